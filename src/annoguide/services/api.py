"""ApiService: fetch entities from the API and decode them.

The transport hands back raw bytes; every entity goes through
:func:`~annoguide.domain.codec.decode_entity` before it reaches a result.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import structlog

from annoguide.domain.codec import decode_entity, encode_entity
from annoguide.domain.models import Post, User
from annoguide.services.base import BaseService
from annoguide.services.result import ServiceResult

if TYPE_CHECKING:
    from annoguide.config.settings import AppSettings
    from annoguide.infrastructure.http import ApiClient

logger = structlog.get_logger(__name__)

MISSING_TOKEN_WARNING = "No auth token configured; post request sent without Authorization"


class ApiService(BaseService):
    """Read users and posts through an :class:`ApiClient`."""

    def __init__(self, settings: AppSettings, client: ApiClient) -> None:
        super().__init__(settings)
        self._client = client

    def get_user(self, user_id: int | None = None) -> ServiceResult:
        uid = self._settings.api.user_id if user_id is None else user_id
        strategy = self._strategy()

        def body() -> dict[str, Any]:
            return {"user": encode_entity(self._fetch_user(uid))}

        return self._run("get_user", body, meta={"strategy": strategy.value, "id": uid})

    def get_post(self, post_id: int | None = None) -> ServiceResult:
        pid = self._settings.api.post_id if post_id is None else post_id
        strategy = self._strategy()

        def body() -> dict[str, Any]:
            return {"post": encode_entity(self._fetch_post(pid))}

        return self._run(
            "get_post",
            body,
            meta={"strategy": strategy.value, "id": pid},
            warnings=self._auth_warnings(),
        )

    def demo(self, user_id: int | None = None, post_id: int | None = None) -> ServiceResult:
        """Fetch the post first, then the user, and return both."""
        uid = self._settings.api.user_id if user_id is None else user_id
        pid = self._settings.api.post_id if post_id is None else post_id

        def body() -> dict[str, Any]:
            post = self._fetch_post(pid)
            user = self._fetch_user(uid)
            return {"post": encode_entity(post), "user": encode_entity(user)}

        return self._run(
            "demo",
            body,
            meta={"strategy": self._strategy().value},
            warnings=self._auth_warnings(),
        )

    def _auth_warnings(self) -> list[str]:
        if self._settings.api.auth_token:
            return []
        return [MISSING_TOKEN_WARNING]

    def _fetch_user(self, user_id: int) -> User:
        user = decode_entity(User, self._client.get_user(user_id), strategy=self._strategy())
        logger.debug("entity.decoded", kind="user", id=user_id)
        return user

    def _fetch_post(self, post_id: int) -> Post:
        post = decode_entity(Post, self._client.get_post(post_id), strategy=self._strategy())
        logger.debug("entity.decoded", kind="post", id=post_id)
        return post
