"""HTTP transport for the jsonplaceholder API.

Returns raw response bytes only; turning them into entities is the
codec's job.  Endpoints flagged as authenticated get a bearer token
attached per request, everything else goes out without one.
"""

from __future__ import annotations

from collections.abc import Generator
from types import TracebackType
from typing import TYPE_CHECKING

import httpx
import structlog

if TYPE_CHECKING:
    from annoguide.config.models import ApiConfig

logger = structlog.get_logger(__name__)

USER_PATH = "/users/{id}"
POST_PATH = "/posts/{id}"


class BearerAuth(httpx.Auth):
    """Attach ``Authorization: Bearer <token>`` to each request."""

    def __init__(self, token: str) -> None:
        self._token = token

    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]:
        request.headers["Authorization"] = f"Bearer {self._token}"
        yield request


class ApiClient:
    """Thin synchronous wrapper around :class:`httpx.Client`.

    Usage::

        with ApiClient(settings.api) as client:
            raw = client.get_user(2)
    """

    def __init__(
        self,
        config: ApiConfig,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._config = config
        self._client = httpx.Client(
            base_url=config.base_url,
            timeout=config.timeout,
            headers={"Accept": "application/json"},
            event_hooks={"request": [self._log_request], "response": [self._log_response]},
            transport=transport,
        )

    def __enter__(self) -> ApiClient:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def get(self, path: str, *, authenticated: bool = False) -> bytes:
        """GET *path* and return the raw body.

        Raises:
            httpx.HTTPStatusError: On a non-2xx response.
            httpx.TransportError: On connection or timeout failures.
        """
        auth: BearerAuth | None = None
        if authenticated:
            if self._config.auth_token:
                auth = BearerAuth(self._config.auth_token)
            else:
                logger.debug("auth.token_missing", path=path)

        if auth is None:
            response = self._client.get(path)
        else:
            response = self._client.get(path, auth=auth)
        response.raise_for_status()
        return response.content

    def get_user(self, user_id: int) -> bytes:
        return self.get(USER_PATH.format(id=user_id))

    def get_post(self, post_id: int) -> bytes:
        return self.get(POST_PATH.format(id=post_id), authenticated=True)

    def _log_request(self, request: httpx.Request) -> None:
        logger.debug(
            "http.request",
            method=request.method,
            url=str(request.url),
            headers=dict(request.headers),
        )

    def _log_response(self, response: httpx.Response) -> None:
        request = response.request
        if not self._config.log_bodies:
            logger.debug("http.response", status=response.status_code, url=str(request.url))
            return
        response.read()
        logger.debug(
            "http.response",
            status=response.status_code,
            url=str(request.url),
            body=response.text,
        )
