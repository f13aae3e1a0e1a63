"""BaseService: shared settings access and error shaping.

Services run an operation body and let :meth:`BaseService._run` turn
domain and transport exceptions into failed ServiceResults.  Nothing is
retried; a ConstraintViolation means the upstream data is malformed.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

import httpx

from annoguide.domain.codec import DecodeStrategy
from annoguide.domain.errors import ConstraintViolation, DecodeError
from annoguide.services.result import ServiceResult

if TYPE_CHECKING:
    from annoguide.config.settings import AppSettings

logger = logging.getLogger(__name__)


class BaseService:
    """Base for service classes; holds the frozen settings."""

    def __init__(self, settings: AppSettings) -> None:
        self._settings = settings

    def _strategy(self, override: str | None = None) -> DecodeStrategy:
        return DecodeStrategy(override or self._settings.codec.strategy)

    def _run(
        self,
        op: str,
        body: Callable[[], dict[str, Any]],
        *,
        meta: dict[str, Any] | None = None,
        warnings: list[str] | None = None,
    ) -> ServiceResult:
        extra: dict[str, Any] = {"meta": meta, "warnings": warnings or []}
        try:
            data = body()
        except ConstraintViolation as exc:
            logger.debug("Constraint violation in %s: %s", op, exc)
            return ServiceResult.failure(
                op, "CONSTRAINT_VIOLATION", str(exc), exc.to_detail(), **extra
            )
        except DecodeError as exc:
            logger.debug("Decode failed in %s: %s", op, exc)
            return ServiceResult.failure(
                op, "DECODE_ERROR", str(exc), {"entity": exc.entity}, **extra
            )
        except httpx.HTTPStatusError as exc:
            detail = {"status": exc.response.status_code, "url": str(exc.request.url)}
            return ServiceResult.failure(op, "HTTP_ERROR", str(exc), detail, **extra)
        except httpx.HTTPError as exc:
            return ServiceResult.failure(op, "HTTP_ERROR", str(exc) or type(exc).__name__, **extra)
        return ServiceResult.success(op, data, **extra)
