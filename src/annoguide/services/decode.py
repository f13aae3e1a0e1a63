"""DecodeService: validate a JSON document as one of the entity kinds."""

from __future__ import annotations

from typing import Any

from annoguide.domain.codec import decode_entity, encode_entity
from annoguide.domain.models import get_entity_type
from annoguide.services.base import BaseService
from annoguide.services.result import ServiceResult


class DecodeService(BaseService):
    def decode(
        self,
        kind: str,
        raw: bytes | str,
        *,
        strategy: str | None = None,
        source: str | None = None,
    ) -> ServiceResult:
        """Decode *raw* as *kind* (``user``, ``address`` or ``post``)."""
        chosen = self._strategy(strategy)
        meta = {"strategy": chosen.value, "source": source or "<stdin>"}
        try:
            entity_type = get_entity_type(kind)
        except KeyError as exc:
            return ServiceResult.failure("decode", "UNKNOWN_KIND", exc.args[0], meta=meta)

        def body() -> dict[str, Any]:
            entity = decode_entity(entity_type, raw, strategy=chosen)
            return {"kind": kind, "entity": encode_entity(entity)}

        return self._run("decode", body, meta=meta)
