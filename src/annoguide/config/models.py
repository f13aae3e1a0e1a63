"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, annoguide.toml only contains
overrides.  An empty file is a valid configuration.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel


class ApiConfig(BaseModel):
    """[api] section."""

    model_config = {"frozen": True}

    base_url: str = "https://jsonplaceholder.typicode.com"
    timeout: float = 30.0
    auth_token: str | None = None
    log_bodies: bool = True
    user_id: int = 2
    post_id: int = 1


class CodecConfig(BaseModel):
    """[codec] section."""

    model_config = {"frozen": True}

    strategy: Literal["validate", "construct"] = "validate"
