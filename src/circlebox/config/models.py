"""Configuration section models with code-baked defaults.

Sparse TOML contract: defaults baked here, circlebox.toml only contains
overrides. A working setup needs only ``[api] key``.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

DEFAULT_API_URL = "http://contest.elecard.ru/api"


class ApiConfig(BaseModel):
    """[api] section."""

    model_config = {"frozen": True}

    url: str = DEFAULT_API_URL
    key: str = ""
    timeout: float | None = Field(default=None, gt=0)

    @property
    def has_key(self) -> bool:
        return bool(self.key.strip())

