"""Client configuration (pydantic BaseModel)."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_TIMEOUT_MS = 30000


class ApitoConfig(BaseModel):
    """Apito client configuration. Immutable once built.

    ``http_options`` is forwarded verbatim to ``httpx.AsyncClient``
    (``follow_redirects``, ``max_redirects``, ``verify``, ``transport``, ...)
    and is kept as a read-only copy of what the caller passed.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    endpoint: str = Field(min_length=1)
    api_key: str = Field(min_length=1)
    tenant_id: str | None = None
    timeout_ms: int = Field(default=DEFAULT_TIMEOUT_MS, gt=0)
    http_options: Mapping[str, Any] = Field(default_factory=dict, validate_default=True)

    @field_validator("http_options", mode="after")
    @classmethod
    def _freeze_http_options(cls, v: Mapping[str, Any]) -> Mapping[str, Any]:
        return MappingProxyType(dict(v))

    @property
    def timeout_seconds(self) -> float:
        return self.timeout_ms / 1000
