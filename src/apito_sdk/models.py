"""Apito document data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

T = TypeVar("T")


@dataclass
class MetaField:
    """Document metadata maintained by the backend."""

    created_at: str = ""
    updated_at: str = ""
    status: str = ""
    revision: str | None = None
    revision_at: str | None = None
    root_revision_id: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> MetaField:
        return cls(
            created_at=data.get("created_at", ""),
            updated_at=data.get("updated_at", ""),
            status=data.get("status", ""),
            revision=data.get("revision"),
            revision_at=data.get("revision_at"),
            root_revision_id=data.get("root_revision_id"),
        )


@dataclass
class Document(Generic[T]):
    """A stored record of a model: payload plus metadata.

    ``data`` is an opaque mapping unless the caller narrows ``T`` through
    :class:`~apito_sdk.typed.TypedOperations`.
    """

    id: str
    data: T
    meta: MetaField | None = None
    key: str | None = None
    expire_at: str | int | None = None
    relation_doc_id: str | None = None
    type: str | None = None
    tenant_id: str | None = None
    tenant_model: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Document[Any]:
        meta = data.get("meta")
        return cls(
            id=data.get("id", ""),
            data=data.get("data"),
            meta=MetaField.from_dict(meta) if meta is not None else None,
            key=data.get("_key"),
            expire_at=data.get("expire_at"),
            relation_doc_id=data.get("relation_doc_id"),
            type=data.get("type"),
            tenant_id=data.get("tenant_id"),
            tenant_model=data.get("tenant_model"),
        )


@dataclass
class SearchResult(Generic[T]):
    """A page of documents plus the logical total count."""

    results: list[Document[T]] = field(default_factory=list)
    count: int = 0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SearchResult[Any]:
        return cls(
            results=[Document.from_dict(d) for d in data.get("results") or []],
            count=data.get("count") or 0,
        )


@dataclass
class CreateAndUpdateRequest:
    """Create or update request. ``id`` is required only for updates."""

    model: str
    payload: dict[str, Any]
    id: str | None = None
    connect: dict[str, Any] | None = None
    disconnect: dict[str, Any] | None = None
    single_page_data: bool = False
    force_update: bool = False


@dataclass
class AuditData:
    """Audit log entry."""

    resource: str
    action: str
    author: dict[str, Any] = field(default_factory=dict)
    data: dict[str, Any] = field(default_factory=dict)
    meta: dict[str, Any] = field(default_factory=dict)
    extra: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            **self.extra,
            "resource": self.resource,
            "action": self.action,
            "author": self.author,
            "data": self.data,
            "meta": self.meta,
        }
