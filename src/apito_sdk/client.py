"""ApitoOperations abstract base class."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from .models import AuditData, CreateAndUpdateRequest, Document, SearchResult


class ApitoOperations(ABC):
    """Data operations offered by an Apito backend."""

    @abstractmethod
    async def generate_tenant_token(self, token: str, tenant_id: str) -> str:
        """Exchange ``token`` for a token scoped to ``tenant_id``."""
        ...

    @abstractmethod
    async def get_single_resource(
        self, model: str, id: str, single_page_data: bool = False
    ) -> Document[Any]:
        """Fetch one document by model and id."""
        ...

    @abstractmethod
    async def search_resources(
        self, model: str, filter: dict[str, Any] | None = None
    ) -> SearchResult[Any]:
        """Search documents of a model."""
        ...

    @abstractmethod
    async def get_relation_documents(
        self, id: str, connection: dict[str, Any]
    ) -> SearchResult[Any]:
        """Fetch documents related to ``id`` through ``connection``."""
        ...

    @abstractmethod
    async def create_new_resource(self, request: CreateAndUpdateRequest) -> Document[Any]: ...

    @abstractmethod
    async def update_resource(self, request: CreateAndUpdateRequest) -> Document[Any]: ...

    @abstractmethod
    async def delete_resource(self, model: str, id: str) -> None: ...

    @abstractmethod
    async def send_audit_log(self, audit_data: AuditData) -> None: ...

    @abstractmethod
    async def debug(self, stage: str, *data: Any) -> Any: ...
