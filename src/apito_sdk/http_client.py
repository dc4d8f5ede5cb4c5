"""Apito GraphQL client implementation."""

from __future__ import annotations

import logging
from typing import Any

from . import queries
from .client import ApitoOperations
from .config import ApitoConfig
from .exceptions import ValidationError
from .executor import GraphQLExecutor
from .models import AuditData, CreateAndUpdateRequest, Document, SearchResult

logger = logging.getLogger(__name__)

# Keys of connection["filter"] forwarded by get_relation_documents.
RELATION_FILTER_KEYS = ("page", "limit", "where", "search")


def _require(value: Any, field: str, message: str) -> None:
    if value is None or value == "":
        raise ValidationError(message, field=field)


class ApitoClient(ApitoOperations):
    """Apito client over a single GraphQL endpoint.

    Holds nothing but its configuration, so one instance may serve
    concurrent calls.
    """

    def __init__(self, config: ApitoConfig) -> None:
        self._config = config
        self._executor = GraphQLExecutor(config)

    @property
    def config(self) -> ApitoConfig:
        return self._config

    async def _execute(
        self,
        query: str,
        variables: dict[str, Any],
        tenant_id: str | None = None,
    ) -> dict[str, Any]:
        response = await self._executor.execute(query, variables, tenant_id=tenant_id)
        return response.data or {}

    async def generate_tenant_token(self, token: str, tenant_id: str) -> str:
        """Exchange a token for one scoped to ``tenant_id``."""
        data = await self._execute(
            queries.GENERATE_TENANT_TOKEN,
            {"token": token, "tenantId": tenant_id},
            tenant_id=tenant_id,
        )
        result = data.get("generateTenantToken") or {}
        if not result.get("token"):
            raise ValidationError("Invalid response format for tenant token")
        return str(result["token"])

    async def get_single_resource(
        self, model: str, id: str, single_page_data: bool = False
    ) -> Document[Any]:
        """Fetch one document by model and id."""
        variables = {"model": model, "_id": id, "single_page_data": single_page_data}
        data = await self._execute(queries.GET_SINGLE_DATA, variables)
        result = data.get("getSingleData")
        if not result:
            raise ValidationError("Resource not found")
        return Document.from_dict(result)

    async def search_resources(
        self, model: str, filter: dict[str, Any] | None = None
    ) -> SearchResult[Any]:
        """Search documents of a model; ``filter`` is merged into the variables."""
        variables: dict[str, Any] = {"model": model, **(filter or {})}
        data = await self._execute(queries.GET_MODEL_DATA, variables)
        result = data.get("getModelData")
        if result is None:
            raise ValidationError("Invalid search response format")
        return SearchResult.from_dict(result)

    async def get_relation_documents(
        self, id: str, connection: dict[str, Any]
    ) -> SearchResult[Any]:
        """Fetch documents related to ``id`` through ``connection``."""
        model = connection.get("model")
        _require(model, "model", "model is required in connection parameters")

        descriptor = {k: v for k, v in connection.items() if k not in ("model", "filter")}
        descriptor["_id"] = id
        variables: dict[str, Any] = {"model": model, "connection": descriptor}
        filter_ = connection.get("filter") or {}
        for key in RELATION_FILTER_KEYS:
            if key in filter_:
                variables[key] = filter_[key]

        data = await self._execute(queries.GET_RELATION_DOCUMENTS, variables)
        result = data.get("getModelData")
        if result is None:
            raise ValidationError("Invalid relation documents response format")
        return SearchResult.from_dict(result)

    async def create_new_resource(self, request: CreateAndUpdateRequest) -> Document[Any]:
        """Create a document."""
        _require(request.model, "model", "model is required for create operations")
        _require(request.payload, "payload", "payload is required for create operations")

        variables = {
            "model": request.model,
            "payload": request.payload,
            "connect": request.connect,
            "single_page_data": request.single_page_data,
        }
        data = await self._execute(queries.CREATE_NEW_RESOURCE, variables)
        result = data.get("upsertModelData")
        if not result:
            raise ValidationError("Invalid create response format")
        logger.debug("Created resource", extra={"model": request.model, "id": result.get("id")})
        return Document.from_dict(result)

    async def update_resource(self, request: CreateAndUpdateRequest) -> Document[Any]:
        """Update a document by id."""
        _require(request.id, "id", "id is required for update operations")
        _require(request.model, "model", "model is required for update operations")
        _require(request.payload, "payload", "payload is required for update operations")

        variables = {
            "model": request.model,
            "_id": request.id,
            "payload": request.payload,
            "connect": request.connect,
            "disconnect": request.disconnect,
            "single_page_data": request.single_page_data,
            "force_update": request.force_update,
        }
        data = await self._execute(queries.UPDATE_RESOURCE, variables)
        result = data.get("upsertModelData")
        if not result:
            raise ValidationError("Invalid update response format")
        return Document.from_dict(result)

    async def delete_resource(self, model: str, id: str) -> None:
        """Delete a document by model and id."""
        await self._execute(queries.DELETE_RESOURCE, {"model": model, "_id": id})
        logger.debug("Deleted resource", extra={"model": model, "id": id})

    async def send_audit_log(self, audit_data: AuditData) -> None:
        """Send an audit log entry."""
        await self._execute(queries.SEND_AUDIT_LOG, {"auditData": audit_data.to_dict()})

    async def debug(self, stage: str, *data: Any) -> Any:
        """Send debug data for ``stage`` and return the backend's answer as-is."""
        variables = {"stage": stage, "data": data[0] if len(data) == 1 else list(data)}
        response = await self._execute(queries.DEBUG, variables)
        return response.get("debug")


def create_client(config: ApitoConfig) -> ApitoClient:
    """Build an ApitoClient from ``config``."""
    return ApitoClient(config)
