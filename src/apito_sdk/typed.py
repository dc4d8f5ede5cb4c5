"""Typed wrappers that narrow the document payload type."""

from __future__ import annotations

from typing import TypeVar, cast

from .http_client import ApitoClient
from .models import CreateAndUpdateRequest, Document, SearchResult

T = TypeVar("T")


class TypedOperations:
    """Delegates to :class:`ApitoClient` and narrows ``Document.data`` to ``T``.

    ``payload_type`` is only used by the type checker; the payload is not
    converted or validated::

        typed = TypedOperations(client)
        todo = await typed.get_single_resource(TodoDict, "todos", "123")
    """

    def __init__(self, client: ApitoClient) -> None:
        self._client = client

    async def get_single_resource(
        self, payload_type: type[T], model: str, id: str, single_page_data: bool = False
    ) -> Document[T]:
        result = await self._client.get_single_resource(model, id, single_page_data)
        return cast(Document[T], result)

    async def search_resources(
        self, payload_type: type[T], model: str, filter: dict[str, object] | None = None
    ) -> SearchResult[T]:
        result = await self._client.search_resources(model, filter)
        return cast(SearchResult[T], result)

    async def get_relation_documents(
        self, payload_type: type[T], id: str, connection: dict[str, object]
    ) -> SearchResult[T]:
        result = await self._client.get_relation_documents(id, connection)
        return cast(SearchResult[T], result)

    async def create_new_resource(
        self, payload_type: type[T], request: CreateAndUpdateRequest
    ) -> Document[T]:
        result = await self._client.create_new_resource(request)
        return cast(Document[T], result)

    async def update_resource(
        self, payload_type: type[T], request: CreateAndUpdateRequest
    ) -> Document[T]:
        result = await self._client.update_resource(request)
        return cast(Document[T], result)
