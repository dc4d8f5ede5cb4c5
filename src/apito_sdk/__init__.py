"""Apito GraphQL client library."""

from .client import ApitoOperations
from .config import ApitoConfig
from .exceptions import (
    ApitoError,
    ApitoErrorCodes,
    GraphQLError,
    TransportError,
    ValidationError,
)
from .executor import GraphQLExecutor
from .http_client import ApitoClient, create_client
from .models import (
    AuditData,
    CreateAndUpdateRequest,
    Document,
    MetaField,
    SearchResult,
)
from .typed import TypedOperations
from .types import ErrorLocation, GraphQLErrorEntry, GraphQLResponse
from .version import __version__, get_version

__all__ = [
    "ApitoClient",
    "ApitoConfig",
    "ApitoError",
    "ApitoErrorCodes",
    "ApitoOperations",
    "AuditData",
    "CreateAndUpdateRequest",
    "Document",
    "ErrorLocation",
    "GraphQLError",
    "GraphQLErrorEntry",
    "GraphQLExecutor",
    "GraphQLResponse",
    "MetaField",
    "SearchResult",
    "TransportError",
    "TypedOperations",
    "ValidationError",
    "__version__",
    "create_client",
    "get_version",
]
