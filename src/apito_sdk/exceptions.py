"""Apito SDK exception types."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .types import GraphQLErrorEntry


class ApitoErrorCodes:
    """Error code constants for ApitoError."""

    HTTP_ERROR: str = "HTTP_ERROR"
    GRAPHQL_ERROR: str = "GRAPHQL_ERROR"
    VALIDATION_ERROR: str = "VALIDATION_ERROR"


class ApitoError(Exception):
    """Base class for every error raised by the SDK."""

    def __init__(
        self,
        message: str,
        code: str | None = None,
        status_code: int | None = None,
        details: Any = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        if self.code is None:
            return self.message
        return f"{self.code}: {self.message}"


class TransportError(ApitoError):
    """The HTTP call failed: network error, timeout or non-2xx status."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        details: Any = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(
            message,
            code=ApitoErrorCodes.HTTP_ERROR,
            status_code=status_code,
            details=details,
            cause=cause,
        )


class GraphQLError(ApitoError):
    """The backend answered with a non-empty ``errors`` list."""

    def __init__(
        self,
        message: str,
        graphql_errors: list[GraphQLErrorEntry],
        response: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code=ApitoErrorCodes.GRAPHQL_ERROR, details=response)
        self.graphql_errors = graphql_errors
        self.response = response


class ValidationError(ApitoError):
    """A required argument is missing or the response lacks an expected field."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message, code=ApitoErrorCodes.VALIDATION_ERROR)
        self.field = field
