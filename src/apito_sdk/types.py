"""GraphQL envelope types."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class ErrorLocation:
    """Error location in a GraphQL document."""

    line: int | None = None
    column: int | None = None


@dataclass
class GraphQLErrorEntry:
    """One entry of the ``errors`` list of a GraphQL response."""

    message: str
    locations: list[ErrorLocation] | None = None
    path: list[str | int] | None = None
    extensions: dict[str, Any] | None = None

    @classmethod
    def from_dict(cls, data: Any) -> GraphQLErrorEntry:
        """Parse one error entry. Never raises; odd shapes keep their text."""
        if not isinstance(data, dict):
            return cls(message=str(data))
        locations = data.get("locations")
        return cls(
            message=str(data.get("message", "")),
            locations=(
                [
                    ErrorLocation(line=loc.get("line"), column=loc.get("column"))
                    for loc in locations
                    if isinstance(loc, dict)
                ]
                if isinstance(locations, list)
                else None
            ),
            path=data.get("path") if isinstance(data.get("path"), list) else None,
            extensions=data.get("extensions") if isinstance(data.get("extensions"), dict) else None,
        )


@dataclass
class GraphQLResponse:
    """GraphQL response envelope."""

    data: dict[str, Any] | None = None
    errors: list[GraphQLErrorEntry] | None = None

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    @classmethod
    def from_dict(cls, body: dict[str, Any]) -> GraphQLResponse:
        errors = body.get("errors")
        if errors is not None and not isinstance(errors, list):
            errors = [errors] if errors else []
        return cls(
            data=body.get("data"),
            errors=[GraphQLErrorEntry.from_dict(e) for e in errors] if errors is not None else None,
        )
