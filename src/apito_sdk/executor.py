"""GraphQL query executor over httpx."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from .config import ApitoConfig
from .exceptions import GraphQLError, TransportError
from .types import GraphQLResponse

logger = logging.getLogger(__name__)

API_KEY_HEADER = "X-Apito-Key"
TENANT_HEADER = "X-Apito-Tenant-ID"


def _error_body(resp: httpx.Response | None) -> Any:
    if resp is None:
        return None
    try:
        return resp.json()
    except ValueError:
        return resp.text or None


class GraphQLExecutor:
    """Sends one GraphQL document per call and unwraps the response envelope."""

    def __init__(self, config: ApitoConfig) -> None:
        self._config = config
        self._headers: dict[str, str] = {
            "Content-Type": "application/json",
            API_KEY_HEADER: config.api_key,
        }

    @property
    def config(self) -> ApitoConfig:
        return self._config

    def _make_client(self) -> httpx.AsyncClient:
        options: dict[str, Any] = {"timeout": self._config.timeout_seconds}
        options.update(self._config.http_options)
        return httpx.AsyncClient(**options)

    def _request_headers(self, tenant_id: str | None) -> dict[str, str]:
        headers = dict(self._headers)
        tenant = tenant_id or self._config.tenant_id
        if tenant:
            headers[TENANT_HEADER] = tenant
        return headers

    async def execute(
        self,
        query: str,
        variables: dict[str, Any] | None = None,
        tenant_id: str | None = None,
    ) -> GraphQLResponse:
        """POST ``query`` with ``variables`` and return the parsed envelope.

        Raises:
            TransportError: network failure, timeout or non-2xx status.
            GraphQLError: the envelope carries a non-empty ``errors`` list.
        """
        payload = {"query": query, "variables": variables or {}}
        headers = self._request_headers(tenant_id)
        logger.debug("Sending GraphQL request", extra={"endpoint": self._config.endpoint})
        try:
            async with self._make_client() as client:
                resp = await client.post(self._config.endpoint, json=payload, headers=headers)
            resp.raise_for_status()
        except httpx.HTTPError as e:
            raise self._transport_error(e) from e

        body: dict[str, Any] = resp.json()
        envelope = GraphQLResponse.from_dict(body)
        if envelope.has_errors:
            logger.warning(
                "GraphQL request returned errors",
                extra={"errors": [err.message for err in envelope.errors or []]},
            )
            raise GraphQLError("GraphQL query failed", envelope.errors or [], body)
        return envelope

    def _transport_error(self, e: httpx.HTTPError) -> TransportError:
        resp = e.response if isinstance(e, httpx.HTTPStatusError) else None
        body = _error_body(resp)
        message = str(e)
        if isinstance(body, dict) and body.get("message"):
            message = str(body["message"])
        status_code = resp.status_code if resp is not None else None
        logger.warning(
            "GraphQL transport failure",
            extra={"status_code": status_code, "error": message},
        )
        return TransportError(message, status_code=status_code, details=body, cause=e)
