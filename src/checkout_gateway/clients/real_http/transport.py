"""
Real HTTP transport.

Sends checkout requests to the VTEX backend through a shared httpx.AsyncClient.
Network failures are raised as httpx.RequestError; any HTTP status is returned
to the dispatcher as-is.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Union

import httpx

from checkout_gateway.contracts.interfaces import CheckoutTransport, TransportResponse

logger = logging.getLogger(__name__)


class HttpxTransport(CheckoutTransport):
    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout_seconds: float = 20.0,
        headers: Optional[Dict[str, str]] = None,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        if client is None and not base_url:
            raise ValueError("base_url is required when no httpx client is given.")
        self._owns_client = client is None
        self.client = client or httpx.AsyncClient(
            base_url=base_url.rstrip("/"),
            timeout=timeout_seconds,
            headers={"Accept": "application/json", **(headers or {})},
        )
        logger.info("HttpxTransport initialized with base_url: %s", self.client.base_url)

    async def send(
        self,
        method: str,
        url: str,
        headers: Dict[str, str],
        body: Optional[Any] = None,
    ) -> TransportResponse:
        kwargs: Dict[str, Any] = {"headers": headers}
        if body is not None:
            kwargs["json"] = body
        response = await self.client.request(method, url, **kwargs)
        logger.debug("%s %s -> %s", method, url, response.status_code)
        return TransportResponse(
            status_code=response.status_code,
            headers=_header_values(response.headers),
            content=response.content,
        )

    async def aclose(self) -> None:
        if self._owns_client:
            await self.client.aclose()

    async def __aenter__(self) -> "HttpxTransport":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()


def _header_values(headers: httpx.Headers) -> Dict[str, Union[str, List[str]]]:
    # Set-Cookie values contain commas (expires=...), so repeats are never joined.
    values: Dict[str, Union[str, List[str]]] = {}
    for name in headers.keys():
        found = headers.get_list(name)
        values[name] = found[0] if len(found) == 1 else found
    return values
