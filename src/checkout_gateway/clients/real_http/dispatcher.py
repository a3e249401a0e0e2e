"""
Request dispatcher.

Purpose:
- Implements the five HTTP verbs used by the checkout client (plus the raw POST variant)
- Merges construction-time headers, the session cookie and caller headers
- Sends through the injected CheckoutTransport
- Turns every failure into a DomainError inside a CheckoutResult

Header precedence, lowest to highest:
    default headers (config + identity cookie) -> composed Cookie -> caller headers

Nothing is retried here. Cancellation raised by the transport propagates unchanged.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from checkout_gateway.contracts.checkout import CheckoutResponse
from checkout_gateway.contracts.context import RequestContext
from checkout_gateway.contracts.errors import CheckoutResult
from checkout_gateway.contracts.interfaces import CheckoutTransport, TransportResponse
from checkout_gateway.headers import compose_headers, merge_headers
from checkout_gateway.policy.response_wrappers import decode_body, translate_exception, translate_response

logger = logging.getLogger(__name__)


class RequestDispatcher:
    def __init__(self, transport: CheckoutTransport, default_headers: Optional[Dict[str, str]] = None) -> None:
        self.transport = transport
        self.default_headers: Dict[str, str] = dict(default_headers or {})

    async def fetch(
        self,
        context: RequestContext,
        path: str,
        headers: Optional[Dict[str, str]] = None,
        metric: Optional[str] = None,
    ) -> CheckoutResult[Any]:
        return await self._send_parsed("GET", context, path, None, headers, metric)

    async def create(
        self,
        context: RequestContext,
        path: str,
        body: Any,
        headers: Optional[Dict[str, str]] = None,
        metric: Optional[str] = None,
    ) -> CheckoutResult[Any]:
        return await self._send_parsed("POST", context, path, body, headers, metric)

    async def create_raw(
        self,
        context: RequestContext,
        path: str,
        body: Any,
        headers: Optional[Dict[str, str]] = None,
        metric: Optional[str] = None,
    ) -> CheckoutResult[CheckoutResponse]:
        result = await self._send("POST", context, path, body, headers, metric)
        if not result.ok:
            return CheckoutResult.failure(result.error)
        response: TransportResponse = result.value
        try:
            data = decode_body(response.content)
        except ValueError as exc:
            return self._fail("POST", path, metric, exc)
        return CheckoutResult.success(
            CheckoutResponse(status_code=response.status_code, headers=dict(response.headers), data=data)
        )

    async def replace(
        self,
        context: RequestContext,
        path: str,
        body: Any,
        headers: Optional[Dict[str, str]] = None,
        metric: Optional[str] = None,
    ) -> CheckoutResult[Any]:
        return await self._send_parsed("PUT", context, path, body, headers, metric)

    async def patch(
        self,
        context: RequestContext,
        path: str,
        body: Any,
        headers: Optional[Dict[str, str]] = None,
        metric: Optional[str] = None,
    ) -> CheckoutResult[Any]:
        return await self._send_parsed("PATCH", context, path, body, headers, metric)

    async def remove(
        self,
        context: RequestContext,
        path: str,
        headers: Optional[Dict[str, str]] = None,
        body: Any = None,
        metric: Optional[str] = None,
    ) -> CheckoutResult[Any]:
        return await self._send_parsed("DELETE", context, path, body, headers, metric)

    def build_headers(self, context: RequestContext, headers: Optional[Dict[str, str]] = None) -> Dict[str, str]:
        return merge_headers(self.default_headers, compose_headers(context), headers)

    async def _send_parsed(
        self,
        method: str,
        context: RequestContext,
        path: str,
        body: Any,
        headers: Optional[Dict[str, str]],
        metric: Optional[str],
    ) -> CheckoutResult[Any]:
        result = await self._send(method, context, path, body, headers, metric)
        if not result.ok:
            return CheckoutResult.failure(result.error)
        try:
            return CheckoutResult.success(decode_body(result.value.content))
        except ValueError as exc:
            return self._fail(method, path, metric, exc)

    async def _send(
        self,
        method: str,
        context: RequestContext,
        path: str,
        body: Any,
        headers: Optional[Dict[str, str]],
        metric: Optional[str],
    ) -> CheckoutResult[TransportResponse]:
        logger.debug("%s %s [%s]", method, path, metric or "-")
        request_headers = self.build_headers(context, headers)
        try:
            response = await self.transport.send(method, path, request_headers, body)
        except Exception as exc:
            return self._fail(method, path, metric, exc)

        if 200 <= response.status_code < 300:
            return CheckoutResult.success(response)

        error = translate_response(response)
        logger.warning(
            "%s %s [%s] failed: %s status=%s %s",
            method, path, metric or "-", error.kind.value, error.status_code, error.message,
        )
        return CheckoutResult.failure(error)

    @staticmethod
    def _fail(method: str, path: str, metric: Optional[str], exc: Exception) -> CheckoutResult[Any]:
        error = translate_exception(exc)
        logger.warning("%s %s [%s] failed: %s %s", method, path, metric or "-", error.kind.value, error.message)
        return CheckoutResult.failure(error)
