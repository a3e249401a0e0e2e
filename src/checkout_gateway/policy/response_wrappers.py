from __future__ import annotations

import json
from typing import Any, Dict, Optional

import httpx

from checkout_gateway.contracts.errors import DomainError, ErrorKind
from checkout_gateway.contracts.interfaces import TransportResponse


_CLIENT_REASONS = {
    400: "user_input",
    401: "unauthenticated",
    403: "forbidden",
    404: "not_found",
    409: "conflict",
    429: "too_many_requests",
}

_NETWORK_ERRORS = (httpx.RequestError, ConnectionError, TimeoutError, OSError)


class UndecodableBody(ValueError):
    def __init__(self, text: str) -> None:
        super().__init__("Response body is not valid JSON")
        self.text = text


def decode_body(content: bytes) -> Any:
    """Parse a JSON response body. Empty bodies decode to None."""
    if not content or not content.strip():
        return None
    try:
        text = content.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise UndecodableBody(content.decode("utf-8", errors="replace")) from exc
    try:
        return json.loads(text)
    except ValueError as exc:
        raise UndecodableBody(text) from exc


def translate_response(response: TransportResponse) -> DomainError:
    """Map a non-2xx response to a DomainError, keeping its payload."""
    status = response.status_code
    payload = _payload_for_diagnostics(response.content)
    message = _extract_message(payload) or f"Checkout request failed with status {status}"

    if 400 <= status < 500:
        return DomainError(
            ErrorKind.CLIENT_ERROR,
            message,
            status_code=status,
            payload=payload,
            reason=_CLIENT_REASONS.get(status, "client_error"),
        )
    if 500 <= status < 600:
        return DomainError(ErrorKind.SERVER_ERROR, message, status_code=status, payload=payload, reason="server_error")
    return DomainError(
        ErrorKind.UNKNOWN_ERROR,
        f"Unexpected response status {status}",
        status_code=status,
        payload=payload,
    )


def translate_exception(exc: Exception) -> DomainError:
    """Map an exception raised while talking to the backend to a DomainError."""
    if isinstance(exc, DomainError):
        return exc
    if isinstance(exc, UndecodableBody):
        return DomainError(ErrorKind.UNKNOWN_ERROR, str(exc), payload={"body": exc.text})
    if isinstance(exc, _NETWORK_ERRORS):
        return DomainError(
            ErrorKind.TRANSPORT_ERROR,
            str(exc) or type(exc).__name__,
            payload={"exception": type(exc).__name__},
            reason="network",
        )
    return DomainError(
        ErrorKind.UNKNOWN_ERROR,
        str(exc) or type(exc).__name__,
        payload={"exception": type(exc).__name__, "detail": repr(exc)},
    )


def _payload_for_diagnostics(content: bytes) -> Any:
    try:
        return decode_body(content)
    except UndecodableBody as exc:
        return exc.text


def _extract_message(payload: Any) -> Optional[str]:
    if isinstance(payload, str):
        return payload.strip() or None
    if not isinstance(payload, dict):
        return None
    error = payload.get("error")
    if isinstance(error, dict):
        return _first_non_empty(error, "message", "code")
    if isinstance(error, str) and error.strip():
        return error
    return _first_non_empty(payload, "message", "Message", "detail")


def _first_non_empty(data: Dict[str, Any], *keys: str) -> Optional[str]:
    for key in keys:
        value = data.get(key)
        if value is None:
            continue
        if isinstance(value, str) and not value.strip():
            continue
        return str(value)
    return None
