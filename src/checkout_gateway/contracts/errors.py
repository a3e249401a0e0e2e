"""
Error contracts.

Every checkout operation returns a CheckoutResult: either the decoded value or
a DomainError describing why the call failed. DomainErrors are built only by
src/checkout_gateway/policy/response_wrappers.py.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, Optional, TypeVar


T = TypeVar("T")


class ErrorKind(str, Enum):
    CLIENT_ERROR = "ClientError"          # 4xx
    SERVER_ERROR = "ServerError"          # 5xx
    TRANSPORT_ERROR = "TransportError"    # no response received
    UNKNOWN_ERROR = "UnknownError"


class DomainError(Exception):
    def __init__(
        self,
        kind: ErrorKind,
        message: str,
        *,
        status_code: Optional[int] = None,
        payload: Any = None,
        reason: str = "unknown",
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.status_code = status_code
        self.payload = payload
        self.reason = reason

    @property
    def retryable(self) -> bool:
        if self.kind in (ErrorKind.SERVER_ERROR, ErrorKind.TRANSPORT_ERROR):
            return True
        return self.status_code == 429

    def __repr__(self) -> str:
        return (
            f"DomainError(kind={self.kind.value!r}, status_code={self.status_code!r}, "
            f"reason={self.reason!r}, message={self.message!r})"
        )


@dataclass(frozen=True)
class CheckoutResult(Generic[T]):
    value: Optional[T] = None
    error: Optional[DomainError] = None

    @classmethod
    def success(cls, value: T) -> "CheckoutResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: DomainError) -> "CheckoutResult[T]":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Return the value, or raise the DomainError for exception-style callers."""
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]
