from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union


# ---------------------------------------------------------------------------
# Transport data models
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class TransportResponse:
    """Status, headers and raw body of one response. Repeated headers keep every value as a list."""

    status_code: int
    headers: Dict[str, Union[str, List[str]]] = field(default_factory=dict)
    content: bytes = b""


# ---------------------------------------------------------------------------
# Abstract transport interface
# ---------------------------------------------------------------------------

class CheckoutTransport(ABC):
    """Every transport used by the checkout client must implement this interface."""

    @abstractmethod
    async def send(
        self,
        method: str,
        url: str,
        headers: Dict[str, str],
        body: Optional[Any] = None,
    ) -> TransportResponse:
        """Send one request and return the response, whatever its status.

        Raises on network failure (no response received). Bodies are
        JSON-serializable values; None means no body.
        """

    async def aclose(self) -> None:
        """Release transport resources. No-op unless the transport owns a connection pool."""
