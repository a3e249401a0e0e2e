"""
Checkout gateway.
This package translates checkout operations into HTTP requests against the
VTEX checkout API (/api/checkout/pub) and translates responses back, e.g.:
- order form creation, items, coupons, attachments and custom data
- cart simulation
- order listing and cancellation

Key rule:
- Callers MUST NOT build checkout URLs or session cookies themselves.
- They call CheckoutClient methods, which return a CheckoutResult (value or DomainError).

Switching implementations:
- Mock vs real transport is selected in ONE place (checkout_gateway.clients).
"""

from .contracts.checkout import CheckoutResponse, OrderForm, SimulationData, SimulationItem
from .contracts.context import RequestContext
from .contracts.errors import CheckoutResult, DomainError, ErrorKind
from .contracts.interfaces import CheckoutTransport, TransportResponse
from .clients import (
    CheckoutClient,
    HttpxTransport,
    MockCheckoutTransport,
    build_checkout_client,
    build_transport,
)
from .routes import CheckoutRoute, resolve

__version__ = "0.1.0"

__all__ = [
    # contracts
    "CheckoutResponse", "OrderForm", "SimulationData", "SimulationItem",
    "RequestContext", "CheckoutResult", "DomainError", "ErrorKind",
    "CheckoutTransport", "TransportResponse",
    # clients
    "CheckoutClient", "HttpxTransport", "MockCheckoutTransport",
    "build_checkout_client", "build_transport",
    # routes
    "CheckoutRoute", "resolve",
]
