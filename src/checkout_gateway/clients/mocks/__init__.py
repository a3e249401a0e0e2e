"""
Mock checkout transport.

Returns fake (but realistic) checkout responses without calling the backend.
Used when:
- no account/base URL is configured (local development, demos)
- tests need to assert on the exact requests the checkout client sends

Important:
- The mock implements the SAME CheckoutTransport interface as the real HTTP transport.

Switching to real:
Set use_mock to false in config/checkout_config.yml (or CHECKOUT_USE_MOCK=false).
"""

from .transport import MockCheckoutTransport, RecordedRequest

__all__ = ["MockCheckoutTransport", "RecordedRequest"]
