"""
Checkout client wiring.

The selection of mock vs real transport happens here, and only here.
"""

import logging
from typing import Optional

from checkout_gateway.contracts.context import RequestContext
from checkout_gateway.contracts.interfaces import CheckoutTransport
from checkout_gateway.clients.mocks.transport import MockCheckoutTransport
from checkout_gateway.clients.real_http.checkout import CheckoutClient
from checkout_gateway.clients.real_http.transport import HttpxTransport
from checkout_gateway.utils.config_loader import CheckoutConfig, load_checkout_config

logger = logging.getLogger(__name__)


def build_transport(config: CheckoutConfig) -> CheckoutTransport:
    if config.use_mock:
        logger.info("Using mock checkout transport")
        return MockCheckoutTransport()
    return HttpxTransport(
        base_url=config.resolved_base_url,
        timeout_seconds=config.timeout_seconds,
    )


def build_checkout_client(
    context: RequestContext,
    config: Optional[CheckoutConfig] = None,
    transport: Optional[CheckoutTransport] = None,
) -> CheckoutClient:
    config = config or load_checkout_config()
    return CheckoutClient(
        transport or build_transport(config),
        context,
        default_headers=config.default_headers,
    )


__all__ = ["CheckoutClient", "HttpxTransport", "MockCheckoutTransport", "build_checkout_client", "build_transport"]
