"""Pytest fixtures for checkout client tests."""

import pytest

from checkout_gateway.clients.mocks.transport import MockCheckoutTransport
from checkout_gateway.clients.real_http.checkout import CheckoutClient
from checkout_gateway.clients.real_http.dispatcher import RequestDispatcher
from checkout_gateway.contracts.context import RequestContext


@pytest.fixture
def context():
    return RequestContext(
        session_token="sess-1",
        segment_token="seg-1",
        channel="2",
        order_form_id="of-123",
    )


@pytest.fixture
def bare_context():
    """No channel, no order form, no tokens."""
    return RequestContext()


@pytest.fixture
def transport():
    return MockCheckoutTransport()


@pytest.fixture
def dispatcher(transport):
    return RequestDispatcher(transport)


@pytest.fixture
def client(transport, context):
    return CheckoutClient(transport, context)
