"""Tests for the httpx transport using httpx.MockTransport (no network)."""

import json

import httpx
import pytest

from checkout_gateway.clients.real_http.checkout import CheckoutClient
from checkout_gateway.clients.real_http.transport import HttpxTransport
from checkout_gateway.contracts.context import RequestContext
from checkout_gateway.contracts.errors import ErrorKind


class RecordingHandler:
    def __init__(self, status_code=200, body=None, headers=None):
        self.requests = []
        self.status_code = status_code
        self.body = body if body is not None else {}
        self.headers = headers or {}

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, json=self.body, headers=self.headers)


def _transport(handler):
    client = httpx.AsyncClient(base_url="https://store.vtexcommercestable.com.br", transport=httpx.MockTransport(handler))
    return HttpxTransport(client=client)


@pytest.mark.asyncio
async def test_json_body_and_headers_reach_the_wire():
    handler = RecordingHandler(body={"orderFormId": "of1"})
    transport = _transport(handler)

    response = await transport.send("POST", "/api/checkout/pub/orderForm", {"Cookie": "c=1;"}, {"a": [1, 2]})

    request = handler.requests[0]
    assert request.method == "POST"
    assert str(request.url) == "https://store.vtexcommercestable.com.br/api/checkout/pub/orderForm"
    assert request.headers["Cookie"] == "c=1;"
    assert request.headers["Content-Type"] == "application/json"
    assert json.loads(request.content) == {"a": [1, 2]}
    assert response.status_code == 200
    assert json.loads(response.content) == {"orderFormId": "of1"}


@pytest.mark.asyncio
async def test_get_sends_no_body():
    handler = RecordingHandler(body=[])
    transport = _transport(handler)

    await transport.send("GET", "/api/checkout/pub/orders", {})

    assert handler.requests[0].content == b""


@pytest.mark.asyncio
async def test_delete_with_body_through_client():
    handler = RecordingHandler(body={"orderFormId": "of1"})
    client = CheckoutClient(_transport(handler), RequestContext(order_form_id="of1"))

    result = await client.remove_assembly_options("of1", 2, "engraving", {"composition": {"items": [{"id": "x"}]}})

    request = handler.requests[0]
    assert result.ok
    assert request.method == "DELETE"
    assert request.url.path == "/api/checkout/pub/orderForm/of1/items/2/assemblyOptions/engraving"
    assert json.loads(request.content) == {"composition": {"items": [{"id": "x"}]}}


@pytest.mark.asyncio
async def test_sales_channel_query_reaches_the_wire():
    handler = RecordingHandler()
    client = CheckoutClient(_transport(handler), RequestContext(channel="3"))

    await client.simulation({"country": "BRA", "items": []})

    assert handler.requests[0].url.params["sc"] == "3"


@pytest.mark.asyncio
async def test_http_error_status_is_returned_not_raised():
    handler = RecordingHandler(status_code=404, body={"error": "orderForm not found"})
    client = CheckoutClient(_transport(handler), RequestContext())

    result = await client.clear_messages("missing")

    assert result.error.kind is ErrorKind.CLIENT_ERROR
    assert result.error.payload == {"error": "orderForm not found"}


@pytest.mark.asyncio
async def test_connection_refused_is_transport_error():
    def refuse(request):
        raise httpx.ConnectError("Connection refused", request=request)

    client = CheckoutClient(_transport(refuse), RequestContext())

    result = await client.orders()

    assert result.error.kind is ErrorKind.TRANSPORT_ERROR
    assert result.error.status_code is None


@pytest.mark.asyncio
async def test_owned_client_is_closed():
    transport = HttpxTransport(base_url="https://store.example/")
    async with transport:
        assert transport.client.base_url.host == "store.example"
        assert transport.client.headers["Accept"] == "application/json"
    assert transport.client.is_closed


@pytest.mark.asyncio
async def test_injected_client_is_left_open():
    client = httpx.AsyncClient(transport=httpx.MockTransport(RecordingHandler()))
    transport = HttpxTransport(client=client)

    await transport.aclose()

    assert not client.is_closed
    await client.aclose()


def test_base_url_required_without_client():
    with pytest.raises(ValueError):
        HttpxTransport()


@pytest.mark.asyncio
async def test_repeated_set_cookie_headers_are_kept_apart():
    cookies = [
        "checkout.vtex.com=__ofid=of1; expires=Wed, 21 Oct 2026 07:28:00 GMT; path=/",
        "CheckoutOrderFormOwnership=abc; path=/",
    ]

    def handler(request):
        return httpx.Response(200, json={"orderFormId": "of1"}, headers=[("set-cookie", c) for c in cookies])

    client = CheckoutClient(_transport(handler), RequestContext())

    result = await client.order_form_raw()

    assert result.value.headers["set-cookie"] == cookies
    assert result.value.headers["content-type"] == "application/json"
    assert result.value.data == {"orderFormId": "of1"}
