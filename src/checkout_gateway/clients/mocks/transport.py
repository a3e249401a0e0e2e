"""
Mock Checkout Transport.

Purpose:
- Provides a fake checkout backend used for development/testing
- Does NOT make any network calls
- Records every request so callers can assert on method, path, headers and body

Behavior:
- Scripted responses/exceptions (queue_response / queue_exception) are served first, in order
- Otherwise a small in-memory order form store answers the checkout routes
- Unknown order forms and routes answer 404 with a VTEX-style error body

Swap:
Replace this transport with clients/real_http/transport.py (HttpxTransport)
when backend credentials are configured.
"""

from __future__ import annotations

import copy
import json
import logging
import re
import uuid
from collections import deque
from dataclasses import dataclass, field
from typing import Any, Deque, Dict, List, Optional, Union
from urllib.parse import parse_qs, urlsplit

from checkout_gateway.contracts.interfaces import CheckoutTransport, TransportResponse
from checkout_gateway.headers import CHECKOUT_COOKIE, checkout_cookie_format
from checkout_gateway.routes import BASE_PATH

logger = logging.getLogger(__name__)

_OFID_PATTERN = re.compile(rf"{re.escape(CHECKOUT_COOKIE)}=__ofid=([^;]+)")
_UNIT_PRICE = 10000  # cents


@dataclass(frozen=True)
class RecordedRequest:
    method: str
    url: str
    headers: Dict[str, str] = field(default_factory=dict)
    body: Any = None

    @property
    def path(self) -> str:
        return urlsplit(self.url).path

    @property
    def query(self) -> Dict[str, List[str]]:
        return parse_qs(urlsplit(self.url).query)


class MockCheckoutTransport(CheckoutTransport):
    def __init__(self) -> None:
        self.requests: List[RecordedRequest] = []
        self.order_forms: Dict[str, Dict[str, Any]] = {}
        self.orders: List[Dict[str, Any]] = []
        self._scripted: Deque[Union[TransportResponse, BaseException]] = deque()

    # -- Scripting --

    def queue_response(
        self,
        status_code: int = 200,
        body: Any = None,
        headers: Optional[Dict[str, str]] = None,
        raw: Optional[bytes] = None,
    ) -> None:
        content = raw if raw is not None else (b"" if body is None else _encode(body))
        self._scripted.append(TransportResponse(status_code=status_code, headers=dict(headers or {}), content=content))

    def queue_exception(self, exc: BaseException) -> None:
        self._scripted.append(exc)

    @property
    def last_request(self) -> Optional[RecordedRequest]:
        return self.requests[-1] if self.requests else None

    # -- Transport --

    async def send(
        self,
        method: str,
        url: str,
        headers: Dict[str, str],
        body: Optional[Any] = None,
    ) -> TransportResponse:
        self.requests.append(RecordedRequest(method=method, url=url, headers=dict(headers), body=copy.deepcopy(body)))
        if self._scripted:
            scripted = self._scripted.popleft()
            if isinstance(scripted, BaseException):
                raise scripted
            return scripted
        return self._route(method, url, headers, body)

    # -- In-memory backend --

    def _route(self, method: str, url: str, headers: Dict[str, str], body: Any) -> TransportResponse:
        path = urlsplit(url).path
        if not path.startswith(BASE_PATH):
            return _not_found("route not found")
        parts = [p for p in path[len(BASE_PATH):].split("/") if p]
        logger.debug("Mock checkout %s %s", method, "/".join(parts))

        if parts == ["orderForm"] and method == "POST":
            return self._order_form(headers)
        if parts == ["orderForms", "simulation"] and method == "POST":
            return _ok(self._simulate(body or {}))
        if parts == ["orders"] and method == "GET":
            return _ok(copy.deepcopy(self.orders))
        if len(parts) == 3 and parts[0] == "orders" and parts[2] == "user-cancel-request" and method == "POST":
            return _ok({"orderId": parts[1], "reason": (body or {}).get("reason")})
        if len(parts) >= 3 and parts[0] == "orderForm":
            form = self.order_forms.get(parts[1])
            if form is None:
                return _not_found("orderForm not found")
            return self._order_form_action(form, method, parts[2:], body or {})
        return _not_found("route not found")

    def _order_form(self, headers: Dict[str, str]) -> TransportResponse:
        match = _OFID_PATTERN.search(headers.get("Cookie", ""))
        order_form_id = match.group(1) if match and match.group(1) in self.order_forms else uuid.uuid4().hex
        form = self.order_forms.setdefault(order_form_id, _empty_order_form(order_form_id))
        return _ok(form, headers={"set-cookie": checkout_cookie_format(order_form_id)})

    def _order_form_action(self, form: Dict[str, Any], method: str, action: List[str], body: Dict[str, Any]) -> TransportResponse:
        if action == ["items"] and method == "POST":
            for item in body.get("orderItems", []):
                form["items"].append(_line_item(item))
        elif action == ["items", "update"] and method == "POST":
            for update in body.get("orderItems", []):
                index = int(update.get("index", -1))
                if not 0 <= index < len(form["items"]):
                    return _bad_request(f"item index {index} out of range")
                form["items"][index]["quantity"] = int(update.get("quantity", 0))
            form["items"] = [item for item in form["items"] if item["quantity"] > 0]
        elif len(action) == 4 and action[0] == "items" and action[2] == "assemblyOptions" and method in ("POST", "DELETE"):
            key = f"{action[1]}/{action[3]}"
            if method == "POST":
                form["assemblyOptions"][key] = body
            else:
                form["assemblyOptions"].pop(key, None)
        elif len(action) == 2 and action[0] == "attachments" and method == "POST":
            form[action[1]] = body
        elif action == ["profile"] and method == "PATCH":
            form["ignoreProfileData"] = bool(body.get("ignoreProfileData"))
        elif action == ["checkIn"] and method == "POST":
            form["isCheckedIn"] = bool(body.get("isCheckedIn"))
            form["checkedInPickupPointId"] = body.get("pickupPointId")
        elif len(action) == 3 and action[0] == "customData" and method == "PUT":
            form["customData"].setdefault(action[1], {})[action[2]] = body.get("value")
        elif action == ["coupons"] and method == "POST":
            form["marketingData"] = {**(form.get("marketingData") or {}), "coupon": body.get("text")}
        elif action == ["messages", "clear"] and method == "POST":
            form["messages"] = []
        else:
            return _not_found("route not found")
        form["value"] = sum(item["price"] * item["quantity"] for item in form["items"])
        return _ok(form)

    def _simulate(self, body: Dict[str, Any]) -> Dict[str, Any]:
        items = [_line_item(item) for item in body.get("items", [])]
        return {
            "country": body.get("country"),
            "postalCode": body.get("postalCode"),
            "items": items,
            "totals": [{"id": "Items", "value": sum(i["price"] * i["quantity"] for i in items)}],
        }


def _empty_order_form(order_form_id: str) -> Dict[str, Any]:
    return {
        "orderFormId": order_form_id,
        "items": [],
        "value": 0,
        "messages": [],
        "clientProfileData": None,
        "shippingData": None,
        "paymentData": None,
        "marketingData": None,
        "customData": {},
        "assemblyOptions": {},
        "ignoreProfileData": False,
        "isCheckedIn": False,
    }


def _line_item(item: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "id": str(item.get("id")),
        "quantity": int(item.get("quantity", 1)),
        "seller": str(item.get("seller", "1")),
        "price": _UNIT_PRICE,
    }


def _encode(body: Any) -> bytes:
    return json.dumps(body).encode("utf-8")


def _ok(body: Any, headers: Optional[Dict[str, str]] = None) -> TransportResponse:
    return TransportResponse(
        status_code=200,
        headers={"content-type": "application/json", **(headers or {})},
        content=_encode(copy.deepcopy(body)),
    )


def _not_found(message: str) -> TransportResponse:
    return TransportResponse(status_code=404, content=_encode({"error": {"code": "CHK0001", "message": message}}))


def _bad_request(message: str) -> TransportResponse:
    return TransportResponse(status_code=400, content=_encode({"error": {"code": "CHK0002", "message": message}}))
