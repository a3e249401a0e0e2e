"""
Checkout Client.

Purpose:
- One async method per checkout capability (order form, items, coupons, attachments, simulation, orders)
- Each method resolves its route, picks the HTTP verb and payload shape, and returns the
  dispatcher's CheckoutResult unchanged

Usage:
- Built by src/checkout_gateway/clients/__init__.py (build_checkout_client)
- Bound to one RequestContext; use with_context() to address another session

Important:
- Keep this client as the ONLY place where checkout routes are wired to HTTP verbs.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Union

from checkout_gateway.contracts.checkout import CheckoutResponse, OrderForm, SimulationData
from checkout_gateway.contracts.context import RequestContext
from checkout_gateway.contracts.errors import CheckoutResult
from checkout_gateway.contracts.interfaces import CheckoutTransport
from checkout_gateway.clients.real_http.dispatcher import RequestDispatcher
from checkout_gateway.headers import channel_query_string, identity_headers, merge_headers
from checkout_gateway.routes import (
    CLIENT_PROFILE_DATA,
    MARKETING_DATA,
    PAYMENT_DATA,
    SHIPPING_DATA,
    CheckoutRoute,
    resolve,
)


class CheckoutClient:
    def __init__(
        self,
        transport: CheckoutTransport,
        context: RequestContext,
        default_headers: Optional[Dict[str, str]] = None,
    ) -> None:
        self.context = context
        self._base_headers = dict(default_headers or {})
        # Identity cookie is fixed for the lifetime of the client.
        self.dispatcher = RequestDispatcher(
            transport,
            default_headers=merge_headers(self._base_headers, identity_headers(context)),
        )

    @property
    def transport(self) -> CheckoutTransport:
        return self.dispatcher.transport

    def with_context(self, context: RequestContext) -> "CheckoutClient":
        return CheckoutClient(self.transport, context, default_headers=self._base_headers)

    # -- Order form --

    async def order_form(self) -> CheckoutResult[OrderForm]:
        return await self.dispatcher.create(
            self.context, resolve(CheckoutRoute.ORDER_FORM), {}, metric="checkout-orderForm"
        )

    async def order_form_raw(self) -> CheckoutResult[CheckoutResponse]:
        return await self.dispatcher.create_raw(
            self.context, resolve(CheckoutRoute.ORDER_FORM), {}, metric="checkout-orderForm"
        )

    # -- Items --

    async def add_item(self, order_form_id: str, items: List[Dict[str, Any]]) -> CheckoutResult[OrderForm]:
        path = resolve(CheckoutRoute.ADD_ITEM, order_form_id, query=channel_query_string(self.context))
        return await self.dispatcher.create(
            self.context, path, {"orderItems": items}, metric="checkout-addItem"
        )

    async def update_items(self, order_form_id: str, order_items: List[Dict[str, Any]]) -> CheckoutResult[OrderForm]:
        return await self.dispatcher.create(
            self.context,
            resolve(CheckoutRoute.UPDATE_ITEMS, order_form_id),
            {"orderItems": order_items},
            metric="checkout-updateItems",
        )

    async def add_assembly_options(
        self,
        order_form_id: str,
        item_id: Union[str, int],
        assembly_options_id: str,
        body: Any,
    ) -> CheckoutResult[OrderForm]:
        return await self.dispatcher.create(
            self.context,
            resolve(CheckoutRoute.ASSEMBLY_OPTIONS, order_form_id, item_id, assembly_options_id),
            body,
            metric="checkout-addAssemblyOptions",
        )

    async def remove_assembly_options(
        self,
        order_form_id: str,
        item_id: Union[str, int],
        assembly_options_id: str,
        body: Any,
    ) -> CheckoutResult[OrderForm]:
        # The sub-resource is identified partly by the body, so DELETE carries one.
        return await self.dispatcher.remove(
            self.context,
            resolve(CheckoutRoute.ASSEMBLY_OPTIONS, order_form_id, item_id, assembly_options_id),
            body=body,
            metric="checkout-removeAssemblyOptions",
        )

    # -- Attachments --

    async def update_order_form_payment(self, order_form_id: str, payments: Any) -> CheckoutResult[OrderForm]:
        return await self._attach(order_form_id, PAYMENT_DATA, {"payments": payments}, "checkout-updateOrderFormPayment")

    async def update_order_form_profile(self, order_form_id: str, fields: Dict[str, Any]) -> CheckoutResult[OrderForm]:
        return await self._attach(order_form_id, CLIENT_PROFILE_DATA, fields, "checkout-updateOrderFormProfile")

    async def update_order_form_shipping(self, order_form_id: str, shipping: Dict[str, Any]) -> CheckoutResult[OrderForm]:
        return await self._attach(order_form_id, SHIPPING_DATA, shipping, "checkout-updateOrderFormShipping")

    async def update_order_form_marketing_data(
        self, order_form_id: str, marketing_data: Dict[str, Any]
    ) -> CheckoutResult[OrderForm]:
        return await self._attach(order_form_id, MARKETING_DATA, marketing_data, "checkout-updateOrderFormMarketingData")

    async def update_order_form_ignore_profile(
        self, order_form_id: str, ignore_profile_data: bool
    ) -> CheckoutResult[OrderForm]:
        return await self.dispatcher.patch(
            self.context,
            resolve(CheckoutRoute.PROFILE, order_form_id),
            {"ignoreProfileData": ignore_profile_data},
            metric="checkout-updateOrderFormIgnoreProfile",
        )

    async def update_order_form_checkin(self, order_form_id: str, checkin_payload: Dict[str, Any]) -> CheckoutResult[OrderForm]:
        return await self.dispatcher.create(
            self.context,
            resolve(CheckoutRoute.CHECKIN, order_form_id),
            checkin_payload,
            metric="checkout-updateOrderFormCheckin",
        )

    async def set_order_form_custom_data(
        self, order_form_id: str, app_id: str, field: str, value: Any
    ) -> CheckoutResult[OrderForm]:
        return await self.dispatcher.replace(
            self.context,
            resolve(CheckoutRoute.ORDER_FORM_CUSTOM_DATA, order_form_id, app_id, field),
            {"value": value},
            metric="checkout-setOrderFormCustomData",
        )

    # -- Coupons and messages --

    async def insert_coupon(self, order_form_id: str, coupon: str) -> CheckoutResult[OrderForm]:
        return await self.dispatcher.create(
            self.context,
            resolve(CheckoutRoute.INSERT_COUPON, order_form_id),
            {"text": coupon},
            metric="checkout-insertCoupon",
        )

    async def clear_messages(self, order_form_id: str) -> CheckoutResult[OrderForm]:
        return await self.dispatcher.create(
            self.context,
            resolve(CheckoutRoute.CLEAR_MESSAGES, order_form_id),
            {},
            metric="checkout-clearMessages",
        )

    # -- Orders --

    async def cancel_order(self, order_form_id: str, reason: str) -> CheckoutResult[Any]:
        return await self.dispatcher.create(
            self.context,
            resolve(CheckoutRoute.CANCEL_ORDER, order_form_id),
            {"reason": reason},
            metric="checkout-cancelOrder",
        )

    async def orders(self) -> CheckoutResult[Any]:
        return await self.dispatcher.fetch(self.context, resolve(CheckoutRoute.ORDERS), metric="checkout-orders")

    # -- Simulation --

    async def simulation(self, simulation: Union[SimulationData, Dict[str, Any]]) -> CheckoutResult[Any]:
        body = simulation.to_payload() if isinstance(simulation, SimulationData) else simulation
        path = resolve(CheckoutRoute.SIMULATION, query=channel_query_string(self.context))
        return await self.dispatcher.create(self.context, path, body, metric="checkout-simulation")

    async def _attach(self, order_form_id: str, field: str, body: Any, metric: str) -> CheckoutResult[OrderForm]:
        return await self.dispatcher.create(
            self.context, resolve(CheckoutRoute.ATTACHMENTS_DATA, order_form_id, field), body, metric=metric
        )
