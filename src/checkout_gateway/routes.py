"""
Checkout route table.

Maps each checkout capability to its path under /api/checkout/pub.
Resolution is a pure string format: no I/O, no shared state.
"""

from enum import Enum

BASE_PATH = "/api/checkout/pub"

# Attachment names accepted by ATTACHMENTS_DATA. The route itself takes any name.
PAYMENT_DATA = "paymentData"
CLIENT_PROFILE_DATA = "clientProfileData"
SHIPPING_DATA = "shippingData"
MARKETING_DATA = "marketingData"


class CheckoutRoute(str, Enum):
    ORDER_FORM = "/orderForm"
    ADD_ITEM = "/orderForm/{}/items"
    UPDATE_ITEMS = "/orderForm/{}/items/update"
    ASSEMBLY_OPTIONS = "/orderForm/{}/items/{}/assemblyOptions/{}"
    ATTACHMENTS_DATA = "/orderForm/{}/attachments/{}"
    ORDER_FORM_CUSTOM_DATA = "/orderForm/{}/customData/{}/{}"
    PROFILE = "/orderForm/{}/profile"
    CHECKIN = "/orderForm/{}/checkIn"
    INSERT_COUPON = "/orderForm/{}/coupons"
    CLEAR_MESSAGES = "/orderForm/{}/messages/clear"
    CANCEL_ORDER = "/orders/{}/user-cancel-request"
    ORDERS = "/orders"
    SIMULATION = "/orderForms/simulation"

    @property
    def arity(self) -> int:
        return self.value.count("{}")


def resolve(route: CheckoutRoute, *ids, query: str = "") -> str:
    """
    Build the full path for a route.

    Args:
        route: Route template
        *ids: Identifiers substituted in order
        query: Optional query suffix (e.g. "?sc=1"), appended verbatim

    Raises:
        ValueError: If the number of identifiers does not match the template
    """
    if len(ids) != route.arity:
        raise ValueError(f"Route {route.name} expects {route.arity} identifier(s), got {len(ids)}")
    return f"{BASE_PATH}{route.value.format(*(str(i) for i in ids))}{query}"
