"""Header and query-string helpers derived from the request context."""

from typing import Dict, Optional

from checkout_gateway.contracts.context import RequestContext

CHECKOUT_COOKIE = "checkout.vtex.com"
IDENTITY_HEADER = "VtexIdclientAutCookie"


def checkout_cookie_format(order_form_id: str) -> str:
    return f"{CHECKOUT_COOKIE}=__ofid={order_form_id};"


def compose_headers(context: RequestContext) -> Dict[str, str]:
    """Build the session cookie sent with every checkout request."""
    checkout_cookie = checkout_cookie_format(context.order_form_id) if context.order_form_id else ""
    segment = context.segment_token or ""
    session = context.session_token or ""
    return {"Cookie": f"{checkout_cookie}vtex_segment={segment};vtex_session={session};"}


def identity_headers(context: RequestContext) -> Dict[str, str]:
    if context.store_user_auth_token:
        return {IDENTITY_HEADER: context.store_user_auth_token}
    return {}


def channel_query_string(context: RequestContext) -> str:
    channel = context.channel
    return f"?sc={channel}" if channel else ""


def merge_headers(*layers: Optional[Dict[str, str]]) -> Dict[str, str]:
    """Layer header dicts left to right; later layers win on the same name (case-insensitive)."""
    merged: Dict[str, str] = {}
    names: Dict[str, str] = {}
    for layer in layers:
        for name, value in (layer or {}).items():
            previous = names.get(name.lower())
            if previous is not None and previous != name:
                merged.pop(previous)
            names[name.lower()] = name
            merged[name] = value
    return merged
