from dataclasses import dataclass, replace
from typing import Optional


@dataclass(frozen=True)
class RequestContext:
    """Per-call session facts supplied by the calling application.

    Read-only: the checkout client never mutates it. Tokens that are absent
    are rendered as empty strings in the session cookie.
    """

    session_token: Optional[str] = None
    segment_token: Optional[str] = None
    store_user_auth_token: Optional[str] = None
    channel: Optional[str] = None            # sales channel, sent as ?sc=
    order_form_id: Optional[str] = None

    def with_order_form(self, order_form_id: Optional[str]) -> "RequestContext":
        return replace(self, order_form_id=order_form_id)
