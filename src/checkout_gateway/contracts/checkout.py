"""
Checkout contracts.

Defines the request/response structures the checkout client forwards, e.g.:
- cart simulation requests (items, country, postal code, price tables)
- the raw response envelope kept for order form creation

Order forms themselves are opaque: the client passes them through as plain
JSON dictionaries and never validates their contents.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


OrderForm = Dict[str, Any]


class SimulationItem(BaseModel):
    # Extra keys (price, measurementUnit, ...) are forwarded untouched.
    model_config = ConfigDict(frozen=True, extra="allow")

    id: str
    quantity: Union[int, float, str]
    seller: str


class SimulationData(BaseModel):
    """Body of a cart simulation request. Field names follow the backend's camelCase."""

    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="allow")

    country: str
    items: List[SimulationItem]
    postal_code: Optional[str] = Field(default=None, alias="postalCode")
    is_checked_in: Optional[bool] = Field(default=None, alias="isCheckedIn")
    price_tables: Optional[List[str]] = Field(default=None, alias="priceTables")
    marketing_data: Optional[Dict[str, str]] = Field(default=None, alias="marketingData")

    def to_payload(self) -> Dict[str, Any]:
        # Unset optionals are omitted; item and price table order is kept as given.
        return self.model_dump(by_alias=True, exclude_none=True)


class CheckoutResponse(BaseModel):
    """Full response envelope, kept when callers need status and headers."""

    status_code: int
    headers: Dict[str, Union[str, List[str]]] = Field(default_factory=dict)
    data: Any = None
