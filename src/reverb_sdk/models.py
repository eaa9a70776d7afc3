"""Pydantic models for the Reverb resources this SDK touches.

Only commonly used fields are declared; anything else the API returns is
kept as extra attributes.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class ReverbModel(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)


class Price(ReverbModel):
    amount: Optional[str] = None
    amount_cents: Optional[int] = None
    currency: Optional[str] = None
    symbol: Optional[str] = None
    display: Optional[str] = None


class ListingState(ReverbModel):
    slug: str
    description: Optional[str] = None


class Listing(ReverbModel):
    id: Union[int, str]
    make: Optional[str] = None
    model: Optional[str] = None
    finish: Optional[str] = None
    year: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    created_at: Optional[str] = None
    published_at: Optional[str] = None
    shop_name: Optional[str] = None
    price: Optional[Price] = None
    inventory: Optional[int] = None
    state: Optional[ListingState] = None
    slug: Optional[str] = None
    photos: List[Dict[str, Any]] = Field(default_factory=list)
    links: Dict[str, Any] = Field(default_factory=dict, alias="_links")


class Order(ReverbModel):
    order_number: Union[int, str]
    uuid: Optional[str] = None
    status: Optional[str] = None
    title: Optional[str] = None
    quantity: Optional[int] = None
    buyer_name: Optional[str] = None
    shop_name: Optional[str] = None
    total: Optional[Price] = None
    created_at: Optional[str] = None
    paid_at: Optional[str] = None
    shipped_at: Optional[str] = None
    product_id: Optional[Union[int, str]] = None
    links: Dict[str, Any] = Field(default_factory=dict, alias="_links")


class PriceInput(ReverbModel):
    amount: str
    currency: str


class ListingPostBody(ReverbModel):
    make: str
    model: str
    title: Optional[str] = None
    description: Optional[str] = None
    finish: Optional[str] = None
    year: Optional[str] = None
    sku: Optional[str] = None
    upc: Optional[str] = None
    upc_does_not_apply: Optional[str] = None
    categories: List[Dict[str, str]] = Field(default_factory=list)
    condition: Optional[Dict[str, str]] = None
    photos: List[str] = Field(default_factory=list)
    videos: List[Dict[str, str]] = Field(default_factory=list)
    price: Optional[PriceInput] = None
    has_inventory: Optional[bool] = None
    inventory: Optional[int] = None
    offers_enabled: Optional[bool] = None
    handmade: Optional[bool] = None
    shipping_profile_id: Optional[str] = None
    shipping: Optional[Dict[str, Any]] = None


__all__ = [
    "Listing",
    "ListingPostBody",
    "ListingState",
    "Order",
    "Price",
    "PriceInput",
]
