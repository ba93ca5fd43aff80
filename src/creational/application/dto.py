"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry display-ready data from the application layer to the CLI
without exposing domain objects to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class LineItemDTO:
    name: str
    unit_price: str  # formatted, e.g. "500000.00"
    quantity: int


@dataclass(frozen=True)
class DiscountDTO:
    name: str
    percent: str  # formatted, e.g. "10%"


@dataclass(frozen=True)
class OrderDTO:
    """Output: a complete order as displayed to the user."""

    payment_method: str
    delivery_cost: str
    items: list[LineItemDTO]
    discounts: list[DiscountDTO]


@dataclass(frozen=True)
class SettingDTO:
    key: str
    value: str
