"""Order record: a composite value that owns its line items and discounts.

Line items and discounts are plain value holders. The record owns both
sequences exclusively; use ``order_duplicator.duplicate()`` to get an
independent copy instead of sharing them.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class LineItem:
    """A product line: name, unit price and how many units were ordered."""

    name: str
    unit_price: float
    quantity: int


@dataclass
class DiscountEntry:
    name: str
    percent: float


@dataclass
class OrderRecord:
    """Composite order: items, discounts and two scalar fields.

    Starts empty; populated via ``add_item()``/``add_discount()`` and
    direct assignment of ``delivery_cost`` and ``payment_method``.
    """

    items: list[LineItem] = field(default_factory=list)
    discounts: list[DiscountEntry] = field(default_factory=list)
    delivery_cost: float = 0.0
    payment_method: str = ""

    def add_item(self, item: LineItem) -> None:
        self.items.append(item)

    def add_discount(self, discount: DiscountEntry) -> None:
        self.discounts.append(discount)
