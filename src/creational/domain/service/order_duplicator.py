"""Domain service: Order Duplicator.

Produces an independent copy of an OrderRecord.  Copying the list
objects alone is not enough: the copy would still hold the very same
LineItem instances, and changing a quantity on one order would change
it on the other.  Every owned element is therefore rebuilt from its own
field values.
"""

from __future__ import annotations

import logging

from creational.domain.exceptions import DuplicationError
from creational.domain.model.order import DiscountEntry, LineItem, OrderRecord

logger = logging.getLogger(__name__)


def duplicate(source: OrderRecord) -> OrderRecord:
    """Return a copy of *source* that shares no mutable storage with it.

    Scalars are copied by value; items and discounts are copied element
    by element, preserving order.  *source* is not modified.

    Raises DuplicationError if either collection holds something other
    than a LineItem / DiscountEntry.
    """
    copy = OrderRecord(
        delivery_cost=source.delivery_cost,
        payment_method=source.payment_method,
    )

    for index, item in enumerate(source.items):
        copy.add_item(_copy_line_item(index, item))

    for index, discount in enumerate(source.discounts):
        copy.add_discount(_copy_discount(index, discount))

    logger.debug(
        "Duplicated order: %d item(s), %d discount(s)",
        len(copy.items),
        len(copy.discounts),
    )
    return copy


# --- Element copies -----------------------------------------------------------


def _copy_line_item(index: int, item: object) -> LineItem:
    if type(item) is not LineItem:
        raise DuplicationError(
            f"Cannot duplicate items[{index}]: expected LineItem, "
            f"got {type(item).__name__} ({item!r})",
            element=item,
        )
    return LineItem(name=item.name, unit_price=item.unit_price, quantity=item.quantity)


def _copy_discount(index: int, discount: object) -> DiscountEntry:
    if type(discount) is not DiscountEntry:
        raise DuplicationError(
            f"Cannot duplicate discounts[{index}]: expected DiscountEntry, "
            f"got {type(discount).__name__} ({discount!r})",
            element=discount,
        )
    return DiscountEntry(name=discount.name, percent=discount.percent)
