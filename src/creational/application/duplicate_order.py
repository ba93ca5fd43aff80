"""Application service: Duplicate Order use case.

Copies an existing order and applies scalar overrides to the copy only,
e.g. re-issuing the same basket with a different payment method.
"""

from __future__ import annotations

import logging

from creational.domain.model.order import OrderRecord
from creational.domain.service.order_duplicator import duplicate

logger = logging.getLogger(__name__)


class DuplicateOrderHandler:

    def handle(
        self,
        source: OrderRecord,
        payment_method: str | None = None,
        delivery_cost: float | None = None,
    ) -> OrderRecord:
        """Return an independent copy of *source*.

        Args:
            source: The order to copy. It is never modified.
            payment_method: If given, replaces the copy's payment method.
            delivery_cost: If given, replaces the copy's delivery cost.
        """
        copy = duplicate(source)

        if payment_method is not None:
            copy.payment_method = payment_method
        if delivery_cost is not None:
            copy.delivery_cost = delivery_cost

        logger.info(
            "Order duplicated (payment method %r -> %r)",
            source.payment_method,
            copy.payment_method,
        )
        return copy
