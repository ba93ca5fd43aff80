"""Application service: Show Order use case (query)."""

from __future__ import annotations

from creational.application.dto import DiscountDTO, LineItemDTO, OrderDTO
from creational.domain.model.order import OrderRecord


class ShowOrderHandler:

    def handle(self, order: OrderRecord) -> OrderDTO:
        return self._to_dto(order)

    @staticmethod
    def _to_dto(order: OrderRecord) -> OrderDTO:
        return OrderDTO(
            payment_method=order.payment_method,
            delivery_cost=f"{order.delivery_cost:.2f}",
            items=[
                LineItemDTO(
                    name=item.name,
                    unit_price=f"{item.unit_price:.2f}",
                    quantity=item.quantity,
                )
                for item in order.items
            ],
            discounts=[
                DiscountDTO(name=d.name, percent=f"{d.percent:g}%")
                for d in order.discounts
            ],
        )
