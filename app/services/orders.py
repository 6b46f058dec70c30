"""
Order Service

List, create, read, update and delete orders. Updates replace every
mutable field; the status rules live in app.services.validation.orders.

Author: Khalil Bannouri
Version: 3.0.0
"""

import logging
from typing import Any, Mapping

from app.core.exceptions import NotFoundError
from app.models import Order, OrderLine, OrderStatus
from app.services.stores.base import BaseStore
from app.services.validation import (
    CheckContext,
    ORDER_CREATE_CHECKS,
    ORDER_DELETE_CHECKS,
    ORDER_UPDATE_CHECKS,
    is_present,
    run_checks,
)

logger = logging.getLogger(__name__)


def _lines(payload: Mapping[str, Any]) -> list[OrderLine]:
    return [OrderLine.from_payload(line) for line in payload["dishes"]]


class OrderService:
    """
    Order operations over an injected store.

    Every operation holds the store lock from the lookup until the
    mutation is done, so a check never passes against stale state.
    """

    def __init__(self, store: BaseStore[Order]):
        self.store = store

    def list(self) -> list[Order]:
        return self.store.list()

    def find(self, order_id: str) -> Order:
        """
        Resolve an order by ID.

        Raises:
            NotFoundError: If no order has this ID
        """
        order = self.store.get(order_id)
        if order is None:
            raise NotFoundError(f"Order id not found: {order_id}")
        return order

    def read(self, order_id: str) -> Order:
        with self.store.locked():
            return self.find(order_id)

    def create(self, payload: Mapping[str, Any]) -> Order:
        with self.store.locked():
            run_checks(CheckContext(payload), ORDER_CREATE_CHECKS)

            status = payload.get("status")
            order = Order(
                id=self.store.next_id(),
                deliver_to=str(payload["deliverTo"]),
                mobile_number=str(payload["mobileNumber"]),
                status=OrderStatus(status) if is_present(status) else OrderStatus.PENDING,
                dishes=_lines(payload),
            )
            self.store.add(order)

        logger.info(
            f"Order #{order.id} created: {len(order.dishes)} line(s) "
            f"to {order.deliver_to} [{order.status.value}]"
        )
        return order

    def update(self, order_id: str, payload: Mapping[str, Any]) -> Order:
        with self.store.locked():
            order = self.find(order_id)
            previous = order.status
            run_checks(
                CheckContext(payload, route_id=order_id, existing=order),
                ORDER_UPDATE_CHECKS,
            )

            order.deliver_to = str(payload["deliverTo"])
            order.mobile_number = str(payload["mobileNumber"])
            order.status = OrderStatus(payload["status"])
            order.dishes = _lines(payload)
            self.store.save(order)

        if order.status is not previous:
            logger.info(f"Order #{order.id} status: {previous.value} -> {order.status.value}")
        else:
            logger.info(f"Order #{order.id} updated")
        return order

    def delete(self, order_id: str) -> None:
        with self.store.locked():
            order = self.find(order_id)
            run_checks(CheckContext(route_id=order_id, existing=order), ORDER_DELETE_CHECKS)

            if self.store.delete(order.id):
                logger.info(f"Order #{order.id} deleted")
