"""
Dish Service

List, create, read and update dishes. Dishes are never deleted.

Author: Khalil Bannouri
Version: 3.0.0
"""

import logging
from typing import Any, Mapping

from app.core.exceptions import NotFoundError
from app.models import Dish
from app.services.stores.base import BaseStore
from app.services.validation import (
    CheckContext,
    DISH_CREATE_CHECKS,
    DISH_UPDATE_CHECKS,
    run_checks,
)

logger = logging.getLogger(__name__)


class DishService:
    """
    Dish operations over an injected store.

    Example:
        >>> service = DishService(InMemoryStore("dishes"))
        >>> dish = service.create({"name": "Taco", "description": "x",
        ...                        "price": 8, "image_url": "u"})
        >>> dish.id
        '1'
    """

    def __init__(self, store: BaseStore[Dish]):
        self.store = store

    def list(self) -> list[Dish]:
        return self.store.list()

    def find(self, dish_id: str) -> Dish:
        """
        Resolve a dish by ID.

        Raises:
            NotFoundError: If no dish has this ID
        """
        dish = self.store.get(dish_id)
        if dish is None:
            raise NotFoundError(f"Dish not found: {dish_id}")
        return dish

    def read(self, dish_id: str) -> Dish:
        with self.store.locked():
            return self.find(dish_id)

    def create(self, payload: Mapping[str, Any]) -> Dish:
        with self.store.locked():
            run_checks(CheckContext(payload), DISH_CREATE_CHECKS)

            dish = Dish(
                id=self.store.next_id(),
                name=str(payload["name"]),
                description=str(payload["description"]),
                price=int(payload["price"]),
                image_url=str(payload["image_url"]),
            )
            self.store.add(dish)

        logger.info(f"Dish #{dish.id} created: {dish.name} ({dish.price})")
        return dish

    def update(self, dish_id: str, payload: Mapping[str, Any]) -> Dish:
        with self.store.locked():
            dish = self.find(dish_id)
            run_checks(
                CheckContext(payload, route_id=dish_id, existing=dish),
                DISH_UPDATE_CHECKS,
            )

            dish.name = str(payload["name"])
            dish.description = str(payload["description"])
            dish.price = int(payload["price"])
            dish.image_url = str(payload["image_url"])
            self.store.save(dish)

        logger.info(f"Dish #{dish.id} updated")
        return dish
