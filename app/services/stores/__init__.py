"""
Store Factory

Provides a single entry point for obtaining the dish and order stores.
The factory pattern keeps the services agnostic about which backend is
being used.

Usage:
    from app.services.stores import get_order_store

    store = get_order_store()
    orders = store.list()

Both stores are process-wide singletons. Call reset_stores() to drop them
(tests, or after changing SEED_DATA at runtime).

Author: Khalil Bannouri
Version: 3.0.0
"""

import logging
from functools import lru_cache

from app.core.config import get_settings
from app.models import Dish, Order
from app.services.stores.base import BaseStore
from app.services.stores.memory import InMemoryStore
from app.services.stores.seed import sample_dishes, sample_orders

logger = logging.getLogger(__name__)


@lru_cache()
def get_dish_store() -> BaseStore[Dish]:
    """
    Get the shared dish store.

    Returns:
        BaseStore[Dish]: In-memory dish store, seeded when SEED_DATA is set
    """
    settings = get_settings()
    records = sample_dishes() if settings.should_seed_data else []
    logger.info("Dish Store: Using InMemoryStore")
    return InMemoryStore("dishes", records)


@lru_cache()
def get_order_store() -> BaseStore[Order]:
    """
    Get the shared order store.

    Returns:
        BaseStore[Order]: In-memory order store, seeded when SEED_DATA is set
    """
    settings = get_settings()
    records = sample_orders() if settings.should_seed_data else []
    logger.info("Order Store: Using InMemoryStore")
    return InMemoryStore("orders", records)


def reset_stores() -> None:
    """
    Clear the cached store instances.

    The next call to get_dish_store() / get_order_store() creates empty
    (or freshly seeded) stores.
    """
    get_dish_store.cache_clear()
    get_order_store.cache_clear()
    logger.debug("Store cache cleared")


__all__ = [
    "get_dish_store",
    "get_order_store",
    "reset_stores",
    "BaseStore",
    "InMemoryStore",
]
