"""
                        Services Module

Business logic for the two resources. Each service works against an
injected store (see app.services.stores), so tests and future backends
can swap the storage without touching the validation chain.

Services:
    - dishes: Dish list/create/read/update
    - orders: Order list/create/read/update/delete with status rules
    - stores: Store interface, in-memory backend and factory
    - validation: Ordered check chains
"""

from app.services.dishes import DishService
from app.services.orders import OrderService
from app.services.stores import get_dish_store, get_order_store


def get_dish_service() -> DishService:
    """FastAPI dependency returning a service bound to the shared dish store."""
    return DishService(get_dish_store())


def get_order_service() -> OrderService:
    """FastAPI dependency returning a service bound to the shared order store."""
    return OrderService(get_order_store())


__all__ = [
    "DishService",
    "OrderService",
    "get_dish_service",
    "get_order_service",
]
