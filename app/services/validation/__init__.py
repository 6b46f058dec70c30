"""
Validation Module

Ordered check chains run before each dish and order operation.
"""

from app.services.validation.base import (
    Check,
    CheckContext,
    run_checks,
    require_field,
    id_matches_route,
    is_present,
    is_positive_integer,
)
from app.services.validation.dishes import (
    DISH_CREATE_CHECKS,
    DISH_UPDATE_CHECKS,
    price_is_valid,
)
from app.services.validation.orders import (
    ORDER_CREATE_CHECKS,
    ORDER_UPDATE_CHECKS,
    ORDER_DELETE_CHECKS,
    dishes_valid,
    status_valid,
    not_delivered,
    only_pending_deletable,
)

__all__ = [
    "Check",
    "CheckContext",
    "run_checks",
    "require_field",
    "id_matches_route",
    "is_present",
    "is_positive_integer",
    "DISH_CREATE_CHECKS",
    "DISH_UPDATE_CHECKS",
    "price_is_valid",
    "ORDER_CREATE_CHECKS",
    "ORDER_UPDATE_CHECKS",
    "ORDER_DELETE_CHECKS",
    "dishes_valid",
    "status_valid",
    "not_delivered",
    "only_pending_deletable",
]
