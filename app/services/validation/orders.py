"""
Order Checks and Status Rules

Status lifecycle:
    pending <-> preparing <-> out-for-delivery -> delivered

Any status may be replaced by any other through an update, except
``delivered``, which is terminal. Only ``pending`` orders can be deleted.
"""

from typing import Optional

from app.core.exceptions import ApplicationError, ValidationError
from app.models import OrderStatus
from app.services.validation.base import (
    CheckContext,
    id_matches_route,
    is_positive_integer,
    is_present,
    require_field,
)


def dishes_valid(context: CheckContext) -> Optional[ApplicationError]:
    dishes = context.payload.get("dishes")
    if not isinstance(dishes, list) or not dishes:
        return ValidationError("Order must include a dish")

    for index, line in enumerate(dishes):
        quantity = line.get("quantity") if isinstance(line, dict) else None
        if not is_positive_integer(quantity):
            line_id = line.get("id") if isinstance(line, dict) else None
            return ValidationError(
                f"Dish {line_id if line_id is not None else index} "
                f"must have a quantity that is an integer greater than 0"
            )
    return None


def status_valid(context: CheckContext) -> Optional[ApplicationError]:
    if context.payload.get("status") in OrderStatus.values():
        return None
    return ValidationError("Order status invalid")


def status_valid_if_given(context: CheckContext) -> Optional[ApplicationError]:
    # New orders default to pending when no status is sent.
    if not is_present(context.payload.get("status")):
        return None
    return status_valid(context)


def not_delivered(context: CheckContext) -> Optional[ApplicationError]:
    if context.existing.status.is_terminal:
        return ValidationError("A delivered order cannot be changed")
    return None


def only_pending_deletable(context: CheckContext) -> Optional[ApplicationError]:
    if context.existing.status.is_deletable:
        return None
    return ValidationError("An order cannot be deleted unless it is pending.")


ORDER_CREATE_CHECKS = (
    require_field("Order", "deliverTo"),
    require_field("Order", "mobileNumber"),
    require_field("Order", "dishes"),
    dishes_valid,
    status_valid_if_given,
)

# The update and delete chains run after the order was found.
ORDER_UPDATE_CHECKS = (
    id_matches_route("Order", trailing="."),
    not_delivered,
    require_field("Order", "deliverTo"),
    require_field("Order", "mobileNumber"),
    require_field("Order", "dishes"),
    require_field("Order", "status"),
    status_valid,
    dishes_valid,
)

ORDER_DELETE_CHECKS = (
    only_pending_deletable,
)
