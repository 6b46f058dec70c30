"""Dish checks and the chains run before creating or updating a dish."""

from typing import Optional

from app.core.exceptions import ApplicationError, ValidationError
from app.services.validation.base import (
    CheckContext,
    id_matches_route,
    is_positive_integer,
    require_field,
)


def price_is_valid(context: CheckContext) -> Optional[ApplicationError]:
    if is_positive_integer(context.payload.get("price")):
        return None
    return ValidationError("Dish must have a price that is an integer greater than 0")


DISH_FIELD_CHECKS = (
    require_field("Dish", "name"),
    require_field("Dish", "description"),
    require_field("Dish", "price"),
    price_is_valid,
    require_field("Dish", "image_url"),
)

DISH_CREATE_CHECKS = DISH_FIELD_CHECKS

# Runs after the dish was found.
DISH_UPDATE_CHECKS = (id_matches_route("Dish"),) + DISH_FIELD_CHECKS
