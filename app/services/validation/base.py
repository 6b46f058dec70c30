"""
Validation Chain

A check is a plain function taking a CheckContext and returning either None
(pass) or the ApplicationError describing the failure. run_checks() walks an
ordered sequence of checks and raises the first error, so nothing after a
failing check runs and no mutation happens.

Usage:
    run_checks(
        CheckContext(payload, route_id=dish_id, existing=dish),
        DISH_UPDATE_CHECKS,
    )
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, Optional, Sequence

from app.core.exceptions import ApplicationError, ValidationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CheckContext:
    """
    Input shared by every check in a chain.

    Attributes:
        payload: The ``data`` object of the request body
        route_id: ID taken from the URL, for path-addressed operations
        existing: Record returned by the exists-check, if any
    """
    payload: Mapping[str, Any] = field(default_factory=dict)
    route_id: Optional[str] = None
    existing: Any = None


Check = Callable[[CheckContext], Optional[ApplicationError]]


def run_checks(context: CheckContext, checks: Sequence[Check]) -> None:
    """
    Run checks in order and stop at the first failure.

    Raises:
        ApplicationError: The error returned by the first failing check
    """
    for check in checks:
        error = check(context)
        if error is not None:
            logger.debug(f"Check {getattr(check, '__name__', check)} failed: {error.message}")
            raise error


def is_present(value: Any) -> bool:
    """
    Whether a payload value counts as supplied.

    Missing, None, False, "" and numeric zero are blank. Empty lists and
    objects are present; the checks that need content inspect them.
    """
    if value is None or value is False:
        return False
    if isinstance(value, str):
        return value != ""
    if isinstance(value, (int, float)):
        return value != 0
    return True


def is_positive_integer(value: Any) -> bool:
    """Integers (or integral floats) greater than zero; booleans excluded."""
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return value > 0
    if isinstance(value, float):
        return value.is_integer() and value > 0
    return False


def require_field(resource: str, name: str) -> Check:
    """
    Build a presence check for one payload field.

    Example:
        >>> check = require_field("Dish", "name")
        >>> check(CheckContext({})).message
        'Dish must include a name'
    """
    def check(context: CheckContext) -> Optional[ApplicationError]:
        if is_present(context.payload.get(name)):
            return None
        return ValidationError(f"{resource} must include a {name}")

    check.__name__ = f"require_{name}"
    return check


def id_matches_route(resource: str, trailing: str = "") -> Check:
    """
    Build a check that a body ``id``, when given, equals the route ID.

    Args:
        resource: Name used in the message ("Dish", "Order")
        trailing: Text appended to the message
    """
    def check(context: CheckContext) -> Optional[ApplicationError]:
        body_id = context.payload.get("id")
        if not is_present(body_id) or str(body_id) == context.route_id:
            return None
        return ValidationError(
            f"{resource} id does not match route id. "
            f"{resource}: {body_id}, Route: {context.route_id}{trailing}"
        )

    check.__name__ = "id_matches_route"
    return check
