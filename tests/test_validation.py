"""
Validation check tests.
"""

import pytest

from app.core.exceptions import NotFoundError, ValidationError
from app.models import Order, OrderLine, OrderStatus
from app.services.validation import (
    CheckContext,
    DISH_CREATE_CHECKS,
    ORDER_UPDATE_CHECKS,
    dishes_valid,
    id_matches_route,
    is_positive_integer,
    is_present,
    not_delivered,
    only_pending_deletable,
    price_is_valid,
    require_field,
    run_checks,
    status_valid,
)


def _order(status: OrderStatus) -> Order:
    return Order(
        id="5",
        deliver_to="here",
        mobile_number="555",
        status=status,
        dishes=[OrderLine(quantity=1)],
    )


class TestHelpers:
    """Value predicates"""

    @pytest.mark.parametrize("value", [None, False, "", 0, 0.0])
    def test_blank_values(self, value):
        assert is_present(value) is False

    @pytest.mark.parametrize("value", ["x", 1, -1, True, [], {}])
    def test_present_values(self, value):
        assert is_present(value) is True

    @pytest.mark.parametrize("value", [1, 8, 3.0])
    def test_positive_integers(self, value):
        assert is_positive_integer(value) is True

    @pytest.mark.parametrize("value", [0, -2, 1.5, "2", None, True])
    def test_not_positive_integers(self, value):
        assert is_positive_integer(value) is False


class TestRunChecks:
    """Chain runner"""

    def test_passes_when_every_check_passes(self):
        run_checks(CheckContext({"name": "x"}), [require_field("Dish", "name")])

    def test_stops_at_first_failure(self):
        calls = []

        def first(context):
            calls.append("first")
            return ValidationError("first failed")

        def second(context):
            calls.append("second")
            return None

        with pytest.raises(ValidationError, match="first failed"):
            run_checks(CheckContext(), [first, second])
        assert calls == ["first"]

    def test_raises_the_returned_error_type(self):
        with pytest.raises(NotFoundError):
            run_checks(CheckContext(), [lambda context: NotFoundError("gone")])


class TestRequireField:
    """Presence checks"""

    def test_missing_field_message(self):
        error = require_field("Dish", "name")(CheckContext({}))

        assert isinstance(error, ValidationError)
        assert error.status_code == 400
        assert error.message == "Dish must include a name"

    def test_empty_string_is_missing(self):
        error = require_field("Order", "deliverTo")(CheckContext({"deliverTo": ""}))

        assert error.message == "Order must include a deliverTo"

    def test_present_field_passes(self):
        assert require_field("Dish", "name")(CheckContext({"name": "Taco"})) is None


class TestDishChecks:
    """Dish checks"""

    @pytest.mark.parametrize("price", [0, -1, 2.5, "8", None])
    def test_invalid_price(self, price):
        error = price_is_valid(CheckContext({"price": price}))

        assert error.message == "Dish must have a price that is an integer greater than 0"

    def test_valid_price(self):
        assert price_is_valid(CheckContext({"price": 8})) is None

    def test_create_chain_order(self):
        with pytest.raises(ValidationError, match="Dish must include a description"):
            run_checks(CheckContext({"name": "Taco", "price": -1}), DISH_CREATE_CHECKS)

    def test_negative_price_reaches_price_check(self):
        payload = {"name": "Taco", "description": "x", "price": -1, "image_url": "u"}

        with pytest.raises(ValidationError, match="integer greater than 0"):
            run_checks(CheckContext(payload), DISH_CREATE_CHECKS)


class TestIdMatchesRoute:
    """Body/route ID check"""

    def test_absent_body_id_passes(self):
        check = id_matches_route("Dish")

        assert check(CheckContext({}, route_id="1")) is None
        assert check(CheckContext({"id": ""}, route_id="1")) is None

    def test_matching_id_passes(self):
        assert id_matches_route("Dish")(CheckContext({"id": "1"}, route_id="1")) is None

    def test_dish_mismatch_message(self):
        error = id_matches_route("Dish")(CheckContext({"id": "2"}, route_id="1"))

        assert error.message == "Dish id does not match route id. Dish: 2, Route: 1"

    def test_order_mismatch_message(self):
        error = id_matches_route("Order", trailing=".")(CheckContext({"id": "6"}, route_id="5"))

        assert error.message == "Order id does not match route id. Order: 6, Route: 5."


class TestOrderChecks:
    """Order checks and status rules"""

    @pytest.mark.parametrize("dishes", [[], "taco", {"id": "1"}, None])
    def test_dishes_must_be_non_empty_list(self, dishes):
        error = dishes_valid(CheckContext({"dishes": dishes}))

        assert error.message == "Order must include a dish"

    @pytest.mark.parametrize("quantity", [0, -1, 1.5, "2", None])
    def test_line_quantity_must_be_positive_integer(self, quantity):
        lines = [{"id": "1", "quantity": 1}, {"id": "7", "quantity": quantity}]

        error = dishes_valid(CheckContext({"dishes": lines}))

        assert error.message == "Dish 7 must have a quantity that is an integer greater than 0"

    def test_line_without_id_named_by_position(self):
        error = dishes_valid(CheckContext({"dishes": [{"quantity": 1}, {"quantity": 0}]}))

        assert error.message == "Dish 1 must have a quantity that is an integer greater than 0"

    def test_valid_lines(self):
        assert dishes_valid(CheckContext({"dishes": [{"id": "1", "quantity": 3}]})) is None

    @pytest.mark.parametrize("status", OrderStatus.values())
    def test_known_statuses(self, status):
        assert status_valid(CheckContext({"status": status})) is None

    @pytest.mark.parametrize("status", ["invalid", "out_for_delivery", "", None])
    def test_unknown_status(self, status):
        assert status_valid(CheckContext({"status": status})).message == "Order status invalid"

    def test_delivered_is_terminal(self):
        error = not_delivered(CheckContext(existing=_order(OrderStatus.DELIVERED)))

        assert error.message == "A delivered order cannot be changed"

    @pytest.mark.parametrize(
        "status", [OrderStatus.PENDING, OrderStatus.PREPARING, OrderStatus.OUT_FOR_DELIVERY]
    )
    def test_other_statuses_can_change(self, status):
        assert not_delivered(CheckContext(existing=_order(status))) is None

    def test_only_pending_deletable(self):
        assert only_pending_deletable(CheckContext(existing=_order(OrderStatus.PENDING))) is None

        error = only_pending_deletable(CheckContext(existing=_order(OrderStatus.PREPARING)))
        assert error.message == "An order cannot be deleted unless it is pending."

    def test_delivered_rejected_before_payload_checks(self):
        with pytest.raises(ValidationError, match="A delivered order cannot be changed"):
            run_checks(
                CheckContext({}, route_id="5", existing=_order(OrderStatus.DELIVERED)),
                ORDER_UPDATE_CHECKS,
            )
