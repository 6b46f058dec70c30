"""
Order API integration tests.
"""

import pytest

from app.models import OrderStatus


class TestOrdersAPI:
    """Order endpoints"""

    def test_list_orders_uses_camel_case(self, client, make_order):
        make_order("5")

        response = client.get("/orders")

        assert response.status_code == 200
        order = response.json()["data"][0]
        assert order["id"] == "5"
        assert order["deliverTo"] == "1 Infinite Loop"
        assert order["mobileNumber"] == "555-0100"
        assert order["status"] == "pending"
        assert order["dishes"][0]["quantity"] == 1

    def test_create_order(self, client, order_payload):
        response = client.post("/orders", json={"data": order_payload})

        assert response.status_code == 201
        data = response.json()["data"]
        assert data["id"] == "1"
        assert data["status"] == "pending"
        assert data["deliverTo"] == order_payload["deliverTo"]
        assert data["dishes"] == order_payload["dishes"]

    def test_create_then_read(self, client, order_payload):
        created = client.post("/orders", json={"data": order_payload}).json()["data"]

        response = client.get(f"/orders/{created['id']}")

        assert response.status_code == 200
        assert response.json()["data"] == created

    @pytest.mark.parametrize("dishes", [[], "pizza"])
    def test_create_without_dishes(self, client, order_payload, dishes):
        response = client.post("/orders", json={"data": dict(order_payload, dishes=dishes)})

        assert response.status_code == 400
        assert response.json()["error"] == "Order must include a dish"

    @pytest.mark.parametrize("quantity", [0, -1, 1.5, "2"])
    def test_create_with_invalid_quantity(self, client, order_payload, quantity):
        order_payload["dishes"][0]["quantity"] = quantity

        response = client.post("/orders", json={"data": order_payload})

        assert response.status_code == 400
        assert response.json()["error"] == (
            "Dish 1 must have a quantity that is an integer greater than 0"
        )

    def test_create_missing_mobile_number(self, client, order_payload):
        del order_payload["mobileNumber"]

        response = client.post("/orders", json={"data": order_payload})

        assert response.status_code == 400
        assert response.json()["error"] == "Order must include a mobileNumber"

    def test_read_unknown_order(self, client):
        response = client.get("/orders/99")

        assert response.status_code == 404
        assert response.json() == {"error": "Order id not found: 99"}

    def test_update_order(self, client, make_order, order_payload):
        make_order("5")

        response = client.put(
            "/orders/5", json={"data": dict(order_payload, status="out-for-delivery")}
        )

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["id"] == "5"
        assert data["status"] == "out-for-delivery"
        assert data["deliverTo"] == order_payload["deliverTo"]

    def test_update_id_mismatch(self, client, make_order, order_payload):
        make_order("5")

        response = client.put(
            "/orders/5", json={"data": dict(order_payload, id="6", status="pending")}
        )

        assert response.status_code == 400
        assert response.json()["error"] == (
            "Order id does not match route id. Order: 6, Route: 5."
        )

    def test_update_invalid_status(self, client, make_order, order_payload):
        make_order("5")

        response = client.put("/orders/5", json={"data": dict(order_payload, status="invalid")})

        assert response.status_code == 400
        assert response.json()["error"] == "Order status invalid"

    @pytest.mark.parametrize("quantity", [0, -1, 1.5, "2"])
    def test_update_with_invalid_quantity(self, client, make_order, order_payload, quantity):
        order = make_order("5")
        order_payload["dishes"][0]["quantity"] = quantity

        response = client.put(
            "/orders/5", json={"data": dict(order_payload, status="preparing")}
        )

        assert response.status_code == 400
        assert response.json()["error"] == (
            "Dish 1 must have a quantity that is an integer greater than 0"
        )
        assert order.status is OrderStatus.PENDING
        assert order.deliver_to == "1 Infinite Loop"
        assert order.dishes[0].quantity == 1

    def test_update_with_empty_dishes(self, client, make_order, order_payload):
        make_order("5")

        response = client.put(
            "/orders/5", json={"data": dict(order_payload, status="pending", dishes=[])}
        )

        assert response.status_code == 400
        assert response.json()["error"] == "Order must include a dish"

    def test_update_delivered_order(self, client, make_order, order_payload):
        make_order("5", OrderStatus.DELIVERED)

        for body in [dict(order_payload, status="pending"), {}]:
            response = client.put("/orders/5", json={"data": body})

            assert response.status_code == 400
            assert response.json()["error"] == "A delivered order cannot be changed"

    def test_update_unknown_order(self, client, order_payload):
        response = client.put("/orders/9", json={"data": dict(order_payload, status="pending")})

        assert response.status_code == 404

    def test_delete_pending_order(self, client, make_order):
        make_order("5")

        response = client.delete("/orders/5")

        assert response.status_code == 204
        assert response.content == b""
        assert client.get("/orders/5").status_code == 404

    def test_delete_preparing_order(self, client, make_order):
        make_order("5", OrderStatus.PREPARING)

        response = client.delete("/orders/5")

        assert response.status_code == 400
        assert response.json()["error"] == "An order cannot be deleted unless it is pending."

    def test_delete_unknown_order(self, client):
        response = client.delete("/orders/5")

        assert response.status_code == 404

    def test_deleted_id_not_reused(self, client, order_payload):
        first = client.post("/orders", json={"data": order_payload}).json()["data"]["id"]
        client.delete(f"/orders/{first}")

        second = client.post("/orders", json={"data": order_payload}).json()["data"]["id"]

        assert int(second) > int(first)


class TestMiscAPI:
    """Root, health and routing errors"""

    def test_root(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert response.json()["health"] == "/health"

    def test_health(self, client, taco, make_order):
        make_order("5")

        response = client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "operational"
        assert data["dishes"] == 1
        assert data["orders"] == 1

    def test_unknown_path(self, client):
        response = client.get("/menu")

        assert response.status_code == 404
        assert response.json() == {"error": "Path not found: /menu"}
