"""
Test configuration.
Provides fresh stores, services and an API client per test.
"""

import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.models import Dish, Order, OrderLine, OrderStatus
from app.services import DishService, OrderService, get_dish_service, get_order_service
from app.services.stores import InMemoryStore


@pytest.fixture
def dish_store():
    return InMemoryStore("dishes")


@pytest.fixture
def order_store():
    return InMemoryStore("orders")


@pytest.fixture
def dish_service(dish_store):
    return DishService(dish_store)


@pytest.fixture
def order_service(order_store):
    return OrderService(order_store)


@pytest.fixture
def client(dish_service, order_service):
    """API client wired to the per-test stores."""
    app.dependency_overrides[get_dish_service] = lambda: dish_service
    app.dependency_overrides[get_order_service] = lambda: order_service
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def dish_payload():
    return {
        "name": "Taco",
        "description": "Crispy corn shell with pinto beans",
        "price": 8,
        "image_url": "https://example.com/taco.jpg",
    }


@pytest.fixture
def order_payload():
    return {
        "deliverTo": "350 Fifth Avenue, New York",
        "mobileNumber": "(212) 555-0147",
        "dishes": [
            {
                "id": "1",
                "name": "Taco",
                "description": "Crispy corn shell with pinto beans",
                "image_url": "https://example.com/taco.jpg",
                "price": 8,
                "quantity": 2,
            }
        ],
    }


@pytest.fixture
def make_order(order_store):
    """Put an order with the given status straight into the store."""
    def factory(order_id: str = "5", status: OrderStatus = OrderStatus.PENDING) -> Order:
        order = Order(
            id=order_id,
            deliver_to="1 Infinite Loop",
            mobile_number="555-0100",
            status=status,
            dishes=[OrderLine(id="1", name="Taco", price=8, quantity=1)],
        )
        return order_store.add(order)

    return factory


@pytest.fixture
def taco(dish_store):
    return dish_store.add(
        Dish(id="3", name="Taco", description="Crispy", price=8, image_url="u")
    )
