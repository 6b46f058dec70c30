"""
Sample Records

Loaded into the stores at startup when SEED_DATA is enabled, so a fresh
development server has a menu and a few orders to work with.
"""

from app.models import Dish, Order, OrderLine, OrderStatus


def sample_dishes() -> list[Dish]:
    return [
        Dish(
            id="1",
            name="Dolcelatte and chickpea spaghetti",
            description="Spaghetti topped with a blend of dolcelatte and fresh chickpeas",
            price=19,
            image_url="https://images.pexels.com/photos/1279330/pexels-photo-1279330.jpeg?h=530&w=350",
        ),
        Dish(
            id="2",
            name="Broccoli and beetroot stir fry",
            description="Crunchy stir fry featuring fresh broccoli and beetroot",
            price=15,
            image_url="https://images.pexels.com/photos/2347311/pexels-photo-2347311.jpeg?h=530&w=350",
        ),
        Dish(
            id="3",
            name="Falafel and tahini bagel",
            description="A warm bagel filled with falafel and tahini",
            price=6,
            image_url="https://images.pexels.com/photos/4078159/pexels-photo-4078159.jpeg?h=530&w=350",
        ),
    ]


def _line(dish: Dish, quantity: int) -> OrderLine:
    return OrderLine(
        id=dish.id,
        name=dish.name,
        description=dish.description,
        image_url=dish.image_url,
        price=dish.price,
        quantity=quantity,
    )


def sample_orders() -> list[Order]:
    spaghetti, stir_fry, bagel = sample_dishes()
    return [
        Order(
            id="1",
            deliver_to="308 Negra Arroyo Lane, Albuquerque, NM",
            mobile_number="(505) 143-3369",
            status=OrderStatus.DELIVERED,
            dishes=[_line(spaghetti, 2)],
        ),
        Order(
            id="2",
            deliver_to="1600 Pennsylvania Avenue NW, Washington, DC 20500",
            mobile_number="(202) 456-1111",
            status=OrderStatus.PENDING,
            dishes=[_line(stir_fry, 1), _line(bagel, 3)],
        ),
    ]
