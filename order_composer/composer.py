from typing import Iterable, Tuple

from .models import Extra, Food, OrderPayload


def selected_extras(extras: Iterable[Extra]) -> Tuple[Extra, ...]:
    return tuple(e for e in extras if e.quantity > 0)


def compose_order(food: Food, extras: Iterable[Extra], quantity: int) -> OrderPayload:
    # TODO: send `quantity` once the orders endpoint accepts it; today it only affects the total.
    return OrderPayload(
        product_id=food.id,
        name=food.name,
        description=food.description,
        price=food.price,
        category=food.category,
        thumbnail_url=food.thumbnail_url,
        extras=selected_extras(extras),
    )
