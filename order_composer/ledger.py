from dataclasses import replace
from typing import Tuple

from .models import Extra, Food

Extras = Tuple[Extra, ...]


def seed_extras(food: Food) -> Extras:
    return tuple(replace(e, quantity=0) for e in food.extras)


def increment_extra(extras: Extras, extra_id: int) -> Extras:
    return tuple(
        replace(e, quantity=e.quantity + 1) if e.id == extra_id else e
        for e in extras
    )


def decrement_extra(extras: Extras, extra_id: int) -> Extras:
    # floor at 0; unknown ids leave the tuple unchanged
    return tuple(
        replace(e, quantity=e.quantity - 1) if e.id == extra_id and e.quantity > 0 else e
        for e in extras
    )
