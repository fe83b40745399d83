import logging
from typing import Callable, Iterable, Optional

from .formatting import format_value
from .models import Extra, Food, Number

logger = logging.getLogger("order_composer.pricing")


def calculate_extras_subtotal(extras: Iterable[Extra]) -> Number:
    subtotal = sum(e.value * e.quantity for e in extras)
    logger.info("subtotal=%s", subtotal)
    return subtotal


def calculate_total(food: Optional[Food], extras: Iterable[Extra], quantity: int) -> Number:
    base_price = food.price if food is not None else 0
    total = calculate_extras_subtotal(extras) + base_price * quantity
    logger.debug("total computed: %s", total)
    return total


def compute_total(
    food: Optional[Food],
    extras: Iterable[Extra],
    quantity: int,
    formatter: Callable[[Number], str] = format_value,
) -> str:
    return formatter(calculate_total(food, extras, quantity))
