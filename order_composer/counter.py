def increment_food(quantity: int) -> int:
    return quantity + 1


def decrement_food(quantity: int) -> int:
    """The base item never drops below one unit."""
    if quantity > 1:
        return quantity - 1
    return quantity
