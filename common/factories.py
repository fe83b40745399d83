from dataclasses import dataclass
from typing import Any, Dict, List

from order_composer.ledger import seed_extras
from order_composer.models import Extra, Food, SelectionState


@dataclass(frozen=True)
class Defaults:
    base_price: float = 10.0


def make_extras(n: int = 2, base: float = 2.0) -> List[Extra]:
    return [Extra(id=i + 1, name=f"Extra {i + 1}", value=base + i) for i in range(n)]


def make_food(fid: int = 1, price: float = Defaults.base_price, extras: List[Extra] = None) -> Food:
    if extras is None:
        extras = make_extras()
    return Food(
        id=fid,
        name="Ao molho",
        description="Macarrão ao molho branco, fughi e cheiro verde das montanhas.",
        price=price,
        category=1,
        image_url="https://example.com/food.png",
        thumbnail_url="https://example.com/food-thumb.png",
        extras=tuple(extras),
    )


def make_state(food: Food = None, quantity: int = 1) -> SelectionState:
    food = food or make_food()
    return SelectionState(food=food, extras=seed_extras(food), quantity=quantity)


def food_response(food: Food = None) -> Dict[str, Any]:
    food = food or make_food()
    return {
        "id": food.id,
        "name": food.name,
        "description": food.description,
        "price": food.price,
        "category": food.category,
        "image_url": food.image_url,
        "thumbnail_url": food.thumbnail_url,
        "extras": [{"id": e.id, "name": e.name, "value": e.value} for e in food.extras],
    }
