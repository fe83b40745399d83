import asyncio
import json
import logging
from dataclasses import replace
from typing import Callable, Optional

from . import counter, ledger
from .composer import compose_order
from .formatting import format_value
from .models import Food, Number, OrderPayload, SelectionState
from .ports import FAVORITES_ROUTE, ORDERS_ROUTE, CatalogLookup, Navigator, OrderSink, reset_route
from .pricing import compute_total

logger = logging.getLogger("order_composer.service")


class FoodDetailsSession:
    """State of one food details screen, from catalog lookup to order submit.

    Every mutation swaps ``state`` for a new ``SelectionState``. Until
    ``load`` completes the state holds no food and no extras, so the total
    formats as zero.
    """

    def __init__(
        self,
        catalog: CatalogLookup,
        sink: OrderSink,
        navigator: Navigator,
        formatter: Callable[[Number], str] = format_value,
    ):
        self.catalog = catalog
        self.sink = sink
        self.navigator = navigator
        self.formatter = formatter
        self.state = SelectionState()
        self.is_favorite = False

    @property
    def food(self) -> Optional[Food]:
        return self.state.food

    async def load(self, food_id: int) -> SelectionState:
        data = await self.catalog.get_food(food_id)
        food = Food.from_dict(data, formatted_price=self.formatter(data["price"]))
        self.state = SelectionState(food=food, extras=ledger.seed_extras(food))
        logger.info("loaded food id=%s extras=%s", food.id, len(food.extras))
        return self.state

    def increment_extra(self, extra_id: int) -> SelectionState:
        self.state = replace(self.state, extras=ledger.increment_extra(self.state.extras, extra_id))
        return self.state

    def decrement_extra(self, extra_id: int) -> SelectionState:
        self.state = replace(self.state, extras=ledger.decrement_extra(self.state.extras, extra_id))
        return self.state

    def increment_food(self) -> SelectionState:
        self.state = replace(self.state, quantity=counter.increment_food(self.state.quantity))
        return self.state

    def decrement_food(self) -> SelectionState:
        self.state = replace(self.state, quantity=counter.decrement_food(self.state.quantity))
        return self.state

    @property
    def cart_total(self) -> str:
        return compute_total(self.state.food, self.state.extras, self.state.quantity, self.formatter)

    @property
    def favorite_icon_name(self) -> str:
        return "favorite" if self.is_favorite else "favorite-border"

    async def finish_order(self) -> OrderPayload:
        payload = compose_order(self.state.food, self.state.extras, self.state.quantity)
        await self.sink.submit_order(payload)
        logger.info("order submitted product_id=%s extras=%s", payload.product_id, len(payload.extras))
        self._navigate(ORDERS_ROUTE)
        return payload

    async def toggle_favorite(self) -> "asyncio.Task":
        # is_favorite is left as is; the icon keeps showing "favorite-border"
        food = self.state.food
        request = asyncio.create_task(self.sink.mark_favorite(food))
        logger.info("favorite requested food_id=%s", food.id if food else None)
        self._navigate(FAVORITES_ROUTE)
        return request

    def _navigate(self, route: str) -> None:
        self.navigator.reset(**reset_route(route))


def print_order(payload: OrderPayload) -> str:
    text = json.dumps(payload.to_dict(), ensure_ascii=False)
    print(text)
    return text
