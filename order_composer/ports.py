from typing import Any, Dict, List, Mapping, Optional, Protocol

from .models import Food, OrderPayload

ORDERS_ROUTE = "Orders"
FAVORITES_ROUTE = "Favorites"

# stack index the app navigator expects for each root route
ROUTE_INDEX = {ORDERS_ROUTE: 1, FAVORITES_ROUTE: 2}


class CatalogLookup(Protocol):
    async def get_food(self, food_id: int) -> Mapping[str, Any]:
        ...


class OrderSink(Protocol):
    async def submit_order(self, payload: OrderPayload) -> Any:
        ...

    async def mark_favorite(self, food: Optional[Food]) -> Any:
        ...


class Navigator(Protocol):
    def reset(self, routes: List[Dict[str, str]], index: int) -> None:
        ...


def reset_route(name: str) -> Dict[str, object]:
    return {"routes": [{"name": name}], "index": ROUTE_INDEX[name]}
