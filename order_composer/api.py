import asyncio
import dataclasses
import logging
from typing import Any, Dict, Optional

import requests

from .config import load_settings
from .models import Food, OrderPayload

logger = logging.getLogger("order_composer.api")


def food_to_dict(food: Optional[Food]) -> Dict[str, object]:
    # a food that never loaded is posted as an empty body
    if food is None:
        return {}
    data = dataclasses.asdict(food)
    data["extras"] = [e.to_dict() for e in food.extras]
    data["formattedPrice"] = data.pop("formatted_price")
    return data


class FoodApi:
    """Catalog lookup and order sink backed by the food REST API.

    ``get_food`` raises ``requests.HTTPError`` on a non-2xx reply. Posting an
    order or a favorite returns the response as-is; callers do not inspect it.
    Every request is sent with ``timeout`` seconds, taken from
    ``FOOD_API_TIMEOUT`` when not given.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
    ):
        settings = load_settings()
        self.base_url = (base_url or settings.api_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.request_timeout
        self.session = session or requests.Session()

    def _url(self, path: str) -> str:
        return f"{self.base_url}/{path}"

    def _get(self, path: str) -> Any:
        response = self.session.get(self._url(path), timeout=self.timeout)
        logger.debug("GET %s -> %s", path, response.status_code)
        response.raise_for_status()
        return response.json()

    def _post(self, path: str, body: Dict[str, object]) -> requests.Response:
        response = self.session.post(self._url(path), json=body, timeout=self.timeout)
        logger.debug("POST %s -> %s", path, response.status_code)
        return response

    async def get_food(self, food_id: int) -> Dict[str, Any]:
        return await asyncio.to_thread(self._get, f"foods/{food_id}")

    async def submit_order(self, payload: OrderPayload) -> requests.Response:
        return await asyncio.to_thread(self._post, "orders", payload.to_dict())

    async def mark_favorite(self, food: Optional[Food]) -> requests.Response:
        return await asyncio.to_thread(self._post, "favorites", food_to_dict(food))
