import asyncio
import json

import pytest

from common.factories import food_response, make_food
from order_composer.models import Extra
from order_composer.service import FoodDetailsSession, print_order


@pytest.mark.e2e
def test_full_order_and_receipt(fake_api, navigator, capsys, currency):
    # e2e：加载、选择、计价、下单、打印
    fake_api.foods[5] = food_response(make_food(fid=5, price=10, extras=[Extra(1, "Bacon", 2), Extra(2, "Queijo", 3)]))
    session = FoodDetailsSession(fake_api, fake_api, navigator)

    async def flow():
        await session.load(5)
        for extra_id in (1, 1, 2):
            session.increment_extra(extra_id)
        session.increment_food()
        assert session.cart_total == "R$ 27,00"
        session.decrement_extra(2)
        return await session.finish_order()

    payload = asyncio.run(flow())
    text = print_order(payload)

    out = capsys.readouterr().out.strip()
    assert out == text

    body = json.loads(text)
    assert body["product_id"] == 5
    assert body["extras"] == [{"id": 1, "name": "Bacon", "value": 2, "quantity": 2}]
    assert navigator.resets[-1]["routes"] == [{"name": "Orders"}]


@pytest.mark.e2e
@pytest.mark.slow
def test_many_mutations_stay_consistent(fake_api, navigator, currency):
    fake_api.foods[1] = food_response(make_food(price=1, extras=[Extra(1, "Bacon", 1)]))
    session = FoodDetailsSession(fake_api, fake_api, navigator)
    asyncio.run(session.load(1))
    for _ in range(1000):
        session.increment_extra(1)
        session.increment_food()
    for _ in range(2000):
        session.decrement_extra(1)
        session.decrement_food()
    assert session.state.extras[0].quantity == 0
    assert session.state.quantity == 1
    assert session.cart_total == "R$ 1,00"
