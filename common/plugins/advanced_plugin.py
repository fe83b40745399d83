import pytest

from order_composer.models import Food, OrderPayload


class FakeFoodApi:
    """记录调用的目录/下单接口替身

    fail_with: get_food 抛出的异常
    submit_fail_with: submit_order 抛出的异常
    submit_reply: submit_order 的返回值
    """

    def __init__(self, foods=None, fail_with=None):
        self.foods = dict(foods or {})
        self.fail_with = fail_with
        self.submit_fail_with = None
        self.submit_reply = {"status": "created"}
        self.calls = []

    async def get_food(self, food_id: int):
        self.calls.append(("GET", f"foods/{food_id}"))
        if self.fail_with is not None:
            raise self.fail_with
        return self.foods[food_id]

    async def submit_order(self, payload: OrderPayload):
        self.calls.append(("POST", "orders", payload.to_dict()))
        if self.submit_fail_with is not None:
            raise self.submit_fail_with
        return self.submit_reply

    async def mark_favorite(self, food: Food):
        self.calls.append(("POST", "favorites", food))
        return {"status": "created"}


class RecordingNavigator:
    def __init__(self):
        self.resets = []

    def reset(self, routes, index):
        self.resets.append({"routes": routes, "index": index})


@pytest.fixture(scope="function")
def fake_api():
    """提供接口替身的fixture"""
    client = FakeFoodApi()
    yield client
    # 清理资源
    client.calls.clear()


@pytest.fixture(scope="function")
def navigator():
    return RecordingNavigator()
