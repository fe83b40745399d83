import pytest

from order_composer.counter import decrement_food, increment_food


@pytest.mark.unit
def test_decrement_floor_is_one():
    assert decrement_food(1) == 1
    assert decrement_food(3) == 2


@pytest.mark.unit
def test_increment_has_no_upper_bound(clicks):
    # clicks 由 pytest_generate_tests 注入
    quantity = 1
    for _ in range(clicks):
        quantity = increment_food(quantity)
    assert quantity == 1 + clicks
