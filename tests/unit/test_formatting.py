import pytest

from order_composer.formatting import format_value


@pytest.mark.unit
@pytest.mark.parametrize(
    "amount,expect",
    [
        (0, "R$ 0,00"),
        (27, "R$ 27,00"),
        (19.9, "R$ 19,90"),
        (1234.5, "R$ 1.234,50"),
        (1000000, "R$ 1.000.000,00"),
    ],
    ids=["zero", "int", "cents", "thousands", "millions"],
)
def test_format_value(amount, expect, currency):
    assert format_value(amount) == expect


@pytest.mark.unit
def test_symbol_from_env(monkeypatch):
    monkeypatch.setenv("CURRENCY_SYMBOL", "US$")
    assert format_value(5) == "US$ 5,00"
    assert format_value(5, symbol="€") == "€ 5,00"


@pytest.mark.unit
def test_symbol_follows_settings(monkeypatch):
    # 格式化与 load_settings 读取同一个配置项
    from order_composer.config import load_settings

    monkeypatch.setenv("CURRENCY_SYMBOL", "Kz")
    assert format_value(1).startswith(load_settings().currency_symbol + " ")
