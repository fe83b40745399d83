import logging

import pytest

# 激活自定义插件
pytest_plugins = [
    "common.plugins.example_plugin",
    "common.plugins.advanced_plugin"
]


@pytest.fixture(scope="function")
def currency(monkeypatch):
    monkeypatch.setenv("CURRENCY_SYMBOL", "R$")
    yield "R$"
    monkeypatch.delenv("CURRENCY_SYMBOL", raising=False)


@pytest.fixture(scope="function")
def log_capture(caplog):
    logger = logging.getLogger("order_composer.pricing")
    caplog.set_level(logging.DEBUG, logger=logger.name)
    return caplog


def pytest_generate_tests(metafunc):
    # 基础数量连续点击次数
    if "clicks" in metafunc.fixturenames:
        metafunc.parametrize("clicks", [1, 10, 5000], ids=["once", "few", "many"])
