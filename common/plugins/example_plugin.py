import os
import time

import pytest

from order_composer.config import ENV_CONFIG, load_settings


def pytest_addoption(parser):
    parser.addoption("--env", action="store", default="dev", choices=sorted(ENV_CONFIG),
                     help="运行环境，写入 APP_ENV 供 order_composer.config 读取")


# Hook 1: --env 写入 APP_ENV，测试结束后恢复
def pytest_configure(config):
    config._previous_app_env = os.environ.get("APP_ENV")
    os.environ["APP_ENV"] = config.getoption("--env")


def pytest_unconfigure(config):
    previous = getattr(config, "_previous_app_env", None)
    if previous is None:
        os.environ.pop("APP_ENV", None)
    else:
        os.environ["APP_ENV"] = previous


# Hook 2: 生产环境跳过慢测试，并按 unit → contract → integration → e2e 排序
LAYER_ORDER = ["unit", "contract", "integration", "e2e"]


def pytest_collection_modifyitems(config, items):
    if config.getoption("--env") == "prod":
        for item in items:
            if item.get_closest_marker("slow"):
                item.add_marker(pytest.mark.skip(reason="生产环境跳过慢测试"))

    def layer(item):
        markers = {m.name for m in item.iter_markers()}
        return next((i for i, name in enumerate(LAYER_ORDER) if name in markers), len(LAYER_ORDER))

    items.sort(key=layer)


# Hook 3: 会话开始时输出实际生效的接口配置
def pytest_sessionstart(session):
    session.config._start_time = time.time()
    settings = load_settings()
    print(f"\n运行环境: {settings.env}  接口地址: {settings.api_url}  超时: {settings.request_timeout}秒")


def pytest_terminal_summary(terminalreporter, exitstatus):
    duration = time.time() - getattr(terminalreporter.config, "_start_time", time.time())
    stats = terminalreporter.stats
    counts = {layer: 0 for layer in LAYER_ORDER}
    for report in stats.get("passed", []):
        for layer in LAYER_ORDER:
            if layer in report.keywords:
                counts[layer] += 1
    terminalreporter.write_sep("=", "按层级统计通过用例")
    terminalreporter.write_line("  ".join(f"{layer}: {n}" for layer, n in counts.items()))
    terminalreporter.write_line(f"失败: {len(stats.get('failed', []))}  耗时: {duration:.2f}秒")
