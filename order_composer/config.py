import os
from dataclasses import dataclass

ENV_CONFIG = {
    "dev": {"api_url": "http://localhost:3333"},
    "staging": {"api_url": "https://staging-api.example.com"},
    "prod": {"api_url": "https://api.example.com"},
}

DEFAULT_CURRENCY_SYMBOL = "R$"
DEFAULT_REQUEST_TIMEOUT = 10.0


@dataclass(frozen=True)
class Settings:
    env: str
    api_url: str
    currency_symbol: str
    request_timeout: float


def load_settings() -> Settings:
    """Read settings from the environment.

    ``APP_ENV`` picks a row of ``ENV_CONFIG`` (unknown names fall back to dev),
    ``FOOD_API_URL`` overrides its API url.
    """
    env = os.environ.get("APP_ENV", "dev")
    defaults = ENV_CONFIG.get(env, ENV_CONFIG["dev"])
    api_url = os.environ.get("FOOD_API_URL") or defaults["api_url"]
    return Settings(
        env=env,
        api_url=api_url,
        currency_symbol=os.environ.get("CURRENCY_SYMBOL", DEFAULT_CURRENCY_SYMBOL),
        request_timeout=float(os.environ.get("FOOD_API_TIMEOUT", DEFAULT_REQUEST_TIMEOUT)),
    )
