from typing import Optional

from .config import load_settings
from .models import Number


def format_value(amount: Number, symbol: Optional[str] = None) -> str:
    if symbol is None:
        symbol = load_settings().currency_symbol
    # 1,234.50 -> 1.234,50
    text = f"{amount:,.2f}".replace(",", "_").replace(".", ",").replace("_", ".")
    return f"{symbol} {text}"
