import json
from decimal import Decimal
from typing import Iterable, Tuple

from ..schemas import Currency


def format_list(items: Iterable[str]) -> str:
    """Bracketed, quoted, comma-separated: ["a", "b"]. Empty -> []."""
    return json.dumps(list(items), ensure_ascii=False)


def _format_float(v: float) -> str:
    # full precision, never scientific; whole numbers lose the ".0" (46.0 -> 46)
    if v.is_integer():
        return str(int(v))
    return format(Decimal(repr(v)), "f")


def format_coordinates(latlng: Tuple[float, float]) -> str:
    lat, lng = latlng
    return f"{_format_float(lat)}/{_format_float(lng)}"


def format_population(n: int) -> str:
    return f"{n:,}"


def format_currency(c: Currency) -> str:
    return f"{c.name} ({c.symbol})"


def format_bool(v: bool) -> str:
    return "true" if v else "false"
