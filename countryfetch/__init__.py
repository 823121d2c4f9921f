from __future__ import annotations
from typing import List

from .config import Settings
from .report import ReportLine, render
from .schemas import CountryRecord, Currency
from .state import LookupResult
from .tools.countries import fetch

__version__ = "0.1.0"


def lookup(name: str, settings: Settings | None = None) -> List[ReportLine]:
    """Fetch then render: the whole pipeline for one country name."""
    return render(fetch(name, settings))


__all__ = [
    "CountryRecord",
    "Currency",
    "LookupResult",
    "ReportLine",
    "Settings",
    "fetch",
    "lookup",
    "render",
]
