from typing import List, NamedTuple, Optional

from .helpers.formatting import (
    format_bool,
    format_coordinates,
    format_currency,
    format_list,
    format_population,
)
from .schemas import CountryRecord
from .state import LookupResult

NO_DATA_MESSAGE = "No data found for the specified country."
ERROR_LABEL = "Error fetching data"


class ReportLine(NamedTuple):
    label: Optional[str]
    value: str
    error: bool = False

    def __str__(self) -> str:
        return f"{self.label}: {self.value}" if self.label else self.value


def country_lines(c: CountryRecord) -> List[ReportLine]:
    """The 16 labeled lines for one record, in display order.

    Languages and currencies follow the mapping's order, which the API does
    not guarantee; compare them as sets.
    """
    return [
        ReportLine("Country", f"{c.official_name} {c.flag_glyph}"),
        ReportLine("Capital", ", ".join(c.capitals)),
        ReportLine("Region", c.region),
        ReportLine("Subregion", c.subregion),
        ReportLine("LatLng", format_coordinates(c.coordinates)),
        ReportLine("Capital LatLng", format_coordinates(c.capital_coordinates)),
        ReportLine("Timezones", format_list(c.timezones)),
        ReportLine("TLD", format_list(c.top_level_domains)),
        ReportLine("Population", format_population(c.population)),
        ReportLine("Continent", format_list(c.continents)),
        ReportLine("Languages", format_list(c.languages.values())),
        ReportLine("Currencies", format_list(format_currency(cur) for cur in c.currencies.values())),
        ReportLine("Borders", format_list(c.borders)),
        ReportLine("Landlocked", format_bool(c.landlocked)),
        ReportLine("Start of the week", c.start_of_week),
        ReportLine("OpenStreetMap Link", c.map_link),
    ]


def render(result: LookupResult) -> List[ReportLine]:
    if result.failed:
        return [ReportLine(ERROR_LABEL, result.error, error=True)]
    first = result.first
    if first is None:
        return [ReportLine(None, NO_DATA_MESSAGE)]
    return country_lines(first)
