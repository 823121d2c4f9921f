from types import MappingProxyType
from typing import Any, Iterable, Mapping, Optional, Tuple
from pydantic import (
    AliasPath,
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictFloat,
    StrictInt,
    TypeAdapter,
    field_validator,
)

UNKNOWN_CONTINENT = "Unknown"
NO_BORDERS = "None"

LatLng = Tuple[StrictFloat, StrictFloat]


class Currency(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    name: str
    symbol: str


class CountryRecord(BaseModel):
    """One country as returned by the REST Countries API.

    Field names are snake_case; the API keys (some nested, e.g. ``name.official``)
    are mapped through validation aliases. Extra keys are ignored. Numbers and
    booleans are strict: ``"67391582"`` is not a population.

    ``continents`` and ``borders`` are optional upstream. They are resolved to a
    placeholder at construction time, so a built record never holds ``None``.
    Sequences are tuples and mappings are read-only proxies.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    official_name: str = Field(..., validation_alias=AliasPath("name", "official"))
    flag_glyph: str = Field(..., validation_alias="flag")
    capitals: Tuple[str, ...] = Field(..., validation_alias="capital")
    capital_coordinates: LatLng = Field(..., validation_alias=AliasPath("capitalInfo", "latlng"))
    region: str
    subregion: str
    coordinates: LatLng = Field(..., validation_alias="latlng")
    timezones: Tuple[str, ...]
    top_level_domains: Tuple[str, ...] = Field(..., validation_alias="tld")
    population: StrictInt = Field(..., ge=0)
    continents: Tuple[str, ...] = (UNKNOWN_CONTINENT,)
    languages: Mapping[str, str]
    currencies: Mapping[str, Currency]
    borders: Tuple[str, ...] = (NO_BORDERS,)
    landlocked: StrictBool
    start_of_week: str = Field(..., validation_alias="startOfWeek")
    map_link: str = Field(..., validation_alias=AliasPath("maps", "openStreetMaps"))

    @field_validator("continents", mode="before")
    @classmethod
    def _continents_or_unknown(cls, v: Optional[Iterable[str]]) -> Any:
        return (UNKNOWN_CONTINENT,) if v is None else v

    @field_validator("borders", mode="before")
    @classmethod
    def _borders_or_none(cls, v: Optional[Iterable[str]]) -> Any:
        return (NO_BORDERS,) if v is None else v

    @field_validator("languages", "currencies", mode="after")
    @classmethod
    def _read_only(cls, v: Mapping[str, Any]) -> Mapping[str, Any]:
        return MappingProxyType(dict(v))


_CANDIDATES = TypeAdapter(Tuple[CountryRecord, ...])


def parse_candidates(payload: Any) -> Tuple[CountryRecord, ...]:
    """Validate a decoded JSON array into records. Raises pydantic.ValidationError."""
    return _CANDIDATES.validate_python(payload)
