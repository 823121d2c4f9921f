import copy

import pytest

FRANCE = {
    "name": {"official": "France"},
    "flag": "🇫🇷",
    "capital": ["Paris"],
    "capitalInfo": {"latlng": [48.87, 2.33]},
    "region": "Europe",
    "subregion": "Western Europe",
    "latlng": [46.0, 2.0],
    "timezones": ["UTC+01:00"],
    "tld": [".fr"],
    "population": 67391582,
    "languages": {"fra": "French"},
    "currencies": {"EUR": {"name": "Euro", "symbol": "€"}},
    "landlocked": False,
    "startOfWeek": "monday",
    "maps": {"openStreetMaps": "https://www.openstreetmap.org/relation/1403916"},
}

SWITZERLAND = {
    "name": {"official": "Swiss Confederation", "common": "Switzerland"},
    "flag": "🇨🇭",
    "capital": ["Bern"],
    "capitalInfo": {"latlng": [46.92, 7.47]},
    "region": "Europe",
    "subregion": "Western Europe",
    "latlng": [47.0, 8.0],
    "timezones": ["UTC+01:00"],
    "tld": [".ch"],
    "population": 8654622,
    "continents": ["Europe"],
    "languages": {"fra": "French", "gsw": "Swiss German", "ita": "Italian", "roh": "Romansh"},
    "currencies": {"CHF": {"name": "Swiss franc", "symbol": "Fr."}},
    "borders": ["AUT", "FRA", "ITA", "LIE", "DEU"],
    "landlocked": True,
    "startOfWeek": "monday",
    "maps": {"openStreetMaps": "https://www.openstreetmap.org/relation/51701"},
    "area": 41284.0,
}


@pytest.fixture
def france_payload():
    return copy.deepcopy(FRANCE)


@pytest.fixture
def swiss_payload():
    return copy.deepcopy(SWITZERLAND)
