import logging
import requests
from pydantic import ValidationError

from ..config import Settings
from ..schemas import parse_candidates
from ..state import LookupResult

logger = logging.getLogger(__name__)

NAME_PATH = "/name/{name}"
FIELDS = ",".join([
    "name", "capital", "population", "flag", "region", "subregion",
    "timezones", "latlng", "capitalInfo", "tld", "languages", "currencies",
    "borders", "landlocked", "startOfWeek", "continents", "maps",
])


def _describe(e: ValidationError) -> str:
    """Flatten pydantic's multi-line report into one line."""
    parts = []
    for err in e.errors():
        loc = ".".join(str(p) for p in err.get("loc", ())) or "<root>"
        parts.append(f"{loc}: {err.get('msg', 'invalid')}")
    return "; ".join(parts)


def fetch(name: str, settings: Settings | None = None) -> LookupResult:
    """Look up countries matching ``name`` with a single GET request.

    Never raises for network or payload problems; those come back as a failed
    LookupResult carrying the cause text.
    """
    settings = settings or Settings.from_env()
    url = settings.base_url + NAME_PATH.format(name=name)
    logger.debug("GET %s fields=%s", url, FIELDS)
    try:
        r = requests.get(url, params={"fields": FIELDS}, timeout=settings.timeout)
        # the API answers 404 when nothing matches the name
        if r.status_code == 404:
            logger.info("No match for '%s'", name)
            return LookupResult.found(())
        r.raise_for_status()
        candidates = parse_candidates(r.json())
    except requests.exceptions.JSONDecodeError as e:
        logger.info("Response for '%s' is not valid JSON: %s", name, e)
        return LookupResult.failure(f"invalid JSON response: {e}")
    except requests.RequestException as e:
        logger.info("Country lookup failed for '%s': %s", name, e)
        return LookupResult.failure(str(e))
    except ValidationError as e:
        logger.info("Unexpected record shape for '%s': %s", name, e)
        return LookupResult.failure(f"unexpected response shape: {_describe(e)}")
    logger.info("Fetched %d candidate(s) for '%s'", len(candidates), name)
    return LookupResult.found(candidates)
