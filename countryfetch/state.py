from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

from .schemas import CountryRecord


@dataclass(frozen=True)
class LookupResult:
    """Outcome of one lookup, passed from the fetcher to the reporter.

    Exactly one of two shapes:
    - success: ``candidates`` holds the matching records in API order (may be empty)
    - failure: ``error`` holds a human-readable cause and ``candidates`` is empty

    Use the ``found`` / ``failure`` constructors rather than the raw initializer.
    """

    candidates: Tuple[CountryRecord, ...] = ()
    error: Optional[str] = None

    def __post_init__(self):
        if self.error is not None and self.candidates:
            raise ValueError("a failed LookupResult cannot carry candidates")

    @classmethod
    def found(cls, candidates: Iterable[CountryRecord]) -> "LookupResult":
        return cls(candidates=tuple(candidates))

    @classmethod
    def failure(cls, cause: str) -> "LookupResult":
        return cls(error=cause or "unknown error")

    @property
    def failed(self) -> bool:
        return self.error is not None

    @property
    def empty(self) -> bool:
        return not self.failed and not self.candidates

    @property
    def first(self) -> Optional[CountryRecord]:
        """First candidate wins; the API's own ordering is the tie-break."""
        return self.candidates[0] if self.candidates else None
