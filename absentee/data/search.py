"""Name search over the loaded district records."""

from typing import Iterable, Optional

from config.settings import get_settings

from .models import DistrictRecord

NO_RESULTS_MESSAGE = "No districts found."


def normalize_query(query: str) -> str:
    """Lowercase and trim a raw search-box value."""
    return (query or "").strip().lower()


def should_search(query: str, min_length: Optional[int] = None) -> bool:
    """Whether a query is long enough to run a search and show results."""
    if min_length is None:
        min_length = get_settings().MIN_QUERY_LENGTH
    return len(normalize_query(query)) >= min_length


def search_districts(records: Iterable[DistrictRecord], query: str) -> tuple[DistrictRecord, ...]:
    """
    Return every record whose name contains the query, case-insensitively.

    Matches keep the order of ``records``. Duplicate names are returned as
    separate matches.
    """
    needle = normalize_query(query)
    return tuple(r for r in records if r.name and needle in r.name.lower())
