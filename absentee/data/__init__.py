from .loader import LoadError, load_districts
from .models import DistrictDataset, DistrictRecord, YearPeriod, YEAR_PERIODS
from .search import search_districts

__all__ = [
    "LoadError",
    "load_districts",
    "DistrictDataset",
    "DistrictRecord",
    "YearPeriod",
    "YEAR_PERIODS",
    "search_districts",
]
