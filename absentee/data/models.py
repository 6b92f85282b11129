"""Data models for district chronic absenteeism data."""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterator, Mapping


@dataclass(frozen=True)
class YearPeriod:
    """A reporting period: source column key plus display label."""

    key: str
    label: str


# Newest first, matching the column order of the source file
YEAR_PERIODS: tuple[YearPeriod, ...] = (
    YearPeriod(key="20242025", label="2024-2025"),
    YearPeriod(key="20232024", label="2023-2024"),
    YearPeriod(key="20222023", label="2022-2023"),
    YearPeriod(key="20212022", label="2021-2022"),
    YearPeriod(key="20202021", label="2020-2021"),
    YearPeriod(key="20192020", label="2019-2020"),
)


@dataclass(frozen=True)
class DistrictRecord:
    """One row of the district dataset.

    Values are kept as the raw strings read from the source file; numeric
    interpretation happens when a history is built for display.
    """

    name: str
    yearly_values: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self):
        # Freeze a private copy so callers cannot mutate the record afterwards
        object.__setattr__(self, "yearly_values", MappingProxyType(dict(self.yearly_values)))

    @property
    def display_name(self) -> str:
        return self.name

    def value_for(self, key: str) -> str:
        """Raw value for a period key; missing columns read as not reported."""
        return self.yearly_values.get(key, "")


@dataclass(frozen=True)
class DistrictDataset:
    """Immutable snapshot of every record loaded from one source."""

    records: tuple[DistrictRecord, ...]
    source: str = ""

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[DistrictRecord]:
        return iter(self.records)
