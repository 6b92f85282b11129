"""Derive the chart series and table rows for one district."""

import math
from dataclasses import dataclass
from typing import Optional, Sequence

from config.settings import get_settings
from absentee.data.models import DistrictRecord, YearPeriod, YEAR_PERIODS

SERIES_LABEL = "Chronic Absenteeism Rate (%)"
NOT_AVAILABLE_DISPLAY = "N/A"


@dataclass(frozen=True)
class HistoryRow:
    label: str
    value: str


@dataclass(frozen=True)
class DistrictHistory:
    """
    Display-ready history for a district.

    ``labels`` and ``series`` run oldest to newest for the chart x-axis;
    ``rows`` run newest to oldest for the table.
    """

    title: str
    labels: tuple[str, ...]
    series: tuple[Optional[float], ...]
    rows: tuple[HistoryRow, ...]
    series_label: str = SERIES_LABEL

    @property
    def has_values(self) -> bool:
        return any(v is not None for v in self.series)


def is_reported(raw: str) -> bool:
    """False for the "not available" sentinel and for empty values."""
    return raw is not None and raw != "" and raw != get_settings().NOT_AVAILABLE


def chart_value(raw: str) -> Optional[float]:
    """Numeric value for charting, or None when the period has no usable value."""
    if not is_reported(raw):
        return None
    try:
        value = float(raw)
    except (ValueError, TypeError):
        return None
    if not math.isfinite(value):
        return None
    return value


def display_value(raw: str) -> str:
    """Table text: the raw value with a percent sign, or N/A."""
    if not is_reported(raw):
        return NOT_AVAILABLE_DISPLAY
    return f"{raw}%"


def build_history(record: DistrictRecord, periods: Sequence[YearPeriod] = YEAR_PERIODS) -> DistrictHistory:
    """Build the chart series and table rows for ``record`` over ``periods`` (newest first)."""
    chronological = list(reversed(periods))

    return DistrictHistory(
        title=record.display_name,
        labels=tuple(p.label for p in chronological),
        series=tuple(chart_value(record.value_for(p.key)) for p in chronological),
        rows=tuple(HistoryRow(label=p.label, value=display_value(record.value_for(p.key))) for p in periods),
    )
