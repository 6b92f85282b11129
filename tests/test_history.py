"""Tests for history derivation — NA handling and period ordering."""

import pytest

from absentee.data.models import YEAR_PERIODS, DistrictRecord, YearPeriod
from absentee.viz.history import (
    NOT_AVAILABLE_DISPLAY,
    SERIES_LABEL,
    HistoryRow,
    build_history,
    chart_value,
    display_value,
)


@pytest.fixture
def lakeview():
    return DistrictRecord(
        name="Lakeview USD",
        yearly_values={
            "20242025": "12.5",
            "20232024": "13.9",
            "20222023": "18.2",
            "20212022": "",
            "20202021": "10.3",
            "20192020": "NA",
        },
    )


class TestChartValue:
    def test_number(self):
        assert chart_value("12.5") == 12.5

    def test_sentinel(self):
        assert chart_value("NA") is None

    def test_empty(self):
        assert chart_value("") is None

    def test_none(self):
        assert chart_value(None) is None

    def test_non_numeric(self):
        assert chart_value("n<10") is None

    def test_nan_text(self):
        assert chart_value("nan") is None

    def test_zero(self):
        assert chart_value("0") == 0.0


class TestDisplayValue:
    def test_appends_percent_to_raw(self):
        assert display_value("12.5") == "12.5%"

    def test_keeps_raw_formatting(self):
        assert display_value("12.50") == "12.50%"

    def test_sentinel(self):
        assert display_value("NA") == NOT_AVAILABLE_DISPLAY

    def test_empty(self):
        assert display_value("") == "N/A"

    def test_non_numeric_keeps_raw_text(self):
        assert display_value("n<10") == "n<10%"

    def test_non_numeric_is_not_charted_but_is_listed(self):
        assert chart_value("suppressed") is None
        assert display_value("suppressed") == "suppressed%"


class TestBuildHistory:
    def test_title_and_series_label(self, lakeview):
        history = build_history(lakeview)
        assert history.title == "Lakeview USD"
        assert history.series_label == SERIES_LABEL

    def test_chart_is_oldest_first(self, lakeview):
        history = build_history(lakeview)
        assert history.labels == (
            "2019-2020", "2020-2021", "2021-2022", "2022-2023", "2023-2024", "2024-2025",
        )
        assert history.series == (None, 10.3, None, 18.2, 13.9, 12.5)

    def test_table_is_newest_first(self, lakeview):
        history = build_history(lakeview)
        assert history.rows[0] == HistoryRow(label="2024-2025", value="12.5%")
        assert history.rows[-1] == HistoryRow(label="2019-2020", value="N/A")
        assert history.rows[3] == HistoryRow(label="2021-2022", value="N/A")

    def test_chart_labels_reverse_table_labels(self, lakeview):
        history = build_history(lakeview)
        assert list(history.labels) == [row.label for row in reversed(history.rows)]

    def test_one_row_per_period(self, lakeview):
        assert len(build_history(lakeview).rows) == len(YEAR_PERIODS)

    def test_missing_columns_are_na(self):
        history = build_history(DistrictRecord(name="Sparse SD", yearly_values={"20242025": "5"}))
        assert history.series == (None, None, None, None, None, 5.0)
        assert [r.value for r in history.rows] == ["5%", "N/A", "N/A", "N/A", "N/A", "N/A"]

    def test_has_values(self, lakeview):
        assert build_history(lakeview).has_values is True
        assert build_history(DistrictRecord(name="Empty SD")).has_values is False

    def test_custom_periods(self, lakeview):
        periods = (YearPeriod("20242025", "24-25"), YearPeriod("20232024", "23-24"))
        history = build_history(lakeview, periods)
        assert history.labels == ("23-24", "24-25")
        assert history.series == (13.9, 12.5)

    def test_idempotent(self, lakeview):
        assert build_history(lakeview) == build_history(lakeview)
