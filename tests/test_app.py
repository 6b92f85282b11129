"""Tests for the Streamlit page, run headless with AppTest."""

from pathlib import Path
from unittest.mock import patch

import pytest
from streamlit.testing.v1 import AppTest

from absentee.dashboard.state import LOAD_ERROR_MESSAGE
from absentee.data.loader import LoadError
from absentee.data.models import DistrictDataset, DistrictRecord
from absentee.data.search import NO_RESULTS_MESSAGE

APP_PATH = str(Path(__file__).parent.parent / "app.py")
SEARCH_KEY = "district_search"
TIMEOUT = 30


@pytest.fixture
def dataset():
    return DistrictDataset(
        records=(
            DistrictRecord(name="Lakeview USD", yearly_values={"20242025": "12.5", "20192020": "NA"}),
            DistrictRecord(name="Alder Creek SD", yearly_values={"20242025": "14.2"}),
        ),
        source="test.csv",
    )


@pytest.fixture
def loaded_app(dataset):
    with patch("absentee.data.loader.get_district_dataset", return_value=dataset):
        at = AppTest.from_file(APP_PATH, default_timeout=TIMEOUT)
        at.run()
        yield at


@pytest.fixture
def failed_app():
    with patch("absentee.data.loader.get_district_dataset", side_effect=LoadError("boom")) as loader:
        at = AppTest.from_file(APP_PATH, default_timeout=TIMEOUT)
        at.run()
        yield at, loader


class TestSearchPanel:
    def test_no_match_shows_single_placeholder(self, loaded_app):
        loaded_app.text_input(key=SEARCH_KEY).input("zz").run()

        assert [c.value for c in loaded_app.caption] == [NO_RESULTS_MESSAGE]
        assert len(loaded_app.button) == 0

    def test_short_query_shows_nothing(self, loaded_app):
        loaded_app.text_input(key=SEARCH_KEY).input("l").run()

        assert len(loaded_app.caption) == 0
        assert len(loaded_app.button) == 0

    def test_match_lists_district(self, loaded_app):
        loaded_app.text_input(key=SEARCH_KEY).input("lake").run()

        assert [b.label for b in loaded_app.button] == ["Lakeview USD"]

    def test_selecting_result_shows_detail(self, loaded_app):
        loaded_app.text_input(key=SEARCH_KEY).input("lake").run()
        loaded_app.button(key="result_0").click().run()

        assert loaded_app.header[0].value == "Lakeview USD"
        assert loaded_app.text_input(key=SEARCH_KEY).value == "Lakeview USD"
        assert len(loaded_app.error) == 0


class TestLoadFailure:
    def test_error_replaces_loading_message(self, failed_app):
        at, _ = failed_app

        assert [e.value for e in at.error] == [LOAD_ERROR_MESSAGE]
        assert len(at.info) == 0

    def test_search_box_disabled(self, failed_app):
        at, _ = failed_app
        assert at.text_input(key=SEARCH_KEY).disabled is True

    def test_error_persists_without_reload(self, failed_app):
        at, loader = failed_app
        at.run()

        assert [e.value for e in at.error] == [LOAD_ERROR_MESSAGE]
        assert loader.call_count == 1
