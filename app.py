"""
District Chronic Absenteeism Dashboard

Search for a school district by name and view its chronic absenteeism rate
history as a chart and a table.
"""

import logging
import re

import streamlit as st

from config.settings import get_settings
from absentee.dashboard import (
    DashboardController,
    Phase,
    QueryChanged,
    ResultSelected,
    ResultsDismissed,
)
from absentee.dashboard.state import LOADING_MESSAGE
from absentee.data.loader import get_district_dataset
from absentee.data.search import NO_RESULTS_MESSAGE

logger = logging.getLogger(__name__)

SEARCH_KEY = "district_search"
INTERACTION_KEY = "search_interaction"

st.set_page_config(
    page_title="District Absenteeism",
    page_icon="📉",
    layout="wide",
)


def _get_controller() -> DashboardController:
    """One controller per browser session."""
    if "dashboard" not in st.session_state:
        st.session_state.dashboard = DashboardController()
    return st.session_state.dashboard


def _on_search_change():
    st.session_state[INTERACTION_KEY] = True
    _get_controller().dispatch(QueryChanged(st.session_state.get(SEARCH_KEY, "")))


def _on_result_click(position: int):
    st.session_state[INTERACTION_KEY] = True
    state = _get_controller().dispatch(ResultSelected(position))
    st.session_state[SEARCH_KEY] = state.query


def _download_name(district_name: str) -> str:
    slug = re.sub(r"[^A-Za-z0-9]+", "_", district_name).strip("_").lower() or "district"
    return f"{slug}_absenteeism.csv"


def main():
    settings = get_settings()
    logging.basicConfig(level=settings.LOG_LEVEL)

    controller = _get_controller()

    # Any rerun not caused by the search widget closes the results list
    if not st.session_state.pop(INTERACTION_KEY, False) and controller.state.results_visible:
        controller.dispatch(ResultsDismissed())

    st.title("📉 District Chronic Absenteeism")
    st.markdown("Search for a school district to see its chronic absenteeism rate by school year.")

    status = st.empty()
    if controller.state.phase is Phase.IDLE:
        status.info(LOADING_MESSAGE)
        controller.load(lambda: get_district_dataset(settings.DATA_SOURCE))

    state = controller.state
    if state.status_message:
        status.error(state.status_message)
    else:
        status.empty()

    st.text_input(
        "Search districts:",
        key=SEARCH_KEY,
        placeholder="Enter district name...",
        on_change=_on_search_change,
        disabled=state.phase is Phase.ERROR,
    )

    if state.results_visible:
        with st.container(border=True):
            if not state.results:
                st.caption(NO_RESULTS_MESSAGE)
            for i, district in enumerate(state.results):
                st.button(
                    district.display_name,
                    key=f"result_{i}",
                    on_click=_on_result_click,
                    args=(i,),
                )

    if state.phase is not Phase.DETAIL or state.selected is None:
        if state.has_data:
            st.info(f"Search {len(state.dataset):,} districts above to view their history.")
        return

    st.divider()
    st.header(state.selected.display_name)

    col1, col2 = st.columns([2, 1])

    with col1:
        st.subheader("Chronic Absenteeism Trend")
        st.plotly_chart(state.chart.figure, width="stretch")

    with col2:
        st.subheader("History")
        st.dataframe(state.table, width="stretch", hide_index=True)
        st.download_button(
            "Download history (CSV)",
            state.table.to_csv(index=False),
            file_name=_download_name(state.selected.name),
            mime="text/csv",
        )


if __name__ == "__main__":
    main()
