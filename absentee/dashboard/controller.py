"""Event dispatch for the dashboard page."""

import logging
from collections import deque
from dataclasses import dataclass
from typing import Callable, Optional

import pandas as pd
import plotly.graph_objects as go

from absentee.data.loader import LoadError
from absentee.data.models import DistrictDataset, DistrictRecord
from absentee.data.search import search_districts, should_search
from absentee.viz.charts import create_absenteeism_chart, create_history_table
from absentee.viz.history import DistrictHistory, build_history

from .state import (
    LOAD_ERROR_MESSAGE,
    DashboardState,
    DatasetFailed,
    DatasetLoaded,
    Phase,
    QueryChanged,
    ResultSelected,
    ResultsDismissed,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenderedDetail:
    history: DistrictHistory
    figure: go.Figure
    table: pd.DataFrame


class DashboardController:
    """
    Owns the dashboard state and applies events to it one at a time.

    ``dispatch`` queues the event and, unless a handler is already running,
    drains the queue in FIFO order. Each handler runs to completion before
    the next event is handled, including events dispatched from inside a
    handler.
    """

    def __init__(self, state: Optional[DashboardState] = None):
        self.state = state or DashboardState()
        self._queue = deque()
        self._dispatching = False
        self._handlers = {
            DatasetLoaded: self._on_dataset_loaded,
            DatasetFailed: self._on_dataset_failed,
            QueryChanged: self._on_query_changed,
            ResultSelected: self._on_result_selected,
            ResultsDismissed: self._on_results_dismissed,
        }

    def dispatch(self, event) -> DashboardState:
        self._queue.append(event)
        if self._dispatching:
            return self.state

        self._dispatching = True
        try:
            while self._queue:
                current = self._queue.popleft()
                handler = self._handlers.get(type(current))
                if handler is None:
                    raise TypeError(f"Unknown dashboard event: {current!r}")
                handler(current)
        finally:
            self._dispatching = False
        return self.state

    def load(self, loader: Callable[[], DistrictDataset]) -> DashboardState:
        """Run ``loader`` once for the session and record the outcome."""
        if self.state.phase is not Phase.IDLE:
            return self.state

        try:
            dataset = loader()
        except LoadError as e:
            logger.error("District data failed to load: %s", e)
            return self.dispatch(DatasetFailed(reason=str(e)))
        return self.dispatch(DatasetLoaded(dataset=dataset))

    def render_district(self, record: DistrictRecord) -> RenderedDetail:
        """Replace the chart and table with ``record``'s history."""
        history = build_history(record)
        figure = self.state.chart.replace(create_absenteeism_chart(history))
        self.state.table = create_history_table(history)
        return RenderedDetail(history=history, figure=figure, table=self.state.table)

    # -------------------------------------------------------------------------
    # Handlers
    # -------------------------------------------------------------------------

    def _on_dataset_loaded(self, event: DatasetLoaded):
        if self.state.phase is not Phase.IDLE:
            logger.debug("Ignoring dataset load in phase %s", self.state.phase)
            return
        self.state.dataset = event.dataset
        self.state.phase = Phase.READY
        self.state.status_message = None

    def _on_dataset_failed(self, event: DatasetFailed):
        if self.state.phase is not Phase.IDLE:
            logger.debug("Ignoring dataset failure in phase %s", self.state.phase)
            return
        self.state.phase = Phase.ERROR
        self.state.status_message = LOAD_ERROR_MESSAGE

    def _on_query_changed(self, event: QueryChanged):
        self.state.query = event.query
        if not self.state.has_data:
            logger.debug("Ignoring query in phase %s", self.state.phase)
            self.state.results = ()
            self.state.results_visible = False
            return

        if not should_search(event.query):
            self.state.results = ()
            self.state.results_visible = False
            return

        self.state.results = search_districts(self.state.dataset, event.query)
        self.state.results_visible = True

    def _on_result_selected(self, event: ResultSelected):
        if not self.state.has_data:
            logger.debug("Ignoring selection in phase %s", self.state.phase)
            return
        if not 0 <= event.position < len(self.state.results):
            logger.debug("Ignoring selection of missing result %d", event.position)
            return

        record = self.state.results[event.position]
        self.render_district(record)
        self.state.selected = record
        self.state.phase = Phase.DETAIL
        self.state.query = record.name
        self.state.results_visible = False

    def _on_results_dismissed(self, event: ResultsDismissed):
        self.state.results_visible = False
