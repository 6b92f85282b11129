"""Page state, events and the owned chart handle for the dashboard."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

import pandas as pd
import plotly.graph_objects as go

from absentee.data.models import DistrictDataset, DistrictRecord

LOADING_MESSAGE = "Loading district data..."
LOAD_ERROR_MESSAGE = "Error loading data. Please try refreshing."


class Phase(Enum):
    IDLE = "idle"  # no data yet
    READY = "ready"  # data loaded, nothing selected
    DETAIL = "detail"  # data loaded, one district selected
    ERROR = "error"  # load failed; terminal for the session


# -----------------------------------------------------------------------------
# Events
# -----------------------------------------------------------------------------


@dataclass(frozen=True)
class DatasetLoaded:
    dataset: DistrictDataset


@dataclass(frozen=True)
class DatasetFailed:
    reason: str = ""


@dataclass(frozen=True)
class QueryChanged:
    query: str


@dataclass(frozen=True)
class ResultSelected:
    """Selection of a search result by its position in the current results."""

    position: int


@dataclass(frozen=True)
class ResultsDismissed:
    """An interaction happened outside the search widget."""


# -----------------------------------------------------------------------------
# Rendering resources
# -----------------------------------------------------------------------------


class ChartHandle:
    """Owns the single chart figure currently on display."""

    def __init__(self):
        self._figure: Optional[go.Figure] = None

    @property
    def figure(self) -> Optional[go.Figure]:
        return self._figure

    def replace(self, figure: go.Figure) -> go.Figure:
        """Install ``figure`` in place of the current one, dropping the old figure."""
        previous, self._figure = self._figure, figure
        if previous is not None and previous is not figure:
            previous.data = []
            previous.layout = {}
        return figure


@dataclass
class DashboardState:
    """Everything the page draws, owned by one controller."""

    phase: Phase = Phase.IDLE
    dataset: Optional[DistrictDataset] = None
    status_message: Optional[str] = LOADING_MESSAGE
    query: str = ""
    results: tuple[DistrictRecord, ...] = ()
    results_visible: bool = False
    selected: Optional[DistrictRecord] = None
    chart: ChartHandle = field(default_factory=ChartHandle)
    table: pd.DataFrame = field(default_factory=pd.DataFrame)

    @property
    def has_data(self) -> bool:
        return self.phase in (Phase.READY, Phase.DETAIL)
