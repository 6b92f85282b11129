from .controller import DashboardController, RenderedDetail
from .state import (
    ChartHandle,
    DashboardState,
    DatasetFailed,
    DatasetLoaded,
    Phase,
    QueryChanged,
    ResultSelected,
    ResultsDismissed,
)

__all__ = [
    "DashboardController",
    "RenderedDetail",
    "ChartHandle",
    "DashboardState",
    "DatasetFailed",
    "DatasetLoaded",
    "Phase",
    "QueryChanged",
    "ResultSelected",
    "ResultsDismissed",
]
