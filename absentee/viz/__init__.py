from .charts import create_absenteeism_chart, create_history_table
from .history import DistrictHistory, build_history

__all__ = [
    "create_absenteeism_chart",
    "create_history_table",
    "DistrictHistory",
    "build_history",
]
