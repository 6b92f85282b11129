"""Plotly chart and table builders for district absenteeism history."""

import pandas as pd
import plotly.graph_objects as go

from .history import DistrictHistory


# Color palette for consistent styling
COLORS = {
    "primary": "#2563eb",
    "fill": "rgba(37, 99, 235, 0.1)",
    "marker": "#ffffff",
    "grid": "#e2e8f0",
}

TABLE_COLUMNS = ["School Year", "Chronic Absenteeism Rate"]


def create_absenteeism_chart(history: DistrictHistory) -> go.Figure:
    """
    Create a line chart of a district's absenteeism rate over time.

    Missing periods are left as gaps in the line. The y-axis starts at zero
    and the legend is hidden. A district with no values still gets the
    labelled axis, with a message on top.

    Args:
        history: DistrictHistory built for the selected district
    """
    fig = go.Figure()

    fig.add_trace(
        go.Scatter(
            x=list(history.labels),
            y=list(history.series),
            name=history.series_label,
            mode="lines+markers",
            connectgaps=False,
            fill="tozeroy",
            fillcolor=COLORS["fill"],
            line=dict(color=COLORS["primary"], width=3, shape="spline", smoothing=0.6),
            marker=dict(
                size=10,
                color=COLORS["marker"],
                line=dict(color=COLORS["primary"], width=2),
            ),
            hovertemplate=f"{history.series_label}: %{{y}}%<extra></extra>",
        )
    )

    fig.update_layout(
        title=history.title,
        showlegend=False,
        hovermode="x unified",
        xaxis=dict(title="School Year", showgrid=False, type="category"),
        yaxis=dict(title="Percent Absent", rangemode="tozero", gridcolor=COLORS["grid"]),
    )

    if not history.has_values:
        fig.add_annotation(
            text=f"No absenteeism data available for {history.title}",
            xref="paper",
            yref="paper",
            x=0.5,
            y=0.5,
            showarrow=False,
            font=dict(size=16, color="gray"),
        )

    return fig


def create_history_table(history: DistrictHistory) -> pd.DataFrame:
    """One row per school year, newest first."""
    return pd.DataFrame(
        [(row.label, row.value) for row in history.rows],
        columns=TABLE_COLUMNS,
    )

