"""Plotly figures for the category series.

The figures only consume a :class:`~transaction_dashboard.grouping.CategorySeries`;
bar positions in a figure are the series positions, so a selection on the
chart can be mapped back with :meth:`CategorySeries.category_at`.
"""

from __future__ import annotations

from typing import Any, List, Mapping, Optional

import numpy as np
import plotly.colors as pc
import plotly.express as px
import plotly.graph_objects as go

from . import config
from .grouping import CategorySeries


def colorscale_positions(count: int) -> List[float]:
    """Normalized ``[0, 1]`` positions for ``count`` bars (``[0.0]`` for a single bar)."""
    if count <= 0:
        return []
    if count == 1:
        return [0.0]
    return np.linspace(0.0, 1.0, count).tolist()


def category_colors(count: int, colorscale: str = "Greens") -> List[str]:
    """Sample ``count`` colours from a named sequential Plotly colour scale."""
    positions = colorscale_positions(count)
    if not positions:
        return []
    return pc.sample_colorscale(pc.get_colorscale(colorscale), positions)


def _empty_figure(title: str = "No data to display") -> go.Figure:
    fig = go.Figure()
    fig.update_layout(title=title)
    return fig


def create_category_bar_chart(
    series: CategorySeries,
    title: str | None = None,
    colorscale: str = config.CHART_COLORSCALES["expense"],
) -> go.Figure:
    """Bar chart of totals per category, coloured along ``colorscale``.

    Parameters
    ----------
    series : CategorySeries
        Category totals in first-seen order.
    title : str, optional
        Chart title.
    colorscale : str
        Name of a sequential Plotly colour scale.

    Returns
    -------
    plotly.graph_objects.Figure
        Bar chart; each bar carries its category in ``customdata``.
    """
    if not len(series):
        return _empty_figure()
    df = series.to_frame()
    df["Amount"] = df["Amount"].round(2)
    fig = px.bar(df, x="Category", y="Amount", custom_data=["Category"])
    fig.update_traces(marker_color=category_colors(len(df), colorscale))
    fig.update_layout(
        title=title or "Totals by category",
        xaxis_title="Category",
        yaxis_title="Amount",
        showlegend=False,
        clickmode="event+select",
    )
    return fig


def create_category_line_chart(series: CategorySeries, title: str | None = None) -> go.Figure:
    """Line chart of the same series, for the bar/line toggle."""
    if not len(series):
        return _empty_figure()
    df = series.to_frame()
    df["Amount"] = df["Amount"].round(2)
    fig = px.line(df, x="Category", y="Amount", markers=True)
    fig.update_layout(
        title=title or "Totals by category",
        xaxis_title="Category",
        yaxis_title="Amount",
    )
    return fig


def selected_category(event: Optional[Mapping[str, Any]], series: CategorySeries) -> Optional[str]:
    """Category label of the first selected point in a chart selection event.

    Accepts the selection state returned by ``st.plotly_chart(on_select=...)``:
    ``{"selection": {"points": [{"point_index": 2, "x": "Food", ...}]}}``.
    """
    if not event:
        return None
    selection = event.get("selection") if hasattr(event, "get") else None
    points = (selection or {}).get("points") or []
    if not points:
        return None
    point = points[0]
    index = point.get("point_index", point.get("pointIndex"))
    if index is not None and 0 <= int(index) < len(series):
        return series.category_at(int(index))
    label = point.get("x")
    return str(label) if label is not None else None
