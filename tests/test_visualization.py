from __future__ import annotations

from transaction_dashboard.grouping import CategorySeries
from transaction_dashboard.models import CategoryAggregate
from transaction_dashboard.visualization import (
    category_colors,
    colorscale_positions,
    create_category_bar_chart,
    create_category_line_chart,
    selected_category,
)


def _series() -> CategorySeries:
    return CategorySeries((
        CategoryAggregate("House", 1000.0),
        CategoryAggregate("Food", 150.456),
        CategoryAggregate("Fun", 20.0),
    ))


def test_positions_are_normalized() -> None:
    assert colorscale_positions(0) == []
    assert colorscale_positions(1) == [0.0]
    assert colorscale_positions(3) == [0.0, 0.5, 1.0]


def test_category_colors_sample_the_scale() -> None:
    colors = category_colors(4, "Greens")
    assert len(colors) == 4
    assert all(color.startswith("rgb") for color in colors)
    assert colors[0] != colors[-1]
    assert category_colors(0) == []


def test_bar_chart_keeps_series_order() -> None:
    fig = create_category_bar_chart(_series(), title="Expenses by Category")
    bar = fig.data[0]
    assert list(bar.x) == ["House", "Food", "Fun"]
    assert list(bar.y) == [1000.0, 150.46, 20.0]
    assert len(bar.marker.color) == 3
    assert fig.layout.title.text == "Expenses by Category"


def test_empty_series_renders_placeholder() -> None:
    fig = create_category_bar_chart(CategorySeries())
    assert fig.layout.title.text == "No data to display"
    assert len(fig.data) == 0
    assert create_category_line_chart(CategorySeries()).layout.title.text == "No data to display"


def test_line_chart_plots_the_same_series() -> None:
    fig = create_category_line_chart(_series())
    assert list(fig.data[0].x) == ["House", "Food", "Fun"]


def test_selected_category_prefers_point_index() -> None:
    event = {"selection": {"points": [{"point_index": 1, "x": "ignored"}]}}
    assert selected_category(event, _series()) == "Food"


def test_selected_category_falls_back_to_label() -> None:
    event = {"selection": {"points": [{"x": "Fun"}]}}
    assert selected_category(event, _series()) == "Fun"


def test_no_selection_yields_none() -> None:
    assert selected_category(None, _series()) is None
    assert selected_category({"selection": {"points": []}}, _series()) is None
