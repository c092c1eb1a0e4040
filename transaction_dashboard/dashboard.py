"""Streamlit page for browsing income and expense transactions.

The page owns the :class:`~transaction_dashboard.view.ViewState` (kept in
``st.session_state``) and re-derives the whole view on every rerun through
:meth:`ViewState.derive`. Widgets never touch the pipeline directly; they
only produce a new ``ViewState``.

To run the dashboard from the command line::

    streamlit run transaction_dashboard/dashboard.py
"""

from __future__ import annotations

import os
import sys
from typing import Optional

import streamlit as st

if __package__:
    from . import config
    from .formatting import TABLE_COLUMNS, format_currency, format_table_rows
    from .logging_setup import configure_logging
    from .models import FilterCriteria, StoreState
    from .store import load_transactions
    from .view import STATUS_ERROR, STATUS_LOADING, TransactionView, ViewState
    from .visualization import create_category_bar_chart, create_category_line_chart, selected_category
else:
    # ``streamlit run transaction_dashboard/dashboard.py`` executes this file
    # as a script; put the project root on the path for absolute imports.
    PARENT_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    if PARENT_DIR not in sys.path:
        sys.path.insert(0, PARENT_DIR)
    from transaction_dashboard import config  # type: ignore
    from transaction_dashboard.formatting import TABLE_COLUMNS, format_currency, format_table_rows  # type: ignore
    from transaction_dashboard.logging_setup import configure_logging  # type: ignore
    from transaction_dashboard.models import FilterCriteria, StoreState  # type: ignore
    from transaction_dashboard.store import load_transactions  # type: ignore
    from transaction_dashboard.view import STATUS_ERROR, STATUS_LOADING, TransactionView, ViewState  # type: ignore
    from transaction_dashboard.visualization import (  # type: ignore
        create_category_bar_chart,
        create_category_line_chart,
        selected_category,
    )

STATE_KEY = "view_state"
CHART_MODE_KEY = "show_bar_chart"
SELECTION_KEY = "chart_selection"

TYPE_LABELS = {"expense": "Expenses", "income": "Incomes"}


def _rerun() -> None:
    rerun_fn = getattr(st, "rerun", None) or getattr(st, "experimental_rerun", None)
    if rerun_fn:
        rerun_fn()


def _ensure_view_state() -> ViewState:
    state = st.session_state.get(STATE_KEY)
    if not isinstance(state, ViewState):
        state = ViewState()
        st.session_state[STATE_KEY] = state
    return state


def _save_view_state(state: ViewState) -> None:
    st.session_state[STATE_KEY] = state


def _load_store(uploaded_file=None) -> StoreState:
    if uploaded_file is not None:
        return load_transactions(uploaded_file)
    path = config.get_transactions_path()
    if not os.path.exists(path):
        return StoreState()
    return load_transactions(path)


def _render_filters(state: ViewState) -> ViewState:
    """Filter inputs; a changed criterion sends the table back to page one."""
    current = state.filters
    st.sidebar.header("Filters")
    title = st.sidebar.text_input("Title", value=current.title)
    category = st.sidebar.text_input("Category", value=current.category)
    amount = st.sidebar.text_input("Amount starts with", value=current.amount)
    date = st.sidebar.text_input("Date (YYYY-MM-DD)", value=current.date)
    created_date = st.sidebar.text_input("Created date (YYYY-MM-DD)", value=current.created_date)
    state = state.with_filters(
        FilterCriteria(
            title=title,
            category=category,
            amount=amount,
            date=date,
            created_date=created_date,
        )
    )
    if st.sidebar.button("Clear filters", disabled=not state.filters.is_active()):
        state = state.with_filters_cleared()
    return state


def _render_summary(view: TransactionView, transaction_type: str) -> None:
    label = TYPE_LABELS.get(transaction_type, transaction_type.title())
    summary = view.summary
    cols = st.columns(4)
    cols[0].metric(f"Total {label}", format_currency(summary.total))
    cols[1].metric("Total Transactions", summary.count)
    cols[2].metric(f"Average {label.rstrip('s')}", format_currency(summary.average))
    cols[3].metric("Top Category", summary.top_category)


def _render_chart(view: TransactionView, state: ViewState) -> ViewState:
    """Bar or line chart; selecting a bar becomes the category filter."""
    label = TYPE_LABELS.get(state.transaction_type, state.transaction_type.title())
    show_bar = st.session_state.get(CHART_MODE_KEY, True)
    if st.button("Line Chart" if show_bar else "Bar Chart"):
        show_bar = not show_bar
        st.session_state[CHART_MODE_KEY] = show_bar

    title = f"{label} by Category"
    if not show_bar:
        st.plotly_chart(create_category_line_chart(view.chart_series, title=title), use_container_width=True)
        return state

    colorscale = config.CHART_COLORSCALES.get(state.transaction_type, "Greens")
    fig = create_category_bar_chart(view.chart_series, title=title, colorscale=colorscale)
    event = st.plotly_chart(fig, use_container_width=True, on_select="rerun", key="category_chart")
    category = selected_category(event, view.chart_series)
    if category != st.session_state.get(SELECTION_KEY):
        st.session_state[SELECTION_KEY] = category
        if category is not None:
            return state.with_category_selected(category)
    return state


def _render_sort_controls(state: ViewState) -> ViewState:
    cols = st.columns(len(TABLE_COLUMNS))
    for col, (key, label) in zip(cols, TABLE_COLUMNS.items()):
        marker = ""
        if state.sort.key == key:
            marker = " ▲" if state.sort.ascending else " ▼"
        if col.button(f"{label}{marker}", key=f"sort_{key}"):
            state = state.with_sort_clicked(key)
    return state


def _render_table(view: TransactionView) -> None:
    if view.is_empty:
        st.info("No transactions found.")
        return
    st.dataframe(format_table_rows(view.table_rows), use_container_width=True, hide_index=True)


def _render_pagination(view: TransactionView, state: ViewState) -> ViewState:
    if view.total_pages <= 1:
        return state
    page = st.number_input(
        "Page",
        min_value=1,
        max_value=view.total_pages,
        value=view.page.current_page,
        step=1,
    )
    st.caption(f"Page {view.page.current_page} of {view.total_pages}")
    if int(page) != state.page.current_page:
        return state.with_page(int(page))
    return state


def main(uploaded_file: Optional[object] = None) -> None:
    """Entry point for the Streamlit app."""
    configure_logging()
    st.set_page_config(page_title="Transactions", layout="wide", initial_sidebar_state="expanded")
    st.title("Transaction Dashboard")

    if uploaded_file is None:
        uploaded_file = st.sidebar.file_uploader("Transactions file", type=["json", "csv"])

    state = _ensure_view_state()
    transaction_type = st.sidebar.radio(
        "Transactions",
        options=list(TYPE_LABELS.keys()),
        format_func=lambda t: TYPE_LABELS[t],
        index=list(TYPE_LABELS.keys()).index(state.transaction_type),
    )
    state = state.with_type(transaction_type)
    state = _render_filters(state)

    view, state = state.derive(_load_store(uploaded_file))
    _save_view_state(state)

    if view.status == STATUS_LOADING:
        st.info("Loading...")
        st.stop()
    if view.status == STATUS_ERROR:
        st.error(f"Error: {view.error}")
        st.stop()

    _render_summary(view, state.transaction_type)
    updated = _render_chart(view, state)
    updated = _render_sort_controls(updated)
    _render_table(view)
    updated = _render_pagination(view, updated)

    if updated != state:
        _save_view_state(updated)
        _rerun()


if __name__ == "__main__":  # pragma: no cover
    main()
