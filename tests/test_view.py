from __future__ import annotations

import copy

import pandas as pd

from transaction_dashboard import (
    CategoryRef,
    FilterCriteria,
    PageState,
    SortConfig,
    StoreState,
    Transaction,
    ViewState,
    build_store_view,
    build_view,
)
from transaction_dashboard.view import STATUS_ERROR, STATUS_LOADING, STATUS_READY


def _scenario():
    return [
        {"title": "Rent", "type": "expense", "category": "House", "amount": "1000", "date": "2024-06-01"},
        {"title": "Groceries", "type": "expense", "category": "Food", "amount": "150", "date": "2024-06-02"},
        {"title": "Salary", "type": "income", "category": "Job", "amount": "2500", "date": "2024-06-01"},
    ]


def _many(coffee: int, lunch: int):
    rows = []
    for i in range(coffee):
        rows.append({"id": f"c{i}", "title": f"Coffee {i}", "type": "expense", "category": "Food",
                     "amount": str(3 + i), "date": f"2024-05-{1 + i % 28:02d}"})
    for i in range(lunch):
        rows.append({"id": f"l{i}", "title": f"Lunch {i}", "type": "expense", "category": "Food",
                     "amount": str(10 + i), "date": f"2024-04-{1 + i % 28:02d}"})
    return rows


def test_expense_scenario_summary() -> None:
    view = build_view(_scenario(), "expense")

    assert view.status == STATUS_READY
    assert view.summary.total == 1150.00
    assert view.summary.count == 2
    assert view.summary.average == 575.00
    assert view.summary.top_category == "House"
    assert view.chart_series.labels == ["House", "Food"]
    assert view.pagination == {"current_page": 1, "total_pages": 1}


def test_income_type_split() -> None:
    view = build_view(_scenario(), "income")
    assert view.table_rows["title"].tolist() == ["Salary"]
    assert view.summary.top_category == "Job"


def test_amount_prefix_filter_on_expenses() -> None:
    view = build_view(_scenario(), "expense", FilterCriteria(amount="1"))
    assert view.table_rows["title"].tolist() == ["Groceries", "Rent"]
    assert view.summary.total == 1150.0

    view = build_view(_scenario(), "expense", FilterCriteria(amount="10"))
    assert view.table_rows["title"].tolist() == ["Rent"]
    assert view.summary.total == 1000.0
    assert view.chart_series.labels == ["House"]


def test_table_rows_are_sorted_and_carry_normalized_categories() -> None:
    rows = [
        Transaction(id=1, title="Cinema", type="expense", amount="12", date="2024-06-03",
                    category=CategoryRef(title="Fun")),
        Transaction(id=2, title="Taxi", type="expense", amount="30", date="2024-06-01"),
    ]
    view = build_view(rows, "expense", sort_config=SortConfig("amount", "desc"))
    assert view.table_rows["title"].tolist() == ["Taxi", "Cinema"]
    assert view.table_rows["category"].tolist() == ["Unknown", "Fun"]


def test_filter_change_that_shrinks_results_clamps_page() -> None:
    rows = _many(coffee=15, lunch=35)
    view = build_view(rows, "expense", FilterCriteria(title="coffee"), page=PageState(5))

    assert view.total_pages == 2
    assert view.page.current_page == 2
    assert len(view.table_rows) == 5


def test_filter_change_to_no_results_keeps_page() -> None:
    rows = _many(coffee=15, lunch=35)
    view = build_view(rows, "expense", FilterCriteria(title="tea"), page=PageState(5))

    assert view.total_pages == 0
    assert view.page.current_page == 5
    assert view.table_rows.empty
    assert view.summary.average == 0
    assert view.summary.top_category == "Unknown"


def test_all_pages_reproduce_the_sorted_set() -> None:
    rows = _many(coffee=7, lunch=16)
    sort = SortConfig("amount", "asc")
    first = build_view(rows, "expense", sort_config=sort)
    titles = []
    for number in range(1, first.total_pages + 1):
        view = build_view(rows, "expense", sort_config=sort, page=PageState(number))
        assert len(view.table_rows) <= 10
        titles.extend(view.table_rows["title"].tolist())
    amounts = sorted(rows, key=lambda r: float(r["amount"]))
    assert titles == [r["title"] for r in amounts]


def test_pipeline_does_not_modify_raw_transactions() -> None:
    rows = _scenario()
    rows[0]["category"] = {"title": "House"}
    before = copy.deepcopy(rows)
    build_view(rows, "expense", FilterCriteria(category="House"))
    assert rows == before


def test_raw_dataframe_input_is_accepted() -> None:
    df = pd.DataFrame(_scenario())
    view = build_view(df, "expense")
    assert view.summary.count == 2


def test_store_loading_and_error_pass_through() -> None:
    loading = build_store_view(StoreState(loading=True), "expense", page=PageState(3))
    assert loading.status == STATUS_LOADING
    assert loading.table_rows.empty
    assert loading.page == PageState(3)

    failed = build_store_view(StoreState(transactions=_scenario(), error="boom"), "expense")
    assert failed.status == STATUS_ERROR
    assert failed.error == "boom"
    assert failed.summary.count == 0

    ready = build_store_view(StoreState(transactions=_scenario()), "expense")
    assert ready.status == STATUS_READY
    assert ready.summary.count == 2


def test_view_state_filter_change_resets_page() -> None:
    state = ViewState(page=PageState(4))
    assert state.with_filters(FilterCriteria()) is state

    state = state.with_filters({"title": "coffee"})
    assert state.page == PageState(1)
    assert state.filters == FilterCriteria(title="coffee")


def test_view_state_category_selection_feeds_the_filter() -> None:
    rows = _scenario()
    state = ViewState(transaction_type="expense", page=PageState(2))
    view, _ = state.derive(rows)

    state = state.with_category_selected(view.chart_series.category_at(1))
    view, state = state.derive(rows)

    assert state.filters.category == "Food"
    assert state.page == PageState(1)
    assert view.table_rows["title"].tolist() == ["Groceries"]

    state = state.with_filters_cleared()
    assert not state.filters.is_active()


def test_view_state_derive_stores_clamped_page() -> None:
    state = ViewState(page=PageState(5))
    view, new_state = state.derive(_many(coffee=12, lunch=0))
    assert view.page == PageState(2)
    assert new_state.page == PageState(2)
    assert new_state.filters == state.filters


def test_view_state_sort_clicks() -> None:
    state = ViewState()
    state = state.with_sort_clicked("amount")
    assert state.sort == SortConfig("amount", "asc")
    state = state.with_sort_clicked("amount")
    assert state.sort == SortConfig("amount", "desc")


def test_far_future_date_does_not_break_the_default_sort() -> None:
    rows = _scenario() + [
        {"title": "Lease", "type": "expense", "category": "House", "amount": "5", "date": "2300-01-01"},
    ]
    view = build_view(rows, "expense")
    assert view.status == STATUS_READY
    assert view.table_rows["title"].tolist() == ["Lease", "Groceries", "Rent"]
