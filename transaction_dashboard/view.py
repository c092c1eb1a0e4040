"""Composition of the pipeline into the view model the pages render.

:func:`build_view` is the single entry point: it runs every stage in a
fixed order so that no caller can paginate against a stale filtered set
or clamp the page before the filters have been applied::

    normalize -> type split -> filter -> {summarize, group}
                               filter -> sort -> clamp -> paginate

The pipeline keeps no state between calls. The caller owns a
:class:`ViewState` and stores back the clamped page returned in
:attr:`TransactionView.page`.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Dict, Mapping, Optional, Tuple, Union

import pandas as pd

from .aggregation import summarize
from .categories import normalize_categories
from .filtering import filter_transactions
from .frames import TRANSACTION_COLUMNS, TransactionsLike, split_by_type, transactions_to_frame
from .grouping import CategorySeries, group_by_category, select_category
from .logging_setup import get_logger
from .models import FilterCriteria, PageState, SortConfig, StoreState, Summary
from .pagination import clamp_page, paginate, reset_page, total_pages
from .sorting import next_sort_config, sort_transactions

logger = get_logger(__name__)

STATUS_READY = "ready"
STATUS_LOADING = "loading"
STATUS_ERROR = "error"


@dataclass(frozen=True, eq=False)
class TransactionView:
    status: str = STATUS_READY
    summary: Summary = field(default_factory=Summary)
    chart_series: CategorySeries = field(default_factory=CategorySeries)
    table_rows: pd.DataFrame = field(default_factory=lambda: pd.DataFrame(columns=TRANSACTION_COLUMNS))
    page: PageState = field(default_factory=PageState)
    total_pages: int = 0
    error: Optional[str] = None

    @property
    def pagination(self) -> Dict[str, int]:
        return {"current_page": self.page.current_page, "total_pages": self.total_pages}

    @property
    def is_empty(self) -> bool:
        return self.table_rows.empty


def build_view(
    transactions: TransactionsLike,
    transaction_type: str,
    filters: Union[FilterCriteria, Mapping[str, Any], None] = None,
    sort_config: Optional[SortConfig] = None,
    page: Optional[PageState] = None,
) -> TransactionView:
    """Derive summary, chart series and the current table page."""
    criteria = FilterCriteria.from_mapping(filters)
    frame = normalize_categories(transactions_to_frame(transactions))
    typed = split_by_type(frame, transaction_type)
    filtered = filter_transactions(typed, criteria)

    summary = summarize(filtered)
    chart_series = group_by_category(filtered)

    ordered = sort_transactions(filtered, sort_config)
    current = clamp_page(page, len(ordered))
    if page is not None and current != page:
        logger.debug("Clamped page %d to %d", page.current_page, current.current_page)
    rows = paginate(ordered, current)

    return TransactionView(
        status=STATUS_READY,
        summary=summary,
        chart_series=chart_series,
        table_rows=rows.reset_index(drop=True),
        page=current,
        total_pages=total_pages(len(ordered), current.page_size),
    )


def build_store_view(
    store: StoreState,
    transaction_type: str,
    filters: Union[FilterCriteria, Mapping[str, Any], None] = None,
    sort_config: Optional[SortConfig] = None,
    page: Optional[PageState] = None,
) -> TransactionView:
    """Like :func:`build_view`, but passes loading and error states through untouched."""
    page = page or PageState()
    if store.loading:
        return TransactionView(status=STATUS_LOADING, page=page)
    if store.error:
        return TransactionView(status=STATUS_ERROR, page=page, error=store.error)
    return build_view(store.transactions, transaction_type, filters, sort_config, page)


@dataclass(frozen=True)
class ViewState:
    """The filter/sort/page tuple owned by one page of the presentation layer."""

    transaction_type: str = "expense"
    filters: FilterCriteria = field(default_factory=FilterCriteria)
    sort: SortConfig = field(default_factory=SortConfig)
    page: PageState = field(default_factory=PageState)

    def with_filters(self, filters: Union[FilterCriteria, Mapping[str, Any], None]) -> "ViewState":
        criteria = FilterCriteria.from_mapping(filters)
        if criteria == self.filters:
            return self
        return replace(self, filters=criteria, page=reset_page(self.page))

    def with_category_selected(self, category: str) -> "ViewState":
        return self.with_filters(select_category(self.filters, category))

    def with_filters_cleared(self) -> "ViewState":
        return self.with_filters(FilterCriteria.cleared())

    def with_sort_clicked(self, key: str) -> "ViewState":
        return replace(self, sort=next_sort_config(self.sort, key))

    def with_page(self, current_page: int) -> "ViewState":
        return replace(self, page=replace(self.page, current_page=int(current_page)))

    def with_type(self, transaction_type: str) -> "ViewState":
        if transaction_type == self.transaction_type:
            return self
        return replace(self, transaction_type=transaction_type, page=reset_page(self.page))

    def derive(self, source: Union[StoreState, TransactionsLike]) -> Tuple[TransactionView, "ViewState"]:
        """Build the view and return the state carrying the clamped page."""
        if isinstance(source, StoreState):
            view = build_store_view(source, self.transaction_type, self.filters, self.sort, self.page)
        else:
            view = build_view(source, self.transaction_type, self.filters, self.sort, self.page)
        if view.page == self.page:
            return view, self
        return view, replace(self, page=view.page)
