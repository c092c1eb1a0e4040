"""Fixed-size paging over an ordered transaction set."""

from __future__ import annotations

from dataclasses import replace
from typing import Iterator, Optional

import pandas as pd

from . import config
from .models import PageState


def total_pages(length: int, page_size: int = config.PAGE_SIZE) -> int:
    if length <= 0:
        return 0
    return -(-length // page_size)


def clamp_page(page: Optional[PageState], length: int) -> PageState:
    """Pull ``current_page`` back to the last page when the set shrank.

    With no pages at all the page is left untouched; :func:`paginate`
    then simply yields an empty slice.
    """
    page = page or PageState()
    pages = total_pages(length, page.page_size)
    if pages > 0 and page.current_page > pages:
        return replace(page, current_page=pages)
    return page


def reset_page(page: Optional[PageState]) -> PageState:
    """Back to the first page; used whenever the filters change."""
    page = page or PageState()
    if page.current_page == 1:
        return page
    return replace(page, current_page=1)


def paginate(frame: pd.DataFrame, page: Optional[PageState] = None) -> pd.DataFrame:
    page = page or PageState()
    start = (page.current_page - 1) * page.page_size
    return frame.iloc[start:start + page.page_size].copy()


def iter_pages(frame: pd.DataFrame, page_size: int = config.PAGE_SIZE) -> Iterator[pd.DataFrame]:
    for number in range(1, total_pages(len(frame), page_size) + 1):
        yield paginate(frame, PageState(number, page_size))
