"""Top-level package for the Transaction Dashboard.

The package turns a user's raw income/expense records into the view model
rendered by the dashboard page. The primary modules are:

* ``categories`` – normalization of the string-or-object category field
* ``filtering`` – compound title/category/amount/date predicates
* ``aggregation`` and ``grouping`` – summary figures and per-category series
* ``sorting`` and ``pagination`` – table ordering and paging
* ``view`` – the composed pipeline and the caller-owned ``ViewState``
* ``visualization`` – Plotly figures for the category series
* ``dashboard`` – a Streamlit page that ties everything together

To run the dashboard from the command line you can execute:

```bash
streamlit run transaction_dashboard/dashboard.py
```
"""

from .models import (  # noqa: F401  # re-exported for convenience
    CategoryAggregate,
    CategoryRef,
    FilterCriteria,
    PageState,
    SortConfig,
    StoreState,
    Summary,
    Transaction,
)
from .view import TransactionView, ViewState, build_store_view, build_view  # noqa: F401

__all__ = [
    "CategoryAggregate",
    "CategoryRef",
    "FilterCriteria",
    "PageState",
    "SortConfig",
    "StoreState",
    "Summary",
    "Transaction",
    "TransactionView",
    "ViewState",
    "build_store_view",
    "build_view",
]
