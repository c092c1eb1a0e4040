"""Category series for the charts and the chart-to-filter bridge.

The series keeps categories in the order they are first seen in the
filtered set. Positions in the series are the bar indexes of the chart,
so a click on a bar maps straight back to its category label.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

import pandas as pd

from .aggregation import category_totals
from .models import CategoryAggregate, FilterCriteria


@dataclass(frozen=True)
class CategorySeries:
    aggregates: Tuple[CategoryAggregate, ...] = ()

    def __len__(self) -> int:
        return len(self.aggregates)

    def __iter__(self):
        return iter(self.aggregates)

    @property
    def labels(self) -> List[str]:
        return [agg.category for agg in self.aggregates]

    @property
    def values(self) -> List[float]:
        return [agg.total_amount for agg in self.aggregates]

    def category_at(self, index: int) -> str:
        if not 0 <= index < len(self.aggregates):
            raise IndexError(f"No category at position {index}; series has {len(self.aggregates)} entries")
        return self.aggregates[index].category

    def index_of(self, category: str) -> int:
        for position, agg in enumerate(self.aggregates):
            if agg.category == category:
                return position
        raise ValueError(f"Category '{category}' is not in the series")

    def total(self) -> float:
        return float(sum(self.values))

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame(
            {"Category": self.labels, "Amount": self.values},
            columns=["Category", "Amount"],
        )

    def as_records(self) -> List[dict]:
        return [agg.as_dict() for agg in self.aggregates]

    def select(self, index: int, criteria: FilterCriteria) -> FilterCriteria:
        """Turn a click on bar ``index`` into the new filter criteria."""
        return select_category(criteria, self.category_at(index))


def group_by_category(frame: pd.DataFrame) -> CategorySeries:
    totals = category_totals(frame)
    return CategorySeries(
        tuple(CategoryAggregate(str(category), float(amount)) for category, amount in totals.items())
    )


def select_category(criteria: FilterCriteria, category: str) -> FilterCriteria:
    """Write a selected chart label verbatim into the category criterion."""
    return FilterCriteria.from_mapping(criteria).with_category(category)
