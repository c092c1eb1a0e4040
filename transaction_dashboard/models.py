"""Value objects passed between the stages of the transaction view pipeline.

Everything here is immutable. The presentation layer owns the current
``FilterCriteria``/``SortConfig``/``PageState`` tuple and hands it to
:func:`transaction_dashboard.view.build_view` on every render.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from typing import Any, Dict, Mapping, Optional, Sequence, Union

from . import config


@dataclass(frozen=True)
class CategoryRef:
    """Reference form of a category as stored by the transaction service."""

    title: str = ""
    id: Any = None


CategoryValue = Union[str, CategoryRef, Mapping[str, Any], None]


@dataclass(frozen=True)
class Transaction:
    id: Any
    title: str
    type: str
    amount: Any
    date: Any
    category: CategoryValue = None
    created_at: Any = None

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "Transaction":
        """Build a transaction from a store record (``createdAt``/``_id`` aliases accepted)."""
        created_at = record.get("created_at", record.get("createdAt"))
        return cls(
            id=record.get("id", record.get("_id")),
            title=record.get("title", ""),
            type=record.get("type", ""),
            amount=record.get("amount"),
            date=record.get("date"),
            category=record.get("category"),
            created_at=created_at,
        )

    def to_record(self) -> Dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


@dataclass(frozen=True)
class FilterCriteria:
    """Five independent predicates; an empty string imposes no constraint."""

    title: str = ""
    category: str = ""
    amount: str = ""
    date: str = ""
    created_date: str = ""

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if value is None:
                object.__setattr__(self, f.name, "")
            elif not isinstance(value, str):
                object.__setattr__(self, f.name, str(value))

    @classmethod
    def from_mapping(cls, mapping: Optional[Mapping[str, Any]]) -> "FilterCriteria":
        """Fill any missing field of a partial mapping with its default."""
        if mapping is None:
            return cls()
        if isinstance(mapping, FilterCriteria):
            return mapping
        names = {f.name for f in fields(cls)}
        values = dict(mapping)
        if "createdDate" in values and "created_date" not in values:
            values["created_date"] = values.pop("createdDate")
        return cls(**{k: v for k, v in values.items() if k in names})

    def is_active(self) -> bool:
        return any(getattr(self, f.name) != "" for f in fields(self))

    def with_category(self, category: str) -> "FilterCriteria":
        return replace(self, category=category)

    @classmethod
    def cleared(cls) -> "FilterCriteria":
        return cls()

    def as_dict(self) -> Dict[str, str]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


@dataclass(frozen=True)
class SortConfig:
    key: str = config.DEFAULT_SORT_KEY
    direction: str = config.DEFAULT_SORT_DIRECTION

    def __post_init__(self) -> None:
        object.__setattr__(self, "key", config.SORT_KEY_ALIASES.get(self.key, self.key))
        if self.key not in config.SORT_KEYS:
            raise ValueError(
                f"Unsupported sort key '{self.key}'. Expected one of {', '.join(config.SORT_KEYS)}."
            )
        if self.direction not in config.SORT_DIRECTIONS:
            raise ValueError(f"Sort direction must be 'asc' or 'desc', got '{self.direction}'.")

    @property
    def ascending(self) -> bool:
        return self.direction == "asc"

    def toggled(self, key: str) -> "SortConfig":
        """Return the config after the user clicks the ``key`` column header.

        A new key starts ascending; clicking the active key flips its direction.
        """
        key = config.SORT_KEY_ALIASES.get(key, key)
        if key == self.key and self.direction == "asc":
            return SortConfig(key, "desc")
        return SortConfig(key, "asc")


@dataclass(frozen=True)
class PageState:
    current_page: int = 1
    page_size: int = config.PAGE_SIZE

    def __post_init__(self) -> None:
        if int(self.current_page) < 1:
            raise ValueError(f"current_page must be >= 1, got {self.current_page}")
        if int(self.page_size) < 1:
            raise ValueError(f"page_size must be >= 1, got {self.page_size}")


@dataclass(frozen=True)
class CategoryAggregate:
    category: str
    total_amount: float

    def as_dict(self) -> Dict[str, Any]:
        return {"category": self.category, "total_amount": self.total_amount}


@dataclass(frozen=True)
class Summary:
    total: float = 0.0
    count: int = 0
    average: float = 0.0
    top_category: str = config.UNKNOWN_CATEGORY

    def as_dict(self) -> Dict[str, Any]:
        return {
            "total": self.total,
            "count": self.count,
            "average": self.average,
            "top_category": self.top_category,
        }


@dataclass(frozen=True)
class StoreState:
    """What the transaction store hands to the view layer."""

    transactions: Sequence[Any] = field(default_factory=tuple)
    loading: bool = False
    error: Optional[str] = None
