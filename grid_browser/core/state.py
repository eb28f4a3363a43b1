from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Dict, Iterable, Iterator, Optional, Tuple


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"

    def toggled(self) -> SortDirection:
        return SortDirection.DESC if self is SortDirection.ASC else SortDirection.ASC


@dataclass(frozen=True)
class SortState:
    """
    The single active sort. There is no "unsorted" state.
    """
    column: str
    direction: SortDirection = SortDirection.ASC

    @property
    def descending(self) -> bool:
        return self.direction is SortDirection.DESC


@dataclass(frozen=True)
class FilterState:
    """
    Search term per filterable column.

    Stored as ordered (column, term) pairs so the state stays immutable and
    hashable. A term of None or "" puts no constraint on its column.
    """
    terms: Tuple[Tuple[str, Optional[str]], ...] = ()

    @classmethod
    def for_columns(cls, columns: Iterable[str]) -> FilterState:
        return cls(terms=tuple((c, None) for c in columns))

    def get(self, column: str) -> Optional[str]:
        for name, term in self.terms:
            if name == column:
                return term
        return None

    def with_term(self, column: str, term: Optional[str]) -> FilterState:
        term = term or None
        if any(name == column for name, _ in self.terms):
            terms = tuple((name, term if name == column else t) for name, t in self.terms)
        else:
            terms = self.terms + ((column, term),)
        return FilterState(terms=terms)

    def active(self) -> Iterator[Tuple[str, str]]:
        """Yield only the (column, term) pairs that constrain rows."""
        for name, term in self.terms:
            if term:
                yield name, term

    def is_active(self) -> bool:
        return any(True for _ in self.active())

    def as_dict(self) -> Dict[str, Optional[str]]:
        return dict(self.terms)


@dataclass(frozen=True)
class GridState:
    """
    Everything the controller needs to reproduce a view, apart from the rows.

    Fields:

    - filters: current search terms
    - sort: the active (column, direction)
    - page_size: rows per page, always >= 1
    - page_index: zero-based current page

    Serialises to plain JSON types so the UI can keep it in a dcc.Store.
    """
    sort: SortState
    filters: FilterState = field(default_factory=FilterState)
    page_size: int = 5
    page_index: int = 0

    def evolve(self, **changes: Any) -> GridState:
        return replace(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "filters": self.filters.as_dict(),
            "sort": {"column": self.sort.column, "direction": self.sort.direction.value},
            "page_size": self.page_size,
            "page_index": self.page_index,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> GridState:
        """
        Rebuild a state from to_dict() output.

        Values are taken at face value here; GridController normalises them
        against its GridOptions (unknown columns, bad page sizes).

        Raises:
            KeyError / ValueError / TypeError on structurally broken input.
        """
        sort_raw = data["sort"]
        filters_raw = data.get("filters") or {}
        return cls(
            sort=SortState(
                column=str(sort_raw["column"]),
                direction=SortDirection(sort_raw.get("direction", SortDirection.ASC.value)),
            ),
            filters=FilterState(
                terms=tuple(
                    (str(k), None if v is None else str(v)) for k, v in dict(filters_raw).items()
                )
            ),
            page_size=int(data.get("page_size", 5)),
            page_index=int(data.get("page_index", 0)),
        )
