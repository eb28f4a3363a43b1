from __future__ import annotations

from typing import Sequence, Tuple

from .dataset import Row, cell_text
from .state import FilterState


def row_matches(row: Row, predicates: Sequence[Tuple[str, str]]) -> bool:
    """
    True iff the row satisfies every (column, casefolded term) predicate.

    A row whose value for a constrained column is missing never matches.
    """
    for column, needle in predicates:
        value = row.get(column)
        if value is None:
            return False
        if needle not in cell_text(value).casefold():
            return False
    return True


def apply(rows: Sequence[Row], filters: FilterState) -> Sequence[Row]:
    """
    Keep the rows that contain every active term, case-insensitively.

    Active filters are ANDed, so evaluation order across columns never
    changes the result. With no active term the input is returned as-is.
    """
    predicates = [(column, term.casefold()) for column, term in filters.active()]
    if not predicates:
        return rows
    return tuple(row for row in rows if row_matches(row, predicates))
