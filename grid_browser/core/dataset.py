from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Iterable, Mapping, Optional, Sequence, Tuple

logger = logging.getLogger(__name__)

Row = Mapping[str, Any]


def cell_text(value: Any) -> str:
    """
    The one string rendering of a cell, shared by filtering, sorting and display.

    - None -> ""
    - bools -> "true"/"false"
    - integral floats drop the trailing ".0" (3.0 -> "3")
    - lists/tuples -> items joined with ", "
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (list, tuple)):
        return ", ".join(cell_text(v) for v in value)
    return str(value)


def project_record(record: Any, columns: Sequence[str]) -> Row:
    """
    Project an arbitrary-shape record onto the Column Set.

    The result has exactly `columns`, in order. Absent fields become None;
    anything that is not a mapping projects to an all-empty row.
    """
    source = record if isinstance(record, Mapping) else {}
    return MappingProxyType({c: source.get(c) for c in columns})


class DatasetStore:
    """
    Holds the immutable source rows and the cached derived (filtered + sorted) sequence.

    Source rows are read-only mappings stored in a tuple; every downstream
    stage builds a new sequence instead of mutating them.
    """

    def __init__(self, columns: Sequence[str]) -> None:
        self.columns: Tuple[str, ...] = tuple(columns)
        self._source: Tuple[Row, ...] = ()
        self._derived: Optional[Tuple[Row, ...]] = None
        self._loaded = False

    @property
    def is_loaded(self) -> bool:
        """False until the first successful load ("empty" vs "ready")."""
        return self._loaded

    def load(self, records: Iterable[Any]) -> None:
        """Replace the source dataset and drop any cached derived sequence."""
        rows = tuple(project_record(r, self.columns) for r in records)
        n_incomplete = sum(1 for r in rows if any(r[c] is None for c in self.columns))

        self._source = rows
        self._derived = None
        self._loaded = True

        logger.info(
            "Dataset loaded",
            extra={"n_rows": len(rows), "n_incomplete_rows": n_incomplete},
        )

    def fork(self) -> DatasetStore:
        """
        A new store sharing this one's source rows but with its own derived cache.

        Used when several controllers (one per browser session) read the same rows.
        """
        other = DatasetStore(self.columns)
        other._source = self._source
        other._loaded = self._loaded
        return other

    def source_rows(self) -> Tuple[Row, ...]:
        return self._source

    def derived_rows(self) -> Optional[Tuple[Row, ...]]:
        """The cached filtered + sorted sequence, or None if it was invalidated."""
        return self._derived

    def set_derived(self, rows: Sequence[Row]) -> None:
        self._derived = tuple(rows)

    def __len__(self) -> int:
        return len(self._source)
