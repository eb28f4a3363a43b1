from __future__ import annotations

import locale
import logging
from typing import Sequence, Tuple

from .dataset import Row, cell_text
from .state import SortState

logger = logging.getLogger(__name__)

CODE_POINT_LOCALES = ("C", "POSIX")


def sort_key(row: Row, column: str) -> str:
    """
    Locale-aware collation key for one cell.

    Every value is compared as text, numbers included: "100" sorts before
    "20" and ["9", "80", "700"] ascending is ["700", "80", "9"].

    Text the C library cannot collate (NUL characters, lone surrogates) is
    keyed by its code points instead, so any JSON string can be sorted.
    """
    text = cell_text(row.get(column)).replace("\x00", "")
    try:
        return locale.strxfrm(text)
    except ValueError:
        return text


def configure_collation() -> str:
    """
    Take LC_COLLATE from the environment and return the active locale name.

    Under C/POSIX collation compares code points: every upper-case name sorts
    before every lower-case one and "Åland Islands" lands after "Zimbabwe".
    """
    try:
        name = locale.setlocale(locale.LC_COLLATE, "")
    except locale.Error:
        logger.warning("Unsupported locale in environment; sorting with the C locale")
        name = locale.setlocale(locale.LC_COLLATE)

    if name in CODE_POINT_LOCALES:
        logger.warning(
            "Collation locale is %s; columns sort by code point. Set LC_COLLATE or LANG "
            "to a UTF-8 locale for natural ordering",
            name,
            extra={"lc_collate": name},
        )
    return name


def apply(rows: Sequence[Row], sort: SortState) -> Tuple[Row, ...]:
    """
    Return a new sequence ordered by the active column.

    Stable in both directions: rows with equal keys keep their input order
    (sorted() preserves it under reverse=True too).
    """
    return tuple(
        sorted(rows, key=lambda row: sort_key(row, sort.column), reverse=sort.descending)
    )
