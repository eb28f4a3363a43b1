from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence, Tuple

from .dataset import Row


@dataclass(frozen=True)
class DisplayRange:
    """
    One-based (start, end, total) for "Showing start to end of total".

    (0, 0, 0) when there is nothing to show.
    """
    start: int = 0
    end: int = 0
    total: int = 0

    def as_tuple(self) -> Tuple[int, int, int]:
        return self.start, self.end, self.total

    def describe(self) -> str:
        return f"Showing {self.start} to {self.end} of {self.total}"


@dataclass(frozen=True)
class Page:
    rows: Tuple[Row, ...]
    total_pages: int
    display_range: DisplayRange


def total_pages_for(count: int, page_size: int) -> int:
    """ceil(count / page_size); 0 for an empty sequence."""
    if count <= 0:
        return 0
    return math.ceil(count / page_size)


def clamp_page_index(index: int, total_pages: int) -> int:
    """Clamp into [0, total_pages - 1]; 0 when there are no pages."""
    return max(0, min(index, total_pages - 1))


def paginate(rows: Sequence[Row], page_size: int, page_index: int) -> Page:
    """
    Slice one page out of the derived sequence.

    The caller clamps page_index; an out-of-range index yields an empty
    slice rather than an error.
    """
    total = len(rows)
    total_pages = total_pages_for(total, page_size)

    start = page_index * page_size
    end = min(start + page_size, total)
    page_rows = tuple(rows[start:end]) if 0 <= start < end else ()

    if page_rows:
        display = DisplayRange(start + 1, end, total)
    elif total:
        display = DisplayRange(0, 0, total)
    else:
        display = DisplayRange()

    return Page(rows=page_rows, total_pages=total_pages, display_range=display)


def page_links(total_pages: int, page_index: int, window: int = 5) -> Tuple[int, ...]:
    """
    Zero-based page indices shown as numbered links in the pagination bar.

    - a single page (or none) shows no links at all
    - fewer pages than `window`: every page
    - current page within `window` of the end: the last `window` pages
    - otherwise `window` pages starting at the current one
    """
    if total_pages <= 1:
        return ()
    if total_pages < window:
        return tuple(range(total_pages))
    if total_pages - page_index < window:
        return tuple(range(total_pages - window, total_pages))
    return tuple(range(page_index, page_index + window))
