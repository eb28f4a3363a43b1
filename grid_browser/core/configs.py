from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Tuple

from .exceptions import ConfigError

DEFAULT_COLUMNS: Tuple[str, ...] = ("name", "capital", "area", "population", "region")
DEFAULT_PAGE_SIZE_OPTIONS: Tuple[int, ...] = (5, 10, 20, 50)


@dataclass(frozen=True)
class GridOptions:
    """
    Grid configuration, supplied once when the controller is built.

    Fields:

    - columns: ordered Column Set; the only row fields ever read, sorted or filtered
    - sortable: columns whose header toggles the sort
    - filterable: columns that get a search input
    - page_size: default rows per page
    - page_size_options: choices offered by the page-size select
    - page_link_window: how many page numbers the pagination bar shows at once
    - is_paginated: if False the whole derived sequence is a single page
    - is_header_fixed: render hint only (sticky header), ignored by the core
    """

    columns: Tuple[str, ...] = DEFAULT_COLUMNS
    sortable: Tuple[str, ...] = ("name", "population")
    filterable: Tuple[str, ...] = ("capital", "area")
    page_size: int = 5
    page_size_options: Tuple[int, ...] = DEFAULT_PAGE_SIZE_OPTIONS
    page_link_window: int = 5
    is_paginated: bool = True
    is_header_fixed: bool = True

    def __post_init__(self) -> None:
        # Normalise list input (e.g. straight from JSON) to tuples
        for name in ("columns", "sortable", "filterable", "page_size_options"):
            object.__setattr__(self, name, tuple(getattr(self, name)))

        if not self.columns:
            raise ConfigError("Grid needs at least one column")
        if len(set(self.columns)) != len(self.columns):
            raise ConfigError(f"Duplicate column names in {list(self.columns)}")

        for group in ("sortable", "filterable"):
            unknown = [c for c in getattr(self, group) if c not in self.columns]
            if unknown:
                raise ConfigError(f"Unknown {group} column(s): {unknown}")

        if not _is_positive_int(self.page_size):
            raise ConfigError(f"page_size must be a positive integer, got {self.page_size!r}")
        if not all(_is_positive_int(n) for n in self.page_size_options):
            raise ConfigError(f"Invalid page_size_options: {list(self.page_size_options)}")
        if not _is_positive_int(self.page_link_window):
            raise ConfigError(f"page_link_window must be a positive integer, got {self.page_link_window!r}")

        # The page-size select must be able to show the default size
        if self.page_size not in self.page_size_options:
            object.__setattr__(
                self, "page_size_options", tuple(sorted((*self.page_size_options, self.page_size)))
            )

    @property
    def default_sort_column(self) -> str:
        return self.sortable[0] if self.sortable else self.columns[0]

    def header_label(self, column: str) -> str:
        """Display label for a column: first letter upper-cased."""
        return column[:1].upper() + column[1:]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> GridOptions:
        """
        Build options from the "grid" section of global.json.

        Missing keys take the dataclass defaults. When only 'columns' is given,
        the default sortable/filterable columns are kept where they still exist.
        """
        defaults = cls()
        columns = tuple(data.get("columns", defaults.columns))

        def subset(key: str) -> Tuple[str, ...]:
            if key in data:
                return tuple(data[key] or ())
            return tuple(c for c in getattr(defaults, key) if c in columns)

        return cls(
            columns=columns,
            sortable=subset("sortable"),
            filterable=subset("filterable"),
            page_size=data.get("page_size", defaults.page_size),
            page_size_options=tuple(data.get("page_size_options", defaults.page_size_options)),
            page_link_window=data.get("page_link_window", defaults.page_link_window),
            is_paginated=bool(data.get("is_paginated", defaults.is_paginated)),
            is_header_fixed=bool(data.get("is_header_fixed", defaults.is_header_fixed)),
        )


def _is_positive_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 1
