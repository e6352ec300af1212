import re
from dataclasses import dataclass
from typing import List, Sequence, Tuple


@dataclass(frozen=True)
class RowsFilter:
    """Snapshot of the rows matched by a search, restricted to one window.

    ``indices`` are absolute row positions for the requested slice of the
    match set; ``total`` counts every match. Two filters compare equal when
    both fields do, which is what decides whether the view must reload.
    """

    indices: Tuple[int, ...]
    total: int

    @classmethod
    def new(cls, finder, rows_from: int, num_rows: int) -> "RowsFilter":
        total = finder.count()
        indices = finder.get_subset_found(rows_from, num_rows)
        return cls(indices=tuple(int(i) for i in indices), total=int(total))


class ColumnsFilter:
    """Columns whose header matches ``pattern``.

    When nothing matches, the filter falls back to every column instead of
    leaving an empty view, and flags it through ``disabled_because_no_match``.
    """

    def __init__(self, pattern, headers: Sequence[str]):
        if isinstance(pattern, str):
            pattern = re.compile(pattern)
        indices: List[int] = []
        filtered_headers: List[str] = []
        for i, header in enumerate(headers):
            if pattern.search(header):
                indices.append(i)
                filtered_headers.append(header)

        if indices:
            disabled = False
        else:
            indices = list(range(len(headers)))
            filtered_headers = list(headers)
            disabled = True

        self._pattern = pattern
        self._indices = tuple(indices)
        self._filtered_headers = tuple(filtered_headers)
        self._num_columns_before_filter = len(headers)
        self._disabled_because_no_match = disabled

    @property
    def pattern(self) -> re.Pattern:
        return self._pattern

    @property
    def indices(self) -> Tuple[int, ...]:
        return self._indices

    @property
    def filtered_headers(self) -> List[str]:
        return list(self._filtered_headers)

    def num_filtered(self) -> int:
        return len(self._indices)

    def num_original(self) -> int:
        return self._num_columns_before_filter

    def disabled_because_no_match(self) -> bool:
        return self._disabled_because_no_match

    def __repr__(self):
        return (
            f"ColumnsFilter(pattern={self._pattern.pattern!r}, "
            f"indices={list(self._indices)!r}, "
            f"disabled_because_no_match={self._disabled_because_no_match})"
        )
