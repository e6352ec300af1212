import logging
import time
from typing import List, Optional

import controls
from errors import DataSourceError
from filters import ColumnsFilter, RowsFilter
from row import Row, subset_columns
from selection import Selection

logger = logging.getLogger(__name__)


class RowsView:
    """The window of rows currently loaded from a data source.

    The view owns the window (``rows_from`` and ``num_rows``), the loaded rows,
    the optional row and column filters and the selection. Every change that
    affects what is visible goes through one reload path; a failed fetch
    raises and leaves all of that state as it was.
    """

    def __init__(self, reader, num_rows: int):
        self.reader = reader
        self._num_rows = max(0, num_rows)
        self._rows_from = 0
        self._rows: List[Row] = []
        self._filter: Optional[RowsFilter] = None
        self._finder = None
        self._columns_filter: Optional[ColumnsFilter] = None
        self.selection = Selection.default(self._num_rows)
        self._elapsed: Optional[int] = None
        self._do_get_rows(
            rows_from=self._rows_from,
            num_rows=self._num_rows,
            rows_filter=None,
            columns_filter=None,
        )

    # ---------- accessors ----------
    def headers(self) -> List[str]:
        if self._columns_filter is not None:
            return self._columns_filter.filtered_headers
        return list(self.reader.headers)

    def rows(self) -> List[Row]:
        return self._rows

    def num_rows(self) -> int:
        return self._num_rows

    def rows_from(self) -> int:
        return self._rows_from

    def elapsed(self) -> Optional[int]:
        """Microseconds spent fetching rows in the last reload."""
        return self._elapsed

    def is_filter(self) -> bool:
        return self._filter is not None

    def rows_filter(self) -> Optional[RowsFilter]:
        return self._filter

    def columns_filter(self) -> Optional[ColumnsFilter]:
        return self._columns_filter

    def get_cell_value(self, column_name: str) -> Optional[str]:
        row_index = self.selection.row.index
        if row_index is None:
            return None
        try:
            column_index = self.headers().index(column_name)
        except ValueError:
            return None
        if row_index >= len(self._rows):
            return None
        fields = self._rows[row_index].fields
        if column_index >= len(fields):
            return None
        return fields[column_index]

    def selected_offset(self) -> Optional[int]:
        index = self.selection.row.index
        if index is None:
            return None
        return self._rows_from + index

    def in_view(self, row_index: int) -> bool:
        return self._rows_from <= row_index < self._rows_from + self._num_rows

    def get_total_line_numbers(self) -> Optional[int]:
        return self.reader.get_total_line_numbers()

    def get_total_line_numbers_approx(self) -> Optional[int]:
        return self.reader.get_total_line_numbers_approx()

    def get_total(self) -> Optional[int]:
        if self._filter is not None:
            return self._filter.total
        total = self.reader.get_total_line_numbers()
        if total is None:
            total = self.reader.get_total_line_numbers_approx()
        return total

    def bottom_rows_from(self) -> Optional[int]:
        total = self.get_total()
        if total is None:
            return None
        return max(0, total - self._num_rows)

    # ---------- window and filters ----------
    def set_num_rows(self, num_rows: int):
        num_rows = max(0, num_rows)
        if num_rows == self._num_rows:
            return
        self._reload_window(self._rows_from, num_rows)

    def set_rows_from(self, rows_from: int):
        rows_from = max(0, rows_from)
        bottom = self.bottom_rows_from()
        if bottom is not None:
            rows_from = min(rows_from, bottom)
        if rows_from == self._rows_from:
            return
        self._reload_window(rows_from, self._num_rows)

    def set_filter(self, finder):
        rows_filter = RowsFilter.new(finder, self._rows_from, self._num_rows)
        if self._filter is not None and self._filter.indices == rows_filter.indices:
            # same rows on screen; only the counters moved
            self._filter = rows_filter
            self._finder = finder
            return
        self._do_get_rows(
            rows_from=self._rows_from,
            num_rows=self._num_rows,
            rows_filter=rows_filter,
            columns_filter=self._columns_filter,
        )
        self._finder = finder

    def reset_filter(self):
        if self._filter is None:
            return
        self._do_get_rows(
            rows_from=self._rows_from,
            num_rows=self._num_rows,
            rows_filter=None,
            columns_filter=self._columns_filter,
        )
        self._finder = None

    def set_columns_filter(self, pattern):
        columns_filter = ColumnsFilter(pattern, self.reader.headers)
        self._do_get_rows(
            rows_from=self._rows_from,
            num_rows=self._num_rows,
            rows_filter=self._filter,
            columns_filter=columns_filter,
        )

    def reset_columns_filter(self):
        self._do_get_rows(
            rows_from=self._rows_from,
            num_rows=self._num_rows,
            rows_filter=self._filter,
            columns_filter=None,
        )

    # ---------- navigation ----------
    def handle_control(self, control):
        row = self.selection.row
        if control == controls.SCROLL_DOWN:
            if row.index is not None and row.index != self._num_rows - 1:
                row.select_next()
            else:
                self._increase_rows_from(1)
        elif control == controls.SCROLL_UP:
            if row.index is not None and row.index != 0:
                row.select_previous()
            else:
                self._decrease_rows_from(1)
        elif control == controls.SCROLL_PAGE_DOWN:
            self._increase_rows_from(self._num_rows)
            row.select_first()
        elif control == controls.SCROLL_PAGE_UP:
            self._decrease_rows_from(self._num_rows)
            row.select_first()
        elif control == controls.SCROLL_TOP:
            self.set_rows_from(0)
            row.select_first()
        elif control == controls.SCROLL_BOTTOM:
            bottom = self.bottom_rows_from()
            if bottom is not None:
                self.set_rows_from(bottom)
            row.select_last()
        elif isinstance(control, controls.ScrollTo):
            self.set_rows_from(max(0, control.line - 1))
            row.select_first()

    def _increase_rows_from(self, delta: int):
        self.set_rows_from(self._rows_from + delta)

    def _decrease_rows_from(self, delta: int):
        self.set_rows_from(max(0, self._rows_from - delta))

    # ---------- reload ----------
    def _reload_window(self, rows_from: int, num_rows: int):
        rows_filter = None
        if self._finder is not None:
            # the filter covers one window of matches; follow the new window
            rows_filter = RowsFilter.new(self._finder, rows_from, num_rows)
        self._do_get_rows(
            rows_from=rows_from,
            num_rows=num_rows,
            rows_filter=rows_filter,
            columns_filter=self._columns_filter,
        )

    def _do_get_rows(self, rows_from, num_rows, rows_filter, columns_filter):
        start = time.perf_counter()
        try:
            if rows_filter is not None:
                rows = self.reader.get_rows_for_indices(rows_filter.indices)
            else:
                rows = self.reader.get_rows(rows_from, num_rows)
        except DataSourceError as exc:
            logger.warning(
                "Failed to load rows %d-%d: %s", rows_from, rows_from + num_rows, exc
            )
            raise
        elapsed = int((time.perf_counter() - start) * 1_000_000)

        if columns_filter is not None:
            rows = subset_columns(rows, columns_filter.indices)

        self._rows_from = rows_from
        self._num_rows = num_rows
        self._filter = rows_filter
        self._columns_filter = columns_filter
        self._rows = rows
        self._elapsed = elapsed

        # the old selection may point past the new rows
        self.selection.row.set_bound(len(rows))
        if rows:
            self.selection.column.set_bound(len(rows[0].fields))

        logger.debug(
            "Loaded %d rows from %d (window %d, filtered=%s) in %dus",
            len(rows),
            rows_from,
            num_rows,
            rows_filter is not None,
            elapsed,
        )
