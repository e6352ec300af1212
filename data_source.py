import contextlib
import logging
import os
from typing import Iterable, List, Optional

import pandas as pd

from errors import SourceIOError, SourceParseError
from row import Row

logger = logging.getLogger(__name__)


def _to_text(value) -> str:
    if value is None:
        return ""
    try:
        if pd.isna(value):
            return ""
    except (TypeError, ValueError):
        pass
    return str(value)


def _frame_to_rows(frame: pd.DataFrame, record_nums: Iterable[int]) -> List[Row]:
    rows = []
    for record_num, values in zip(record_nums, frame.itertuples(index=False, name=None)):
        rows.append(Row(record_num=int(record_num), fields=[_to_text(v) for v in values]))
    return rows


@contextlib.contextmanager
def _translate_errors(path: str):
    try:
        yield
    except (pd.errors.ParserError, UnicodeDecodeError) as exc:
        raise SourceParseError(f"{path}: {exc}") from exc
    except OSError as exc:
        raise SourceIOError(f"{path}: {exc}") from exc


class DataFrameSource:
    """Rows served from a DataFrame that is already in memory."""

    def __init__(self, df: pd.DataFrame):
        self.df = df
        self.headers = [str(c) for c in df.columns]

    def get_rows(self, rows_from: int, num_rows: int) -> List[Row]:
        if num_rows <= 0:
            return []
        frame = self.df.iloc[rows_from : rows_from + num_rows]
        return _frame_to_rows(frame, range(rows_from, rows_from + len(frame)))

    def get_rows_for_indices(self, indices: Iterable[int]) -> List[Row]:
        total = len(self.df)
        wanted = [int(i) for i in indices if 0 <= int(i) < total]
        if not wanted:
            return []
        frame = self.df.iloc[wanted]
        return _frame_to_rows(frame, wanted)

    def get_total_line_numbers(self) -> Optional[int]:
        return len(self.df)

    def get_total_line_numbers_approx(self) -> Optional[int]:
        return len(self.df)


class CsvFileSource:
    """Delimited file read window by window instead of loaded wholesale.

    Only the header is read up front. The exact row count is unknown until
    ``count_lines`` runs; until then an estimate is derived from the file size.

    Every line after the header is one record, blank lines included (as a row
    of empty fields), so record numbers match physical lines on every path.
    """

    SAMPLE_BYTES = 64 * 1024

    def __init__(self, path: str, sep: str = ","):
        self.path = path
        self.sep = sep
        self._total: Optional[int] = None
        self._approx: Optional[int] = None
        self.headers = self._read_headers()

    def _read_csv(self, **kwargs) -> pd.DataFrame:
        with _translate_errors(self.path):
            try:
                return pd.read_csv(
                    self.path,
                    sep=self.sep,
                    header=None,
                    dtype=str,
                    keep_default_na=False,
                    skip_blank_lines=False,
                    **kwargs,
                )
            except pd.errors.EmptyDataError:
                return pd.DataFrame()

    def _read_headers(self) -> List[str]:
        frame = self._read_csv(nrows=1)
        if frame.empty:
            return []
        return [_to_text(v) for v in frame.iloc[0].tolist()]

    def _names(self):
        # fixed width, or a leading blank line would set it to one field
        return list(range(len(self.headers))) if self.headers else None

    def get_rows(self, rows_from: int, num_rows: int) -> List[Row]:
        if num_rows <= 0:
            return []
        # +1 skips the header line
        frame = self._read_csv(
            skiprows=rows_from + 1, nrows=num_rows, names=self._names()
        )
        return _frame_to_rows(frame, range(rows_from, rows_from + len(frame)))

    def get_rows_for_indices(self, indices: Iterable[int]) -> List[Row]:
        order = [int(i) for i in indices]
        wanted = sorted(set(i for i in order if i >= 0))
        if not wanted:
            return []
        keep = {i + 1 for i in wanted}
        frame = self._read_csv(
            skiprows=lambda line: line not in keep,
            nrows=len(wanted),
            names=self._names(),
        )
        # rows come back in file order; the file may be shorter than the indices
        by_record = {row.record_num: row for row in _frame_to_rows(frame, wanted)}
        return [by_record[i] for i in order if i in by_record]

    def count_lines(self) -> int:
        total = 0
        with _translate_errors(self.path):
            try:
                reader = pd.read_csv(
                    self.path,
                    sep=self.sep,
                    usecols=[0],
                    dtype=str,
                    keep_default_na=False,
                    skip_blank_lines=False,
                    chunksize=65536,
                )
                with reader:
                    for chunk in reader:
                        total += len(chunk)
            except pd.errors.EmptyDataError:
                total = 0
        self._total = total
        logger.debug("Counted %d rows in %s", total, self.path)
        return total

    def get_total_line_numbers(self) -> Optional[int]:
        return self._total

    def get_total_line_numbers_approx(self) -> Optional[int]:
        if self._total is not None:
            return self._total
        if self._approx is None:
            self._approx = self._estimate_rows()
        return self._approx

    def _estimate_rows(self) -> Optional[int]:
        try:
            size = os.path.getsize(self.path)
            with open(self.path, "rb") as f:
                head = f.read(self.SAMPLE_BYTES)
        except OSError as exc:
            logger.warning("Unable to estimate rows for %s: %s", self.path, exc)
            return None
        newlines = head.count(b"\n")
        if len(head) < self.SAMPLE_BYTES:
            lines = newlines + (0 if head.endswith(b"\n") or not head else 1)
            return max(0, lines - 1)
        if newlines == 0:
            return None
        avg = len(head) / newlines
        return max(0, int(size / avg) - 1)
