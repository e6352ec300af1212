import pandas as pd
import pytest

from data_source import CsvFileSource, DataFrameSource
from errors import SourceIOError, SourceParseError
from match_set import MatchSet
from rows_view import RowsView
import controls


def _write_csv(path, num_rows):
    lines = ["id,name,amount"]
    for i in range(num_rows):
        lines.append(f"{i},name{i},{i * 10}")
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(path)


@pytest.fixture
def csv_path(tmp_path):
    return _write_csv(tmp_path / "data.csv", 25)


def test_dataframe_source_renders_values_as_text():
    df = pd.DataFrame({"a": [1, None, 3], "b": ["x", pd.NA, "z"]})
    source = DataFrameSource(df)
    rows = source.get_rows(0, 10)
    assert source.headers == ["a", "b"]
    assert [r.record_num for r in rows] == [0, 1, 2]
    assert rows[0].fields == ["1.0", "x"]
    assert rows[1].fields == ["", ""]
    assert source.get_total_line_numbers() == 3


def test_dataframe_source_indices_follow_requested_order():
    df = pd.DataFrame({"a": range(10)})
    source = DataFrameSource(df)
    rows = source.get_rows_for_indices([7, 2, 99, 4])
    assert [r.record_num for r in rows] == [7, 2, 4]
    assert [r.fields for r in rows] == [["7"], ["2"], ["4"]]


def test_csv_source_headers_and_window(csv_path):
    source = CsvFileSource(csv_path)
    assert source.headers == ["id", "name", "amount"]
    rows = source.get_rows(5, 3)
    assert [r.record_num for r in rows] == [5, 6, 7]
    assert rows[0].fields == ["5", "name5", "50"]


def test_csv_source_keeps_values_as_strings(tmp_path):
    path = tmp_path / "zeros.csv"
    path.write_text("code,label\n007,NA\n,x\n", encoding="utf-8")
    rows = CsvFileSource(str(path)).get_rows(0, 5)
    assert rows[0].fields == ["007", "NA"]
    assert rows[1].fields == ["", "x"]


def test_csv_source_window_past_end_is_empty(csv_path):
    source = CsvFileSource(csv_path)
    assert source.get_rows(20, 10)[-1].record_num == 24
    assert source.get_rows(100, 10) == []


def test_csv_source_rows_for_indices(csv_path):
    source = CsvFileSource(csv_path)
    rows = source.get_rows_for_indices([12, 3, 40, 0])
    assert [r.record_num for r in rows] == [12, 3, 0]
    assert rows[0].fields == ["12", "name12", "120"]


@pytest.mark.parametrize(
    "text",
    [
        "id,v\n\n0,a\n1,b\n2,c\n",
        "id,v\n0,a\n\n1,b\n2,c\n",
    ],
)
def test_csv_source_blank_line_is_a_record_on_every_path(tmp_path, text):
    path = tmp_path / "blank.csv"
    path.write_text(text, encoding="utf-8")
    source = CsvFileSource(str(path))

    assert source.count_lines() == 4
    ranged = source.get_rows(2, 2)
    assert [r.record_num for r in ranged] == [2, 3]
    assert [r.fields for r in ranged] == [["1", "b"], ["2", "c"]]
    assert source.get_rows_for_indices([2, 3]) == ranged

    every = source.get_rows(0, 10)
    assert len(every) == 4
    assert source.get_rows_for_indices([3, 2, 1, 0]) == every[::-1]
    assert ["", ""] in [r.fields for r in every]


def test_csv_source_leading_blank_line_in_indexed_fetch(tmp_path):
    path = tmp_path / "blank.csv"
    path.write_text("id,v\n\n0,a\n1,b\n2,c\n", encoding="utf-8")
    rows = CsvFileSource(str(path)).get_rows_for_indices([3, 0])
    assert rows[0].record_num == 3
    assert rows[0].fields == ["2", "c"]
    assert rows[1].record_num == 0
    assert rows[1].fields == ["", ""]


def test_mask_from_frame_selects_same_rows_as_source(tmp_path):
    path = tmp_path / "blank.csv"
    path.write_text("id,v\n0,a\n\n1,b\n2,c\n", encoding="utf-8")
    df = pd.read_csv(path, dtype=str, keep_default_na=False, skip_blank_lines=False)
    source = CsvFileSource(str(path))
    source.count_lines()
    view = RowsView(source, 10)
    view.set_filter(MatchSet.from_mask(df["v"] == "b"))
    assert [r.fields for r in view.rows()] == [["1", "b"]]
    assert view.get_total() == 1


def test_csv_source_line_counts(csv_path):
    source = CsvFileSource(csv_path)
    assert source.get_total_line_numbers() is None
    assert source.get_total_line_numbers_approx() == 25
    assert source.count_lines() == 25
    assert source.get_total_line_numbers() == 25


def test_csv_source_estimate_for_large_file(tmp_path):
    path = _write_csv(tmp_path / "big.csv", 20000)
    source = CsvFileSource(path)
    approx = source.get_total_line_numbers_approx()
    assert approx is not None
    assert 15000 < approx < 25000


def test_csv_source_empty_file(tmp_path):
    path = tmp_path / "empty.csv"
    path.write_text("", encoding="utf-8")
    source = CsvFileSource(str(path))
    assert source.headers == []
    assert source.get_rows(0, 10) == []
    assert source.count_lines() == 0


def test_csv_source_missing_file_raises_io_error(tmp_path):
    with pytest.raises(SourceIOError):
        CsvFileSource(str(tmp_path / "missing.csv"))


def test_csv_source_ragged_rows_raise_parse_error(tmp_path):
    path = tmp_path / "ragged.csv"
    path.write_text("a,b\n1,2\n1,2,3,4\n", encoding="utf-8")
    source = CsvFileSource(str(path))
    with pytest.raises(SourceParseError):
        source.get_rows(0, 10)


def test_view_over_csv_source(csv_path):
    source = CsvFileSource(csv_path)
    source.count_lines()
    view = RowsView(source, 10)
    view.handle_control(controls.SCROLL_BOTTOM)
    assert view.rows_from() == 15
    assert view.selected_offset() == 24
    assert view.get_cell_value("name") == "name24"
