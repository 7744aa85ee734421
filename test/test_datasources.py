import pyarrow as pa
import pytest

from rowframe import DataFrame, Series
from rowframe.cells import MISSING
from rowframe.compute.datasources import arrow_to_rows, rows_to_arrow, values_to_arrow

# Mock data for testing
MOCK_PYARROW_TABLE = pa.table({"col1": [1, 4, 7], "col2": [2, 5, 8], "col3": [3, 6, 9]})

MOCK_ROWS = [
    {"col1": 1, "col2": 2, "col3": 3},
    {"col1": 4, "col2": 5, "col3": 6},
    {"col1": 7, "col2": 8, "col3": 9},
]


@pytest.mark.parametrize(
    "source",
    [MOCK_PYARROW_TABLE, MOCK_PYARROW_TABLE.to_batches()[0]],
)
def test_arrow_to_rows(source):
    assert arrow_to_rows(source) == MOCK_ROWS


def test_rows_to_arrow():
    assert rows_to_arrow(MOCK_ROWS, ["col1", "col2", "col3"]).equals(MOCK_PYARROW_TABLE)


def test_rows_to_arrow_missing_values():
    table = rows_to_arrow([{"a": 1}, {"a": MISSING}, {}], ["a"])
    assert table.column("a").to_pylist() == [1, None, None]


def test_values_to_arrow():
    array = values_to_arrow(["x", None, MISSING])
    assert array.to_pylist() == ["x", None, None]
    assert array.type == pa.string()


def test_values_to_arrow_mixed_types():
    with pytest.raises((pa.ArrowInvalid, pa.ArrowTypeError)):
        values_to_arrow([1, "one"])


@pytest.mark.parametrize(
    "source",
    [MOCK_PYARROW_TABLE, MOCK_PYARROW_TABLE.to_batches()[0]],
)
def test_dataframe_from_arrow(source):
    df = DataFrame(source)
    assert df.shape == (3, 3)
    assert df.columns == ["col1", "col2", "col3"]
    assert df.col("col2").sum() == 15


def test_dataframe_to_arrow_uses_first_row_columns():
    df = DataFrame([{"a": 1, "b": "x"}, {"a": 2, "extra": True}])
    table = df.to_arrow()
    assert table.column_names == ["a", "b"]
    assert table.column("b").to_pylist() == ["x", None]


def test_dataframe_arrow_roundtrip():
    assert DataFrame(MOCK_PYARROW_TABLE).to_arrow().equals(MOCK_PYARROW_TABLE)


def test_empty_dataframe_to_arrow():
    table = DataFrame().to_arrow()
    assert table.num_columns == 0


def test_series_to_arrow():
    assert Series([1, 2, None], "n").to_arrow().to_pylist() == [1, 2, None]
