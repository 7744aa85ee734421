"""Exchange data with Apache Arrow.

rowframe keeps data as Python rows, but a lot of the Python
data ecosystem speaks Arrow. The helpers in this module
convert a :class:`pyarrow.Table` or :class:`pyarrow.RecordBatch`
into rows and rows back into a :class:`pyarrow.Table`.

>>> import pyarrow as pa
>>> table = pa.table({"animals": ["Flamingo", "Horse"], "n_legs": [2, 4]})
>>> rows = arrow_to_rows(table)
>>> rows
[{'animals': 'Flamingo', 'n_legs': 2}, {'animals': 'Horse', 'n_legs': 4}]
>>> rows_to_arrow(rows, ["n_legs"])
pyarrow.Table
n_legs: int64
----
n_legs: [[2,4]]
"""

from typing import Any, Sequence

import pyarrow as pa

from ..cells import MISSING
from .base import Row

__all__ = ("arrow_to_rows", "rows_to_arrow", "values_to_arrow")


def arrow_to_rows(table: pa.Table | pa.RecordBatch) -> list[Row]:
    """Convert an Arrow table or record batch into a list of rows.

    Arrow nulls become ``None``.
    """
    return table.to_pylist()


def values_to_arrow(values: Sequence[Any]) -> pa.Array:
    """Convert a sequence of values into an Arrow array.

    :data:`rowframe.cells.MISSING` values become nulls,
    the type of the array is inferred by Arrow, so
    values of different kinds can't be converted.
    """
    return pa.array([None if v is MISSING else v for v in values])


def rows_to_arrow(rows: Sequence[Row], columns: Sequence[Any]) -> pa.Table:
    """Convert a list of rows into an Arrow table.

    The table will have exactly the provided columns,
    rows lacking one of them will have a null value for it.

    :param rows: The rows to convert.
    :param columns: The columns of the resulting table.
    """
    return pa.table(
        {
            str(column): values_to_arrow([row.get(column, MISSING) for row in rows])
            for column in columns
        }
    )
