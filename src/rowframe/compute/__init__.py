"""The rowframe Compute helpers

The compute package implements the algorithms
that the :class:`rowframe.DataFrame` and :class:`rowframe.Series`
objects rely on. Each module is in charge of one operation
and works on plain Python data: rows (``dict`` objects)
for frames and lists of values for series.

Keeping the algorithms out of the data structures
allows to know how an operation is actually executed
without having to look around too much:

* :mod:`rowframe.compute.selection` picks and omits columns of a row.
* :mod:`rowframe.compute.pagination` resolves rows positions.
* :mod:`rowframe.compute.join` joins two lists of rows.
* :mod:`rowframe.compute.aggregate` computes statistics over values.
* :mod:`rowframe.compute.datasources` converts from and to Apache Arrow.

For example joining two lists of rows:

>>> from rowframe.compute import HashJoin
>>> left = [{"id": 1, "name": "Alice"}, {"id": 2, "name": "Bob"}]
>>> right = [{"id": 2, "age": 30}]
>>> HashJoin(left, "id", right, "id", lookup_columns=["id", "age"]).rows()
[{'id': 1, 'name': 'Alice', 'age': None}, {'id': 2, 'name': 'Bob', 'age': 30}]
"""

from .aggregate import (
    Aggregation,
    MaxAggregation,
    MeanAggregation,
    MedianAggregation,
    MinAggregation,
    QuantileAggregation,
    SumAggregation,
)
from .base import ColumnFill, Constant, Generator, Row, as_column_fill
from .datasources import arrow_to_rows, rows_to_arrow, values_to_arrow
from .join import HashJoin
from .pagination import (
    EmptyFrameError,
    IlocError,
    InvalidSliceError,
    OutOfBoundsError,
    RowFrameError,
    Slice,
    resolve_indices,
)
from .selection import omit, pick

__all__ = (
    "Row",
    "ColumnFill",
    "Constant",
    "Generator",
    "as_column_fill",
    "HashJoin",
    "pick",
    "omit",
    "Slice",
    "resolve_indices",
    "RowFrameError",
    "IlocError",
    "OutOfBoundsError",
    "InvalidSliceError",
    "EmptyFrameError",
    "Aggregation",
    "SumAggregation",
    "MinAggregation",
    "MaxAggregation",
    "MeanAggregation",
    "MedianAggregation",
    "QuantileAggregation",
    "arrow_to_rows",
    "rows_to_arrow",
    "values_to_arrow",
)
