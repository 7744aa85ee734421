"""rowframe

An in-memory tabular data engine working on plain Python rows.

Data is handled by two objects:

* The :class:`DataFrame`, an ordered list of rows, where each row is a ``dict``
  mapping column names to values.
* The :class:`Series`, a named sequence of values, like a single column.

Frames are created from a list of rows and Series are extracted
from them to analyze the values of a column:

>>> from rowframe import DataFrame
>>> df = DataFrame([{"name": "Alice", "age": 30}, {"name": "Bob", "age": 25}])
>>> df.col("age").median()
27.5

The library is constituted by multiple components, each isolated within its own
package and each self documented:

* :mod:`rowframe.dataframe` and :mod:`rowframe.series` for the data structures.
* :mod:`rowframe.compute` for the algorithms (joins, selections, aggregations).
* :mod:`rowframe.cells` for how values of different types are treated.
* :mod:`rowframe.config` for logging and display options.
"""

from . import cells, compute, config, utils
from .cells import MISSING
from .compute import (
    ColumnFill,
    Constant,
    EmptyFrameError,
    Generator,
    IlocError,
    InvalidSliceError,
    OutOfBoundsError,
    RowFrameError,
    Slice,
)
from .dataframe import DataFrame, SchemaError
from .series import Series

__all__ = (
    "DataFrame",
    "Series",
    "MISSING",
    "Slice",
    "ColumnFill",
    "Constant",
    "Generator",
    "RowFrameError",
    "IlocError",
    "OutOfBoundsError",
    "InvalidSliceError",
    "EmptyFrameError",
    "SchemaError",
    "cells",
    "compute",
    "config",
    "utils",
)
