"""Dataframe library built on top of the rowframe compute helpers.

A dataframe library is a tool designed to handle and manipulate structured data,
typically in the form of tables (i.e., rows and columns).
It allows users to explore data, apply transformations, and analyze it.

Dataframes provide a convenient way to perform operations such as filtering,
aggregation, and merging of datasets.

The rowframe DataFrame stores data as a list of rows,
each row being a Python ``dict``. Columns can be extracted
as :class:`rowframe.Series` to analyze them::

    >>> from rowframe import DataFrame
    >>> users = DataFrame([{"id": 1, "name": "Alice"}, {"id": 2, "name": "Bob"}])
    >>> ages = DataFrame([{"userId": 1, "age": 25}, {"userId": 3, "age": 30}])
    >>> joined = users.left_join(ages, this_key="id", other_key="userId")
    >>> joined.to_array()
    [{'id': 1, 'name': 'Alice', 'age': 25}, {'id': 2, 'name': 'Bob', 'age': None}]
    >>> joined.col("age").max()
    25

The algorithms behind the DataFrame operations are implemented
in the :mod:`rowframe.compute` package.
"""

from .dataframe import DataFrame, SchemaError

__all__ = ("DataFrame", "SchemaError")
