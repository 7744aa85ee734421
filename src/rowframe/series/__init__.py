"""Series, named sequences of values.

A Series is the equivalent of a single column of a table:
a sequence of values with a name. Series are usually obtained
from a :class:`rowframe.DataFrame` through its ``col`` method,
but they can also be created directly::

    >>> from rowframe import Series
    >>> ages = Series([30, 25, None, 41], "age")
    >>> ages.mean()
    32.0
    >>> ages.fill_nullish(0).to_array()
    [30, 25, 0, 41]

Values of a Series can be of any type, and they don't need to be
all of the same type. Operations that deal with numbers, like statistics,
will only consider the values that are numbers.
"""

from .series import Series

__all__ = ("Series",)
