"""Contracts shared by every value stored in a Series or DataFrame.

Rows and Series can hold values of any type, a single column
might mix numbers, strings, booleans and missing values.
Operations like aggregations or fills need to know how to
treat each of those values, so this module provides a single
place where a value gets classified.

Each value (a *cell*) belongs to exactly one :class:`CellKind`:

>>> classify(3.5)
<CellKind.NUMBER: 'number'>
>>> classify("3.5")
<CellKind.TEXT: 'text'>
>>> classify(True)
<CellKind.BOOLEAN: 'boolean'>
>>> classify(None)
<CellKind.MISSING: 'missing'>
>>> classify([1, 2])
<CellKind.OTHER: 'other'>

Missing values come in two flavours. ``None`` is the null value,
explicitly stored by the user or produced by operations like joins
that have no value to provide. :data:`MISSING` is the value of
a key that a row doesn't have at all, it's what you get when
projecting a column out of rows that don't share the same keys:

>>> MISSING
undefined
>>> bool(MISSING)
False
"""

import enum
import math
from typing import Any

__all__ = (
    "MISSING",
    "CellKind",
    "classify",
    "is_number",
    "is_valid_number",
    "is_nan",
    "is_truthy",
    "same_value",
    "hash_key",
    "FALSEY_VALUES",
    "NULLISH_VALUES",
)


class _MissingType:
    """Type of the :data:`MISSING` singleton."""

    _instance = None

    def __new__(cls) -> "_MissingType":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "undefined"

    __str__ = __repr__

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "MISSING"


MISSING = _MissingType()
"""Value of a column that a row doesn't have."""


class CellKind(enum.Enum):
    """The kinds of value a cell can hold."""

    NUMBER = "number"
    TEXT = "text"
    BOOLEAN = "boolean"
    MISSING = "missing"
    OTHER = "other"


def classify(value: Any) -> CellKind:
    """Detect the :class:`CellKind` of a value.

    ``bool`` is a subclass of ``int`` in Python, so it has to be
    checked first or booleans would be treated as numbers.
    NaN and infinities are numbers, they just aren't *valid*
    numbers, see :func:`is_valid_number`.
    """
    if value is None or value is MISSING:
        return CellKind.MISSING
    if isinstance(value, bool):
        return CellKind.BOOLEAN
    if isinstance(value, (int, float)):
        return CellKind.NUMBER
    if isinstance(value, str):
        return CellKind.TEXT
    return CellKind.OTHER


def is_number(value: Any) -> bool:
    """Check if the value is a number, including NaN and infinities."""
    return classify(value) is CellKind.NUMBER


def is_valid_number(value: Any) -> bool:
    """Check if the value is a finite, non NaN, number.

    Integers are always finite, even when too large to fit a float.

    >>> [is_valid_number(v) for v in (1, 2.5, float("nan"), float("inf"), "1", True)]
    [True, True, False, False, False, False]
    >>> is_valid_number(10**400)
    True
    """
    if not is_number(value):
        return False
    return isinstance(value, int) or math.isfinite(value)


def is_nan(value: Any) -> bool:
    """Check if the value is a NaN float."""
    return isinstance(value, float) and math.isnan(value)


def is_truthy(value: Any) -> bool:
    """Tell if a value is considered set.

    Missing values, NaN, zero, the empty string and ``False``
    are not truthy. Any other value is, including empty
    containers, as they are still a value that was provided.

    >>> [is_truthy(v) for v in (None, MISSING, float("nan"), 0, "", False)]
    [False, False, False, False, False, False]
    >>> [is_truthy(v) for v in (1, "a", True, [], {})]
    [True, True, True, True, True]
    """
    kind = classify(value)
    if kind is CellKind.MISSING:
        return False
    if kind is CellKind.NUMBER:
        return not is_nan(value) and value != 0
    if kind in (CellKind.TEXT, CellKind.BOOLEAN):
        return bool(value)
    return True


def same_value(value: Any, target: Any) -> bool:
    """Strict equality used when looking for values to replace.

    Differently from ``==``, booleans never match numbers
    (``0 == False`` is true in Python) and NaN matches NaN.
    Numbers match regardless of being ``int`` or ``float``.

    >>> same_value(0, False), same_value(0, 0.0), same_value(float("nan"), float("nan"))
    (False, True, True)
    >>> same_value(None, MISSING)
    False
    """
    if target is None or target is MISSING:
        return value is target
    kind = classify(value)
    if kind is not classify(target):
        return False
    if kind is CellKind.NUMBER and is_nan(target):
        return is_nan(value)
    return value == target


def hash_key(value: Any) -> tuple[bool, Any]:
    """Build a dictionary key that keeps booleans apart from numbers.

    ``hash(True) == hash(1)`` and ``True == 1``, so without this
    a ``True`` key would find rows indexed under ``1``.
    NaN is never equal to itself, so all NaN values share a single key.

    >>> hash_key(float("nan")) == hash_key(float("nan"))
    True
    """
    if is_nan(value):
        return (False, _NAN_KEY)
    return (isinstance(value, bool), value)


_NAN_KEY = float("nan")

NULLISH_VALUES = (MISSING, None, float("nan"))
"""Values replaced by :meth:`rowframe.Series.fill_nullish`."""

FALSEY_VALUES = NULLISH_VALUES + (0, "", False)
"""Values replaced by :meth:`rowframe.Series.fill_falsey`."""
