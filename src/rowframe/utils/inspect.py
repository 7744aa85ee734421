"""Provide insights about Python objects."""

import inspect
from typing import Any, Callable, TypeVar

R = TypeVar("R")


def get_qualname(obj: Any) -> str:
    """Get the qualified name of the given object.

    Will return the name of the object and the
    name of the module and class it belongs to.

    For functions or methods, this will return
    something like `module.class.method` or
    `module.function`.

    >>> class TestClass:
    ...   def method(self, arg):
    ...     pass
    >>> get_qualname(TestClass.method)
    'rowframe.utils.inspect.TestClass.method'
    """
    module = inspect.getmodule(obj)
    module = module.__name__ if module is not None else "builtins"
    if inspect.ismethod(obj) or inspect.isfunction(obj):
        if hasattr(obj, "__self__") and obj.__self__:
            class_name = obj.__self__.__class__.__name__
            return f"{module}.{class_name}.{obj.__name__}"
        return f"{module}.{obj.__qualname__}"
    elif inspect.isclass(obj) or inspect.isbuiltin(obj):
        return f"{module}.{obj.__name__}"
    elif inspect.ismodule(obj):
        return obj.__name__
    elif isinstance(obj, object):
        return f"{module}.{obj.__class__.__name__}"
    raise ValueError(f"Unable to detect path for object of type {type(obj)}")


def accepts_index(func: Callable) -> bool:
    """Tell if a callable can receive a second positional argument.

    Row and value callbacks are invoked as ``func(value, index)``,
    but most of the times users only care about the value and
    write ``lambda value: ...``. This detects which of the two
    forms the callable supports.

    Classes and builtins, like ``str`` or ``float``, are used
    as conversions, so they are assumed to accept only the value.

    >>> accepts_index(lambda v: v), accepts_index(lambda v, i: v)
    (False, True)
    >>> accepts_index(lambda *args: args), accepts_index(str)
    (True, False)
    """
    if inspect.isclass(func) or inspect.isbuiltin(func):
        return False

    try:
        signature = inspect.signature(func)
    except (TypeError, ValueError):
        return False

    positional = 0
    for param in signature.parameters.values():
        if param.kind is inspect.Parameter.VAR_POSITIONAL:
            return True
        if param.kind in (
            inspect.Parameter.POSITIONAL_ONLY,
            inspect.Parameter.POSITIONAL_OR_KEYWORD,
        ):
            positional += 1
    return positional >= 2


def with_index(func: Callable[..., R]) -> Callable[[Any, int], R]:
    """Adapt a callback so that it can always be invoked as ``func(value, index)``.

    >>> with_index(lambda v: v * 2)(3, 0)
    6
    >>> with_index(lambda v, i: v * i)(3, 2)
    6
    """
    if accepts_index(func):
        return func
    return lambda value, index: func(value)
