"""Runtime value helpers.

Grafilang values map onto Python objects: ``str``, ``float`` (every number is
a float), ``bool``, ``None`` for null, ``list`` for arrays and
:class:`~grafilang.callable.Callable` for functions. :data:`VOID` marks the
absence of a value, e.g. the result of a function that ended without
``retourner``.


File: values.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from grafilang.callable import Callable


class _Void:
    """Singleton type of :data:`VOID`."""

    def __repr__(self) -> str:
        return "VOID"


VOID = _Void()


def is_number(value) -> bool:
    """Return ``True`` for numbers; booleans are not numbers."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def display(value) -> str:
    """
    Return the text a value prints as.

    Integral numbers print without a fractional part, arrays print their
    elements separated by commas.
    """
    if value is VOID:
        return "undefined"
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if is_number(value):
        if float(value).is_integer():
            return str(int(value))
        return repr(float(value))
    if isinstance(value, list):
        return ",".join(display(item) for item in value)
    return str(value) if isinstance(value, str) else repr(value)


def type_name(value) -> str:
    """
    Name of the type of ``value`` as shown in error messages.
    """
    if value is VOID:
        return "vide"
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "booléen"
    if is_number(value):
        return "nombre"
    if isinstance(value, str):
        return "chaîne"
    if isinstance(value, list):
        return "tableau"
    if isinstance(value, Callable):
        return "fonction"
    return type(value).__name__


def strict_equals(left, right) -> bool:
    """
    Equality without coercion: values of different types are never equal,
    arrays and functions are only equal to themselves.
    """
    if type_name(left) != type_name(right):
        return False
    if isinstance(left, (list, Callable)):
        return left is right
    return left == right
