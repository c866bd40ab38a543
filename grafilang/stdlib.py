"""Standard library.

Native functions available to every program. They live in :data:`LIBRARY`,
the process-wide scope every interpreter session chains its top-level scope
onto; user bindings never go into it, so it survives between runs.

Each function exists under a French and an English name. Misuse raises
:class:`~grafilang.callable.NativeError`, which the interpreter turns into a
runtime error positioned on the call.


File: stdlib.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import math

from grafilang.callable import NativeError, NativeFunction
from grafilang.memory import Memory
from grafilang.values import VOID, display, is_number, type_name


def _write(out, value):
    out.push(display(value))
    return VOID


def _round(_out, value):
    if not is_number(value):
        raise NativeError(
            f"arrondir() attend un nombre ({type_name(value)} obtenu)"
        )
    if not math.isfinite(value):
        return float(value)
    # Halves round up, towards positive infinity
    return float(math.floor(value + 0.5))


def _length(_out, value):
    if not isinstance(value, (list, str)):
        raise NativeError(
            f"taille() attend un tableau ou une chaîne ({type_name(value)} obtenu)"
        )
    return float(len(value))


NATIVES = (
    (("ecrire", "write"), 1, _write),
    (("arrondir", "round"), 1, _round),
    (("taille", "length"), 1, _length),
)


def build_library() -> Memory:
    """
    Create a scope holding every native function.
    """
    library = Memory()
    for names, arity, fn in NATIVES:
        for name in names:
            library.define(name, NativeFunction(name, arity, fn))
    return library


LIBRARY = build_library()
