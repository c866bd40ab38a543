"""Recursive-descent parser for Grafilang.

Expression routines live in :mod:`.expressions`, statement routines in
:mod:`.statements`; :class:`Parser` holds the token cursor they share.


File: __init__.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from .parser import Parser

__all__ = ["Parser"]
