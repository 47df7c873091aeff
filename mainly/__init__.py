"""Mainly language.

A minimal scripting language with two statements, ``print "<text>"`` and
``printcal <arithmetic chain>``. The :func:`run` and :func:`interpret`
helpers are exposed at the package level for convenience.


File: __init__.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from .interpreter import Interpreter, interpret, run

__all__ = ["Interpreter", "interpret", "run"]
