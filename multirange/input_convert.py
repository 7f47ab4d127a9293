"""Numeric text input for configuration panels.

Panel fields hand us raw strings. Plain numbers are parsed directly; anything
else is handed to SymPy so users can type expressions like ``"pi/2"`` or
``"2**10"``.
"""

from __future__ import annotations

import math
from typing import Any

import sympy as sp


def _sympy_value(obj: Any, text: str) -> float:
    try:
        value = sp.sympify(text).evalf()
    except Exception as e:
        raise ValueError(
            f"Could not convert {obj!r} to a number (neither directly nor via SymPy)."
        ) from e
    if value.is_real is not True:
        raise ValueError(f"Could not convert {obj!r}: value is not a real number.")
    return float(value)


def parse_number(obj: Any, *, integer: bool = False) -> float:
    """Convert ``obj`` to a finite real number.

    Rules:
    - numbers (not bools) are accepted as-is,
    - strings are tried with ``float()`` first, then parsed and evaluated
      with SymPy,
    - with ``integer=True`` the result must be a whole number and is
      returned as ``int``.

    Raises
    ------
    ValueError
        If the input is empty, not real, not finite, or not a whole number
        when ``integer=True``.
    """
    if isinstance(obj, bool):
        raise ValueError(f"Could not convert {obj!r}: booleans are not numbers.")

    if isinstance(obj, (int, float)):
        x = float(obj)
    elif isinstance(obj, str):
        s = obj.strip()
        if s == "":
            raise ValueError("Cannot convert empty string to a number.")
        try:
            x = float(s)
        except ValueError:
            x = _sympy_value(obj, s)
    else:
        raise ValueError(f"Could not convert {obj!r} to a number.")

    if not math.isfinite(x):
        raise ValueError(f"Could not convert {obj!r}: value is not finite.")
    if integer:
        if not x.is_integer():
            raise ValueError(f"Could not convert {obj!r} to int: value is not an exact integer.")
        return int(x)
    return x
