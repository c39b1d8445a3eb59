"""
Temperature‑unit scaling functions.
Pure math only, without range checks.
Works on plain floats and NumPy arrays alike.
"""
from __future__ import annotations

import numpy as np


def c_to_f(value: float | np.ndarray) -> float | np.ndarray:
    """Convert degrees Celsius to degrees Fahrenheit."""
    return value * 9.0 / 5.0 + 32.0


def f_to_c(value: float | np.ndarray) -> float | np.ndarray:
    """Convert degrees Fahrenheit to degrees Celsius."""
    return (value - 32.0) * 5.0 / 9.0
