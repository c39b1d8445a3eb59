"""
Type J thermocouple conversions per ITS‑90.
Only depends on NumPy; safe to import anywhere.

Two API flavours share the same math:

* sentinel API (``temperature_c`` …) returns ``TC_RANGE_ERR`` for inputs
  outside the calibrated envelope, matching existing calibration code;
* checked API (``try_temperature_c`` …) returns a ``Reading`` or a
  ``RangeError`` value.

The ``*_array`` methods apply the sentinel API element‑wise to NumPy arrays.
"""
from __future__ import annotations

import numpy as np

from typej.constants import (
    C_MAX,
    C_MIN,
    COEFF_DIR,
    COEFF_INV,
    DIR_RANGE_LOWER,
    DIR_RANGE_UPPER,
    INV_RANGE_LOWER,
    INV_RANGE_UPPER,
    MV_MAX,
    MV_MIN,
    NRANGES_INV,
    TC_RANGE_ERR,
)
from typej.logger_setup import app_logger
from typej.result import RangeError, Reading, Result, from_sentinel
from typej.scaling import c_to_f, f_to_c


# --------------------------------------------------------------------------- #
# power series helpers
# --------------------------------------------------------------------------- #
def _power_series(coeffs: np.ndarray, x: float) -> float:
    """sum(coeffs[i] * x**i), accumulating the running power of x."""
    total = 0.0
    power = 1.0
    for c in coeffs:
        total += power * c
        power *= x
    return float(total)


def _power_series_array(table: np.ndarray, columns: np.ndarray, x: np.ndarray) -> np.ndarray:
    """Element‑wise ``_power_series`` where each element picks its own column."""
    total = np.zeros(x.shape)
    power = np.ones(x.shape)
    with np.errstate(over="ignore", invalid="ignore"):
        for i in range(table.shape[0]):
            total += power * table[i, columns]
            power *= x
    return total


# --------------------------------------------------------------------------- #
# converter
# --------------------------------------------------------------------------- #
class TypeJ:
    """Type J (iron–constantan) converter, -210 °C … 1200 °C."""

    def __init__(self) -> None:
        self.f_min = c_to_f(C_MIN)
        self.f_max = c_to_f(C_MAX)

    # ------------------------------------------------------------------ #
    # range predicates
    # ------------------------------------------------------------------ #
    def in_range_mv(self, mv: float) -> bool:
        return bool(MV_MIN <= mv <= MV_MAX)

    def in_range_c(self, temp_c: float) -> bool:
        return bool(C_MIN <= temp_c <= C_MAX)

    def in_range_f(self, temp_f: float) -> bool:
        return bool(self.f_min <= temp_f <= self.f_max)

    # ------------------------------------------------------------------ #
    # subrange selection
    # ------------------------------------------------------------------ #
    @staticmethod
    def inverse_column(mv: float) -> int:
        """
        Index of the inverse coefficient column for ``mv``.
        Every subrange is scanned in order and the last match is kept, so a
        shared boundary (0.000 or 42.919 mV) belongs to the higher range.
        """
        ind = 0
        for j in range(NRANGES_INV):
            if INV_RANGE_LOWER[j] <= mv <= INV_RANGE_UPPER[j]:
                ind = j
        return ind

    @staticmethod
    def direct_column(temp_c: float) -> int:
        """Index of the direct coefficient column; 760 °C stays in column 0."""
        if DIR_RANGE_LOWER[0] <= temp_c <= DIR_RANGE_UPPER[0]:
            return 0
        return 1

    # ------------------------------------------------------------------ #
    # inverse lookup: mV -> temperature
    # ------------------------------------------------------------------ #
    def temperature_c(self, mv: float, ambient_c: float | None = None) -> float:
        """
        Tip temperature in °C for a millivolt reading.

        With ``ambient_c`` the reading is cold‑junction compensated: the
        ambient's equivalent voltage is added to ``mv`` first. An out‑of‑range
        ambient adds the sentinel itself to the sum; callers relying on the
        legacy behaviour see that propagate unchanged.
        """
        if ambient_c is not None:
            return self.temperature_c(mv + self.voltage_from_celsius(ambient_c))

        if not self.in_range_mv(mv):
            app_logger.debug("mV reading %s outside [%s, %s]", mv, MV_MIN, MV_MAX)
            return TC_RANGE_ERR
        return _power_series(COEFF_INV[:, self.inverse_column(mv)], mv)

    def temperature_f(self, mv: float, ambient_f: float | None = None) -> float:
        """
        Tip temperature in °F.

        The absolute reading passes the sentinel through unconverted. The
        compensated reading converts whatever ``temperature_c`` returns, the
        sentinel included; use ``try_temperature_f`` for a checked result.
        """
        if ambient_f is not None:
            return c_to_f(self.temperature_c(mv, f_to_c(ambient_f)))

        temp = self.temperature_c(mv)
        if temp == TC_RANGE_ERR:
            return TC_RANGE_ERR
        return c_to_f(temp)

    # ------------------------------------------------------------------ #
    # direct lookup: temperature -> mV (cold‑junction compensation)
    # ------------------------------------------------------------------ #
    def voltage_from_celsius(self, ambient_c: float) -> float:
        if not self.in_range_c(ambient_c):
            app_logger.debug("temperature %s C outside [%s, %s]", ambient_c, C_MIN, C_MAX)
            return TC_RANGE_ERR
        return _power_series(COEFF_DIR[:, self.direct_column(ambient_c)], ambient_c)

    def voltage_from_fahrenheit(self, ambient_f: float) -> float:
        if not self.in_range_f(ambient_f):
            app_logger.debug("temperature %s F outside [%s, %s]", ambient_f, self.f_min, self.f_max)
            return TC_RANGE_ERR
        return self.voltage_from_celsius(f_to_c(ambient_f))

    # ------------------------------------------------------------------ #
    # checked API
    # ------------------------------------------------------------------ #
    def try_voltage_from_celsius(self, ambient_c: float) -> Result:
        return from_sentinel(self.voltage_from_celsius(ambient_c), "mV",
                             "C", ambient_c, C_MIN, C_MAX)

    def try_voltage_from_fahrenheit(self, ambient_f: float) -> Result:
        return from_sentinel(self.voltage_from_fahrenheit(ambient_f), "mV",
                             "F", ambient_f, self.f_min, self.f_max)

    def try_temperature_c(self, mv: float, ambient_c: float | None = None) -> Result:
        """Checked ``temperature_c``; a bad ambient is reported as itself."""
        if ambient_c is not None:
            cj = self.try_voltage_from_celsius(ambient_c)
            if isinstance(cj, RangeError):
                return cj
            mv = mv + cj.value
        return from_sentinel(self.temperature_c(mv), "C", "mV", mv, MV_MIN, MV_MAX)

    def try_temperature_f(self, mv: float, ambient_f: float | None = None) -> Result:
        """Checked ``temperature_f``; range errors are never unit‑converted."""
        if ambient_f is None:
            res = self.try_temperature_c(mv)
        else:
            cj = self.try_voltage_from_fahrenheit(ambient_f)
            if isinstance(cj, RangeError):
                return cj
            res = self.try_temperature_c(mv + cj.value)

        if isinstance(res, RangeError):
            return res
        return Reading(c_to_f(res.value), "F")

    # ------------------------------------------------------------------ #
    # array API
    # ------------------------------------------------------------------ #
    def temperature_c_array(self, mv) -> np.ndarray:
        """Element‑wise ``temperature_c`` (no compensation) for an array of mV."""
        mv = np.asarray(mv, dtype=float)
        columns = np.zeros(mv.shape, dtype=int)
        for j in range(NRANGES_INV):
            columns[(mv >= INV_RANGE_LOWER[j]) & (mv <= INV_RANGE_UPPER[j])] = j

        ok = (mv >= MV_MIN) & (mv <= MV_MAX)
        if not ok.all():
            app_logger.debug("%d of %d mV readings outside [%s, %s]",
                             np.count_nonzero(~ok), ok.size, MV_MIN, MV_MAX)
        return np.where(ok, _power_series_array(COEFF_INV, columns, mv), TC_RANGE_ERR)

    def temperature_f_array(self, mv) -> np.ndarray:
        temp = self.temperature_c_array(mv)
        return np.where(temp == TC_RANGE_ERR, TC_RANGE_ERR, c_to_f(temp))

    def voltage_from_celsius_array(self, temp_c) -> np.ndarray:
        temp_c = np.asarray(temp_c, dtype=float)
        columns = np.where(
            (temp_c >= DIR_RANGE_LOWER[0]) & (temp_c <= DIR_RANGE_UPPER[0]), 0, 1
        )

        ok = (temp_c >= C_MIN) & (temp_c <= C_MAX)
        if not ok.all():
            app_logger.debug("%d of %d temperatures outside [%s, %s] C",
                             np.count_nonzero(~ok), ok.size, C_MIN, C_MAX)
        return np.where(ok, _power_series_array(COEFF_DIR, columns, temp_c), TC_RANGE_ERR)


# --------------------------------------------------------------------------- #
# module‑level shortcuts for DAQ code
# --------------------------------------------------------------------------- #
_DEFAULT = TypeJ()


def type_j_temp_from_mv(voltage_mv: float | np.ndarray) -> float | np.ndarray:
    """Type‑J temperature (°C) from millivolts; sentinel where out of range."""
    if np.ndim(voltage_mv):
        return _DEFAULT.temperature_c_array(voltage_mv)
    return _DEFAULT.temperature_c(voltage_mv)


def type_j_mv_from_temp(temp_c: float | np.ndarray) -> float | np.ndarray:
    """Type‑J thermoelectric voltage (mV) for a temperature in °C."""
    if np.ndim(temp_c):
        return _DEFAULT.voltage_from_celsius_array(temp_c)
    return _DEFAULT.voltage_from_celsius(temp_c)
