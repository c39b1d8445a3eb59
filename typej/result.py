"""
Result types for range‑checked conversions.

Usage
-----
res = tc.try_temperature_c(mv)
if isinstance(res, Reading):
    print(res.value, res.unit)
else:
    print(f"{res.quantity} {res.value} outside [{res.low}, {res.high}]")

value = unwrap(res)   # raises ThermocoupleRangeError on a RangeError
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from typej.constants import TC_RANGE_ERR


@dataclass(frozen=True)
class Reading:
    """A successful conversion."""
    value: float
    unit: str


@dataclass(frozen=True)
class RangeError:
    """An input outside the calibrated envelope of the thermocouple."""
    quantity: str      # "mV", "C" or "F"
    value: float
    low: float
    high: float

    def __str__(self) -> str:
        return f"{self.value} {self.quantity} outside [{self.low}, {self.high}] {self.quantity}"


Result = Union[Reading, RangeError]


class ThermocoupleRangeError(ValueError):
    """Raised by :func:`unwrap` when a conversion produced a RangeError."""

    def __init__(self, error: RangeError) -> None:
        super().__init__(str(error))
        self.error = error


def from_sentinel(value: float, unit: str, quantity: str, input_value: float,
                  low: float, high: float) -> Result:
    """
    Wrap a legacy sentinel‑style return value.
    ``quantity``/``input_value``/``low``/``high`` describe the checked input
    and are only used when ``value`` is the range‑error sentinel.
    """
    if value == TC_RANGE_ERR:
        return RangeError(quantity, input_value, low, high)
    return Reading(value, unit)


def unwrap(result: Result) -> float:
    """Return the value of a Reading, raise for a RangeError."""
    if isinstance(result, RangeError):
        raise ThermocoupleRangeError(result)
    return result.value
