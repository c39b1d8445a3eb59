"""
Re‑export the public bits so `from typej import TypeJ`
just works without digging into sub‑modules.
"""
from .constants import C_MAX, C_MIN, MV_MAX, MV_MIN, TC_RANGE_ERR
from .result import RangeError, Reading, ThermocoupleRangeError, from_sentinel, unwrap
from .scaling import c_to_f, f_to_c
from .thermocouple import TypeJ, type_j_mv_from_temp, type_j_temp_from_mv

__all__ = [
    "C_MAX",
    "C_MIN",
    "MV_MAX",
    "MV_MIN",
    "TC_RANGE_ERR",
    "RangeError",
    "Reading",
    "ThermocoupleRangeError",
    "from_sentinel",
    "unwrap",
    "c_to_f",
    "f_to_c",
    "TypeJ",
    "type_j_mv_from_temp",
    "type_j_temp_from_mv",
]
