"""
Centralised, edit‑in‑one‑place constants for the Type J converter.
Only passive data lives here; no imports from other project modules.

The coefficients are the ITS-90 reference values for Type J (iron–constantan)
thermocouples and must not be refitted or rounded.
"""
import numpy as np

# --- Range‑error sentinel ---
# Returned instead of a temperature / voltage when an input leaves the
# calibrated envelope. Compare with ``==``.
TC_RANGE_ERR = -99999.0

# --- Calibrated envelope ---
MV_MIN = -8.095
MV_MAX = 69.553
C_MIN = -210.0
C_MAX = 1200.0

# --- Inverse lookup (given mV, find °C) ---
# rows: power of mV (0..8), columns: mV subrange
COEFF_INV = np.array([
    [ 0.0000000E+00,  0.000000E+00, -3.11358187E+03],
    [ 1.9528268E+01,  1.978425E+01,  3.00543684E+02],
    [-1.2286185E+00, -2.001204E-01, -9.94773230E+00],
    [-1.0752178E+00,  1.036969E-02,  1.70276630E-01],
    [-5.9086933E-01, -2.549687E-04, -1.43033468E-03],
    [-1.7256713E-01,  3.585153E-06,  4.73886084E-06],
    [-2.8131513E-02, -5.344285E-08,  0.00000000E+00],
    [-2.3963370E-03,  5.099890E-10,  0.00000000E+00],
    [-8.3823321E-05,  0.000000E+00,  0.00000000E+00],
])

INV_RANGE_LOWER = np.array([-8.095,  0.000, 42.919])
INV_RANGE_UPPER = np.array([ 0.000, 42.919, 69.553])

# --- Direct lookup (given °C, find mV) ---
# rows: power of °C (0..8), columns: °C subrange
COEFF_DIR = np.array([
    [ 0.000000000000E+00,  0.296456256810E+03],
    [ 0.503811878150E-01, -0.149761277860E+01],
    [ 0.304758369300E-04,  0.317871039240E-02],
    [-0.856810657200E-07, -0.318476867010E-05],
    [ 0.132281952950E-09,  0.157208190040E-08],
    [-0.170529583370E-12, -0.306913690560E-12],
    [ 0.209480906970E-15,  0.000000000000E+00],
    [-0.125383953360E-18,  0.000000000000E+00],
    [ 0.156317256970E-22,  0.000000000000E+00],
])

DIR_RANGE_LOWER = np.array([-210.0,  760.0])
DIR_RANGE_UPPER = np.array([ 760.0, 1200.0])

NCOEFF = COEFF_INV.shape[0]
NRANGES_INV = COEFF_INV.shape[1]

for _table in (COEFF_INV, INV_RANGE_LOWER, INV_RANGE_UPPER,
               COEFF_DIR, DIR_RANGE_LOWER, DIR_RANGE_UPPER):
    _table.flags.writeable = False
del _table
