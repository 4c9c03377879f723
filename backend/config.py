from dotenv import load_dotenv
import os
from pathlib import Path

ROOT_DIR = Path(__file__).parent
load_dotenv(ROOT_DIR / '.env')

CORS_ORIGINS = [o.strip() for o in os.environ.get('CORS_ORIGINS', '*').split(',') if o.strip()]
LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO').upper()

# Speed of light in km/s. 299792.458 / f[MHz] gives the wavelength in mm.
SPEED_OF_LIGHT_KM_S = 299792.458

# Band definitions
BAND_DEFINITIONS = {
    "10m": {"name": "10m", "center": 28.5, "start": 28.0, "end": 29.7},
    "6m": {"name": "6m", "center": 50.15, "start": 50.0, "end": 54.0},
    "4m": {"name": "4m", "center": 70.2, "start": 70.0, "end": 70.5},
    "2m": {"name": "2m", "center": 144.3, "start": 144.0, "end": 148.0},
    "1.25m": {"name": "1.25m", "center": 222.1, "start": 222.0, "end": 225.0},
    "70cm": {"name": "70cm", "center": 435.0, "start": 430.0, "end": 440.0},
    "23cm": {"name": "23cm", "center": 1296.2, "start": 1240.0, "end": 1300.0},
}


# ── Yagi (DL6WU long boom) ──

MIN_ELEMENTS = 3
MAX_ELEMENTS = 30

# Full element lengths and spacings below are fractions of a free-space wavelength.
REFLECTOR_LENGTH_WL = 0.482
REFLECTOR_TO_DRIVEN_WL = 0.200
DRIVEN_LENGTH_WL = {"folded": 0.470, "straight": 0.473}

# Spacing from the previous element for D1, D2, ...; directors past the table
# use the limit.
DL6WU_DIRECTOR_SPACING_WL = (0.075, 0.180, 0.215, 0.250, 0.280)
DL6WU_SPACING_LIMIT_WL = 0.300

DL6WU_DIRECTOR_LENGTH_WL = (
    0.440, 0.435, 0.430, 0.426, 0.423, 0.420, 0.418, 0.416, 0.414, 0.413,
)
DL6WU_DIRECTOR_LENGTH_LIMIT_WL = 0.412

# Cut length multiplier per construction preset. A boom bonded to the
# elements shortens them the most; a PVC boom leaves free-space length.
PRESET_CORRECTION_FACTORS = {
    "metal_bonded": 0.985,
    "metal_insulated": 0.995,
    "pvc": 1.000,
}

# Gain vs boom length: GAIN_BASE_DBI at a 1λ boom, GAIN_SLOPE_DBI per decade.
GAIN_BASE_DBI = 11.8
GAIN_SLOPE_DBI = 8.0
GAIN_MIN_DBI = 7.0
GAIN_MAX_DBI = 20.0

MAX_UNIFORM_SPACING_WL = 0.5

# A straight driven element's feed gap must stay below this share of its length.
MAX_FEED_GAP_FRACTION = 0.1

# Pro mode boom correction (VK5DJ / DL6WU): every element is extended by
# k × effective boom diameter. Aliases map to the four canonical mounts.
MOUNT_ALIASES = {
    "non_metal": "none",
    "above_bonded": "above",
    "through_insulated": "insulated",
    "through_bonded": "bonded",
}
MOUNT_BC_FACTORS = {"none": 0.0, "above": 0.05, "insulated": 0.3}
# Bonded: k = base + slope × ln(B/d), capped; FALLBACK when B/d <= 1
BONDED_BC_BASE = 0.35
BONDED_BC_SLOPE = 0.23
BONDED_BC_MAX = 1.0
BONDED_BC_FALLBACK = 0.7
# A square tube of side s couples like a round tube of diameter 1.18 s
SQUARE_BOOM_EQUIVALENT_DIAMETER = 1.18


# ── Moxon rectangle ──

# A: driven width, B: driven tail, C: gap, D: reflector tail, E: total depth
MOXON_RATIOS = {"a": 0.375, "b": 0.058, "c": 0.067, "d": 0.058, "e": 0.183}

# Wire thickness shortening: vf = 1 - k / ln(1 + λ/d)
MOXON_END_CORRECTION = 0.225
MOXON_MIN_WAVELENGTH_TO_DIAMETER = 10.0

# λ/d range the MoxGen regression was fitted over (d from 1e-5 λ to 1e-2 λ)
MOXGEN_MIN_WAVELENGTH_TO_DIAMETER = 1.0e2
MOXGEN_MAX_WAVELENGTH_TO_DIAMETER = 1.0e5

# AC6LA / MoxGen regression coefficients in X = log10(λ/d), constant term first
MOXGEN_COEFFICIENTS = {
    "width": (0.284203, 0.054366, -0.010186, 0.000636),
    "reflector_tail": (0.024443, 0.027038, -0.006927, 0.000624),
    "driven_tail": (0.012921, 0.027735, -0.007624, 0.000713),
    "depth": (0.170617, -0.026772, 0.004944, -0.000297),
}
