"""Wavelength and unit conversion helpers shared by the design engines."""
import math

from config import SPEED_OF_LIGHT_KM_S
from services.errors import InvalidInputError, NON_POSITIVE, NOT_FINITE


# ── Conversion Helpers ──

def wavelength_mm(frequency_mhz: float) -> float:
    return SPEED_OF_LIGHT_KM_S / frequency_mhz


# ── Validation Helpers ──

def require_positive(field: str, value: float) -> float:
    """Reject NaN/inf and anything <= 0, naming the field in the error."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidInputError(field, NOT_FINITE, f"{field} must be a number, got {value!r}")
    if not math.isfinite(value):
        raise InvalidInputError(field, NOT_FINITE, f"{field} must be finite, got {value}")
    if value <= 0:
        raise InvalidInputError(field, NON_POSITIVE, f"{field} must be positive, got {value}")
    return float(value)
