"""Moxon rectangle design engine.

Two methods are offered:

- ``design_moxon``: fixed wavelength ratios for A..E, with a wire-thickness
  velocity factor applied to the driven and reflector wire lengths.
- ``design_moxgen``: AC6LA / MoxGen third-order regression in log10(λ/d),
  fitted to NEC-2 runs. The wire thickness is already inside the fit.

Labels: A driven width, B driven tail, C gap, D reflector tail, E total depth.
"""
import math

from config import (
    MOXON_RATIOS, MOXON_END_CORRECTION, MOXON_MIN_WAVELENGTH_TO_DIAMETER,
    MOXGEN_COEFFICIENTS, MOXGEN_MIN_WAVELENGTH_TO_DIAMETER, MOXGEN_MAX_WAVELENGTH_TO_DIAMETER,
)
from models import MoxonInput, MoxonDesign
from services.errors import InvalidInputError, OUT_OF_RANGE
from services.units import wavelength_mm, require_positive


def validate_moxon_input(inp: MoxonInput) -> float:
    """Validate and return the wavelength in mm."""
    require_positive("frequency_mhz", inp.frequency_mhz)
    require_positive("wire_diameter_mm", inp.wire_diameter_mm)
    wavelength = wavelength_mm(inp.frequency_mhz)
    if wavelength / inp.wire_diameter_mm < MOXON_MIN_WAVELENGTH_TO_DIAMETER:
        raise InvalidInputError(
            "wire_diameter_mm", OUT_OF_RANGE,
            f"wire_diameter_mm {inp.wire_diameter_mm} exceeds λ/{MOXON_MIN_WAVELENGTH_TO_DIAMETER:g} "
            f"({wavelength / MOXON_MIN_WAVELENGTH_TO_DIAMETER:.1f} mm) at {inp.frequency_mhz} MHz",
        )
    return wavelength


def wire_velocity_factor(wavelength: float, wire_diameter: float) -> float:
    """End-effect shortening for a wire of the given diameter, both in mm."""
    return 1.0 - MOXON_END_CORRECTION / math.log(1.0 + wavelength / wire_diameter)


def design_moxon(inp: MoxonInput) -> MoxonDesign:
    wavelength = validate_moxon_input(inp)
    dims = {key: wavelength * ratio for key, ratio in MOXON_RATIOS.items()}
    vf = wire_velocity_factor(wavelength, inp.wire_diameter_mm)

    reflector_tail = dims["e"] - dims["b"] - dims["c"]
    return MoxonDesign(
        **dims,
        wire_length_driven=(dims["a"] + 2 * dims["b"]) * vf,
        wire_length_reflector=(dims["a"] + 2 * reflector_tail) * vf,
        frequency_mhz=float(inp.frequency_mhz),
        wire_diameter_mm=float(inp.wire_diameter_mm),
        wavelength_mm=wavelength,
        velocity_factor=vf,
    )


# ── AC6LA / MoxGen ──

def _poly(coeffs, x: float) -> float:
    return sum(c * x ** i for i, c in enumerate(coeffs))

def design_moxgen(inp: MoxonInput) -> MoxonDesign:
    wavelength = validate_moxon_input(inp)
    ratio = wavelength / inp.wire_diameter_mm
    if not MOXGEN_MIN_WAVELENGTH_TO_DIAMETER <= ratio <= MOXGEN_MAX_WAVELENGTH_TO_DIAMETER:
        raise InvalidInputError(
            "wire_diameter_mm", OUT_OF_RANGE,
            f"MoxGen fit covers λ/d from {MOXGEN_MIN_WAVELENGTH_TO_DIAMETER:g} to "
            f"{MOXGEN_MAX_WAVELENGTH_TO_DIAMETER:g}, got {ratio:.4g} "
            f"(wire {inp.wire_diameter_mm} mm at {inp.frequency_mhz} MHz)",
        )
    x = math.log10(ratio)

    width = _poly(MOXGEN_COEFFICIENTS["width"], x) * wavelength
    reflector_tail = _poly(MOXGEN_COEFFICIENTS["reflector_tail"], x) * wavelength
    driven_tail = _poly(MOXGEN_COEFFICIENTS["driven_tail"], x) * wavelength
    depth = _poly(MOXGEN_COEFFICIENTS["depth"], x) * wavelength
    gap = depth - driven_tail - reflector_tail

    return MoxonDesign(
        a=width, b=driven_tail, c=gap, d=reflector_tail, e=depth,
        wire_length_driven=width + 2 * driven_tail,
        wire_length_reflector=width + 2 * reflector_tail,
        frequency_mhz=float(inp.frequency_mhz),
        wire_diameter_mm=float(inp.wire_diameter_mm),
        wavelength_mm=wavelength,
        velocity_factor=1.0,
        method="moxgen",
    )
