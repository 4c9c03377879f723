"""Yagi-Uda design engine: DL6WU long-boom model with boom correction.

Two correction paths exist. A construction preset scales every cut length by a
fixed factor. Pro mode (``mount_method`` set) instead extends every element by
``k × boom diameter`` after VK5DJ, with k derived from the mount and the
boom/element diameter ratio unless given as ``bc_factor``.
"""
import math
from typing import List, Optional

from config import (
    MIN_ELEMENTS, MAX_ELEMENTS, REFLECTOR_LENGTH_WL, REFLECTOR_TO_DRIVEN_WL,
    DRIVEN_LENGTH_WL, DL6WU_DIRECTOR_SPACING_WL, DL6WU_SPACING_LIMIT_WL,
    DL6WU_DIRECTOR_LENGTH_WL, DL6WU_DIRECTOR_LENGTH_LIMIT_WL,
    PRESET_CORRECTION_FACTORS, GAIN_BASE_DBI, GAIN_SLOPE_DBI,
    GAIN_MIN_DBI, GAIN_MAX_DBI, MAX_UNIFORM_SPACING_WL, MAX_FEED_GAP_FRACTION,
    MOUNT_ALIASES, MOUNT_BC_FACTORS, BONDED_BC_BASE, BONDED_BC_SLOPE,
    BONDED_BC_MAX, BONDED_BC_FALLBACK, SQUARE_BOOM_EQUIVALENT_DIAMETER,
)
from models import YagiInput, YagiDesign, ElementSpec, BoomCorrection
from services.errors import InvalidInputError, OUT_OF_RANGE
from services.units import wavelength_mm, require_positive


# ── Boom Correction (VK5DJ / DL6WU) ──

def bonded_bc_factor(boom_dia_mm: float, element_dia_mm: float) -> float:
    ratio = boom_dia_mm / element_dia_mm
    if ratio <= 1:
        return BONDED_BC_FALLBACK
    return min(BONDED_BC_BASE + BONDED_BC_SLOPE * math.log(ratio), BONDED_BC_MAX)

def auto_bc_factor(mount_method: str, boom_dia_mm: float, element_dia_mm: float) -> float:
    mount = MOUNT_ALIASES.get(mount_method, mount_method)
    if mount == "bonded":
        return bonded_bc_factor(boom_dia_mm, element_dia_mm)
    return MOUNT_BC_FACTORS[mount]

def boom_correction(inp: YagiInput) -> Optional[BoomCorrection]:
    """Pro mode correction, or None when a construction preset applies."""
    if inp.mount_method is None:
        return None
    effective_dia = inp.boom_diameter_mm
    if inp.boom_shape == "square":
        effective_dia *= SQUARE_BOOM_EQUIVALENT_DIAMETER
    auto = inp.bc_factor is None
    k = auto_bc_factor(inp.mount_method, inp.boom_diameter_mm, inp.element_diameter_mm) if auto else inp.bc_factor
    return BoomCorrection(
        mount_method=inp.mount_method,
        boom_shape=inp.boom_shape,
        effective_boom_diameter_mm=effective_dia,
        boom_to_element_ratio=inp.boom_diameter_mm / inp.element_diameter_mm,
        bc_factor=k,
        bc_factor_auto=auto,
        added_length_mm=k * effective_dia,
    )


# ── Validation ──

def validate_yagi_input(inp: YagiInput) -> None:
    require_positive("frequency_mhz", inp.frequency_mhz)
    n = inp.element_count
    if isinstance(n, bool) or not isinstance(n, int) or n < MIN_ELEMENTS or n > MAX_ELEMENTS:
        raise InvalidInputError(
            "element_count", OUT_OF_RANGE,
            f"element_count must be an integer in [{MIN_ELEMENTS}, {MAX_ELEMENTS}], got {n!r}",
        )
    if inp.preset not in PRESET_CORRECTION_FACTORS:
        raise InvalidInputError("preset", OUT_OF_RANGE, f"Unknown construction preset {inp.preset!r}")
    if inp.mount_method is not None:
        require_positive("element_diameter_mm", inp.element_diameter_mm)
        require_positive("boom_diameter_mm", inp.boom_diameter_mm)
        if inp.bc_factor is not None:
            if not math.isfinite(inp.bc_factor) or not 0 <= inp.bc_factor <= BONDED_BC_MAX:
                raise InvalidInputError(
                    "bc_factor", OUT_OF_RANGE,
                    f"bc_factor must be in [0, {BONDED_BC_MAX:g}], got {inp.bc_factor}",
                )
    if inp.driven_style == "straight":
        if not math.isfinite(inp.feed_gap_mm) or inp.feed_gap_mm < 0:
            raise InvalidInputError("feed_gap_mm", OUT_OF_RANGE, f"feed_gap_mm must be >= 0, got {inp.feed_gap_mm}")
        wavelength = wavelength_mm(inp.frequency_mhz)
        limit = MAX_FEED_GAP_FRACTION * driven_length_before_gap(inp, wavelength, boom_correction(inp))
        if inp.feed_gap_mm >= limit:
            raise InvalidInputError(
                "feed_gap_mm", OUT_OF_RANGE,
                f"feed_gap_mm must be below {MAX_FEED_GAP_FRACTION:.0%} of the driven element "
                f"({limit:.2f} mm at {inp.frequency_mhz} MHz), got {inp.feed_gap_mm}",
            )
    if inp.spacing_type == "uniform":
        require_positive("uniform_spacing_wl", inp.uniform_spacing_wl)
        if inp.uniform_spacing_wl > MAX_UNIFORM_SPACING_WL:
            raise InvalidInputError(
                "uniform_spacing_wl", OUT_OF_RANGE,
                f"uniform_spacing_wl must be <= {MAX_UNIFORM_SPACING_WL}, got {inp.uniform_spacing_wl}",
            )


# ── Empirical Curves ──

def director_spacing_wl(index: int) -> float:
    """DL6WU spacing of director `index` (0 = D1) from the element behind it."""
    if index < len(DL6WU_DIRECTOR_SPACING_WL):
        return DL6WU_DIRECTOR_SPACING_WL[index]
    return DL6WU_SPACING_LIMIT_WL

def director_length_wl(index: int) -> float:
    if index < len(DL6WU_DIRECTOR_LENGTH_WL):
        return DL6WU_DIRECTOR_LENGTH_WL[index]
    return DL6WU_DIRECTOR_LENGTH_LIMIT_WL

def estimate_gain_dbi(boom_length_wl: float) -> float:
    """Free-space gain from boom length: log fit to long-Yagi curves, ~2.4 dB per doubling."""
    if boom_length_wl <= 0:
        return GAIN_MIN_DBI
    gain = GAIN_BASE_DBI + GAIN_SLOPE_DBI * math.log10(boom_length_wl)
    return max(GAIN_MIN_DBI, min(GAIN_MAX_DBI, gain))


# ── Design ──

def cut_length(full_length: float, factor: float, correction: Optional[BoomCorrection]) -> float:
    added = correction.added_length_mm if correction else 0.0
    return full_length * factor + added

def driven_length_before_gap(inp: YagiInput, wavelength: float,
                             correction: Optional[BoomCorrection]) -> float:
    factor = 1.0 if correction else PRESET_CORRECTION_FACTORS[inp.preset]
    return cut_length(wavelength * DRIVEN_LENGTH_WL[inp.driven_style], factor, correction)

def design_yagi(inp: YagiInput) -> YagiDesign:
    validate_yagi_input(inp)
    wavelength = wavelength_mm(inp.frequency_mhz)
    correction = boom_correction(inp)
    k = 1.0 if correction else PRESET_CORRECTION_FACTORS[inp.preset]
    num_directors = inp.element_count - 2

    elements: List[ElementSpec] = []

    refl_half = wavelength * REFLECTOR_LENGTH_WL / 2.0
    elements.append(ElementSpec(
        name="REF", type="REF", position=0.0, spacing=0.0,
        half_length=refl_half, cut_length=cut_length(refl_half * 2.0, k, correction),
    ))

    driven_pos = wavelength * REFLECTOR_TO_DRIVEN_WL
    driven_half = wavelength * DRIVEN_LENGTH_WL[inp.driven_style] / 2.0
    driven_cut = driven_length_before_gap(inp, wavelength, correction)
    gap = None
    if inp.driven_style == "straight":
        gap = float(inp.feed_gap_mm)
        driven_cut -= gap  # both halves are cut from one length, minus the feed gap
    elements.append(ElementSpec(
        name="DE", type="DE", position=driven_pos, spacing=driven_pos,
        half_length=driven_half, cut_length=driven_cut,
        style=inp.driven_style, gap=gap,
    ))

    position = driven_pos
    for i in range(num_directors):
        if inp.spacing_type == "uniform":
            spacing = wavelength * inp.uniform_spacing_wl
        else:
            spacing = wavelength * director_spacing_wl(i)
        position += spacing
        half = wavelength * director_length_wl(i) / 2.0
        elements.append(ElementSpec(
            name=f"D{i + 1}", type="DIR", position=position, spacing=spacing,
            half_length=half, cut_length=cut_length(half * 2.0, k, correction),
        ))

    boom = elements[-1].position
    boom_wl = boom / wavelength
    return YagiDesign(
        elements=tuple(elements),
        total_boom_length=boom,
        estimated_gain=estimate_gain_dbi(boom_wl),
        frequency_mhz=float(inp.frequency_mhz),
        wavelength_mm=wavelength,
        preset=None if correction else inp.preset,
        correction_factor=k,
        boom_length_wl=boom_wl,
        boom_correction=correction,
    )


# ── Cut List ──

CUT_LIST_HEADER = ("Element", "Pos", "Space", "Half", "Cut", "Note")

def element_note(element: ElementSpec) -> str:
    if element.type != "DE":
        return "-"
    if element.style == "folded":
        return "Folded"
    if element.gap:
        return f"Gap: {element.gap:g}mm"
    return "-"

def cut_list_tsv(design: YagiDesign) -> str:
    """Tab-separated cut list, one row per element, lengths in mm to 0.1."""
    rows = ["\t".join(CUT_LIST_HEADER)]
    for el in design.elements:
        rows.append("\t".join([
            el.name,
            f"{el.position:.1f}",
            f"{el.spacing:.1f}" if el.spacing > 0 else "-",
            f"{el.half_length:.1f}",
            f"{el.cut_length:.1f}",
            element_note(el),
        ]))
    return "\n".join(rows) + "\n"
