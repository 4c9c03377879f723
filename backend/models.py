from pydantic import BaseModel, ConfigDict, Field
from typing import Literal, Optional, Tuple


Preset = Literal["metal_bonded", "metal_insulated", "pvc"]
DrivenStyle = Literal["folded", "straight"]
SpacingType = Literal["dl6wu", "uniform"]
ElementType = Literal["REF", "DE", "DIR"]
BoomShape = Literal["round", "square"]
MountMethod = Literal[
    "none", "non_metal", "above", "above_bonded",
    "insulated", "through_insulated", "bonded", "through_bonded",
]


# ── Yagi Input/Output ──
class YagiInput(BaseModel):
    model_config = ConfigDict(frozen=True)

    frequency_mhz: float
    element_count: int
    preset: Preset = Field(default="metal_bonded")
    driven_style: DrivenStyle = Field(default="folded")
    feed_gap_mm: float = Field(default=10.0)
    spacing_type: SpacingType = Field(default="dl6wu")
    uniform_spacing_wl: float = Field(default=0.2)
    # Pro mode: setting mount_method replaces the preset with a boom correction
    mount_method: Optional[MountMethod] = Field(default=None)
    element_diameter_mm: float = Field(default=4.0)
    boom_diameter_mm: float = Field(default=20.0)
    boom_shape: BoomShape = Field(default="round")
    bc_factor: Optional[float] = Field(default=None)

class ElementSpec(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    type: ElementType
    position: float
    spacing: float
    half_length: float
    cut_length: float
    style: Optional[DrivenStyle] = Field(default=None)
    gap: Optional[float] = Field(default=None)

class BoomCorrection(BaseModel):
    model_config = ConfigDict(frozen=True)

    mount_method: MountMethod
    boom_shape: BoomShape
    effective_boom_diameter_mm: float
    boom_to_element_ratio: float
    bc_factor: float
    bc_factor_auto: bool
    added_length_mm: float

class YagiDesign(BaseModel):
    model_config = ConfigDict(frozen=True)

    elements: Tuple[ElementSpec, ...]
    total_boom_length: float
    estimated_gain: float
    frequency_mhz: float
    wavelength_mm: float
    preset: Optional[Preset]
    correction_factor: float
    boom_length_wl: float
    boom_correction: Optional[BoomCorrection] = Field(default=None)


# ── Moxon Input/Output ──
class MoxonInput(BaseModel):
    model_config = ConfigDict(frozen=True)

    frequency_mhz: float
    wire_diameter_mm: float = Field(default=3.0)

class MoxonDesign(BaseModel):
    model_config = ConfigDict(frozen=True)

    a: float
    b: float
    c: float
    d: float
    e: float
    wire_length_driven: float
    wire_length_reflector: float
    frequency_mhz: float
    wire_diameter_mm: float
    wavelength_mm: float
    velocity_factor: float
    method: Literal["fixed_ratio", "moxgen"] = Field(default="fixed_ratio")


# ── Error payload ──
class InvalidInputDetail(BaseModel):
    field: str
    reason: str
    message: str
