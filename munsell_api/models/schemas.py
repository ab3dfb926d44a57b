"""Pydantic schemas for API requests/responses"""
from enum import Enum
from pydantic import BaseModel, ConfigDict, Field
from typing import Any, List, Optional, Tuple


class HarmonyType(str, Enum):
    """Palette harmony rules"""
    MONOCHROMATIC = "monochromatic"
    ANALOGOUS = "analogous"
    COMPLEMENTARY = "complementary"
    TRIADIC = "triadic"
    TETRADIC = "tetradic"
    RANDOM = "random"


class ExportFormat(str, Enum):
    """Color set export formats"""
    JSON = "json"
    CSS = "css"
    PNG = "png"


class DeficiencyType(str, Enum):
    """Color vision deficiency simulations"""
    PROTANOMALY = "protanomaly"
    PROTANOPIA = "protanopia"
    DEUTERANOMALY = "deuteranomaly"
    DEUTERANOPIA = "deuteranopia"
    TRITANOMALY = "tritanomaly"
    TRITANOPIA = "tritanopia"
    ACHROMATOMALY = "achromatomaly"
    ACHROMATOPSIA = "achromatopsia"


class Swatch(BaseModel):
    """Single Munsell chip"""
    model_config = ConfigDict(frozen=True)

    hex: str = Field(..., pattern=r"^#[0-9A-Fa-f]{6}$")
    value: int = Field(..., ge=2, le=9)
    chroma: int = Field(..., ge=2, le=16)


class HueGroup(BaseModel):
    """Munsell hue page with its swatches ordered light to dark"""
    model_config = ConfigDict(frozen=True)

    hue: str
    name: str
    colors: Tuple[Swatch, ...]


class PaletteRequest(BaseModel):
    """Palette generation request"""
    type: Optional[str] = Field(None, description="Harmony type, case-insensitive")
    baseColor: Optional[str] = Field(None, description="Any CSS color, e.g. '#ff8800'")


class PaletteResponse(BaseModel):
    """Palette generation response"""
    palette: List[str]


class CompareRequest(BaseModel):
    """Two colors to compare"""
    colorA: Optional[str] = None
    colorB: Optional[str] = None


class ComparisonResult(BaseModel):
    """Contrast comparison response"""
    contrastRatio: str
    colorDifference: str
    wcagRating: str


class SimulateRequest(BaseModel):
    """Color blindness simulation request"""
    # Items are left untyped: entries that are not colors get dropped, not rejected
    colors: Optional[List[Any]] = None
    type: Optional[str] = None


class SimulateResponse(BaseModel):
    """Color blindness simulation response"""
    simulated: List[str]


class ExportRequest(BaseModel):
    """Color export request"""
    format: Optional[str] = Field(None, description="json, css or png")
    colors: Optional[List[str]] = None


class ExportJsonResponse(BaseModel):
    """JSON export payload"""
    colors: List[str]


class HealthResponse(BaseModel):
    """Health check response"""
    status: str
    version: str
    munsell_loaded: bool
    hue_groups: int
    total_swatches: int
