"""Palette generation routes"""
from fastapi import APIRouter, HTTPException
from munsell_api.models.schemas import HarmonyType, PaletteRequest, PaletteResponse
from munsell_api.services import color_math
from munsell_api.services.palette import generate_palette

router = APIRouter(tags=["palettes"])


def build_palette(request: PaletteRequest) -> PaletteResponse:
    """Validate a palette request and build the palette"""
    base = color_math.parse_color(request.baseColor)
    if not request.type or base is None:
        raise HTTPException(status_code=400, detail="Invalid type or base color")

    try:
        harmony = HarmonyType(request.type.lower())
    except ValueError:
        raise HTTPException(status_code=400, detail="Unsupported palette type")

    try:
        return PaletteResponse(palette=generate_palette(harmony, base))
    except Exception as e:
        print(f"Palette error ({harmony.value}, {request.baseColor}): {e!r}")
        raise HTTPException(status_code=500, detail="Failed to generate palette")


@router.post("/generate-palette", response_model=PaletteResponse)
async def generate_palette_route(request: PaletteRequest):
    """
    Generate a color palette

    - **type**: monochromatic, analogous, complementary, triadic, tetradic or random
    - **baseColor**: Base color (e.g. "#3366cc")
    """
    return build_palette(request)


@router.post("/color-harmony", response_model=PaletteResponse)
async def color_harmony(request: PaletteRequest):
    """Same as /generate-palette, kept for clients using the harmony name"""
    return build_palette(request)
