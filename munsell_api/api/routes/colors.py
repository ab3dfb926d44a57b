"""Color comparison and simulation routes"""
from fastapi import APIRouter, HTTPException
from munsell_api.models.schemas import (
    CompareRequest,
    ComparisonResult,
    DeficiencyType,
    SimulateRequest,
    SimulateResponse,
)
from munsell_api.services import color_math
from munsell_api.services.contrast import compare_colors
from munsell_api.services.vision import simulate

router = APIRouter(tags=["colors"])

_DEFICIENCY_NAMES = ", ".join(d.value for d in DeficiencyType)


@router.post("/compare-colors", response_model=ComparisonResult)
async def compare(request: CompareRequest):
    """
    Compare two colors for accessibility

    - **colorA**, **colorB**: Colors to compare (any CSS color)
    """
    color_a = color_math.parse_color(request.colorA)
    color_b = color_math.parse_color(request.colorB)
    if color_a is None or color_b is None:
        raise HTTPException(status_code=400, detail="Invalid colors")

    return compare_colors(color_a, color_b)


@router.post("/simulate-color-blind", response_model=SimulateResponse)
async def simulate_color_blind(request: SimulateRequest):
    """
    Simulate color vision deficiency

    - **colors**: Colors to transform; invalid entries are skipped
    - **type**: Deficiency name (e.g. deuteranomaly, protanopia)
    """
    if request.colors is None or not request.type:
        raise HTTPException(
            status_code=400,
            detail=f"Invalid colors array or type (use: {_DEFICIENCY_NAMES})"
        )

    try:
        deficiency = DeficiencyType(request.type)
    except ValueError:
        raise HTTPException(
            status_code=400,
            detail=f"Invalid colors array or type (use: {_DEFICIENCY_NAMES})"
        )

    return SimulateResponse(simulated=simulate(request.colors, deficiency))
