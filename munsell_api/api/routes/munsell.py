"""Munsell reference data routes"""
from fastapi import APIRouter, HTTPException
from typing import List
from munsell_api.models.schemas import HueGroup
from munsell_api.services.munsell_data import munsell_table

router = APIRouter(tags=["munsell"])


@router.get("/munsell-data", response_model=List[HueGroup])
async def get_munsell_data():
    """Get the full Munsell chart, hue groups in chart order"""
    return list(munsell_table.get_all())


@router.get("/munsell-data/{hue}", response_model=HueGroup)
async def get_hue_group(hue: str):
    """
    Get a single hue page

    - **hue**: Munsell hue code (e.g. "5YR"), case-insensitive
    """
    group = munsell_table.get_by_hue(hue)
    if not group:
        raise HTTPException(status_code=404, detail="Hue not found")
    return group
