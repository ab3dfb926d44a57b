"""Data models and schemas"""
from .schemas import *

__all__ = [
    "HarmonyType",
    "ExportFormat",
    "DeficiencyType",
    "Swatch",
    "HueGroup",
    "PaletteRequest",
    "PaletteResponse",
    "CompareRequest",
    "ComparisonResult",
    "SimulateRequest",
    "SimulateResponse",
    "ExportRequest",
    "ExportJsonResponse",
    "HealthResponse"
]
