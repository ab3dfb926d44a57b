"""Color vision deficiency simulation"""
from typing import Any, List, Tuple
from munsell_api.core.config import get_settings
from munsell_api.models.schemas import DeficiencyType
from . import color_math

settings = get_settings()

# deficiency -> (coloraide filter, full severity)
_FILTERS = {
    DeficiencyType.PROTANOPIA: ("protan", True),
    DeficiencyType.PROTANOMALY: ("protan", False),
    DeficiencyType.DEUTERANOPIA: ("deutan", True),
    DeficiencyType.DEUTERANOMALY: ("deutan", False),
    DeficiencyType.TRITANOPIA: ("tritan", True),
    DeficiencyType.TRITANOMALY: ("tritan", False),
    DeficiencyType.ACHROMATOPSIA: ("grayscale", True),
    DeficiencyType.ACHROMATOMALY: ("grayscale", False),
}


def filter_for(deficiency: DeficiencyType) -> Tuple[str, float]:
    """Return the coloraide filter name and amount for a deficiency"""
    name, full = _FILTERS[deficiency]
    return name, 1.0 if full else settings.anomaly_severity


def simulate(colors: List[Any], deficiency: DeficiencyType) -> List[str]:
    """
    Simulate how colors look with a vision deficiency

    Entries that do not parse as colors are dropped, so the result
    may be shorter than the input.
    """
    name, amount = filter_for(deficiency)

    simulated = []
    for value in colors:
        color = color_math.parse_color(value)
        if color is None:
            continue
        simulated.append(color_math.to_hex(color.filter(name, amount)))
    return simulated
