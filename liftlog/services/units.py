"""Weight unit conversion (kg <-> lbs)."""

from __future__ import annotations

from liftlog.core.constants import KG_PER_LB, LBS_PER_KG
from liftlog.core.enums import WeightUnit


def convert_weight(value: float, from_unit: WeightUnit | str, to_unit: WeightUnit | str) -> float:
    """
    Convert a weight between units, going through kg and rounding each step to 2 decimals.
    convert_weight(10, "kg", "lbs") -> 22.05, convert_weight(50, "lbs", "kg") -> 22.68.
    Same unit returns the value untouched.
    """
    from_unit = WeightUnit(from_unit)
    to_unit = WeightUnit(to_unit)
    if from_unit == to_unit:
        return value

    kg = round(value * KG_PER_LB, 2) if from_unit == WeightUnit.LBS else value
    if to_unit == WeightUnit.LBS:
        return round(kg * LBS_PER_KG, 2)
    return kg


def to_kg(value: float, unit: WeightUnit | str) -> float:
    return convert_weight(value, unit, WeightUnit.KG)
