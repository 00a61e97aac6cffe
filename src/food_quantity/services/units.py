"""Which units a food can be expressed in."""

from food_quantity.domain.foods import Food
from food_quantity.domain.quantities import QuantityUnit
from food_quantity.domain.units import UnitType, VolumeUnit, WeightUnit


def legal_units(food: Food) -> list[QuantityUnit]:
    """Return the units legal for a food, in picker order."""
    units: list[QuantityUnit] = []
    if food.can_be_measured_in_weight:
        units.extend(QuantityUnit.weight(unit) for unit in WeightUnit)
    if food.can_be_measured_in_volume:
        units.extend(QuantityUnit.volume(unit) for unit in VolumeUnit)
    if food.serving is not None:
        units.append(QuantityUnit.serving())
    for size in food.sizes:
        prefix = size.volume_prefix_unit.volume_unit if size.volume_prefix_unit else None
        units.append(QuantityUnit.for_size(size, prefix))
    return units


def is_unit_legal(unit: QuantityUnit, food: Food) -> bool:
    """Return True when the unit can be used with the food."""
    if unit.unit_type is UnitType.WEIGHT:
        return food.can_be_measured_in_weight
    if unit.unit_type is UnitType.VOLUME:
        return food.can_be_measured_in_volume
    if unit.unit_type is UnitType.SERVING:
        return food.serving is not None
    size = unit.size
    if size is None or food.size(size.id) != size:
        return False
    return size.is_volume_prefixed == (unit.size_volume_prefix_unit is not None)


def short_description(unit: QuantityUnit) -> str:
    """Return the short label for a unit, e.g. "g" or "cup, shredded"."""
    if unit.weight_unit is not None:
        return unit.weight_unit.short
    if unit.volume_unit is not None:
        return unit.volume_unit.short
    if unit.size is not None:
        if unit.size_volume_prefix_unit is not None:
            return f"{unit.size_volume_prefix_unit.short}, {unit.size.name}"
        return unit.size.name
    return "serving"


def unit_type_description(unit_type: UnitType) -> str:
    return unit_type.description
