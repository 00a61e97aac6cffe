"""Conversion between quantities and storage-ready food values."""

import logging
import math

from food_quantity.domain.errors import InvalidUnitForFood, ParseFailure
from food_quantity.domain.foods import Food, FoodValue
from food_quantity.domain.quantities import Quantity, QuantityUnit
from food_quantity.domain.units import (
    UnitType,
    UserUnits,
    UserVolumeUnits,
    VolumeExplicitUnit,
    VolumeUnit,
)
from food_quantity.services.units import is_unit_legal, short_description

_logger = logging.getLogger(__name__)


def to_food_value(
    value: float, unit: QuantityUnit, food: Food, user_units: UserUnits
) -> FoodValue:
    """Normalize a value in a unit into a storage-ready food value.

    Abstract volume units (and the volume prefix of a volume-denominated
    size) are resolved through the user's volume preferences so that the
    stored value never needs resolving again.

    Raises:
        InvalidUnitForFood: If the unit is not legal for the food or a volume
            unit has no concrete mapping in the user's preferences.
    """
    return resolve_food_value(value, unit, food, user_units.volume)


def resolve_food_value(
    value: float,
    unit: QuantityUnit,
    food: Food,
    volume_units: UserVolumeUnits,
) -> FoodValue:
    """Normalize using only volume preferences."""
    if not is_unit_legal(unit, food):
        _logger.debug(
            "Rejected unit %s for food %s", short_description(unit), food.id
        )
        raise InvalidUnitForFood(
            f"{short_description(unit)} cannot be used for {food.name}",
            details={"food_id": str(food.id), "unit_type": unit.unit_type.value},
        )

    if unit.unit_type is UnitType.WEIGHT:
        return FoodValue.weight(value, unit.weight_unit)
    if unit.unit_type is UnitType.VOLUME:
        explicit = _explicit_unit(unit.volume_unit, food, volume_units)
        return FoodValue.volume(value, explicit)
    if unit.unit_type is UnitType.SERVING:
        return FoodValue.serving(value)

    prefix: VolumeExplicitUnit | None = None
    if unit.size_volume_prefix_unit is not None:
        prefix = _explicit_unit(unit.size_volume_prefix_unit, food, volume_units)
    return FoodValue.size(value, unit.size.id, prefix)


def unit_from_food_value(food_value: FoodValue, food: Food) -> QuantityUnit | None:
    """Rebuild the unit a food value was normalized from."""
    if food_value.unit_type is UnitType.WEIGHT:
        return QuantityUnit.weight(food_value.weight_unit)
    if food_value.unit_type is UnitType.VOLUME:
        return QuantityUnit.volume(food_value.volume_explicit_unit.volume_unit)
    if food_value.unit_type is UnitType.SERVING:
        return QuantityUnit.serving()

    size = food.size(food_value.size_unit_id)
    if size is None:
        return None
    prefix = food_value.size_unit_volume_prefix_explicit_unit
    return QuantityUnit.for_size(size, prefix.volume_unit if prefix else None)


def quantity_from_food_value(food_value: FoodValue, food: Food) -> Quantity | None:
    """Rebuild a quantity from a stored food value, if its unit still exists."""
    unit = unit_from_food_value(food_value, food)
    if unit is None:
        return None
    return Quantity(value=food_value.value, unit=unit, food=food)


def parse_amount(text: str) -> float | None:
    """Parse free-text amount input.

    Returns None for empty input.

    Raises:
        ParseFailure: If the text is not a finite number.
    """
    cleaned = text.strip()
    if not cleaned:
        return None
    try:
        value = float(cleaned)
    except ValueError as exc:
        raise ParseFailure(f"{text!r} is not a number") from exc
    if not math.isfinite(value):
        raise ParseFailure(f"{text!r} is not a number")
    return value


def clean_amount(value: float) -> str:
    """Format an amount with at most two decimals and no trailing zeros."""
    formatted = f"{round(value, 2):.2f}".rstrip("0").rstrip(".")
    return "0" if formatted in {"", "-0"} else formatted


def _explicit_unit(
    volume_unit: VolumeUnit, food: Food, volume_units: UserVolumeUnits
) -> VolumeExplicitUnit:
    explicit = volume_units.explicit_unit_for(volume_unit)
    if explicit is None:
        _logger.debug("No explicit volume unit for %s", volume_unit.code)
        raise InvalidUnitForFood(
            f"No {volume_unit.short} preference to measure {food.name}",
            details={"food_id": str(food.id), "volume_unit": volume_unit.code},
        )
    return explicit
