"""Equivalent amounts of a quantity in every other unit its food supports."""

import logging
from dataclasses import dataclass

from food_quantity.domain.errors import InvalidUnitForFood
from food_quantity.domain.foods import Food, FoodValue
from food_quantity.domain.quantities import Quantity, QuantityUnit
from food_quantity.domain.units import UnitType, UserVolumeUnits
from food_quantity.services.normalizer import resolve_food_value
from food_quantity.services.units import legal_units

_MAX_DEPTH = 6

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _Base:
    grams: float | None
    milliliters: float | None

    def scaled(self, factor: float) -> "_Base":
        return _Base(
            grams=None if self.grams is None else self.grams * factor,
            milliliters=None if self.milliliters is None else self.milliliters * factor,
        )


def equivalent_quantities(
    quantity: Quantity | None, user_volume_units: UserVolumeUnits
) -> list[Quantity]:
    """Return the quantity expressed in every other legal unit of its food.

    Results are ordered weight, volume, serving, then sizes in the food's
    declared order. Units that cannot be reached from the quantity (no
    density, no volume preference, cyclic sizes) are left out. An absent or
    non-positive quantity has no equivalents.
    """
    if quantity is None or quantity.value <= 0:
        return []
    source = _quantity_base(quantity, user_volume_units)
    if source is None:
        return []

    equivalents: list[Quantity] = []
    for unit in legal_units(quantity.food):
        if unit == quantity.unit:
            continue
        value = _value_in_unit(source, unit, quantity.food, user_volume_units)
        if value is not None:
            equivalents.append(Quantity(value=value, unit=unit, food=quantity.food))
    return equivalents


def convert(
    quantity: Quantity, unit: QuantityUnit, user_volume_units: UserVolumeUnits
) -> Quantity | None:
    """Express a quantity in another unit, or None when undefined."""
    if unit == quantity.unit:
        return quantity
    source = _quantity_base(quantity, user_volume_units)
    if source is None:
        return None
    value = _value_in_unit(source, unit, quantity.food, user_volume_units)
    if value is None:
        return None
    return Quantity(value=value, unit=unit, food=quantity.food)


def food_value_in_grams(food_value: FoodValue, food: Food) -> float | None:
    base = _food_value_base(food_value, food, depth=0)
    return None if base is None else base.grams


def food_value_in_milliliters(food_value: FoodValue, food: Food) -> float | None:
    base = _food_value_base(food_value, food, depth=0)
    return None if base is None else base.milliliters


def food_value_ratio(
    numerator: FoodValue, denominator: FoodValue, food: Food
) -> float | None:
    """Return how many of ``denominator`` fit in ``numerator``."""
    top = _food_value_base(numerator, food, depth=0)
    bottom = _food_value_base(denominator, food, depth=0)
    if top is None or bottom is None:
        return None
    return _ratio(top, bottom)


def _quantity_base(
    quantity: Quantity, user_volume_units: UserVolumeUnits
) -> _Base | None:
    try:
        food_value = resolve_food_value(
            quantity.value, quantity.unit, quantity.food, user_volume_units
        )
    except InvalidUnitForFood as exc:
        _logger.debug("No equivalents for unresolvable quantity: %s", exc)
        return None
    return _food_value_base(food_value, quantity.food, depth=0)


def _value_in_unit(
    source: _Base,
    unit: QuantityUnit,
    food: Food,
    user_volume_units: UserVolumeUnits,
) -> float | None:
    try:
        one = resolve_food_value(1.0, unit, food, user_volume_units)
    except InvalidUnitForFood:
        return None
    target = _food_value_base(one, food, depth=0)
    if target is None:
        return None
    return _ratio(source, target)


def _ratio(source: _Base, target: _Base) -> float | None:
    if source.grams is not None and target.grams:
        return source.grams / target.grams
    if source.milliliters is not None and target.milliliters:
        return source.milliliters / target.milliliters
    return None


def _food_value_base(food_value: FoodValue, food: Food, depth: int) -> _Base | None:
    if depth > _MAX_DEPTH:
        return None
    density = food.density.grams_per_milliliter if food.density else None

    if food_value.unit_type is UnitType.WEIGHT:
        grams = food_value.value * food_value.weight_unit.grams
        return _Base(grams=grams, milliliters=grams / density if density else None)

    if food_value.unit_type is UnitType.VOLUME:
        milliliters = food_value.value * food_value.volume_explicit_unit.milliliters
        return _Base(
            grams=milliliters * density if density else None, milliliters=milliliters
        )

    if food_value.unit_type is UnitType.SERVING:
        if food.serving is None:
            return None
        serving = _food_value_base(food.serving.amount, food, depth + 1)
        return None if serving is None else serving.scaled(food_value.value)

    size = food.size(food_value.size_unit_id)
    if size is None:
        return None
    count = food_value.value
    prefix = food_value.size_unit_volume_prefix_explicit_unit
    if prefix is not None:
        if size.volume_prefix_unit is None:
            return None
        count *= prefix.milliliters / size.volume_prefix_unit.milliliters
    amount = _food_value_base(size.amount, food, depth + 1)
    return None if amount is None else amount.scaled(count / size.quantity)
