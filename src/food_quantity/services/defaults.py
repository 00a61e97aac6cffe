"""Default quantity for a food."""

import logging

from food_quantity.domain.foods import Food
from food_quantity.domain.quantities import Quantity
from food_quantity.services.normalizer import quantity_from_food_value
from food_quantity.services.units import is_unit_legal

_logger = logging.getLogger(__name__)


def default_quantity(food: Food, last_used: Quantity | None) -> Quantity | None:
    """Return the quantity to prefill for a food.

    The user's last-used quantity for this food wins over the food's own
    declared default. Returns None when neither is usable.
    """
    if last_used is not None:
        if last_used.food.id == food.id and is_unit_legal(last_used.unit, food):
            return Quantity(value=last_used.value, unit=last_used.unit, food=food)
        _logger.debug("Ignoring stale last-used quantity for food %s", food.id)

    if food.default_value is None:
        return None
    quantity = quantity_from_food_value(food.default_value, food)
    if quantity is None or not is_unit_legal(quantity.unit, food):
        _logger.warning("Food %s declares a default it cannot be measured in", food.id)
        return None
    return quantity
