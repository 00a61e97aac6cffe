"""Scaling a food's macros to a logged amount."""

from food_quantity.domain.meals import MealFoodItem
from food_quantity.domain.nutrition import KILOJOULES_PER_KILOCALORIE, MacroProfile
from food_quantity.domain.units import EnergyUnit
from food_quantity.services.equivalence import food_value_ratio


def scaled_macros(item: MealFoodItem) -> MacroProfile:
    """Return the macros for the item's amount.

    Macros are declared per ``food.nutrient_amount``; amounts that cannot be
    converted into that unit scale to zero.
    """
    food = item.food
    if food.nutrient_amount is None or item.amount.value <= 0:
        return MacroProfile.zero()
    factor = food_value_ratio(item.amount, food.nutrient_amount, food)
    if factor is None:
        return MacroProfile.zero()
    return food.macros.scaled(factor)


def energy_in(macros: MacroProfile, energy_unit: EnergyUnit) -> float:
    """Return the energy of a profile in the given unit."""
    if energy_unit is EnergyUnit.KJ:
        return macros.calories * KILOJOULES_PER_KILOCALORIE
    return macros.calories
