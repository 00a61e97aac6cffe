"""Quantity service with injected user data."""

from dataclasses import dataclass, field
from typing import Protocol

from food_quantity.domain.foods import Food, FoodValue
from food_quantity.domain.quantities import Quantity, QuantityUnit
from food_quantity.domain.units import UserUnits, UserVolumeUnits
from food_quantity.services.defaults import default_quantity
from food_quantity.services.equivalence import equivalent_quantities
from food_quantity.services.normalizer import to_food_value


class DataCollaborator(Protocol):
    """Read-only access to a user's quantity history and unit preferences."""

    def last_used_quantity(self, food: Food) -> Quantity | None:
        """Return the quantity the user last logged for a food."""

    def user_volume_units(self) -> UserVolumeUnits:
        """Return the user's volume unit preferences."""

    def user_units(self) -> UserUnits | None:
        """Return the user's unit preferences, if set."""


@dataclass
class StandardPreferences(DataCollaborator):
    """Collaborator for an anonymous user with no history."""

    volume_units: UserVolumeUnits = field(default_factory=UserVolumeUnits.standard)

    def last_used_quantity(self, food: Food) -> Quantity | None:
        return None

    def user_volume_units(self) -> UserVolumeUnits:
        return self.volume_units

    def user_units(self) -> UserUnits | None:
        return UserUnits(volume=self.volume_units)


@dataclass
class QuantityService:
    """Application service over the quantity engine for one user."""

    collaborator: DataCollaborator

    def user_units(self) -> UserUnits:
        """Return the user's units, falling back to the standard set."""
        return self.collaborator.user_units() or UserUnits.standard()

    def food_value(self, value: float, unit: QuantityUnit, food: Food) -> FoodValue:
        """Normalize a value into a storage-ready food value."""
        return to_food_value(value, unit, food, self.user_units())

    def equivalents(self, quantity: Quantity | None) -> list[Quantity]:
        """Return equivalent quantities in the user's volume units."""
        return equivalent_quantities(quantity, self.collaborator.user_volume_units())

    def default_quantity(self, food: Food | None) -> Quantity | None:
        """Return the quantity to prefill for a food, if any."""
        if food is None:
            return None
        return default_quantity(food, self.collaborator.last_used_quantity(food))
