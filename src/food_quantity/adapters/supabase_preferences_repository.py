"""Supabase-backed read-only user data for the quantity engine."""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import TypeVar
from uuid import UUID

from supabase import Client

from food_quantity.domain.foods import Food, FoodValue
from food_quantity.domain.quantities import Quantity
from food_quantity.domain.units import (
    EnergyUnit,
    UnitType,
    UserUnits,
    UserVolumeUnits,
    VolumeExplicitUnit,
    VolumeUnit,
    WeightUnit,
    volume_overrides_from_codes,
)
from food_quantity.services.normalizer import quantity_from_food_value
from food_quantity.services.quantities import DataCollaborator

T = TypeVar("T")

_logger = logging.getLogger(__name__)


@dataclass
class SupabasePreferencesRepository(DataCollaborator):
    """Supabase implementation of a user's quantity history and units."""

    client: Client
    user_id: UUID
    last_used_table: str = "food_last_used_quantities"
    user_settings_table: str = "user_settings"
    fallback_volume_units: UserVolumeUnits | None = None

    def last_used_quantity(self, food: Food) -> Quantity | None:
        """Return the quantity the user last logged for a food."""
        response = (
            self.client.table(self.last_used_table)
            .select("*")
            .eq("user_id", str(self.user_id))
            .eq("food_id", str(food.id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        quantity = quantity_from_food_value(parse_food_value(response.data[0]), food)
        if quantity is None:
            _logger.warning(
                "Last-used quantity for food %s refers to a missing size", food.id
            )
        return quantity

    def user_volume_units(self) -> UserVolumeUnits:
        """Return the user's volume preferences over the fallback set."""
        row = self._settings_row()
        base = self.fallback_volume_units or UserVolumeUnits.standard()
        if row is None:
            return base
        return base.with_overrides(_parse_volume_units(row.get("volume_units")))

    def user_units(self) -> UserUnits | None:
        """Return the user's unit preferences, if they have any."""
        row = self._settings_row()
        if row is None:
            return None
        base = self.fallback_volume_units or UserVolumeUnits.standard()
        energy_raw = row.get("energy_unit")
        energy = EnergyUnit.KJ if energy_raw == EnergyUnit.KJ.value else EnergyUnit.KCAL
        return UserUnits(
            volume=base.with_overrides(_parse_volume_units(row.get("volume_units"))),
            energy=energy,
        )

    def _settings_row(self) -> dict[str, object] | None:
        response = (
            self.client.table(self.user_settings_table)
            .select("volume_units, energy_unit")
            .eq("user_id", str(self.user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return response.data[0]


def parse_food_value(row: dict[str, object]) -> FoodValue:
    """Parse a stored food value row into a domain model."""
    try:
        return FoodValue(
            value=float(row["value"]),
            unit_type=UnitType(row["unit_type"]),
            weight_unit=_optional(row.get("weight_unit"), WeightUnit.from_code),
            volume_explicit_unit=_optional(
                row.get("volume_explicit_unit"), VolumeExplicitUnit.from_code
            ),
            size_unit_id=_optional(row.get("size_unit_id"), str),
            size_unit_volume_prefix_explicit_unit=_optional(
                row.get("size_unit_volume_prefix_explicit_unit"),
                VolumeExplicitUnit.from_code,
            ),
        )
    except (KeyError, TypeError, ValueError) as exc:
        raise RuntimeError(f"Malformed food value row: {exc}") from exc


def _optional(raw: object, parse: Callable[[str], T]) -> T | None:
    if raw is None or raw == "":
        return None
    return parse(str(raw))


def _parse_volume_units(raw: object) -> dict[VolumeUnit, VolumeExplicitUnit]:
    if not isinstance(raw, dict):
        return {}
    return volume_overrides_from_codes(raw)
