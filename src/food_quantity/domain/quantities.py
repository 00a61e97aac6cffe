"""Transient, food-scoped quantities used for computation."""

from dataclasses import dataclass

from food_quantity.domain.foods import Food, FoodSize
from food_quantity.domain.units import UnitType, VolumeUnit, WeightUnit


@dataclass(frozen=True)
class QuantityUnit:
    """Unit of a quantity: weight, volume, serving or one of a food's sizes.

    Build instances with the class-method constructors; the fields that do
    not belong to ``unit_type`` stay ``None``.
    """

    unit_type: UnitType
    weight_unit: WeightUnit | None = None
    volume_unit: VolumeUnit | None = None
    size: FoodSize | None = None
    size_volume_prefix_unit: VolumeUnit | None = None

    def __post_init__(self) -> None:
        expected = {
            UnitType.WEIGHT: self.weight_unit is not None,
            UnitType.VOLUME: self.volume_unit is not None,
            UnitType.SIZE: self.size is not None,
        }
        for unit_type, is_set in expected.items():
            if is_set != (unit_type is self.unit_type):
                raise ValueError(f"Inconsistent {self.unit_type.value} unit")
        if self.size_volume_prefix_unit is not None and self.size is None:
            raise ValueError("Volume prefix requires a size")

    @classmethod
    def weight(cls, unit: WeightUnit) -> "QuantityUnit":
        return cls(unit_type=UnitType.WEIGHT, weight_unit=unit)

    @classmethod
    def volume(cls, unit: VolumeUnit) -> "QuantityUnit":
        return cls(unit_type=UnitType.VOLUME, volume_unit=unit)

    @classmethod
    def serving(cls) -> "QuantityUnit":
        return cls(unit_type=UnitType.SERVING)

    @classmethod
    def for_size(
        cls, size: FoodSize, volume_prefix: VolumeUnit | None = None
    ) -> "QuantityUnit":
        return cls(
            unit_type=UnitType.SIZE, size=size, size_volume_prefix_unit=volume_prefix
        )


@dataclass(frozen=True)
class Quantity:
    """A numeric value in a unit, for a specific food."""

    value: float
    unit: QuantityUnit
    food: Food
