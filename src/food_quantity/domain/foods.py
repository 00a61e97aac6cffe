"""Domain models for foods and stored food amounts."""

from dataclasses import dataclass
from uuid import UUID

from food_quantity.domain.nutrition import MacroProfile
from food_quantity.domain.units import UnitType, VolumeExplicitUnit, WeightUnit


@dataclass(frozen=True)
class FoodValue:
    """Storage-ready amount with enough unit data to rebuild its unit.

    Exactly one of ``weight_unit``, ``volume_explicit_unit`` and
    ``size_unit_id`` is set, matching ``unit_type``; servings carry none.
    """

    value: float
    unit_type: UnitType
    weight_unit: WeightUnit | None = None
    volume_explicit_unit: VolumeExplicitUnit | None = None
    size_unit_id: str | None = None
    size_unit_volume_prefix_explicit_unit: VolumeExplicitUnit | None = None

    def __post_init__(self) -> None:
        populated = {
            UnitType.WEIGHT: self.weight_unit is not None,
            UnitType.VOLUME: self.volume_explicit_unit is not None,
            UnitType.SIZE: self.size_unit_id is not None,
        }
        for unit_type, is_set in populated.items():
            if is_set != (unit_type is self.unit_type):
                raise ValueError(
                    f"Food value of type {self.unit_type.value} has inconsistent units"
                )
        if (
            self.size_unit_volume_prefix_explicit_unit is not None
            and self.unit_type is not UnitType.SIZE
        ):
            raise ValueError("Only size values can carry a volume prefix")

    @classmethod
    def weight(cls, value: float, unit: WeightUnit) -> "FoodValue":
        return cls(value=value, unit_type=UnitType.WEIGHT, weight_unit=unit)

    @classmethod
    def volume(cls, value: float, unit: VolumeExplicitUnit) -> "FoodValue":
        return cls(value=value, unit_type=UnitType.VOLUME, volume_explicit_unit=unit)

    @classmethod
    def serving(cls, value: float) -> "FoodValue":
        return cls(value=value, unit_type=UnitType.SERVING)

    @classmethod
    def size(
        cls,
        value: float,
        size_id: str,
        volume_prefix: VolumeExplicitUnit | None = None,
    ) -> "FoodValue":
        return cls(
            value=value,
            unit_type=UnitType.SIZE,
            size_unit_id=size_id,
            size_unit_volume_prefix_explicit_unit=volume_prefix,
        )


@dataclass(frozen=True)
class FoodSize:
    """Named amount declared by a food, e.g. "1 scoop = 30 g".

    A size with a ``volume_prefix_unit`` is measured per volume, e.g.
    "1 cup, shredded = 100 g".
    """

    id: str
    name: str
    amount: FoodValue
    quantity: float = 1.0
    volume_prefix_unit: VolumeExplicitUnit | None = None

    def __post_init__(self) -> None:
        if self.quantity <= 0:
            raise ValueError(f"Size quantity must be positive, got {self.quantity}")

    @property
    def is_volume_prefixed(self) -> bool:
        return self.volume_prefix_unit is not None


@dataclass(frozen=True)
class FoodServing:
    """What one serving of a food amounts to."""

    amount: FoodValue

    def __post_init__(self) -> None:
        if self.amount.unit_type is UnitType.SERVING:
            raise ValueError("A serving cannot be declared in servings")


@dataclass(frozen=True)
class FoodDensity:
    """Weight of a declared volume of the food."""

    weight_grams: float
    volume_value: float
    volume_unit: VolumeExplicitUnit

    @property
    def grams_per_milliliter(self) -> float | None:
        milliliters = self.volume_value * self.volume_unit.milliliters
        if milliliters <= 0 or self.weight_grams <= 0:
            return None
        return self.weight_grams / milliliters


@dataclass(frozen=True)
class Food:
    """A food as loaded by the caller."""

    id: UUID
    name: str
    emoji: str = ""
    detail: str | None = None
    brand: str | None = None
    can_be_measured_in_weight: bool = False
    can_be_measured_in_volume: bool = False
    serving: FoodServing | None = None
    sizes: tuple[FoodSize, ...] = ()
    density: FoodDensity | None = None
    default_value: FoodValue | None = None
    nutrient_amount: FoodValue | None = None
    macros: MacroProfile = MacroProfile(0.0, 0.0, 0.0, 0.0)

    def size(self, size_id: str) -> FoodSize | None:
        """Return the declared size with the given id."""
        for size in self.sizes:
            if size.id == size_id:
                return size
        return None
