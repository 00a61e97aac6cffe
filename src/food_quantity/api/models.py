"""Pydantic models for the quantity API payloads."""

from typing import Literal
from uuid import UUID

from pydantic import BaseModel, Field

from food_quantity.domain.errors import InvalidUnitForFood
from food_quantity.domain.foods import (
    Food,
    FoodDensity,
    FoodServing,
    FoodSize,
    FoodValue,
)
from food_quantity.domain.nutrition import MacroProfile
from food_quantity.domain.quantities import Quantity, QuantityUnit
from food_quantity.domain.units import (
    UnitType,
    VolumeExplicitUnit,
    VolumeUnit,
    WeightUnit,
)
from food_quantity.services.units import short_description


class FoodValuePayload(BaseModel):
    """Stored food value payload."""

    value: float
    unit_type: Literal["weight", "volume", "serving", "size"]
    weight_unit: str | None = None
    volume_explicit_unit: str | None = None
    size_unit_id: str | None = None
    size_unit_volume_prefix_explicit_unit: str | None = None

    def to_domain(self) -> FoodValue:
        return FoodValue(
            value=self.value,
            unit_type=UnitType(self.unit_type),
            weight_unit=(
                WeightUnit.from_code(self.weight_unit) if self.weight_unit else None
            ),
            volume_explicit_unit=(
                VolumeExplicitUnit.from_code(self.volume_explicit_unit)
                if self.volume_explicit_unit
                else None
            ),
            size_unit_id=self.size_unit_id,
            size_unit_volume_prefix_explicit_unit=(
                VolumeExplicitUnit.from_code(self.size_unit_volume_prefix_explicit_unit)
                if self.size_unit_volume_prefix_explicit_unit
                else None
            ),
        )

    @classmethod
    def from_domain(cls, food_value: FoodValue) -> "FoodValuePayload":
        prefix = food_value.size_unit_volume_prefix_explicit_unit
        return cls(
            value=food_value.value,
            unit_type=food_value.unit_type.value,
            weight_unit=food_value.weight_unit.code if food_value.weight_unit else None,
            volume_explicit_unit=(
                food_value.volume_explicit_unit.code
                if food_value.volume_explicit_unit
                else None
            ),
            size_unit_id=food_value.size_unit_id,
            size_unit_volume_prefix_explicit_unit=prefix.code if prefix else None,
        )


class FoodSizePayload(BaseModel):
    """Food size payload."""

    id: str
    name: str
    amount: FoodValuePayload
    quantity: float = Field(default=1.0, gt=0)
    volume_prefix_unit: str | None = None


class FoodDensityPayload(BaseModel):
    """Food density payload."""

    weight_grams: float
    volume_value: float
    volume_unit: str


class MacroPayload(BaseModel):
    """Macronutrient payload."""

    calories: float = 0.0
    protein_g: float = 0.0
    fat_g: float = 0.0
    carbs_g: float = 0.0


class FoodPayload(BaseModel):
    """Food payload as loaded by the caller."""

    id: UUID
    name: str
    emoji: str = ""
    detail: str | None = None
    brand: str | None = None
    can_be_measured_in_weight: bool = False
    can_be_measured_in_volume: bool = False
    serving: FoodValuePayload | None = None
    sizes: list[FoodSizePayload] = Field(default_factory=list)
    density: FoodDensityPayload | None = None
    default_value: FoodValuePayload | None = None
    nutrient_amount: FoodValuePayload | None = None
    macros: MacroPayload = Field(default_factory=MacroPayload)

    def to_domain(self) -> Food:
        return Food(
            id=self.id,
            name=self.name,
            emoji=self.emoji,
            detail=self.detail,
            brand=self.brand,
            can_be_measured_in_weight=self.can_be_measured_in_weight,
            can_be_measured_in_volume=self.can_be_measured_in_volume,
            serving=FoodServing(self.serving.to_domain()) if self.serving else None,
            sizes=tuple(
                FoodSize(
                    id=size.id,
                    name=size.name,
                    amount=size.amount.to_domain(),
                    quantity=size.quantity,
                    volume_prefix_unit=(
                        VolumeExplicitUnit.from_code(size.volume_prefix_unit)
                        if size.volume_prefix_unit
                        else None
                    ),
                )
                for size in self.sizes
            ),
            density=(
                FoodDensity(
                    weight_grams=self.density.weight_grams,
                    volume_value=self.density.volume_value,
                    volume_unit=VolumeExplicitUnit.from_code(self.density.volume_unit),
                )
                if self.density
                else None
            ),
            default_value=self.default_value.to_domain() if self.default_value else None,
            nutrient_amount=(
                self.nutrient_amount.to_domain() if self.nutrient_amount else None
            ),
            macros=MacroProfile(
                calories=self.macros.calories,
                protein_g=self.macros.protein_g,
                fat_g=self.macros.fat_g,
                carbs_g=self.macros.carbs_g,
            ),
        )


class UnitPayload(BaseModel):
    """Quantity unit payload."""

    type: Literal["weight", "volume", "serving", "size"]
    weight_unit: str | None = None
    volume_unit: str | None = None
    size_id: str | None = None
    volume_prefix_unit: str | None = None

    def to_domain(self, food: Food) -> QuantityUnit:
        """Build the unit, resolving size ids against the food."""
        unit_type = UnitType(self.type)
        if unit_type is UnitType.WEIGHT:
            return QuantityUnit.weight(WeightUnit.from_code(self.weight_unit or ""))
        if unit_type is UnitType.VOLUME:
            return QuantityUnit.volume(VolumeUnit.from_code(self.volume_unit or ""))
        if unit_type is UnitType.SERVING:
            return QuantityUnit.serving()
        size = food.size(self.size_id or "")
        if size is None:
            raise InvalidUnitForFood(
                f"{food.name} has no size {self.size_id}",
                details={"food_id": str(food.id), "size_id": self.size_id},
            )
        prefix = (
            VolumeUnit.from_code(self.volume_prefix_unit)
            if self.volume_prefix_unit
            else None
        )
        return QuantityUnit.for_size(size, prefix)

    @classmethod
    def from_domain(cls, unit: QuantityUnit) -> "UnitPayload":
        return cls(
            type=unit.unit_type.value,
            weight_unit=unit.weight_unit.code if unit.weight_unit else None,
            volume_unit=unit.volume_unit.code if unit.volume_unit else None,
            size_id=unit.size.id if unit.size else None,
            volume_prefix_unit=(
                unit.size_volume_prefix_unit.code
                if unit.size_volume_prefix_unit
                else None
            ),
        )


class QuantityRequest(BaseModel):
    """A value in a unit for a food, on behalf of an optional user."""

    user_id: UUID | None = None
    food: FoodPayload
    value: float
    unit: UnitPayload


class DefaultQuantityRequest(BaseModel):
    """Request for a food's default quantity."""

    user_id: UUID | None = None
    food: FoodPayload


class QuantityPayload(BaseModel):
    """Quantity response payload."""

    value: float
    unit: UnitPayload
    description: str

    @classmethod
    def from_domain(cls, quantity: Quantity) -> "QuantityPayload":
        return cls(
            value=quantity.value,
            unit=UnitPayload.from_domain(quantity.unit),
            description=short_description(quantity.unit),
        )
