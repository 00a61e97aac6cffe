"""Nutrition domain models."""

from dataclasses import dataclass

KILOJOULES_PER_KILOCALORIE = 4.184


@dataclass(frozen=True)
class MacroProfile:
    """Macronutrient profile for an amount of food."""

    calories: float
    protein_g: float
    fat_g: float
    carbs_g: float

    @classmethod
    def zero(cls) -> "MacroProfile":
        return cls(0.0, 0.0, 0.0, 0.0)

    def scaled(self, factor: float) -> "MacroProfile":
        """Return the profile multiplied by a factor."""
        return MacroProfile(
            calories=self.calories * factor,
            protein_g=self.protein_g * factor,
            fat_g=self.fat_g * factor,
            carbs_g=self.carbs_g * factor,
        )
