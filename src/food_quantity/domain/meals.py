"""Domain models for logged meal items."""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID, uuid4

from food_quantity.domain.foods import Food, FoodValue


@dataclass(frozen=True)
class DayMeal:
    """A meal slot within a day."""

    name: str
    time: datetime
    id: UUID = field(default_factory=uuid4)

    @classmethod
    def new(cls) -> "DayMeal":
        """Return a fresh meal slot starting now."""
        return cls(name="New Meal", time=datetime.now(tz=UTC))


@dataclass(frozen=True)
class MealFoodItem:
    """Snapshot of a food logged in a meal."""

    id: UUID
    food: Food
    amount: FoodValue
    is_soft_deleted: bool = False
    marked_as_eaten_at: datetime | None = None
    sort_position: int = 1
