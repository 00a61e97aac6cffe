"""Editing state for a single meal-log entry."""

import logging
from datetime import UTC, datetime
from uuid import UUID, uuid4

from food_quantity.domain.errors import InvalidUnitForFood, ParseFailure
from food_quantity.domain.foods import Food, FoodValue
from food_quantity.domain.meals import DayMeal, MealFoodItem
from food_quantity.domain.nutrition import MacroProfile
from food_quantity.domain.quantities import Quantity, QuantityUnit
from food_quantity.services.normalizer import (
    clean_amount,
    parse_amount,
    unit_from_food_value,
)
from food_quantity.services.nutrition import energy_in, scaled_macros
from food_quantity.services.quantities import QuantityService
from food_quantity.services.units import (
    is_unit_legal,
    legal_units,
    short_description,
    unit_type_description,
)

_logger = logging.getLogger(__name__)


def build_meal_food_item(  # noqa: PLR0913
    identity: UUID,
    food: Food,
    amount: FoodValue,
    eaten_at: datetime | None,
    sort_position: int,
    soft_deleted: bool,
) -> MealFoodItem:
    """Assemble an immutable meal item snapshot."""
    return MealFoodItem(
        id=identity,
        food=food,
        amount=amount,
        is_soft_deleted=soft_deleted,
        marked_as_eaten_at=eaten_at,
        sort_position=sort_position,
    )


class MealItemEditor:
    """State machine behind the "log food" form.

    Holds the food, meal slot, unit and working amount, and reassembles the
    ``MealFoodItem`` every time one of them changes. Amount text is parsed
    field by field: empty text unsets the amount, unparseable text is
    rejected and the previous amount kept.
    """

    def __init__(  # noqa: PLR0913
        self,
        quantity_service: QuantityService,
        existing_item: MealFoodItem | None = None,
        day_meal: DayMeal | None = None,
        food: Food | None = None,
        amount: FoodValue | None = None,
    ) -> None:
        self.quantity_service = quantity_service
        self.existing_item = existing_item
        self.initial_day_meal = day_meal
        self.day_meal = day_meal or DayMeal.new()
        self.food = food
        self.unit = QuantityUnit.serving()
        self._amount: float | None = 1.0
        self._amount_string = "1"
        self.meal_food_item: MealFoodItem | None = None
        self._item_id = existing_item.id if existing_item else uuid4()

        unit = unit_from_food_value(amount, food) if amount and food else None
        if amount is not None and unit is not None and self._resolves(unit, food):
            self._amount = amount.value
            self._amount_string = clean_amount(amount.value)
            self.unit = unit
        elif food is not None:
            if amount is not None:
                _logger.debug("Stored amount for food %s no longer resolves", food.id)
            self._commit(food, *self._default_state(food))
        self._refresh_item()

    @property
    def amount(self) -> float | None:
        return self._amount

    @property
    def amount_string(self) -> str:
        return self._amount_string

    @property
    def is_editing(self) -> bool:
        return self.existing_item is not None

    @property
    def navigation_title(self) -> str:
        """Return "Edit Entry", or "Log Food"/"Prep Food" by the meal time."""
        if self.is_editing:
            return "Edit Entry"
        prefix = "Log" if self.day_meal.time < datetime.now(tz=UTC) else "Prep"
        return f"{prefix} Food"

    @property
    def save_button_title(self) -> str:
        return "Save" if self.is_editing else "Add"

    @property
    def amount_header(self) -> str:
        return unit_type_description(self.unit.unit_type)

    @property
    def amount_is_valid(self) -> bool:
        return self._amount is not None and self._amount > 0

    @property
    def is_dirty(self) -> bool:
        """Return True when saving would change anything."""
        existing = self.existing_item
        if existing is None:
            return self.amount_is_valid
        food_id = self.food.id if self.food else None
        initial_meal_id = self.initial_day_meal.id if self.initial_day_meal else None
        return (
            existing.food.id != food_id
            or (existing.amount != self.amount_value and self.amount_is_valid)
            or initial_meal_id != self.day_meal.id
        )

    @property
    def amount_value(self) -> FoodValue | None:
        """Return the working amount normalized for storage."""
        if self.food is None:
            return None
        return self.quantity_service.food_value(
            self._amount or 0.0, self.unit, self.food
        )

    @property
    def current_quantity(self) -> Quantity | None:
        if self.food is None or self._amount is None:
            return None
        return Quantity(value=self._amount, unit=self.unit, food=self.food)

    @property
    def equivalent_quantities(self) -> list[Quantity]:
        return self.quantity_service.equivalents(self.current_quantity)

    @property
    def amount_title(self) -> str | None:
        if self._amount is None:
            return None
        return f"{clean_amount(self._amount)} {short_description(self.unit)}"

    @property
    def macros(self) -> MacroProfile:
        if self.meal_food_item is None:
            return MacroProfile.zero()
        return scaled_macros(self.meal_food_item)

    @property
    def energy_amount(self) -> float:
        """Return the item's energy in the user's energy unit."""
        return energy_in(self.macros, self.quantity_service.user_units().energy)

    def set_food(self, food: Food) -> None:
        """Switch food and reset the amount to its default.

        Raises:
            InvalidUnitForFood: If the food has no unit the user can measure
                it in. The editor is left unchanged.
        """
        self._commit(food, *self._default_state(food))
        self._refresh_item()

    def set_amount(self, value: float | None) -> None:
        self._amount = value
        self._amount_string = clean_amount(value) if value is not None else ""
        self._refresh_item()

    def set_unit(self, unit: QuantityUnit) -> None:
        self.pick_unit(unit)

    def set_amount_string(self, text: str) -> bool:
        """Apply typed amount text; return False when it was rejected."""
        try:
            value = parse_amount(text)
        except ParseFailure as exc:
            _logger.debug("Rejected amount input: %s", exc)
            return False
        self._amount = value
        self._amount_string = text
        self._refresh_item()
        return True

    def pick_unit(self, unit: QuantityUnit) -> None:
        """Use a unit picked by the user.

        Raises:
            InvalidUnitForFood: If no food is chosen, the food cannot be
                measured in the unit, or the user has no mapping for it.
        """
        if self.food is None or not self._resolves(unit, self.food):
            raise InvalidUnitForFood(
                f"{short_description(unit)} cannot be used here",
                details={"unit_type": unit.unit_type.value},
            )
        self.unit = unit
        self._refresh_item()

    def pick_quantity(self, quantity: Quantity) -> None:
        """Adopt an equivalent quantity picked by the user."""
        self.pick_unit(quantity.unit)
        self.set_amount(quantity.value)

    def pick_day_meal(self, day_meal: DayMeal) -> None:
        self.day_meal = day_meal

    def step_amount(self, step: int) -> None:
        self.set_amount((self._amount or 0.0) + step)

    def amount_can_be_stepped(self, step: int) -> bool:
        return (self._amount or 0.0) + step > 0

    def _default_state(self, food: Food) -> tuple[float | None, QuantityUnit]:
        """Return the amount and unit a food starts with, without applying them.

        A default the user's volume preferences cannot resolve counts as no
        default: the amount is unset and the unit is the current one when it
        still resolves, else the first legal unit that does.
        """
        quantity = self.quantity_service.default_quantity(food)
        if quantity is not None and self._resolves(quantity.unit, food):
            return quantity.value, quantity.unit
        if quantity is not None:
            _logger.debug("Default quantity for food %s does not resolve", food.id)
        if self._resolves(self.unit, food):
            return None, self.unit
        for unit in legal_units(food):
            if self._resolves(unit, food):
                return None, unit
        raise InvalidUnitForFood(
            f"{food.name} has no units it can be measured in",
            details={"food_id": str(food.id)},
        )

    def _commit(self, food: Food, amount: float | None, unit: QuantityUnit) -> None:
        self.food = food
        self.unit = unit
        self._amount = amount
        self._amount_string = clean_amount(amount) if amount is not None else ""

    def _resolves(self, unit: QuantityUnit, food: Food) -> bool:
        if not is_unit_legal(unit, food):
            return False
        try:
            self.quantity_service.food_value(1.0, unit, food)
        except InvalidUnitForFood:
            return False
        return True

    def _refresh_item(self) -> None:
        if self.food is None:
            return
        existing = self.existing_item
        self.meal_food_item = build_meal_food_item(
            identity=self._item_id,
            food=self.food,
            amount=self.quantity_service.food_value(
                self._amount or 0.0, self.unit, self.food
            ),
            eaten_at=existing.marked_as_eaten_at if existing else None,
            sort_position=existing.sort_position if existing else 1,
            soft_deleted=existing.is_soft_deleted if existing else False,
        )
