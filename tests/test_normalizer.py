"""Tests for quantity normalization."""

import pytest

from food_quantity.domain.errors import InvalidUnitForFood, ParseFailure
from food_quantity.domain.foods import FoodValue
from food_quantity.domain.quantities import QuantityUnit
from food_quantity.domain.units import (
    UnitType,
    UserUnits,
    UserVolumeUnits,
    VolumeExplicitUnit,
    VolumeUnit,
    WeightUnit,
)
from food_quantity.services.normalizer import (
    clean_amount,
    parse_amount,
    quantity_from_food_value,
    to_food_value,
    unit_from_food_value,
)
from food_quantity.services.units import legal_units
from tests.conftest import make_cheese, make_milk, make_peanut_butter


def test_size_value_keeps_size_id(peanut_butter) -> None:
    unit = QuantityUnit.for_size(peanut_butter.sizes[0])

    value = to_food_value(2, unit, peanut_butter, UserUnits.standard())

    assert value == FoodValue(value=2, unit_type=UnitType.SIZE, size_unit_id="tbsp")


def test_weight_value_stores_weight_unit(peanut_butter) -> None:
    value = to_food_value(
        30, QuantityUnit.weight(WeightUnit.OZ), peanut_butter, UserUnits.standard()
    )

    assert value.unit_type is UnitType.WEIGHT
    assert value.weight_unit is WeightUnit.OZ
    assert value.volume_explicit_unit is None
    assert value.size_unit_id is None


def test_volume_value_resolves_user_preference(milk) -> None:
    metric = UserUnits(
        volume=UserVolumeUnits.standard().with_overrides(
            {VolumeUnit.CUP: VolumeExplicitUnit.CUP_METRIC}
        )
    )
    unit = QuantityUnit.volume(VolumeUnit.CUP)

    standard_value = to_food_value(1, unit, milk, UserUnits.standard())
    metric_value = to_food_value(1, unit, milk, metric)

    assert standard_value.volume_explicit_unit is VolumeExplicitUnit.CUP_US_CUSTOMARY
    assert metric_value.volume_explicit_unit is VolumeExplicitUnit.CUP_METRIC


def test_serving_value_has_no_sub_unit(milk) -> None:
    value = to_food_value(1.5, QuantityUnit.serving(), milk, UserUnits.standard())

    assert value == FoodValue.serving(1.5)


def test_volume_prefixed_size_resolves_prefix(cheese) -> None:
    unit = QuantityUnit.for_size(cheese.sizes[0], VolumeUnit.TABLESPOON)

    value = to_food_value(3, unit, cheese, UserUnits.standard())

    assert value.size_unit_id == "shredded"
    assert (
        value.size_unit_volume_prefix_explicit_unit is VolumeExplicitUnit.TABLESPOON_US
    )


def test_volume_rejected_for_food_without_volume(peanut_butter) -> None:
    with pytest.raises(InvalidUnitForFood) as exc_info:
        to_food_value(
            1,
            QuantityUnit.volume(VolumeUnit.CUP),
            peanut_butter,
            UserUnits.standard(),
        )

    assert exc_info.value.to_dict()["code"] == "invalid_unit_for_food"


def test_unmapped_volume_unit_is_rejected(milk) -> None:
    no_preferences = UserUnits(volume=UserVolumeUnits())

    with pytest.raises(InvalidUnitForFood):
        to_food_value(1, QuantityUnit.volume(VolumeUnit.CUP), milk, no_preferences)

    value = to_food_value(250, QuantityUnit.volume(VolumeUnit.ML), milk, no_preferences)
    assert value.volume_explicit_unit is VolumeExplicitUnit.ML


def test_every_legal_unit_round_trips() -> None:
    user_units = UserUnits.standard()
    for food in (make_peanut_butter(), make_milk(), make_cheese()):
        for unit in legal_units(food):
            value = to_food_value(1.25, unit, food, user_units)
            assert unit_from_food_value(value, food) == unit


def test_unknown_size_does_not_rebuild(peanut_butter) -> None:
    assert unit_from_food_value(FoodValue.size(1, "scoop"), peanut_butter) is None
    assert quantity_from_food_value(FoodValue.size(1, "scoop"), peanut_butter) is None


def test_quantity_from_food_value(milk) -> None:
    quantity = quantity_from_food_value(
        FoodValue.volume(2, VolumeExplicitUnit.CUP_IMPERIAL), milk
    )

    assert quantity is not None
    assert quantity.value == 2
    assert quantity.unit == QuantityUnit.volume(VolumeUnit.CUP)
    assert quantity.food == milk


def test_food_value_rejects_inconsistent_units() -> None:
    with pytest.raises(ValueError):
        FoodValue(value=1, unit_type=UnitType.WEIGHT)

    with pytest.raises(ValueError):
        FoodValue(value=1, unit_type=UnitType.SERVING, weight_unit=WeightUnit.G)

    with pytest.raises(ValueError):
        FoodValue(
            value=1,
            unit_type=UnitType.VOLUME,
            volume_explicit_unit=VolumeExplicitUnit.ML,
            size_unit_volume_prefix_explicit_unit=VolumeExplicitUnit.ML,
        )


def test_parse_amount() -> None:
    assert parse_amount("") is None
    assert parse_amount("   ") is None
    assert parse_amount("2.5") == 2.5
    assert parse_amount(" 3 ") == 3

    with pytest.raises(ParseFailure):
        parse_amount("two")

    with pytest.raises(ParseFailure):
        parse_amount("nan")


def test_clean_amount() -> None:
    assert clean_amount(2.0) == "2"
    assert clean_amount(2.5) == "2.5"
    assert clean_amount(1.234) == "1.23"
    assert clean_amount(0) == "0"
