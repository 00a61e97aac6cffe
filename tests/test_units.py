"""Tests for the unit model."""

import pytest

from food_quantity.domain.quantities import QuantityUnit
from food_quantity.domain.units import (
    UnitType,
    UserVolumeUnits,
    VolumeExplicitUnit,
    VolumeUnit,
    WeightUnit,
    volume_overrides_from_codes,
)
from food_quantity.services.units import (
    is_unit_legal,
    legal_units,
    short_description,
    unit_type_description,
)


def test_legal_units_for_weight_only_food(peanut_butter) -> None:
    units = legal_units(peanut_butter)

    types = [unit.unit_type for unit in units]
    assert types == [UnitType.WEIGHT] * len(WeightUnit) + [
        UnitType.SERVING,
        UnitType.SIZE,
    ]
    assert units[-1].size == peanut_butter.sizes[0]


def test_legal_units_orders_weight_volume_serving(milk) -> None:
    units = legal_units(milk)

    types = [unit.unit_type for unit in units]
    assert types == (
        [UnitType.WEIGHT] * len(WeightUnit)
        + [UnitType.VOLUME] * len(VolumeUnit)
        + [UnitType.SERVING]
    )


def test_legal_units_uses_declared_size_prefix(cheese) -> None:
    units = legal_units(cheese)
    sizes = [unit for unit in units if unit.unit_type is UnitType.SIZE]

    assert sizes[0].size_volume_prefix_unit is VolumeUnit.CUP
    assert sizes[1].size_volume_prefix_unit is None


def test_volume_not_legal_when_food_cannot_be_measured_in_volume(
    peanut_butter,
) -> None:
    assert not is_unit_legal(QuantityUnit.volume(VolumeUnit.CUP), peanut_butter)
    assert is_unit_legal(QuantityUnit.weight(WeightUnit.OZ), peanut_butter)


def test_serving_legal_only_with_declared_serving(cheese, milk) -> None:
    assert not is_unit_legal(QuantityUnit.serving(), cheese)
    assert is_unit_legal(QuantityUnit.serving(), milk)


def test_size_from_another_food_is_not_legal(peanut_butter, cheese) -> None:
    unit = QuantityUnit.for_size(peanut_butter.sizes[0])

    assert not is_unit_legal(unit, cheese)


def test_volume_prefixed_size_requires_prefix(cheese) -> None:
    shredded, slice_ = cheese.sizes

    assert not is_unit_legal(QuantityUnit.for_size(shredded), cheese)
    assert is_unit_legal(QuantityUnit.for_size(shredded, VolumeUnit.TABLESPOON), cheese)
    assert not is_unit_legal(QuantityUnit.for_size(slice_, VolumeUnit.CUP), cheese)


def test_short_descriptions(cheese) -> None:
    assert short_description(QuantityUnit.weight(WeightUnit.G)) == "g"
    assert short_description(QuantityUnit.volume(VolumeUnit.CUP)) == "cup"
    assert short_description(QuantityUnit.serving()) == "serving"
    assert (
        short_description(QuantityUnit.for_size(cheese.sizes[0], VolumeUnit.CUP))
        == "cup, shredded"
    )
    assert short_description(QuantityUnit.for_size(cheese.sizes[1])) == "slice"
    assert unit_type_description(UnitType.SERVING) == "Serving"


def test_quantity_unit_rejects_inconsistent_fields() -> None:
    with pytest.raises(ValueError):
        QuantityUnit(unit_type=UnitType.WEIGHT)

    with pytest.raises(ValueError):
        QuantityUnit(unit_type=UnitType.SERVING, volume_unit=VolumeUnit.CUP)

    with pytest.raises(ValueError):
        QuantityUnit(
            unit_type=UnitType.SERVING, size_volume_prefix_unit=VolumeUnit.CUP
        )


def test_user_volume_units_resolve_fixed_and_preferred_units() -> None:
    units = UserVolumeUnits.standard()

    assert units.explicit_unit_for(VolumeUnit.ML) is VolumeExplicitUnit.ML
    assert units.explicit_unit_for(VolumeUnit.LITER) is VolumeExplicitUnit.LITER
    assert units.explicit_unit_for(VolumeUnit.CUP) is VolumeExplicitUnit.CUP_US_CUSTOMARY
    assert UserVolumeUnits().explicit_unit_for(VolumeUnit.CUP) is None


def test_user_volume_units_reject_mismatched_choice() -> None:
    with pytest.raises(ValueError):
        UserVolumeUnits(cup=VolumeExplicitUnit.TABLESPOON_US)


def test_with_overrides_replaces_only_named_units() -> None:
    units = UserVolumeUnits.standard().with_overrides(
        {
            VolumeUnit.CUP: VolumeExplicitUnit.CUP_METRIC,
            VolumeUnit.ML: VolumeExplicitUnit.ML,
        }
    )

    assert units.cup is VolumeExplicitUnit.CUP_METRIC
    assert units.tablespoon is VolumeExplicitUnit.TABLESPOON_US


def test_volume_overrides_skip_unknown_and_mismatched_codes() -> None:
    overrides = volume_overrides_from_codes(
        {
            "cup": "cup_imperial",
            "tablespoon": "cup_metric",
            "bucket": "liter",
        }
    )

    assert overrides == {VolumeUnit.CUP: VolumeExplicitUnit.CUP_IMPERIAL}


def test_unknown_unit_code_is_rejected() -> None:
    assert VolumeExplicitUnit.from_code("cup_metric") is VolumeExplicitUnit.CUP_METRIC

    with pytest.raises(ValueError):
        VolumeUnit.from_code("bucket")
