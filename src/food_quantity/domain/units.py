"""Measurement units a food amount can be expressed in."""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class WeightDefinition:
    """Declarative weight unit definition."""

    code: str
    short: str
    grams: float


@dataclass(frozen=True)
class VolumeDefinition:
    """Declarative abstract volume unit definition."""

    code: str
    short: str


class WeightUnit(Enum):
    """Weight units, in picker order."""

    G = WeightDefinition("g", "g", 1.0)
    KG = WeightDefinition("kg", "kg", 1000.0)
    MG = WeightDefinition("mg", "mg", 0.001)
    OZ = WeightDefinition("oz", "oz", 28.349523125)
    LB = WeightDefinition("lb", "lb", 453.59237)

    @property
    def code(self) -> str:
        return self.value.code

    @property
    def short(self) -> str:
        return self.value.short

    @property
    def grams(self) -> float:
        return self.value.grams

    @classmethod
    def from_code(cls, code: str) -> "WeightUnit":
        """Return the unit for a stored code."""
        for unit in cls:
            if unit.code == code:
                return unit
        raise ValueError(f"Unknown weight unit: {code}")


class VolumeUnit(Enum):
    """Abstract volume units; the concrete size depends on user preference."""

    ML = VolumeDefinition("ml", "mL")
    LITER = VolumeDefinition("liter", "L")
    TEASPOON = VolumeDefinition("teaspoon", "tsp")
    TABLESPOON = VolumeDefinition("tablespoon", "tbsp")
    FLUID_OUNCE = VolumeDefinition("fluid_ounce", "fl oz")
    CUP = VolumeDefinition("cup", "cup")
    PINT = VolumeDefinition("pint", "pt")
    QUART = VolumeDefinition("quart", "qt")
    GALLON = VolumeDefinition("gallon", "gal")

    @property
    def code(self) -> str:
        return self.value.code

    @property
    def short(self) -> str:
        return self.value.short

    @classmethod
    def from_code(cls, code: str) -> "VolumeUnit":
        """Return the unit for a stored code."""
        for unit in cls:
            if unit.code == code:
                return unit
        raise ValueError(f"Unknown volume unit: {code}")


@dataclass(frozen=True)
class ExplicitVolumeDefinition:
    """Declarative concrete volume unit definition."""

    code: str
    short: str
    milliliters: float
    volume_unit: VolumeUnit


class VolumeExplicitUnit(Enum):
    """Concrete volume units with a fixed size in millilitres."""

    GALLON_US_LIQUID = ExplicitVolumeDefinition(
        "gallon_us_liquid", "gal", 3785.411784, VolumeUnit.GALLON
    )
    GALLON_US_DRY = ExplicitVolumeDefinition(
        "gallon_us_dry", "gal", 4404.88377086, VolumeUnit.GALLON
    )
    GALLON_IMPERIAL = ExplicitVolumeDefinition(
        "gallon_imperial", "gal", 4546.09, VolumeUnit.GALLON
    )
    QUART_US_LIQUID = ExplicitVolumeDefinition(
        "quart_us_liquid", "qt", 946.352946, VolumeUnit.QUART
    )
    QUART_US_DRY = ExplicitVolumeDefinition(
        "quart_us_dry", "qt", 1101.220942715, VolumeUnit.QUART
    )
    QUART_IMPERIAL = ExplicitVolumeDefinition(
        "quart_imperial", "qt", 1136.5225, VolumeUnit.QUART
    )
    PINT_US_LIQUID = ExplicitVolumeDefinition(
        "pint_us_liquid", "pt", 473.176473, VolumeUnit.PINT
    )
    PINT_US_DRY = ExplicitVolumeDefinition(
        "pint_us_dry", "pt", 550.6104713575, VolumeUnit.PINT
    )
    PINT_IMPERIAL = ExplicitVolumeDefinition(
        "pint_imperial", "pt", 568.26125, VolumeUnit.PINT
    )
    CUP_US_LEGAL = ExplicitVolumeDefinition("cup_us_legal", "cup", 240.0, VolumeUnit.CUP)
    CUP_US_CUSTOMARY = ExplicitVolumeDefinition(
        "cup_us_customary", "cup", 236.5882365, VolumeUnit.CUP
    )
    CUP_IMPERIAL = ExplicitVolumeDefinition(
        "cup_imperial", "cup", 284.130625, VolumeUnit.CUP
    )
    CUP_METRIC = ExplicitVolumeDefinition("cup_metric", "cup", 250.0, VolumeUnit.CUP)
    CUP_JAPANESE = ExplicitVolumeDefinition("cup_japanese", "cup", 200.0, VolumeUnit.CUP)
    FLUID_OUNCE_US_NUTRITION_LABELING = ExplicitVolumeDefinition(
        "fluid_ounce_us_nutrition_labeling", "fl oz", 30.0, VolumeUnit.FLUID_OUNCE
    )
    FLUID_OUNCE_US_CUSTOMARY = ExplicitVolumeDefinition(
        "fluid_ounce_us_customary", "fl oz", 29.5735295625, VolumeUnit.FLUID_OUNCE
    )
    FLUID_OUNCE_IMPERIAL = ExplicitVolumeDefinition(
        "fluid_ounce_imperial", "fl oz", 28.4130625, VolumeUnit.FLUID_OUNCE
    )
    TABLESPOON_US = ExplicitVolumeDefinition(
        "tablespoon_us", "tbsp", 14.78676478125, VolumeUnit.TABLESPOON
    )
    TABLESPOON_IMPERIAL = ExplicitVolumeDefinition(
        "tablespoon_imperial", "tbsp", 17.7581640625, VolumeUnit.TABLESPOON
    )
    TABLESPOON_METRIC = ExplicitVolumeDefinition(
        "tablespoon_metric", "tbsp", 15.0, VolumeUnit.TABLESPOON
    )
    TABLESPOON_AUSTRALIAN = ExplicitVolumeDefinition(
        "tablespoon_australian", "tbsp", 20.0, VolumeUnit.TABLESPOON
    )
    TEASPOON_US = ExplicitVolumeDefinition(
        "teaspoon_us", "tsp", 4.92892159375, VolumeUnit.TEASPOON
    )
    TEASPOON_IMPERIAL = ExplicitVolumeDefinition(
        "teaspoon_imperial", "tsp", 5.91938802083, VolumeUnit.TEASPOON
    )
    TEASPOON_METRIC = ExplicitVolumeDefinition(
        "teaspoon_metric", "tsp", 5.0, VolumeUnit.TEASPOON
    )
    ML = ExplicitVolumeDefinition("ml", "mL", 1.0, VolumeUnit.ML)
    LITER = ExplicitVolumeDefinition("liter", "L", 1000.0, VolumeUnit.LITER)

    @property
    def code(self) -> str:
        return self.value.code

    @property
    def short(self) -> str:
        return self.value.short

    @property
    def milliliters(self) -> float:
        return self.value.milliliters

    @property
    def volume_unit(self) -> VolumeUnit:
        return self.value.volume_unit

    @classmethod
    def from_code(cls, code: str) -> "VolumeExplicitUnit":
        """Return the unit for a stored code."""
        for unit in cls:
            if unit.code == code:
                return unit
        raise ValueError(f"Unknown explicit volume unit: {code}")


class EnergyUnit(Enum):
    """Energy display units."""

    KCAL = "kcal"
    KJ = "kJ"


class UnitType(Enum):
    """Category of a food amount."""

    WEIGHT = "weight"
    VOLUME = "volume"
    SERVING = "serving"
    SIZE = "size"

    @property
    def description(self) -> str:
        return self.value.capitalize()


_PREFERENCE_FIELDS: dict[VolumeUnit, str] = {
    VolumeUnit.GALLON: "gallon",
    VolumeUnit.QUART: "quart",
    VolumeUnit.PINT: "pint",
    VolumeUnit.CUP: "cup",
    VolumeUnit.FLUID_OUNCE: "fluid_ounce",
    VolumeUnit.TABLESPOON: "tablespoon",
    VolumeUnit.TEASPOON: "teaspoon",
}

_FIXED_EXPLICIT_UNITS: dict[VolumeUnit, VolumeExplicitUnit] = {
    VolumeUnit.ML: VolumeExplicitUnit.ML,
    VolumeUnit.LITER: VolumeExplicitUnit.LITER,
}


@dataclass(frozen=True)
class UserVolumeUnits:
    """A user's concrete choice for each ambiguous volume unit."""

    gallon: VolumeExplicitUnit | None = None
    quart: VolumeExplicitUnit | None = None
    pint: VolumeExplicitUnit | None = None
    cup: VolumeExplicitUnit | None = None
    fluid_ounce: VolumeExplicitUnit | None = None
    tablespoon: VolumeExplicitUnit | None = None
    teaspoon: VolumeExplicitUnit | None = None

    def __post_init__(self) -> None:
        for volume_unit, field_name in _PREFERENCE_FIELDS.items():
            explicit = getattr(self, field_name)
            if explicit is not None and explicit.volume_unit is not volume_unit:
                raise ValueError(
                    f"{explicit.code} cannot be used for {volume_unit.code}"
                )

    @classmethod
    def standard(cls) -> "UserVolumeUnits":
        """Return the US customary defaults."""
        return cls(
            gallon=VolumeExplicitUnit.GALLON_US_LIQUID,
            quart=VolumeExplicitUnit.QUART_US_LIQUID,
            pint=VolumeExplicitUnit.PINT_US_LIQUID,
            cup=VolumeExplicitUnit.CUP_US_CUSTOMARY,
            fluid_ounce=VolumeExplicitUnit.FLUID_OUNCE_US_CUSTOMARY,
            tablespoon=VolumeExplicitUnit.TABLESPOON_US,
            teaspoon=VolumeExplicitUnit.TEASPOON_US,
        )

    def explicit_unit_for(self, volume_unit: VolumeUnit) -> VolumeExplicitUnit | None:
        """Return the concrete unit the user means by an abstract one."""
        fixed = _FIXED_EXPLICIT_UNITS.get(volume_unit)
        if fixed is not None:
            return fixed
        return getattr(self, _PREFERENCE_FIELDS[volume_unit])

    def with_overrides(
        self, overrides: dict[VolumeUnit, VolumeExplicitUnit]
    ) -> "UserVolumeUnits":
        """Return a copy with some choices replaced."""
        values = {
            field_name: getattr(self, field_name)
            for field_name in _PREFERENCE_FIELDS.values()
        }
        for volume_unit, explicit in overrides.items():
            if volume_unit in _FIXED_EXPLICIT_UNITS:
                continue
            values[_PREFERENCE_FIELDS[volume_unit]] = explicit
        return UserVolumeUnits(**values)


@dataclass(frozen=True)
class UserUnits:
    """Per-user unit preferences."""

    volume: UserVolumeUnits
    energy: EnergyUnit = EnergyUnit.KCAL

    @classmethod
    def standard(cls) -> "UserUnits":
        """Return the preferences used when a user has none."""
        return cls(volume=UserVolumeUnits.standard(), energy=EnergyUnit.KCAL)


def volume_overrides_from_codes(
    codes: Mapping[object, object],
) -> dict[VolumeUnit, VolumeExplicitUnit]:
    """Map stored ``{abstract code: explicit code}`` pairs to units.

    Unknown codes, and explicit units of the wrong kind, are skipped.
    """
    overrides: dict[VolumeUnit, VolumeExplicitUnit] = {}
    for key, value in codes.items():
        try:
            volume_unit = VolumeUnit.from_code(str(key).strip())
            explicit = VolumeExplicitUnit.from_code(str(value).strip())
        except ValueError:
            continue
        if explicit.volume_unit is volume_unit:
            overrides[volume_unit] = explicit
    return overrides
