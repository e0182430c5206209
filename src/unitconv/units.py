"""Unit tables: categories, linear conversion factors and temperature units.

Distance and weight convert through a scalar factor relative to a base unit
(meter, gram). Temperature is affine, so each unit is a tagged variant whose
conversion step into and out of Celsius is selected by pattern match.

All tables are built once at import and are read-only afterwards.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType

from unitconv.errors import UnknownCategoryError, UnknownUnitError

# 1 unit of X equals this many meters
DISTANCE_IN_METERS: Mapping[str, float] = MappingProxyType(
    {
        "inch": 0.0254,
        "foot": 0.3048,
        "mile": 1609.34,
        "millimeter": 0.001,
        "centimeter": 0.01,
        "meter": 1.0,
        "kilometer": 1000.0,
    }
)

# 1 unit of X equals this many grams
WEIGHT_IN_GRAMS: Mapping[str, float] = MappingProxyType(
    {
        "milligram": 0.001,
        "gram": 1.0,
        "kilogram": 1000.0,
        "ounce": 28.35,
        "pound": 453.592,
    }
)


class TemperatureUnit(str, Enum):
    """Temperature units, converted through Celsius as the base unit."""

    FAHRENHEIT = "fahrenheit"
    CELSIUS = "celsius"
    KELVIN = "kelvin"

    @classmethod
    def parse(cls, name: str) -> TemperatureUnit:
        try:
            return cls(name)
        except ValueError:
            raise UnknownUnitError(name, Category.TEMPERATURE.value) from None

    def step(self, value: float, *, from_unit: bool) -> float:
        """Translate ``value`` into Celsius (``from_unit=True``) or out of it."""
        match self:
            case TemperatureUnit.FAHRENHEIT:
                if from_unit:
                    return (value - 32) * (5.0 / 9.0)
                return value * (9.0 / 5.0) + 32
            case TemperatureUnit.KELVIN:
                if from_unit:
                    return value - 273.15
                return value + 273.15
            case TemperatureUnit.CELSIUS:
                return value
        raise AssertionError(f"unhandled temperature unit: {self!r}")

    def to_celsius(self, value: float) -> float:
        return self.step(value, from_unit=True)

    def from_celsius(self, value: float) -> float:
        return self.step(value, from_unit=False)


@dataclass(frozen=True)
class CategoryInfo:
    """Display label and ordered unit names for a category."""

    label: str
    units: tuple[str, ...]
    base_unit: str


class Category(str, Enum):
    """Supported unit categories."""

    DISTANCE = "distance"
    WEIGHT = "weight"
    TEMPERATURE = "temperature"

    @classmethod
    def parse(cls, name: str) -> Category:
        """Resolve a category from a URL path segment.

        An empty name resolves to the default category.

        Raises:
            UnknownCategoryError: If the name is not a supported category.
        """
        if not name:
            return DEFAULT_CATEGORY
        try:
            return cls(name)
        except ValueError:
            raise UnknownCategoryError(name) from None

    @property
    def label(self) -> str:
        return CATEGORY_INFO[self].label

    @property
    def units(self) -> tuple[str, ...]:
        return CATEGORY_INFO[self].units

    @property
    def factors(self) -> Mapping[str, float] | None:
        """Linear factor table, or None for affine categories."""
        return LINEAR_TABLES.get(self)

    def validate_unit(self, unit: str) -> str:
        if unit not in self.units:
            raise UnknownUnitError(unit, self.value)
        return unit


CATEGORY_INFO: Mapping[Category, CategoryInfo] = MappingProxyType(
    {
        Category.DISTANCE: CategoryInfo(
            label="Distance",
            units=("inch", "foot", "mile", "millimeter", "centimeter", "meter", "kilometer"),
            base_unit="meter",
        ),
        Category.WEIGHT: CategoryInfo(
            label="Weight",
            units=("milligram", "gram", "kilogram", "ounce", "pound"),
            base_unit="gram",
        ),
        Category.TEMPERATURE: CategoryInfo(
            label="Temperature",
            units=tuple(unit.value for unit in TemperatureUnit),
            base_unit="celsius",
        ),
    }
)

LINEAR_TABLES: Mapping[Category, Mapping[str, float]] = MappingProxyType(
    {
        Category.DISTANCE: DISTANCE_IN_METERS,
        Category.WEIGHT: WEIGHT_IN_GRAMS,
    }
)

DEFAULT_CATEGORY = Category.DISTANCE
