"""Converter: pure unit conversion plus the per-request value object."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from unitconv.errors import MissingInputError, UnparseableInputError
from unitconv.units import Category, TemperatureUnit

logger = logging.getLogger(__name__)


def convert(value: float, from_unit: str, to_unit: str, category: Category) -> float:
    """Convert ``value`` from ``from_unit`` to ``to_unit`` within ``category``.

    Distance and weight go through a scalar factor table; temperature goes
    into Celsius and back out.

    Raises:
        UnknownUnitError: If either unit is not valid for the category.
    """
    category.validate_unit(from_unit)
    category.validate_unit(to_unit)

    factors = category.factors
    if factors is not None:
        return convert_linear(value, from_unit, to_unit, factors)
    return convert_temperature(value, TemperatureUnit.parse(from_unit), TemperatureUnit.parse(to_unit))


def convert_linear(value: float, from_unit: str, to_unit: str, factors: Mapping[str, float]) -> float:
    if from_unit == to_unit:
        return value
    return value * factors[from_unit] / factors[to_unit]


def convert_temperature(value: float, from_unit: TemperatureUnit, to_unit: TemperatureUnit) -> float:
    if from_unit is to_unit:
        return value
    return to_unit.from_celsius(from_unit.to_celsius(value))


def parse_number(raw: Any, field: str = "num") -> float:
    """Parse a submitted form value as a float.

    Raises:
        MissingInputError: If the value is absent or blank.
        UnparseableInputError: If the value is not a floating-point number.
    """
    if raw is None or (isinstance(raw, str) and not raw.strip()):
        raise MissingInputError(field)
    if not isinstance(raw, str):
        # file uploads and other non-text parts
        raise UnparseableInputError(type(raw).__name__, field)
    try:
        return float(raw)
    except ValueError:
        raise UnparseableInputError(raw, field) from None


def format_number(value: float) -> str:
    """Shortest round-tripping text for ``value``, without a trailing ``.0``."""
    text = repr(float(value))
    if text.endswith(".0"):
        return text[:-2]
    return text


@dataclass(frozen=True)
class ConversionRequest:
    """One submitted conversion, created and discarded within a request."""

    value: float
    from_unit: str
    to_unit: str
    category: Category

    @classmethod
    def from_form(cls, category: Category, form: Mapping[str, Any]) -> ConversionRequest:
        """Build a request from submitted ``num``, ``from`` and ``to`` fields."""
        value = parse_number(form.get("num"))
        return cls(
            value=value,
            from_unit=str(form.get("from") or ""),
            to_unit=str(form.get("to") or ""),
            category=category,
        )

    def execute(self) -> ConversionResult:
        logger.debug(
            "Converting %s from %s to %s (%s)",
            self.value,
            self.from_unit,
            self.to_unit,
            self.category.value,
        )
        converted = convert(self.value, self.from_unit, self.to_unit, self.category)
        return ConversionResult(request=self, value=converted)


@dataclass(frozen=True)
class ConversionResult:
    request: ConversionRequest
    value: float

    @property
    def display_value(self) -> str:
        return format_number(self.value)
