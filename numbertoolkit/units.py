"""Temperature, currency and mass conversions, and parcel charges."""

from __future__ import annotations

from typing import Callable, Union

Number = Union[int, float]

EURO_PER_USD = 0.87
JPY_PER_USD = 111.09
RMB_PER_USD = 6.82
POUNDS_PER_OUNCE = 0.0625
POUNDS_PER_GRAM = 0.00220462

PARCEL_BASE_CHARGE = 32.50
PARCEL_BASE_WEIGHT = 2
PARCEL_CHARGE_PER_KG = 10.50


def fahrenheit_to_celsius(degrees: int) -> int:
    """Convert Fahrenheit to whole Celsius degrees, truncated toward zero."""
    return int((degrees - 32) * (5.0 / 9.0))


def celsius_to_fahrenheit(degrees: int) -> int:
    """Convert Celsius to whole Fahrenheit degrees, truncated toward zero."""
    return int((9.0 / 5.0) * degrees + 32)


def usd_to_euro(amount: Number) -> float:
    """Convert US dollars to euros."""
    return amount * EURO_PER_USD


def usd_to_jpy(amount: Number) -> float:
    """Convert US dollars to Japanese yen."""
    return amount * JPY_PER_USD


def usd_to_rmb(amount: Number) -> float:
    """Convert US dollars to Chinese yuan."""
    return amount * RMB_PER_USD


def ounces_to_pounds(amount: Number) -> float:
    """Convert ounces to pounds."""
    return amount * POUNDS_PER_OUNCE


def grams_to_pounds(amount: Number) -> float:
    """Convert grams to pounds."""
    return amount * POUNDS_PER_GRAM


def parcel_charge(weight: Number) -> float:
    """Charge for sending a parcel of the given weight in kilograms.

    Up to two kilograms costs the base charge; every kilogram beyond that
    adds the per-kilogram charge.
    """
    if weight <= PARCEL_BASE_WEIGHT:
        return PARCEL_BASE_CHARGE
    return (weight - PARCEL_BASE_WEIGHT) * PARCEL_CHARGE_PER_KG + PARCEL_BASE_CHARGE


_CONVERSIONS: dict[str, dict[int, tuple[str, Callable[[Number], Number]]]] = {
    "T": {
        1: ("Celcius", fahrenheit_to_celsius),
        2: ("Fahrenheit", celsius_to_fahrenheit),
    },
    "C": {
        1: ("Euro", usd_to_euro),
        2: ("JPY", usd_to_jpy),
        3: ("RMB", usd_to_rmb),
    },
    "M": {
        1: ("Pounds", ounces_to_pounds),
        2: ("Pounds", grams_to_pounds),
    },
}


def convert(category: str, choice: int, value: Number) -> tuple[str, Number]:
    """Run a conversion picked by category letter and menu number.

    Categories are ``T`` (temperature), ``C`` (currency) and ``M`` (mass).
    Returns the label of the target unit and the converted value.
    """
    try:
        choices = _CONVERSIONS[category]
    except KeyError:
        raise ValueError(f"unknown category: {category!r}") from None
    try:
        label, func = choices[choice]
    except KeyError:
        raise ValueError("Please enter the correct choice.") from None
    return label, func(value)