"""Short factory functions for building quantities from raw numbers."""

from __future__ import annotations

from tempcast.models.quantity import Celsius, Fahrenheit, Kelvin


def celsius(value: float) -> Celsius:
    return Celsius(value)


def fahrenheit(value: float) -> Fahrenheit:
    return Fahrenheit(value)


def kelvin(value: float) -> Kelvin:
    return Kelvin(value)
