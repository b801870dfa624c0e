"""Conversion between temperature scales."""

from tempcast.conversion.converter import convert
from tempcast.conversion.table import CONVERSION_TABLE, ConversionRule, lookup

__all__ = ["CONVERSION_TABLE", "ConversionRule", "convert", "lookup"]
