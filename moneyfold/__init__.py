"""Exact monetary amounts in minor units, with ISO 4217 currencies, formatting and codecs."""

__version__ = "0.1.0"