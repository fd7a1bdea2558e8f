"""Encode Python values, lists, mappings and dataclasses as URL form data."""

__version__ = "0.1.0"