"""Formatters package for pgnames terminal output."""

from .names import names_json, names_table
from .output import OutputFormatter

__all__ = ["OutputFormatter", "names_json", "names_table"]
