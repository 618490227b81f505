"""Unit table, compound unit parsing and canonical formatting."""

from .algebra import parse_unit_expr
from .formatting import format_dimension, format_quantity
from .table import DEFAULT_TABLE, UnitTable, describe_dimension, kind_name, lookup

__all__ = [
    "DEFAULT_TABLE",
    "UnitTable",
    "describe_dimension",
    "format_dimension",
    "format_quantity",
    "kind_name",
    "lookup",
    "parse_unit_expr",
]
