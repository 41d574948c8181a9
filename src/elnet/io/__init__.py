"""
Text input/output for coordinates and bonds.
"""

from .bonds import bonds_to_text, format_bond, write_bonds
from .coordinates import load_positions, parse_count, parse_row, read_positions

__all__ = [
    "read_positions",
    "load_positions",
    "parse_row",
    "parse_count",
    "format_bond",
    "write_bonds",
    "bonds_to_text",
]
