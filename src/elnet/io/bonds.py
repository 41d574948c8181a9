"""
Bond writer.

One bond per line: "i<TAB>j<TAB>K<TAB>r0", indices as integers and both
floats in fixed-point notation with six decimals.
"""
from typing import Iterable, TextIO

from elnet.network import Bond


def format_bond(bond: Bond) -> str:
    """Format a bond as a single line without the trailing newline."""
    return f"{bond.i:d}\t{bond.j:d}\t{bond.k:f}\t{bond.r0:f}"


def write_bonds(bonds: Iterable[Bond], stream: TextIO) -> int:
    """
    Write bonds to a text stream in the order given.

    Returns:
        Number of bonds written.
    """
    count = 0
    for bond in bonds:
        stream.write(format_bond(bond) + "\n")
        count += 1
    return count


def bonds_to_text(bonds: Iterable[Bond]) -> str:
    """Render bonds as a newline-terminated block of text."""
    return "".join(format_bond(bond) + "\n" for bond in bonds)
