"""Codes identifying the integer codings used to compress a graph."""

from enum import IntEnum


class Coding(IntEnum):
    """Instantaneous codes supported for the compressed streams."""

    DELTA = 1
    GAMMA = 2
    UNARY = 7
    ZETA = 8
    NIBBLE = 9


CODING_NAMES = (
    "NULL",
    "DELTA",
    "GAMMA",
    "GOLOMB",
    "SKEWED_GOLOMB",
    "ARITH",
    "INTERP",
    "UNARY",
    "ZETA",
    "NIBBLE",
)


def coding_name(code: int) -> str:
    """Return the name of the coding with numeric value ``code``."""
    if not 0 <= code < len(CODING_NAMES):
        raise ValueError(f"unknown coding: {code}")
    return CODING_NAMES[code]