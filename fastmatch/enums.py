"""Enumerations shared across the tournament configuration."""

from enum import Enum


class NotationType(Enum):
    """Move notation used when writing PGN bodies."""

    SAN = 0
    LAN = 1
    UCI = 2


class OrderType(Enum):
    """Order in which openings are taken from a book."""

    RANDOM = 0
    SEQUENTIAL = 1


class FormatType(Enum):
    """File format of an opening book."""

    EPD = 0
    PGN = 1
    NONE = 2


class VariantType(Enum):
    """Chess variant played in a tournament."""

    STANDARD = 0
    FRC = 1


class OutputType(Enum):
    """Style of the console output."""

    FASTCHESS = 0
    CUTECHESS = 1
    NONE = 2