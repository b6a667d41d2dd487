"""Bombo: sorteos interactivos por nómina (modo A) o por rango 1..N (modo B)."""

from bombo.core.errors import (
    DomainError,
    DrawError,
    EmptyPool,
    InvalidInput,
    IoError,
    NotConfigured,
)
from bombo.core.rng import RandomSource
from bombo.services.draw_engine import draw_from_range, draw_from_roster
from bombo.services.range_store import RangeStore
from bombo.services.roster_store import RosterStore

__version__ = "1.0.0"

__all__ = [
    "DomainError",
    "DrawError",
    "EmptyPool",
    "InvalidInput",
    "IoError",
    "NotConfigured",
    "RandomSource",
    "RangeStore",
    "RosterStore",
    "draw_from_range",
    "draw_from_roster",
]
