"""Core data structures and type definitions."""

from seqops.core.models import Person
from seqops.core.types import Roster

__all__ = [
    "Person",
    "Roster",
]
