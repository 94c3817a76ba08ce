"""Rosters of people used by the demonstration pipeline.

A roster is a non-empty list of :class:`~seqops.core.models.Person`. The
built-in roster describes a group of six friends walking into a bar; other
rosters can be read from a JSON file holding a list of objects with
``first_name``, ``last_name`` and ``age`` keys.
"""

from pathlib import Path
from typing import List

from pydantic import TypeAdapter

from seqops.core.models import Person
from seqops.core.types import Roster
from seqops.logger.logger import logger

__all__ = [
    "default_roster",
    "load_roster",
]

_ROSTER_ADAPTER = TypeAdapter(Roster)


def default_roster() -> List[Person]:
    """Return a fresh copy of the built-in six-person roster."""
    return [
        Person(first_name="Butter", last_name="Riolu", age=22),
        Person(first_name="Farmer", last_name="Joes", age=21),
        Person(first_name="Juke", last_name="Duke", age=21),
        Person(first_name="Life", last_name="Happens", age=24),
        Person(first_name="Looped", last_name="Needs Help", age=18),
        Person(first_name="Land", last_name="Woof", age=21),
    ]


def load_roster(path: Path) -> List[Person]:
    """Load and validate a roster from a JSON file.

    Args:
        path: Location of the JSON roster.

    Returns:
        List[Person]: The validated roster, in file order.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        pydantic.ValidationError: If the file is not a non-empty list of people.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Roster file not found at {path}")

    people = _ROSTER_ADAPTER.validate_json(path.read_bytes())
    logger.debug(f"Loaded {len(people)} people from {path}")
    return people
