"""Demonstration pipeline composing the sequence operations.

A group of friends walks into a bar. The pipeline keeps the people old enough
to drink, lets the bouncer admit every other one of them, numbers the admitted
people by their place in the queue, and finally computes the average age of
everyone who tried to get in. Each stage consumes the previous stage's result.
"""

import typing as tp

from pydantic import BaseModel, Field, TypeAdapter

from seqops.app.config import Settings
from seqops.core.models import Person
from seqops.core.types import Roster
from seqops.data.roster import default_roster, load_roster
from seqops.functional.sequence import fold, select, select_indexed, transform_indexed
from seqops.logger.logger import logger, set_level

__all__ = [
    "DemoReport",
    "run_demo",
    "render_sequence",
    "render_report",
    "main",
]


class DemoReport(BaseModel):
    """Every intermediate result of the bar pipeline."""

    people: Roster = Field(..., description="Everyone who attempted to join.")
    can_drink: tp.List[Person] = Field(..., description="People at or above the minimum age.")
    admitted: tp.List[Person] = Field(..., description="People the bouncer let in.")
    names: tp.List[str] = Field(..., description="Admitted people numbered by queue position.")
    total_age: float
    average_age: float


def run_demo(
    people: tp.Sequence[Person], min_age: int = 21, admit_every: int = 2
) -> DemoReport:
    """Run the bar pipeline over a roster.

    Args:
        people: Everyone who attempted to join. Must not be empty.
        min_age: Minimum age to be served.
        admit_every: The bouncer admits positions 0, admit_every, 2 * admit_every...

    Returns:
        DemoReport: The result of every stage.

    Raises:
        ValueError: If ``admit_every`` is not positive.
        pydantic.ValidationError: If ``people`` is empty.
    """
    if admit_every < 1:
        raise ValueError(f"admit_every must be positive, got {admit_every}")

    people = TypeAdapter(Roster).validate_python(list(people))

    can_drink = select(people, lambda dude: dude.age >= min_age)
    logger.debug(f"{len(can_drink)} of {len(people)} people are {min_age} or older")

    admitted = select_indexed(can_drink, lambda dude, idx: idx % admit_every == 0)
    logger.debug(f"Bouncer admitted {len(admitted)} of {len(can_drink)} people")

    names = transform_indexed(
        admitted, lambda dude, idx: f"{idx + 1}. {dude.first_name} {dude.last_name}"
    )

    total_age = fold(people, lambda total, dude: total + dude.age, product=float)

    report = DemoReport(
        people=people,
        can_drink=can_drink,
        admitted=admitted,
        names=names,
        total_age=total_age,
        average_age=total_age / len(people),
    )
    logger.debug(
        f"Processed {len(report.people)} people, admitted {len(report.admitted)}, "
        f"average age {report.average_age:g}"
    )
    return report


def render_sequence(items: tp.Iterable[tp.Any]) -> str:
    """Render items on one line, each followed by a single space."""
    return "".join(f"{item} " for item in items)


def render_report(report: DemoReport) -> str:
    """Render a report as the lines printed by :func:`main`."""
    lines = [
        render_sequence(report.people),
        render_sequence(report.can_drink),
        render_sequence(report.admitted),
        render_sequence(report.names),
        f"total age: {report.total_age:g}",
        f"average age: {report.average_age:g}",
    ]
    return "\n".join(lines)


def main():
    """Run the demonstration with settings taken from the environment."""
    settings = Settings.load()
    set_level(settings.LOG_LEVEL)

    if settings.ROSTER_PATH is not None:
        people = load_roster(settings.ROSTER_PATH)
    else:
        people = default_roster()

    report = run_demo(
        people, min_age=settings.MIN_AGE, admit_every=settings.ADMIT_EVERY
    )
    print(render_report(report))


if __name__ == "__main__":
    main()
