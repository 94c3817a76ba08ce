"""Record models used as example inputs for the sequence operations.

The models enforce data validation through Pydantic v2 so that rosters read
from disk are checked at construction time.
"""

from pydantic import BaseModel, ConfigDict, Field

__all__ = [
    "Person",
]


class Person(BaseModel):
    """A person waiting in line, identified by name and age.

    Attributes:
        first_name: Given name.
        last_name: Family name.
        age: Age in whole years.
    """

    model_config = ConfigDict(frozen=True)

    first_name: str = Field(..., description="Given name.")
    last_name: str = Field(..., description="Family name.")
    age: int = Field(..., ge=0, description="Age in whole years.")

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def __str__(self) -> str:
        return f"Person({self.first_name}, {self.last_name}, {self.age})"
