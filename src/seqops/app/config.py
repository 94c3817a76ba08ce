import os
from pathlib import Path
from typing import Optional
from pydantic import BaseModel, Field, field_validator

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseModel):
    LOG_LEVEL: str = "INFO"
    MIN_AGE: int = Field(21, ge=0, description="Minimum age allowed through the door.")
    ADMIT_EVERY: int = Field(
        2, ge=1, description="The bouncer admits one of every ADMIT_EVERY people."
    )
    ROSTER_PATH: Optional[Path] = Field(
        None, description="JSON roster file. The built-in roster is used when unset."
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalise the level name to upper case.

        Raises:
            ValueError: If the name is not one of LOG_LEVELS.
        """
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {LOG_LEVELS}, got '{v}'.")
        return level

    @classmethod
    def load(cls) -> "Settings":
        """Build settings from environment variables, keeping defaults for unset ones."""
        env = {
            "LOG_LEVEL": os.getenv("LOG_LEVEL"),
            "MIN_AGE": os.getenv("SEQOPS_MIN_AGE"),
            "ADMIT_EVERY": os.getenv("SEQOPS_ADMIT_EVERY"),
            "ROSTER_PATH": os.getenv("SEQOPS_ROSTER_PATH"),
        }
        return cls(**{key: value for key, value in env.items() if value})
