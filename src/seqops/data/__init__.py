"""Built-in and file-backed rosters."""

from seqops.data.roster import default_roster, load_roster

__all__ = ["default_roster", "load_roster"]
