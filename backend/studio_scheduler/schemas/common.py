"""Shared request base and field validators for wall-clock times."""

import re
from typing import Optional

from pydantic import BaseModel, ConfigDict

WALL_TIME_REGEX = re.compile(r"^([01]\d|2[0-3]):[0-5]\d$")


class StrictRequestModel(BaseModel):
    """Request bodies reject unknown fields, so clients cannot set server-owned columns."""

    model_config = ConfigDict(extra="forbid", validate_assignment=True)


def validate_wall_time(value: Optional[str]) -> Optional[str]:
    """Accept ``HH:MM`` (24h) or an empty value, normalised to None."""
    if value is None:
        return None
    candidate = value.strip()
    if not candidate:
        return None
    if not WALL_TIME_REGEX.fullmatch(candidate):
        raise ValueError("time must be HH:MM (24-hour)")
    return candidate
