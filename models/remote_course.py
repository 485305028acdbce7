"""Rohdaten eines Kurses aus der Autoren-API (Pydantic v2).

RemoteCourse wird nicht persistiert: es entsteht beim Dekodieren einer
API-Antwort und wird genau einmal in einen Course überführt.
"""

import re

from pydantic import BaseModel, ConfigDict, Field


# HH:MM[:SS[.Bruchteil]] – Tageszeit-Format der API
_DURATION_RE = re.compile(
    r"^(?P<hours>[0-9]{2}):(?P<minutes>[0-9]{2})(?::(?P<seconds>[0-9]{2})(?:\.[0-9]+)?)?$"
)


class MalformedDuration(ValueError):
    """Die Dauer-Angabe der API lässt sich nicht interpretieren."""

    def __init__(self, duration: str):
        self.duration = duration
        super().__init__(f"Ungültige Dauer: {duration!r} (erwartet HH:MM:SS[.ffff])")


def parse_duration_minutes(duration: str) -> int:
    """Wandelt 'HH:MM:SS[.ffff]' in ganze Minuten seit Mitternacht um.

    Sekundenbruchteile werden verworfen, angebrochene Minuten abgeschnitten.
    """
    match = _DURATION_RE.match(duration.strip()) if isinstance(duration, str) else None
    if match is None:
        raise MalformedDuration(duration)

    hours = int(match["hours"])
    minutes = int(match["minutes"])
    seconds = int(match["seconds"] or 0)
    if hours > 23 or minutes > 59 or seconds > 59:
        raise MalformedDuration(duration)

    return (hours * 3600 + minutes * 60 + seconds) // 60


class RemoteCourse(BaseModel):
    """Ein Element der Antwort von /profile/data/author/{id}/all-content."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    id: str
    title: str
    duration: str                                  # "HH:MM:SS.fffffff"
    content_url: str = Field(alias="contentUrl")   # relativer Pfad
    is_retired: bool = Field(default=False, alias="isRetired")

    def duration_in_minutes(self) -> int:
        """Kursdauer in ganzen Minuten."""
        return parse_duration_minutes(self.duration)
