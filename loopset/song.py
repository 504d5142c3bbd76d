"""Song records held by a playlist."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Song:
    """A single song with a title, an artist and a duration."""

    title: str
    artist: str
    minutes: int
    seconds: int

    def total_seconds(self) -> int:
        """Return the full duration in seconds."""
        return self.minutes * 60 + self.seconds

    def __str__(self) -> str:
        return f'"{self.title}" by {self.artist} ({self.minutes}m {self.seconds}s)'