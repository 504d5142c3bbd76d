"""A looping playlist with navigation, shuffling, sorting and reversal."""

from __future__ import annotations

import random
from enum import Enum
from typing import Iterator

from .song import Song
from .utils import to_lower


class SortBy(Enum):
    """Attribute a playlist can be sorted by."""

    TITLE = "title"
    ARTIST = "artist"
    DURATION = "duration"


class PlaylistError(Exception):
    """Base error for playlist operations."""


class EmptyPlaylistError(PlaylistError):
    """The playlist has no songs."""


class PlaylistTooShortError(PlaylistError):
    """The playlist has too few songs for the operation."""


class SongNotFoundError(PlaylistError, LookupError):
    """No song with the given title is in the playlist."""

    def __init__(self, title: str) -> None:
        super().__init__(f'Song "{title}" not found in playlist.')
        self.title = title


_SORT_KEYS = {
    SortBy.TITLE: lambda song: song.title,
    SortBy.ARTIST: lambda song: song.artist,
    SortBy.DURATION: Song.total_seconds,
}


class LoopSet:
    """An ordered playlist whose navigation wraps around at both ends."""

    def __init__(self) -> None:
        self._songs: list[Song] = []
        self._current: Song | None = None

    def __len__(self) -> int:
        return len(self._songs)

    def __iter__(self) -> Iterator[Song]:
        return iter(list(self._songs))

    @property
    def current(self) -> Song | None:
        """The song now playing, or None if the playlist is empty."""
        return self._current

    def _index_of_current(self) -> int:
        return next(i for i, song in enumerate(self._songs) if song is self._current)

    def _locate(self, title: str) -> int:
        wanted = to_lower(title)
        for index, song in enumerate(self._songs):
            if to_lower(song.title) == wanted:
                return index
        raise SongNotFoundError(title)

    def add_song(self, title: str, artist: str, minutes: int, seconds: int) -> Song:
        """Append a song; the first song added becomes the current one."""
        song = Song(title, artist, minutes, seconds)
        self._songs.append(song)
        if self._current is None:
            self._current = song
        return song

    def remove_song(self, title: str) -> Song:
        """Remove the first song whose title matches case-insensitively and return it."""
        index = self._locate(title)
        song = self._songs.pop(index)
        if song is self._current:
            if index < len(self._songs):
                self._current = self._songs[index]
            else:
                self._current = self._songs[0] if self._songs else None
        return song

    def find_song(self, title: str) -> Song:
        """Return the first song whose title matches case-insensitively."""
        return self._songs[self._locate(title)]

    def play(self, title: str) -> Song:
        """Make the song with the given title current and return it."""
        song = self.find_song(title)
        self._current = song
        return song

    def play_next(self) -> Song:
        """Advance to the next song, wrapping to the first."""
        if self._current is None:
            raise EmptyPlaylistError("Playlist is empty.")
        index = (self._index_of_current() + 1) % len(self._songs)
        self._current = self._songs[index]
        return self._current

    def play_previous(self) -> Song:
        """Go back to the previous song, wrapping to the last."""
        if self._current is None:
            raise EmptyPlaylistError("Playlist is empty.")
        index = (self._index_of_current() - 1) % len(self._songs)
        self._current = self._songs[index]
        return self._current

    def render(self) -> str:
        """Return the playlist as text, marking the current song with '>>'."""
        if not self._songs:
            return "The playlist is empty.\n"
        lines = ["Current Playlist:\n"]
        lines.extend(
            f"{'>> ' if song is self._current else '   '}{song}\n" for song in self._songs
        )
        return "".join(lines)

    def _current_title(self) -> str:
        return self._current.title if self._current is not None else ""

    def shuffle(self, rng: random.Random | None = None) -> None:
        """Randomise the order, keeping the current song by title."""
        if len(self._songs) < 2:
            raise PlaylistTooShortError("Not enough songs to shuffle.")
        title = self._current_title()
        (rng or random.Random()).shuffle(self._songs)
        self.restore_current_by_title(title)

    def sort(self, by: SortBy) -> None:
        """Sort by title, artist or duration, keeping the current song by title."""
        if not self._songs:
            return
        title = self._current_title()
        self._songs.sort(key=_SORT_KEYS[SortBy(by)])
        self.restore_current_by_title(title)

    def reverse(self) -> None:
        """Reverse the order, keeping the current song by title."""
        if len(self._songs) < 2:
            raise PlaylistTooShortError("Playlist is too short to reverse.")
        title = self._current_title()
        self._songs.reverse()
        self.restore_current_by_title(title)

    def restore_current_by_title(self, title: str) -> None:
        """Make the first song with exactly this title current, or none if absent."""
        self._current = next((song for song in self._songs if song.title == title), None)