"""Interactive text menu for managing a looping playlist."""

from __future__ import annotations

import argparse
import re
import sys
from typing import Callable

from .playlist import (
    EmptyPlaylistError,
    LoopSet,
    PlaylistTooShortError,
    SongNotFoundError,
    SortBy,
)
from .song import Song
from .utils import get_validated_input

Reader = Callable[[], str]
Writer = Callable[[str], object]

_PRELOADED = (
    ("ENTROPY", "Daniel Caesar", 4, 21),
    ("Cosmic", "Amber Mark", 4, 35),
    ("Red Bottom Sky", "Yung Lean", 5, 3),
    ("Hazey", "Glass Animals", 4, 26),
    ("Nothing Better", "The Postal Service", 3, 47),
    ("Le Matin", "Yann Tiersen", 1, 59),
    ("In Dreams", "Roy Orbison", 3, 24),
    ("Mulholland", "Hope Tala, sky", 3, 44),
    ("Peaceful Place", "Leon Bridges", 4, 15),
    ("Bilgewater", "Brown Bird", 3, 55),
)

_MENU = (
    "\nMenu:\n"
    "1. Display playlist\n"
    "2. Play next\n"
    "3. Play previous\n"
    "4. Add song\n"
    "5. Remove song\n"
    "6. Find song\n"
    "7. Shuffle playlist\n"
    "8. Sort playlist\n"
    "9. Reverse playlist\n"
    "0. Exit\n"
    "Choose an option: "
)

_SORT_CHOICES = {1: SortBy.TITLE, 2: SortBy.ARTIST, 3: SortBy.DURATION}

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _leading_int(text: str) -> int | None:
    """Parse the integer at the start of ``text``, skipping leading whitespace."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else None


def _read_stdin_line() -> str:
    line = sys.stdin.readline()
    if not line:
        raise EOFError
    return line.rstrip("\n")


def preloaded_playlist() -> LoopSet:
    """Return a playlist filled with the default selection of songs."""
    playlist = LoopSet()
    for title, artist, minutes, seconds in _PRELOADED:
        playlist.add_song(title, artist, minutes, seconds)
    return playlist


def _removed_message(song: Song) -> str:
    return f'Removed: "{song.title}" from the playlist.\n'


def _ask_number(read: Reader, write: Writer, prompt: str, valid: Callable[[int], bool]) -> int:
    while True:
        write(prompt)
        value = _leading_int(read())
        if value is not None and valid(value):
            return value
        write("Invalid input. Try again.\n")


def _add(playlist: LoopSet, read: Reader, write: Writer) -> None:
    title = get_validated_input("Enter title (or leave blank to cancel): ", read, write)
    if not title:
        return
    artist = get_validated_input("Enter artist (or leave blank to cancel): ", read, write)
    if not artist:
        return
    minutes = _ask_number(read, write, "Enter minutes: ", lambda m: m >= 0)
    seconds = _ask_number(read, write, "Enter seconds: ", lambda s: 0 <= s < 60)
    song = playlist.add_song(title, artist, minutes, seconds)
    write(f"Added: {song}\n")


def _remove(playlist: LoopSet, read: Reader, write: Writer) -> None:
    while True:
        title = get_validated_input(
            "Enter song title to remove (or leave blank to cancel): ", read, write
        )
        if not title:
            return
        try:
            song = playlist.remove_song(title)
        except SongNotFoundError as err:
            write(f"{err}\n")
            write("Try again or press enter to cancel.\n")
            continue
        write(_removed_message(song))
        return


def _act_on_found(playlist: LoopSet, song: Song, read: Reader, write: Writer) -> None:
    while True:
        write("What would you like to do? (p = play, r = remove, enter = nothing): ")
        choice = read()
        if not choice:
            write("No action was taken.")
            return
        if choice in ("p", "P"):
            playlist.play(song.title)
            return
        if choice in ("r", "R"):
            write(_removed_message(playlist.remove_song(song.title)))
            return
        write("Invalid input. Try again.\n")


def _find(playlist: LoopSet, read: Reader, write: Writer) -> None:
    while True:
        title = get_validated_input(
            "Enter song title to find (or leave blank to cancel): ", read, write
        )
        if not title:
            return
        try:
            song = playlist.find_song(title)
        except SongNotFoundError as err:
            write(f"{err}\n")
            write("Try again or press enter to cancel.\n")
            continue
        write(f"Found: {song}\n")
        _act_on_found(playlist, song, read, write)
        return


def _sort(playlist: LoopSet, read: Reader, write: Writer) -> None:
    if playlist.current is None:
        write("The playlist is empty.\n")
        return
    while True:
        write("Sort by: 1) Title  2) Artist  3) Duration  (0 to cancel): ")
        answer = read()
        if answer in ("", "0"):
            write("Sort cancelled.\n")
            return
        option = _leading_int(answer)
        if option is None:
            write("Invalid input. Please enter a number.\n")
            continue
        by = _SORT_CHOICES.get(option)
        if by is None:
            write("Invalid option. Please enter 1, 2, 3, or 0 to cancel.\n")
            continue
        playlist.sort(by)
        write(f'Playlist sorted by "{by.value}".\n')
        write(playlist.render())
        return


def _read_choice(read: Reader) -> int | None:
    line = read()
    while not line.strip():
        line = read()
    return _leading_int(line)


def run(playlist: LoopSet, read: Reader | None = None, write: Writer | None = None) -> None:
    """Drive the menu loop until the user exits or input runs out."""
    read = read or _read_stdin_line
    write = write or sys.stdout.write
    try:
        while True:
            song = playlist.current
            if song is not None:
                write(f"\n>> Currently playing: {song}\n")
            else:
                write("\nNo song is currently playing.\n")
            write(_MENU)

            choice = _read_choice(read)
            if choice is None:
                write("Invalid input. Please enter a number.\n")
                continue

            if choice == 0:
                write("Goodbye!\n")
                return
            if choice == 1:
                write(playlist.render())
            elif choice in (2, 3):
                try:
                    if choice == 2:
                        playlist.play_next()
                    else:
                        playlist.play_previous()
                except EmptyPlaylistError as err:
                    write(f"{err}\n")
            elif choice == 4:
                _add(playlist, read, write)
            elif choice == 5:
                _remove(playlist, read, write)
            elif choice == 6:
                _find(playlist, read, write)
            elif choice == 7:
                try:
                    playlist.shuffle()
                except PlaylistTooShortError as err:
                    write(f"{err}\n")
                else:
                    write("Playlist shuffled.\n")
            elif choice == 8:
                _sort(playlist, read, write)
            elif choice == 9:
                try:
                    playlist.reverse()
                except PlaylistTooShortError as err:
                    write(f"{err}\n")
                else:
                    write("Playlist order has been reversed.\n")
            else:
                write("Invalid option. Try again.\n")
    except EOFError:
        return


def main(argv: list[str] | None = None) -> int:
    """Start the interactive playlist manager with the default songs loaded."""
    parser = argparse.ArgumentParser(
        prog="loopset", description="Manage a looping playlist from a text menu."
    )
    parser.parse_args(argv)
    playlist = preloaded_playlist()
    for song in playlist:
        sys.stdout.write(f"Added: {song}\n")
    run(playlist)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())