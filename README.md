# loopset

A small playlist manager that keeps songs in a loop. Playing past the last
song wraps back to the first. Stepping back from the first song wraps to the
last. You can add, remove, find, shuffle, sort and reverse songs. The song
that is current is kept through every reordering, matched by its title.

## Installing

```
pip install .
```

## The interactive menu

```
loopset
```

This prints the ten songs it loads at start, then shows the current song and
this menu:

```
1. Display playlist
2. Play next
3. Play previous
4. Add song
5. Remove song
6. Find song
7. Shuffle playlist
8. Sort playlist
9. Reverse playlist
0. Exit
```

- Titles are matched without regard to case when you remove or find a song.
- Leaving a title or artist prompt blank cancels the action.
- After a song is found, you can play it (`p`), remove it (`r`), or press
  enter to do nothing.
- Sorting can be done by title, artist or duration. The sorted list is then
  shown.
- The menu ends on `0` or when input runs out.

The same loop can be driven from Python. `loopset.cli.run(playlist, read,
write)` takes a `LoopSet`, a function that returns the next input line and a
function that writes output text. `loopset.cli.preloaded_playlist()` returns
the playlist with the default songs.

## Using it from Python

```python
from loopset.playlist import LoopSet, SortBy

playlist = LoopSet()
playlist.add_song("Zebra", "Artist", 3, 0)
playlist.add_song("Alaska", "Artist", 2, 45)
playlist.add_song("Middle", "Artist", 4, 10)

playlist.play_next()
print(playlist.current)           # "Alaska" by Artist (2m 45s)

playlist.sort(SortBy.TITLE)       # Alaska, Middle, Zebra
playlist.reverse()                # Zebra, Middle, Alaska
print(playlist.render())          # the list, with ">>" before the current song

playlist.remove_song("middle")    # case-insensitive; returns the removed Song
print([song.title for song in playlist])
```

Songs are `loopset.song.Song` dataclasses with `title`, `artist`, `minutes`
and `seconds`. A song's `total_seconds()` gives its length in seconds.

- The first song added becomes current.
- `play(title)` makes a song current, and `find_song(title)` returns it.
- When the current song is removed, the song after it becomes current. If
  there is no song after it, the first song becomes current.

Some operations cannot be carried out:

- `play_next` or `play_previous` on an empty playlist raises
  `EmptyPlaylistError`.
- `shuffle` or `reverse` on fewer than two songs raises
  `PlaylistTooShortError`.
- A title that is not in the list raises `SongNotFoundError`. This error is
  also a `LookupError`.

All of these errors derive from `PlaylistError`.

`shuffle` accepts a `random.Random` instance, so the order can be
reproduced:

```python
import random

playlist.shuffle(random.Random(42))
```

## What it does not do

loopset keeps track of which song is current. It does not open or play any
audio. "Playing" a song only moves the current marker. Playlists are held in
memory only. They are not saved to or loaded from files, and each start of
`loopset` begins with the same default songs.

## Running the tests

```
pip install ".[test]"
pytest
```