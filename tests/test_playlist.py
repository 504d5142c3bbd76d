import random

import pytest

from loopset.playlist import (
    EmptyPlaylistError,
    LoopSet,
    PlaylistTooShortError,
    SongNotFoundError,
    SortBy,
)


def make(*titles):
    playlist = LoopSet()
    for title in titles:
        playlist.add_song(title, "Artist", 3, 0)
    return playlist


def titles(playlist):
    return [song.title for song in playlist]


def test_add_songs():
    playlist = LoopSet()
    playlist.add_song("In Camera", "Yumi Zouma", 3, 24)
    playlist.add_song("Mulholland", "Hope Tala, sky", 3, 44)
    assert playlist.current.title == "In Camera"
    assert titles(playlist) == ["In Camera", "Mulholland"]
    assert len(playlist) == 2


def test_display_playlist():
    playlist = LoopSet()
    playlist.add_song("In Camera", "Yumi Zouma", 3, 24)
    playlist.add_song("Mulholland", "Hope Tala, sky", 3, 44)
    assert playlist.render() == (
        "Current Playlist:\n"
        '>> "In Camera" by Yumi Zouma (3m 24s)\n'
        '   "Mulholland" by Hope Tala, sky (3m 44s)\n'
    )


def test_display_empty():
    assert LoopSet().render() == "The playlist is empty.\n"


def test_play_navigation():
    playlist = make("Song A", "Song B", "Song C")
    assert playlist.play_next().title == "Song B"
    assert playlist.play_next().title == "Song C"
    assert playlist.play_next().title == "Song A"
    assert playlist.play_previous().title == "Song C"
    assert playlist.current.title == "Song C"


def test_navigation_on_empty_raises():
    playlist = LoopSet()
    with pytest.raises(EmptyPlaylistError):
        playlist.play_next()
    with pytest.raises(EmptyPlaylistError):
        playlist.play_previous()


def test_remove_song():
    playlist = LoopSet()
    playlist.add_song("Keep Me", "Artist", 3, 10)
    playlist.add_song("Delete Me", "Artist", 4, 10)
    playlist.add_song("Keep Me Too", "Artist", 2, 50)
    assert playlist.remove_song("Delete Me").title == "Delete Me"
    assert titles(playlist) == ["Keep Me", "Keep Me Too"]
    with pytest.raises(SongNotFoundError):
        playlist.remove_song("Ghost Song")


def test_remove_is_case_insensitive():
    playlist = make("Hazey", "Cosmic")
    assert playlist.remove_song("hAZEY").title == "Hazey"
    assert titles(playlist) == ["Cosmic"]


def test_remove_current_moves_to_next_or_head():
    playlist = make("A", "B", "C")
    playlist.remove_song("A")
    assert playlist.current.title == "B"
    playlist.play("C")
    playlist.remove_song("C")
    assert playlist.current.title == "B"
    playlist.remove_song("B")
    assert playlist.current is None
    assert len(playlist) == 0


def test_find_song():
    playlist = LoopSet()
    playlist.add_song("In Camera", "Yumi Zouma", 3, 24)
    playlist.add_song("Mulholland", "Hope Tala, sky", 3, 44)
    assert playlist.find_song("In Camera").artist == "Yumi Zouma"
    assert playlist.find_song("in camera").title == "In Camera"
    with pytest.raises(SongNotFoundError):
        playlist.find_song("Ghost Song")


def test_play_sets_current():
    playlist = make("A", "B", "C")
    assert playlist.play("b").title == "B"
    assert playlist.current.title == "B"


def test_shuffle_playlist_keeps_songs_and_current():
    playlist = LoopSet()
    for index, title in enumerate("ABCDE", start=1):
        playlist.add_song(title, "Artist", 1, index)
    playlist.play("C")
    playlist.shuffle(random.Random(0))
    assert sorted(titles(playlist)) == ["A", "B", "C", "D", "E"]
    assert playlist.current.title == "C"


def test_shuffle_too_short():
    with pytest.raises(PlaylistTooShortError):
        make("Only").shuffle()
    with pytest.raises(PlaylistTooShortError):
        LoopSet().shuffle()


def test_sort_by_title():
    playlist = make("Zebra", "Alaska", "Middle")
    playlist.sort(SortBy.TITLE)
    assert titles(playlist) == ["Alaska", "Middle", "Zebra"]
    assert playlist.current.title == "Zebra"


def test_sort_by_artist():
    playlist = LoopSet()
    playlist.add_song("Song A", "Zeta", 3, 0)
    playlist.add_song("Song B", "Alpha", 3, 0)
    playlist.add_song("Song C", "Gamma", 3, 0)
    playlist.sort(SortBy.ARTIST)
    assert [song.artist for song in playlist] == ["Alpha", "Gamma", "Zeta"]


def test_sort_by_duration():
    playlist = LoopSet()
    playlist.add_song("Song A", "Artist", 3, 45)
    playlist.add_song("Song B", "Artist", 2, 30)
    playlist.add_song("Song C", "Artist", 4, 5)
    playlist.sort(SortBy.DURATION)
    durations = [song.total_seconds() for song in playlist]
    assert durations == sorted(durations)
    assert titles(playlist) == ["Song B", "Song A", "Song C"]


def test_sort_empty_is_noop():
    playlist = LoopSet()
    playlist.sort(SortBy.TITLE)
    assert len(playlist) == 0
    assert playlist.current is None


def test_reverse_playlist():
    playlist = make("First", "Second", "Third")
    playlist.reverse()
    assert titles(playlist) == ["Third", "Second", "First"]
    assert playlist.current.title == "First"
    assert playlist.play_next().title == "Third"


def test_reverse_too_short():
    with pytest.raises(PlaylistTooShortError):
        make("Only").reverse()


def test_restore_current_by_title():
    playlist = make("A", "B")
    playlist.restore_current_by_title("B")
    assert playlist.current.title == "B"
    playlist.restore_current_by_title("missing")
    assert playlist.current is None


def test_sort_by_value_string():
    assert SortBy("duration") is SortBy.DURATION
    assert SortBy.TITLE.value == "title"