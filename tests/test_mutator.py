"""Tests for playlist edits."""
import asyncio
import random
from collections import Counter

import pytest

from tandadj.core.errors import InvalidArgumentError, NotFoundError
from tandadj.core.mutator import extract_tanda, move_tanda, normalize_playlist, rename_playlist, replace_track
from tandadj.core.pipeline import generate_playlist
from tandadj.models.playlist import playlist_to_dict, tanda_to_dict

from conftest import make_catalog


def _playlist(catalog=None):
    catalog = catalog or make_catalog()
    return asyncio.run(generate_playlist(catalog, name="Test", rng=random.Random(9)))


def _content(playlist):
    doc = playlist_to_dict(playlist)
    doc.pop("updatedAt")
    return doc


def _pairs(playlist):
    doc = playlist_to_dict(playlist)
    return Counter(repr((t, c)) for t, c in zip(doc["tandas"], doc["cortinas"]))


def test_move_tanda_is_a_permutation():
    playlist = _playlist()
    moved = move_tanda(playlist, 0, 5)
    assert _pairs(moved) == _pairs(playlist)
    assert moved.tandas[5].id == playlist.tandas[0].id
    assert moved.cortinas[5] == playlist.cortinas[0]
    assert moved.tandas[0].id == playlist.tandas[1].id


def test_move_tanda_content_keeps_its_type():
    playlist = _playlist()
    moved = move_tanda(playlist, 2, 0)
    assert [t.type for t in moved.tandas] == ["vals", "tango", "tango", "tango", "tango", "milonga"]


def test_move_to_same_index_only_restamps():
    playlist = _playlist()
    moved = move_tanda(playlist, 3, 3)
    assert _content(moved) == _content(playlist)
    assert moved.updated_at >= playlist.updated_at


def test_move_does_not_touch_input():
    playlist = _playlist()
    before = playlist_to_dict(playlist)
    move_tanda(playlist, 1, 4)
    assert playlist_to_dict(playlist) == before


@pytest.mark.parametrize("from_index,to_index", [(-1, 0), (0, 6), ("1", 2), (1.0, 2), (True, 2), (None, 1)])
def test_move_rejects_bad_indices(from_index, to_index):
    with pytest.raises(InvalidArgumentError):
        move_tanda(_playlist(), from_index, to_index)


def test_replace_track_overwrites_one_position():
    catalog = make_catalog(tango=17)
    playlist = _playlist(catalog)
    updated = replace_track(playlist, catalog, 0, 1, "tango-16")
    assert updated.tandas[0].tracks[1].id == "tango-16"
    assert len(updated.tandas[0].tracks) == len(playlist.tandas[0].tracks)
    assert [t.id for i, t in enumerate(updated.tandas[0].tracks) if i != 1] == [
        t.id for i, t in enumerate(playlist.tandas[0].tracks) if i != 1
    ]


def test_replace_track_allows_duplicates():
    catalog = make_catalog()
    playlist = _playlist(catalog)
    existing = playlist.tandas[1].tracks[0].id
    updated = replace_track(playlist, catalog, 0, 0, existing)
    assert updated.tandas[0].tracks[0].id == existing
    assert updated.tandas[1].tracks[0].id == existing


def test_replace_track_unknown_id():
    catalog = make_catalog()
    playlist = _playlist(catalog)
    before = playlist_to_dict(playlist)
    with pytest.raises(NotFoundError):
        replace_track(playlist, catalog, 0, 0, "missing.mp3")
    assert playlist_to_dict(playlist) == before


@pytest.mark.parametrize("tanda_index,track_index", [(6, 0), (0, 4), ("0", 0), (0, None)])
def test_replace_track_bad_indices(tanda_index, track_index):
    catalog = make_catalog()
    with pytest.raises(InvalidArgumentError):
        replace_track(_playlist(catalog), catalog, tanda_index, track_index, "tango-0")


def test_extract_tanda_copies_by_value():
    playlist = _playlist()
    saved = extract_tanda(playlist, 2, name="Canaro valses")
    assert saved.name == "Canaro valses"
    assert saved.source_playlist_id == playlist.id
    assert saved.id.startswith("saved-tanda-")
    assert tanda_to_dict(saved.tanda) == tanda_to_dict(playlist.tandas[2])
    playlist.tandas[2].tracks.clear()
    assert len(saved.tanda.tracks) == 3


def test_extract_tanda_default_name():
    saved = extract_tanda(_playlist(), 5)
    assert saved.name.startswith("milonga tanda ")


@pytest.mark.parametrize("index", [6, -1, "2", None])
def test_extract_tanda_missing_index(index):
    with pytest.raises(NotFoundError):
        extract_tanda(_playlist(), index)


def test_normalize_aligns_cortinas():
    playlist = _playlist()
    playlist.cortinas = playlist.cortinas[:2]
    normalize_playlist(playlist)
    assert len(playlist.cortinas) == 6
    assert playlist.cortinas[2:] == [None] * 4


def test_rename_playlist():
    playlist = _playlist()
    renamed = rename_playlist(playlist, name="Sunday")
    assert renamed.name == "Sunday"
    assert renamed.prompt == playlist.prompt
    assert playlist.name == "Test"
