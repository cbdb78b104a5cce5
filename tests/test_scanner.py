"""Tests for library scanning helpers that do not need real audio."""
import json

import pytest

from tandadj.core.scanner import _parse_year, build_library, find_audio_files, guess_style


def test_guess_style():
    assert guess_style("Tango", "Poema", "") == "tango"
    assert guess_style("", "Lagrimitas de mi corazón (vals)", "") == "vals"
    assert guess_style("Waltz", "", "") == "vals"
    assert guess_style("", "Milonga sentimental", "") == "milonga"
    assert guess_style("", "", "Cortinas 2024") == "cortina"
    assert guess_style("", "", "") == "tango"


def test_parse_year():
    assert _parse_year("1941-05-02") == 1941
    assert _parse_year("1938") == 1938
    assert _parse_year("") is None


def test_find_audio_files(tmp_path):
    (tmp_path / "a").mkdir()
    (tmp_path / "a" / "one.MP3").write_bytes(b"")
    (tmp_path / "two.flac").write_bytes(b"")
    (tmp_path / "notes.txt").write_text("x")
    found = [p.name for p in find_audio_files(tmp_path)]
    assert sorted(found) == ["one.MP3", "two.flac"]


def test_find_audio_files_missing_dir(tmp_path):
    with pytest.raises(FileNotFoundError):
        find_audio_files(tmp_path / "missing")


def test_build_library_skips_unreadable_files(tmp_path):
    music = tmp_path / "music"
    music.mkdir()
    (music / "broken.mp3").write_bytes(b"not audio")
    library_path = tmp_path / "data" / "library.json"
    library = build_library(music, library_path)
    assert library["trackCount"] == 0
    assert library["tracks"] == []
    assert json.loads(library_path.read_text())["root"] == str(music.resolve())
