import os
import re

import pytest

from aphelion.paths import Paths, generate_stem


def touch(path, mtime):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("{}")
    os.utime(path, (mtime, mtime))


def test_fixed_locations(tmp_path):
    paths = Paths(tmp_path)
    assert paths.save_path_from_stem("slot") == tmp_path / "saves" / "slot.json"
    assert paths.new_game_save_path() == tmp_path / "resources" / "newGame.json"
    assert paths.settings_path() == tmp_path / "settings.json"
    assert paths.fonts_directory() == tmp_path / "resources" / "fonts"
    assert paths.black_body_data_path() == tmp_path / "resources" / "black_body_data.json"


def test_save_paths_creates_directory(tmp_path):
    paths = Paths(tmp_path)
    assert paths.save_paths() == []
    assert (tmp_path / "saves").is_dir()


def test_save_paths_are_sorted_newest_first(tmp_path):
    paths = Paths(tmp_path)
    old = tmp_path / "saves" / "old.json"
    new = tmp_path / "saves" / "new.json"
    middle = tmp_path / "saves" / "middle.json"
    touch(old, 1_000_000)
    touch(new, 3_000_000)
    touch(middle, 2_000_000)
    assert paths.save_paths() == [new, middle, old]


def test_only_matching_regular_files_are_listed(tmp_path):
    paths = Paths(tmp_path)
    sounds = tmp_path / "resources" / "sounds"
    touch(sounds / "engine.wav", 1_000_000)
    touch(sounds / "notes.txt", 1_000_000)
    (sounds / "folder.wav").mkdir()
    assert paths.sound_paths() == [sounds / "engine.wav"]


def test_most_recent_save_path_is_last_in_recency_order(tmp_path):
    paths = Paths(tmp_path)
    touch(tmp_path / "saves" / "a.json", 1_000_000)
    touch(tmp_path / "saves" / "b.json", 2_000_000)
    assert paths.most_recent_save_path() == paths.save_paths()[-1]


def test_most_recent_save_path_without_saves_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        Paths(tmp_path).most_recent_save_path()


def test_missing_resource_directory_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        Paths(tmp_path).texture_paths()


def test_generate_stem_format():
    stem = generate_stem()
    assert stem.startswith("NewGame-")
    assert len(stem) == len("NewGame-2000-01-01-00-00-00")
    match = re.fullmatch(r"NewGame-\d{4}-\d{2}-\d{2}-\d{2}-\d{2}-\d{2}", stem)
    assert match is not None
    assert match.group(0) == stem