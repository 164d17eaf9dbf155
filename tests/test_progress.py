from pathlib import Path

from galaxia.progress import (
    DEFAULT_LEVEL,
    is_known_player,
    load_progress,
    progress_path,
    save_progress,
)


def test_progress_path_uses_pseudo_and_txt(tmp_path):
    path = progress_path("alice", tmp_path)
    assert path == tmp_path / "alice.txt"


def test_progress_path_defaults_to_current_directory():
    assert progress_path("bob") == Path(".") / "bob.txt"


def test_save_then_load_round_trip(tmp_path):
    save_progress("alice", 7, tmp_path)
    assert load_progress("alice", tmp_path) == 7


def test_save_overwrites_previous_level(tmp_path):
    save_progress("alice", 3, tmp_path)
    save_progress("alice", 5, tmp_path)
    assert load_progress("alice", tmp_path) == 5


def test_saved_file_holds_level_as_text(tmp_path):
    save_progress("alice", 12, tmp_path)
    assert (tmp_path / "alice.txt").read_text() == "12"


def test_load_missing_player_gives_default(tmp_path):
    assert load_progress("nobody", tmp_path) == DEFAULT_LEVEL == 1


def test_load_unparsable_file_gives_default(tmp_path):
    (tmp_path / "carl.txt").write_text("not a number")
    assert load_progress("carl", tmp_path) == DEFAULT_LEVEL


def test_load_reads_leading_integer(tmp_path):
    (tmp_path / "dana.txt").write_text("  42abc")
    assert load_progress("dana", tmp_path) == 42


def test_load_accepts_negative_level(tmp_path):
    (tmp_path / "eve.txt").write_text("-3")
    assert load_progress("eve", tmp_path) == -3


def test_unknown_player_then_known_after_save(tmp_path):
    assert is_known_player("frank", tmp_path) is False
    save_progress("frank", 1, tmp_path)
    assert is_known_player("frank", tmp_path) is True


def test_save_into_missing_directory_is_silent(tmp_path):
    missing = tmp_path / "missing"
    save_progress("gina", 2, missing)
    assert is_known_player("gina", missing) is False