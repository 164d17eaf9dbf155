from unittest import mock

import pygame
import pytest

from galaxia import app
from galaxia.progress import load_progress, progress_path, save_progress


@pytest.fixture
def headless(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    yield
    pygame.quit()


@pytest.fixture
def background_file(tmp_path, headless):
    path = tmp_path / "background.bmp"
    surface = pygame.Surface((800, 600))
    surface.fill((10, 20, 30))
    pygame.image.save(surface, str(path))
    return path


def _key(char):
    return pygame.event.Event(pygame.KEYDOWN, key=ord(char), unicode=char)


def _enter():
    return pygame.event.Event(pygame.KEYDOWN, key=pygame.K_RETURN, unicode="\r")


def _any_key():
    return pygame.event.Event(pygame.KEYDOWN, key=pygame.K_SPACE, unicode=" ")


def test_register_new_player_creates_save(tmp_path):
    message = app._register_player("nova", tmp_path)
    assert message == "Nouveau joueur. Sauvegarde en cours..."
    assert progress_path("nova", tmp_path).read_text() == "1"


def test_register_known_player_keeps_save(tmp_path):
    save_progress("nova", 4, tmp_path)
    message = app._register_player("nova", tmp_path)
    assert message == "Joueur reconnu."
    assert load_progress("nova", tmp_path) == 4


def test_register_twice_recognises_player(tmp_path):
    first = app._register_player("pilot7", tmp_path)
    second = app._register_player("pilot7", tmp_path)
    assert first == app.NEW_PLAYER_MESSAGE
    assert second == app.KNOWN_PLAYER_MESSAGE


def test_missing_background_exits_with_failure(tmp_path, headless):
    with pytest.raises(SystemExit) as excinfo:
        app.main(["--background", str(tmp_path / "absent.bmp"), "--directory", str(tmp_path)])
    assert excinfo.value.code == 1


def test_main_saves_new_player(tmp_path, background_file):
    events = [[_key("a"), _key("b"), _key("c"), _enter()], [_any_key()]]
    with mock.patch("pygame.event.get", side_effect=events), mock.patch("pygame.time.wait"):
        result = app.main(["--background", str(background_file), "--directory", str(tmp_path)])
    assert result == 0
    assert load_progress("abc", tmp_path) == 1
    assert progress_path("abc", tmp_path).read_text() == "1"


def test_main_keeps_existing_progress(tmp_path, background_file):
    save_progress("abc", 5, tmp_path)
    events = [[_key("a"), _key("b"), _key("c"), _enter()], [_any_key()]]
    with mock.patch("pygame.event.get", side_effect=events), mock.patch("pygame.time.wait") as wait:
        result = app.main(["--background", str(background_file), "--directory", str(tmp_path)])
    assert result == 0
    assert load_progress("abc", tmp_path) == 5
    wait.assert_called_once_with(app.MESSAGE_DURATION)