"""Game entry point: ask for the player's pseudo and register new players."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

import pygame

from galaxia.progress import DEFAULT_LEVEL, is_known_player, save_progress
from galaxia.pseudo import read_pseudo, show_temporary_message

SCREEN_SIZE = (800, 600)
DEFAULT_BACKGROUND = "background.bmp"
MESSAGE_DURATION = 2000

KNOWN_PLAYER_MESSAGE = "Joueur reconnu."
NEW_PLAYER_MESSAGE = "Nouveau joueur. Sauvegarde en cours..."

_EXIT_FAILURE = 1


def _register_player(pseudo: str, directory: str | Path) -> str:
    """Create a save for a new player; return the message to show."""
    if is_known_player(pseudo, directory):
        return KNOWN_PLAYER_MESSAGE
    save_progress(pseudo, DEFAULT_LEVEL, directory)
    return NEW_PLAYER_MESSAGE


def _wait_for_key() -> None:
    clock = pygame.time.Clock()
    while True:
        for event in pygame.event.get():
            if event.type in (pygame.KEYDOWN, pygame.QUIT):
                return
        clock.tick(50)


def _fail(message: str) -> None:
    print(message, file=sys.stderr)
    raise SystemExit(_EXIT_FAILURE)


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="galaxia", description="Galaxia Classic")
    parser.add_argument(
        "--background",
        default=DEFAULT_BACKGROUND,
        help="image shown behind the pseudo prompt",
    )
    parser.add_argument(
        "--directory",
        default=".",
        help="directory holding the players' progress files",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Run the pseudo prompt; exit with status 1 if the display cannot start."""
    args = _parse_args(argv)
    pygame.init()
    try:
        try:
            screen = pygame.display.set_mode(SCREEN_SIZE)
        except pygame.error:
            _fail("Erreur mode graphique")
        try:
            background = pygame.image.load(args.background)
        except (pygame.error, OSError):
            _fail("Erreur de chargement du fond !")

        screen.blit(background, (0, 0))
        pygame.display.flip()

        pseudo = read_pseudo(screen, background)
        message = _register_player(pseudo, args.directory)
        show_temporary_message(screen, background, message, MESSAGE_DURATION)
        _wait_for_key()
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())