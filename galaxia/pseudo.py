"""Entering a player's pseudo and showing short messages on screen."""

from __future__ import annotations

import string
from dataclasses import dataclass

import pygame

MAX_PSEUDO = 20

PROMPT = "Entrez votre pseudo :"

_ALLOWED = frozenset(string.ascii_letters + string.digits)
_BACKSPACE = "\b"
_ENTER = "\r"

_WHITE = (255, 255, 255)
_YELLOW = (255, 255, 0)


@dataclass
class PseudoEntry:
    """Line editor for a pseudo made of ASCII letters and digits."""

    text: str = ""
    max_length: int = MAX_PSEUDO - 1
    done: bool = False

    def feed(self, char: str) -> bool:
        """Apply one typed character; return True once Enter has been pressed."""
        if char in _ALLOWED and len(char) == 1:
            if len(self.text) < self.max_length:
                self.text += char
        elif char == _BACKSPACE:
            self.text = self.text[:-1]
        elif char == _ENTER:
            self.done = True
        return self.done


def _font() -> pygame.font.Font:
    if not pygame.font.get_init():
        pygame.font.init()
    return pygame.font.Font(None, 24)


def _draw_prompt(screen, background, font, text: str | None) -> None:
    screen.blit(background, (0, 0))
    screen.blit(font.render(PROMPT, True, _WHITE), (100, 100))
    if text is not None:
        screen.blit(font.render(text, True, _YELLOW), (100, 120))
    pygame.display.flip()


def read_pseudo(screen, background) -> str:
    """Let the player type a pseudo; return it once Enter is pressed."""
    font = _font()
    entry = PseudoEntry()
    clock = pygame.time.Clock()
    _draw_prompt(screen, background, font, None)
    while True:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                raise SystemExit(0)
            if event.type != pygame.KEYDOWN:
                continue
            char = _ENTER if event.key in (pygame.K_RETURN, pygame.K_KP_ENTER) else event.unicode
            if entry.feed(char):
                return entry.text
            _draw_prompt(screen, background, font, entry.text)
        clock.tick(50)


def show_temporary_message(screen, background, message: str, duration: int) -> None:
    """Show ``message`` over the background for ``duration`` milliseconds."""
    font = _font()
    screen.blit(background, (0, 0))
    screen.blit(font.render(message, True, _WHITE), (100, 300))
    pygame.display.flip()
    pygame.time.wait(duration)