"""Main menu: option navigation, controls and guide screens."""

from __future__ import annotations

import enum
from dataclasses import dataclass

import pygame

TITLE = "GALAXIA CLASSIC"

MAIN_OPTIONS = ("Nouvelle Partie", "Options", "Quitter")
SUB_OPTIONS = ("Controles", "Guide", "Retour")

CONTROL_LINES = (
    "- Deplacement gauche: Fleche GAUCHE",
    "- Deplacement droite: Fleche DROITE",
    "- Monter: Fleche HAUT",
    "- Descendre: Fleche BAS",
)

GUIDE_LINES = (
    "Dans Galaxia Classic, ton objectif est de defendre ton",
    "vaisseau spatial contre des vagues d'ennemis venus de",
    "l'espace. Les ennemis attaquent en formation ou foncent",
    "vers toi pour te surprendre, alors reste mobile et tire",
    "avec precision pour les eliminer.",
    "",
    "Chaque ennemi detruit te rapporte 50 points, alors plus",
    "tu en abats, plus ton score grimpe. Survis le plus",
    "longtemps possible, esquive les tirs ennemis et tente",
    "de battre ton propre record a chaque partie.",
)

BACK_HINT = "[Retour via le menu Options]"
NEW_GAME_MESSAGE = "Nouvelle Partie !"


class MenuState(enum.Enum):
    MAIN = "main"
    OPTIONS = "options"
    CONTROLS = "controls"
    GUIDE = "guide"


class MenuAction(enum.Enum):
    """Outcome of a key press; anything but NONE is accompanied by the menu sound."""

    NONE = "none"
    MOVE = "move"
    SELECT = "select"
    NEW_GAME = "new_game"
    QUIT = "quit"


@dataclass
class Menu:
    state: MenuState = MenuState.MAIN
    selected: int = 0

    def options(self) -> tuple[str, ...]:
        """Labels of the selectable entries in the current state."""
        if self.state is MenuState.MAIN:
            return MAIN_OPTIONS
        if self.state is MenuState.OPTIONS:
            return SUB_OPTIONS
        return ()

    def handle_key(self, key: int) -> MenuAction:
        """Update the menu for a pygame key code and report what happened."""
        if self.state in (MenuState.CONTROLS, MenuState.GUIDE):
            if key == pygame.K_RETURN:
                self.state = MenuState.OPTIONS
                self.selected = 2
                return MenuAction.SELECT
            return MenuAction.NONE

        count = len(self.options())
        if key == pygame.K_DOWN:
            self.selected = (self.selected + 1) % count
            return MenuAction.MOVE
        if key == pygame.K_UP:
            self.selected = (self.selected - 1) % count
            return MenuAction.MOVE
        if key != pygame.K_RETURN:
            return MenuAction.NONE

        if self.state is MenuState.MAIN:
            if self.selected == 0:
                return MenuAction.NEW_GAME
            if self.selected == 1:
                self.state = MenuState.OPTIONS
                self.selected = 0
                return MenuAction.SELECT
            return MenuAction.QUIT

        if self.selected == 0:
            self.state = MenuState.CONTROLS
        elif self.selected == 1:
            self.state = MenuState.GUIDE
        else:
            self.state = MenuState.MAIN
            self.selected = 0
        return MenuAction.SELECT


def _blit_centered(surface, font, text, x, y, color) -> None:
    rendered = font.render(text, True, color)
    surface.blit(rendered, rendered.get_rect(midtop=(x, y)))


def _draw_overlay(surface) -> None:
    width, height = surface.get_size()
    overlay = pygame.Surface((width - 100 + 1, height - 160 + 1), pygame.SRCALPHA)
    overlay.fill((0, 0, 0, 128))
    surface.blit(overlay, (50, 80))


def _draw_controls(surface, font) -> None:
    width = surface.get_width()
    _draw_overlay(surface)
    _blit_centered(surface, font, "CONTROLES DU JEU", width // 2, 100, (0, 255, 0))
    for offset, line in enumerate(CONTROL_LINES):
        surface.blit(font.render(line, True, (255, 255, 255)), (100, 150 + offset * 30))
    _blit_centered(surface, font, BACK_HINT, width // 2, 300, (150, 150, 150))


def _draw_guide(surface, font) -> None:
    width = surface.get_width()
    _draw_overlay(surface)
    _blit_centered(surface, font, "GUIDE DU JOUEUR", width // 2, 100, (0, 200, 255))
    for offset, line in enumerate(GUIDE_LINES):
        if line:
            surface.blit(font.render(line, True, (200, 200, 200)), (50, 150 + offset * 20))
    _blit_centered(surface, font, BACK_HINT, width // 2, 400, (150, 150, 150))


def draw_menu(surface, background, menu: Menu, title_font, font) -> None:
    """Render the menu in its current state onto ``surface``."""
    width = surface.get_width()
    surface.blit(background, (0, 0))
    _blit_centered(surface, title_font, TITLE, width // 2, 50, (255, 0, 0))

    if menu.state is MenuState.CONTROLS:
        _draw_controls(surface, font)
        return
    if menu.state is MenuState.GUIDE:
        _draw_guide(surface, font)
        return

    if menu.state is MenuState.MAIN:
        highlight, normal = (255, 255, 0), (255, 255, 255)
    else:
        highlight, normal = (0, 255, 255), (200, 200, 200)
    for index, label in enumerate(menu.options()):
        color = highlight if index == menu.selected else normal
        surface.blit(font.render(label, True, color), (width // 2 - 100, 150 + index * 30))


def _load_title_font(default):
    try:
        return pygame.font.Font("big_fontp.ttf", 48)
    except (FileNotFoundError, OSError):
        return default


def run_menu(screen, background, sound=None) -> None:
    """Run the menu loop until Escape, window close or "Quitter"."""
    if not pygame.font.get_init():
        pygame.font.init()
    font = pygame.font.Font(None, 24)
    title_font = _load_title_font(font)
    buffer = pygame.Surface(screen.get_size())
    menu = Menu()
    clock = pygame.time.Clock()

    while True:
        draw_menu(buffer, background, menu, title_font, font)
        screen.blit(buffer, (0, 0))
        pygame.display.flip()

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return
            if event.type != pygame.KEYDOWN:
                continue
            if event.key == pygame.K_ESCAPE:
                return
            action = menu.handle_key(event.key)
            if action is not MenuAction.NONE and sound is not None:
                sound.play()
            if action is MenuAction.QUIT:
                return
            if action is MenuAction.NEW_GAME:
                print(NEW_GAME_MESSAGE)
        clock.tick(20)