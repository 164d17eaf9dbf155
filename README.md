# galaxia

The front end of Galaxia Classic, a space shooter built with pygame. The
package has three parts:

- `galaxia.app` is the sign-in screen behind the `galaxia` command. The
  player types a pseudo there, and a new player gets a save file.
- `galaxia.progress` keeps level progress for each player in a plain text
  file named `<pseudo>.txt`.
- `galaxia.menu` is a title menu with "Nouvelle Partie", "Options" and
  "Quitter". The Options menu leads to a controls screen and a player's
  guide.

## Installing

```
pip install .
```

## Signing in

```
galaxia
galaxia --background space.bmp --directory saves
```

The command opens an 800×600 window. The backdrop is the image given by
`--background`, which defaults to `background.bmp` in the current directory.
The window then asks for a pseudo:

- Only ASCII letters and digits are accepted, up to 19 characters.
- Backspace erases the last character.
- Enter confirms.

If `<pseudo>.txt` already exists in `--directory` (the current directory by
default), the screen shows "Joueur reconnu.". Otherwise it shows "Nouveau
joueur. Sauvegarde en cours..." and writes the file with level 1. Both
messages stay for two seconds. After that, any key closes the window.

The command exits with status 1 when the display cannot be opened or the
background image cannot be loaded.

## Saved progress

These functions work without a window:

```python
from galaxia.progress import save_progress, load_progress, is_known_player

save_progress("alice", 3, "saves")
load_progress("alice", "saves")   # 3
load_progress("bob", "saves")     # 1, the default level
is_known_player("bob", "saves")   # False
```

`load_progress` reads the leading integer of the file. It returns 1 when the
file is missing or unreadable, or when the file does not start with a
number. `save_progress` skips silently a file it cannot write.
`progress_path` gives the path used for a pseudo.

## The menu and the sign-in editor

`galaxia.menu.Menu` is the menu's state machine and needs no display:

- `handle_key` takes a pygame key code: up, down or Enter.
- It returns a `MenuAction`: `NONE`, `MOVE`, `SELECT`, `NEW_GAME` or
  `QUIT`.
- `options()` lists the entries of the current `MenuState`.

`draw_menu` renders the menu onto a surface. `run_menu(screen, background,
sound=None)` runs the whole menu loop on an open pygame display. It plays
`sound` on every key press that has an effect, and it returns on Escape, on
closing the window or on "Quitter".

`galaxia.pseudo.PseudoEntry` is the line editor behind the sign-in screen.
Feed it one character at a time with `feed`.

## What it does not do

- There is no game yet. The package has no ship, enemies, shooting,
  scrolling scenery or bonuses.
- Choosing "Nouvelle Partie" in the menu prints "Nouvelle Partie !" and
  nothing more.
- The `galaxia` command runs only the sign-in screen. The menu runs only
  when your own code calls `run_menu`.
- Saved levels are written once, at level 1, for new players. Nothing in
  the package advances them.

## Tests

```
pip install .[test]
pytest
```