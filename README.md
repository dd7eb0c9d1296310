# solong

A small top-down tile game. You walk a player around a walled map, pick up
every collectible, and then step onto the exit to win. Each move is counted
and printed to the terminal.

## Installing

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Playing

```
solong maps/level.ber
```

Run the command from a directory that holds a `textures/` folder (see
below); the map is checked first, then the window opens.

Controls:

| Key | Action     |
|-----|------------|
| W   | move up    |
| A   | move left  |
| S   | move down  |
| D   | move right |
| Esc | quit       |

Closing the window also quits. Walls block movement. The game ends when you
step onto the exit after every collectible has been picked up; before that,
the exit can be walked over. The move count and the closing messages are
printed to standard output, not drawn in the window.

The command returns 0 after a game and 1 when it is given the wrong number of
arguments or an invalid map.

## Map files

A map is a plain-text file, one row per line, made of these characters:

| Char | Meaning          |
|------|------------------|
| `1`  | wall             |
| `0`  | empty floor      |
| `P`  | player start     |
| `C`  | collectible      |
| `E`  | exit             |

Example:

```
1111111111
1P0C00C0E1
1111111111
```

The file must not end with a newline: a trailing newline counts as an extra,
empty row and the map is then rejected as not rectangular.

A map is rejected, with a message that starts with `Error`, if:

- the file cannot be read;
- the path, from its first `.` onwards, is not exactly `.ber` (so
  `maps/level.ber` is accepted but `./maps/level.ber` is not);
- there is not exactly one `E`, or not exactly one `P`;
- there is no `C`;
- rows have different lengths;
- it contains any other character;
- it is too large for the window (more than 1920 pixels tall or 1080 pixels
  wide at 32 pixels per tile);
- it is not closed in by walls;
- the exit or some collectible cannot be reached from the start.

## Textures

Tiles are drawn from XPM images in `./textures/`: `empty.xpm` (drawn under
every tile), `wall.xpm`, `item.xpm`, `exit.xpm` and `player.xpm`, placed on a
32-pixel grid. No textures ship with the package. The package has its own XPM
reader, `solong.xpm.read_xpm_file` (with `solong.xpm.parse_xpm` for a list of
XPM strings), which knows the X11 colour names through
`solong.colors.lookup_color`.

## Using it as a library

```python
from solong.game import Game, Key
from solong.pathcheck import is_valid_path

game = Game.from_text("11111\n1PCE1\n11111")
game.handle_key(Key.D)      # picks up the collectible, prints "Total moves : 1"
print(game.moves)           # 1
print(game.collected)       # 1
```

- `solong.mapfile.read_map` loads a file into a `MapInfo`;
  `solong.mapfile.check_map` runs the map checks above (except the wall and
  path checks) and raises `solong.mapfile.MapError` on the first failure.
- `Game.from_text` and `Game.from_file` build a game and raise `MapError` if
  the map is not closed in by walls or has no valid path.
- `solong.pathcheck.is_valid_path` and `solong.pathcheck.reachable` answer
  reachability questions on a grid of tiles.
- `solong.render.Renderer` draws a game onto a pygame surface and
  `Renderer.run` opens the window and runs the event loop;
  `solong.render.tiles_to_draw` lists what would be drawn where.