# cubmap

`cubmap` reads and validates `.cub` scene files for a grid-based raycaster.
A scene file has a header that names four wall textures and two colours,
followed by the map itself:

```
NO ./textures/north.xpm
SO ./textures/south.xpm
WE ./textures/west.xpm
EA ./textures/east.xpm
F 220,100,0
C 225,30,0

111111
100001
10N001
111111
```

## Installing

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Command line

```
cubmap path/to/scene.cub
```

The command exits with status 0 when:

- the file name ends in `.cub`;
- the header lines, in any order and with blank lines between them if
  wanted, set each of `NO`, `SO`, `WE`, `EA`, `F` and `C`; a second line
  for an identifier already set is an error;
- each texture path ends in `.xpm`;
- each colour has the form `R,G,B`;
- the map uses only `0`, `1`, `N`, `S`, `E`, `W`, `D`, spaces and tabs,
  with exactly one player start (`N`, `S`, `E` or `W`).

Otherwise it prints the problem and exits with status 1. An empty file also
gives status 1. Colour components outside 0..255 are not rejected: they are
stored as -1.

## Library use

```python
from cubmap.cli import read_map
from cubmap.config import Config, parse_header
from cubmap.mapgrid import parse_map

lines = read_map("scene.cub")
config = Config()
start = parse_header(config, lines)
parse_map(config, lines, start)
print(config.floor, config.ceiling, config.map)
```

`parse_header` and the functions it calls raise `cubmap.config.ConfigError`;
`parse_map` raises `cubmap.mapgrid.MapError`. `config.floor` and
`config.ceiling` are `cubmap.config.Color` values; `config.map` holds the map
rows with surrounding white space trimmed.

Other modules:

- `cubmap.linereader.LineReader` reads a file descriptor line by line, in
  chunks of a fixed size (42 bytes by default).
- `cubmap.mapgrid.flood_fill` checks that the open area reachable from a
  cell is closed in by walls; use it on a grid from `copy_map`, since it
  marks the cells it visits.
- `cubmap.xpm` parses XPM images (`xpm_file_to_image`, `xpm_to_image`,
  `parse_xpm`).
- `cubmap.colornames.lookup_color` resolves X11 colour names to `0xRRGGBB`.
- `cubmap.image` provides an `Image` pixel buffer and a `Canvas` to draw on.
- `cubmap.render` loads the configured textures (`load_textures`), draws
  wall cells onto a canvas (`render_map`, `draw_tile`) and fills a
  two-tone background (`paint_background`).
- `cubmap.ft` holds small helpers used across the package: character
  classes (`chars`), byte buffers (`memory`), a singly linked list
  (`linkedlist`), string search and comparison (`search`) and string
  building and number conversion (`transform`).

## What it does not do

`cubmap` does not open a window, run a game loop, read the keyboard or
cast rays. `Canvas` is an in-memory pixel grid only; nothing shows it on
screen. The `cubmap` command checks the header and the map's characters and
player count, but does not check that the map is closed in by walls; call
`flood_fill` for that.