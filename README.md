# raycube

raycube reads `.cub` scene files for a grid-based raycaster, checks them,
and opens a game window for valid scenes. It also decodes XPM pictures into
in-memory images.

## Scene files

A `.cub` file holds six identifier lines followed by a map:

```
NO ./textures/north.xpm
SO ./textures/south.xpm
WE ./textures/west.xpm
EA ./textures/east.xpm
F 220,100,0
C 225,30,0

        1111111111111
        1000000000001
        1111110N00001
        1111111111111
```

`raycube.parsing.parse_cub` raises `ParseError` when any of the following holds:

- the file name does not end in `.cub`, or the file cannot be read or is empty;
- an identifier is missing, or a line starting with one comes after the map has started;
- one of the `NO`, `SO`, `WE`, `EA` paths does not end in `.xpm`;
- `F` or `C` is not three comma-separated numbers, each made of digits only and between 0 and 255;
- there is no map;
- the map contains a character other than `0`, `1`, `N`, `S`, `E`, `W`, space or tab;
- the map has more than one spawn point;
- from the spawn point the player could walk onto a space or off the edge of the map.

Blanks inside identifier values are removed. When an identifier appears more
than once, the last line wins.

```python
from raycube.parsing import parse_cub, ParseError

try:
    config = parse_cub("maps/level.cub")
except ParseError as exc:
    print(exc)
else:
    print(config.north, config.floor, config.spawn)
```

The returned `CubConfig` holds the texture paths (`north`, `south`, `west`,
`east`), the `floor` and `ceiling` colours as `(red, green, blue)` tuples,
the map rows as `grid`, and `spawn` as `(row, column)` of the spawn point,
or `None` when the map has none.

The steps of the check are also available one by one: `read_lines`,
`first_map_line`, `count_identifiers`, `check_flag_position`,
`extract_textures`, `parse_rgb`, `check_texture_extensions`,
`copy_map_lines`, `flood_fill` and `walkable`.

## XPM images

```python
from raycube.xpm import xpm_file_to_image

image = xpm_file_to_image("textures/north.xpm")
print(image.width, image.height, hex(image.get_pixel(0, 0)))
```

`xpm_to_image` takes the XPM strings from memory instead of a file.
Colours may be given as `#rrggbb` or as X11 colour names
(`raycube.colornames.text_to_rgb`); pixels whose colour is `None` get the
value `0xFF000000`. Malformed data raises `XpmError`.

`raycube.image.Image` is a packed pixel buffer with `set_pixel` and
`get_pixel`; `good_color` and `rgb_shifts` convert 0xRRGGBB colours for
displays of fewer than 24 bits.

## Command line

```
raycube maps/level.cub
```

The command checks the scene and, when it is valid, opens a 1920x1080
window titled "Cub3D". Releasing Escape or closing the window quits. When
the scene is invalid, or not exactly one argument is given, the command
prints an error to standard error and exits with status 1.

## What it does not do

The game window stays blank: the package draws no walls, floor or ceiling,
does not load the textures named in the scene, and has no player movement.
Its main loop only handles the quit keys and the window's close button.

## Installing

```
pip install .
pip install .[test]   # adds pytest for running the test suite
```