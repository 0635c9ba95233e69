# cubraycaster

A small first-person raycasting engine. It reads a `.cub` scene file and draws
the scene as a textured 3D view in a pygame window. A scene file gives the wall
textures, the floor and ceiling colours, and a grid map.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Running

```
cubraycaster path/to/scene.cub
```

The command needs exactly one argument, and that argument must end in `.cub`.
With any other number of arguments, it exits with status 1 and prints nothing.

If the scene is invalid, the command writes `Error` and a description of the
problem to standard error, then exits with status 1. A texture that cannot be
read is reported the same way: `Error` followed by
`Can't read texture file: <path>`.

If the scene is valid, the command prints the padded map grid to standard
output and opens a 1024x768 window.

### Controls

| Key                | Action                    |
|--------------------|---------------------------|
| `W` / Up arrow     | move forward              |
| `S` / Down arrow   | move backward             |
| `A` / `D`          | strafe left / right       |
| Left / Right arrow | turn                      |
| `Q`                | show or hide the minimap  |
| `Esc`              | quit                      |

Closing the window also quits.

On every frame the view turns toward the side of the window the mouse pointer
is on, and the pointer is then moved back to the centre.

Moving is blocked along an axis when a wall on that axis is closer than one
step.

## The `.cub` format

```
NO ./textures/north.xpm
SO ./textures/south.xpm
WE ./textures/west.xpm
EA ./textures/east.xpm

F 220,100,0
C 225,30,0

111111
100101
101001
1100N1
111111
```

- `NO`, `SO`, `WE` and `EA` give the paths of the XPM wall textures.
- `F` and `C` give the floor and ceiling colours as `R,G,B`. Each channel must
  be from 0 to 255. Negative numbers and any characters other than digits,
  blanks and the two commas are rejected.
- Each setting identifier must start its line.
- Exactly six setting lines must come before the map. Only blank lines may sit
  between them.
- The map is the first run of lines that start with `1` or `0`. Leading spaces
  and tabs are allowed. The map needs at least three rows.
- The map is made of the following cells:
  - `1` for a wall.
  - `0` for floor.
  - Spaces, which count as outside the map.
  - Exactly one of `N`, `S`, `E` or `W`, which marks the player's start and
    facing direction.
- Every floor cell and the start cell must be surrounded by walls or floor, so
  the map is closed.
- Nothing except whitespace may follow the map.

## Library use

The parts that do not need a display can be used on their own:

```python
from cubraycaster.scene import load_scene
from cubraycaster.raycast import trace_ray
from cubraycaster.xpm import load_xpm
from cubraycaster.colors import color_by_name

scene = load_scene("maps/room.cub")
print(scene.floor_color, scene.ceiling_color, scene.texture_paths)

hit = trace_ray(scene.grid, scene.player_x, scene.player_y, scene.angle)
print(hit.distance, hit.texture, hit.shift)

texture = load_xpm("textures/north.xpm")   # an Image of 32-bit pixels
print(texture.width, texture.height, texture.get_pixel(0, 0))

color_by_name("steel blue")                # 0x4682B4
```

The modules:

- `cubraycaster.scene`
  - `load_scene` and `parse_scene` return a frozen `Scene`.
  - Its `grid` is the map padded with `X` border cells.
  - Its `player_x`, `player_y` and `angle` give the player's start position
    and facing direction.
- `cubraycaster.config` holds the checks for the settings part of a scene
  file.
- `cubraycaster.mapgrid` holds the checks for the map part.
- `cubraycaster.errors`
  - Parse errors are raised as `CubError`.
  - Each `CubError` carries an `ErrorKind` in its `kind` attribute.
- `cubraycaster.raycast`
  - `trace_ray` follows a ray through the grid and returns a `RayHit`.
  - The `RayHit` holds the distance, the wall texture index (north, east,
    south, west) and the position within the texture.
- `cubraycaster.render`
  - `draw_background` paints the ceiling and floor.
  - `render_view` draws the walls.
  - `draw_minimap` draws an overhead map into an `Image`.
- `cubraycaster.image`
  - `Image` is a flat buffer of 32-bit pixels.
  - `convert_color` packs a colour for visuals of less than 24 bits.
- `cubraycaster.xpm`
  - `load_xpm` and `parse_xpm` read XPM images.
  - Colours can be given as `#hex` values or as names.
  - The colour `None` becomes 0xFF000000.
- `cubraycaster.game`
  - `Game` and `Player` hold the game state and handle input.
  - `Game.render` returns a frame without opening a window.
  - `main` is the command's entry point.

## Limitations

- Wall textures must be XPM files. No other image format is read.
- The window size is fixed at 1024x768.
- The map only knows walls and floor. It has no doors, sprites or other
  objects.