import math

import pytest

from cubraycaster.errors import CubError, ErrorKind
from cubraycaster.scene import load_scene, parse_scene

HEADER = (
    "NO ./north.xpm\n"
    "SO ./south.xpm\n"
    "WE ./west.xpm\n"
    "EA ./east.xpm\n"
    "\n"
    "F 220,100,0\n"
    "C 225,30,0\n"
    "\n"
)
MAP = ["111111\n", "100101\n", "1000N1\n", "111111\n"]


def write(tmp_path, text, name="scene.cub"):
    path = tmp_path / name
    path.write_text(text)
    return path


def test_load_scene(tmp_path):
    scene = load_scene(write(tmp_path, HEADER + "".join(MAP)))
    assert scene.texture_paths == ("./north.xpm", "./east.xpm", "./south.xpm", "./west.xpm")
    assert scene.floor == (220, 100, 0)
    assert scene.ceiling == (225, 30, 0)
    assert scene.angle == pytest.approx(math.pi / 2)
    assert scene.height == len(MAP) + 2
    assert scene.grid[int(scene.player_y)][int(scene.player_x)] == "N"


def test_packed_colors(tmp_path):
    scene = load_scene(write(tmp_path, HEADER + "".join(MAP)))
    assert (scene.floor_color >> 16, (scene.floor_color >> 8) & 0xFF, scene.floor_color & 0xFF) == scene.floor
    assert scene.ceiling_color >> 16 == scene.ceiling[0]


def test_wrong_extension(tmp_path):
    with pytest.raises(CubError) as info:
        load_scene(write(tmp_path, HEADER + "".join(MAP), name="scene.txt"))
    assert info.value.kind is ErrorKind.EXTENSION


def test_open_map():
    lines = (HEADER + "".join(MAP[:-1] + ["110111\n"])).splitlines(keepends=True)
    with pytest.raises(CubError) as info:
        parse_scene(lines)
    assert info.value.kind is ErrorKind.MAP_OPEN


def test_settings_after_map():
    lines = ("".join(MAP) + "\n" + HEADER).splitlines(keepends=True)
    with pytest.raises(CubError) as info:
        parse_scene(lines)
    assert info.value.kind is ErrorKind.TEXTURES_AFTER_MAP


def test_map_too_short():
    lines = (HEADER + "111\n111\n").splitlines(keepends=True)
    with pytest.raises(CubError) as info:
        parse_scene(lines)
    assert info.value.kind is ErrorKind.MAP_INVALID


def test_missing_start():
    lines = (HEADER + "111\n101\n111\n").splitlines(keepends=True)
    with pytest.raises(CubError) as info:
        parse_scene(lines)
    assert info.value.kind is ErrorKind.STARTING_POINT