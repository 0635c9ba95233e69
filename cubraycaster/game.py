"""The interactive game: player movement, input handling and the main loop."""

from __future__ import annotations

import math
import sys
from collections.abc import Sequence
from dataclasses import dataclass

from .errors import CubError
from .image import Image
from .raycast import sign, trace_ray
from .render import draw_background, draw_minimap, render_view
from .scene import Scene, load_scene
from .xpm import XpmError, load_xpm

WINDOW_WIDTH = 1024
WINDOW_HEIGHT = 768
STEP_LINE = 0.1
STEP_ANGLE = math.pi / 60
MOUSE_DAMPING = 0.001
FRAME_DELAY_MS = 5
TITLE = "data"

KEY_ESCAPE = 65307
KEY_LEFT = 65361
KEY_UP = 65362
KEY_RIGHT = 65363
KEY_DOWN = 65364
KEY_A = 97
KEY_D = 100
KEY_Q = 113
KEY_S = 115
KEY_W = 119

_MOVES = {
    KEY_UP: 0,
    KEY_W: 0,
    KEY_DOWN: 2,
    KEY_S: 2,
    KEY_A: 1,
    KEY_D: -1,
}
_TURNS = {KEY_LEFT: STEP_ANGLE, KEY_RIGHT: -STEP_ANGLE}
_FULL_TURN = 2 * math.pi


@dataclass
class Player:
    """Position on the padded grid and view angle in radians."""

    x: float
    y: float
    angle: float

    def move(self, grid: Sequence[str], direction: int) -> None:
        """Step one move length in ``direction`` quarter turns from the view.

        Each axis of the step is cancelled when a wall lies closer than the
        step along that axis.
        """
        heading = self.angle + direction * math.pi / 2
        move_x = STEP_LINE * math.cos(heading)
        move_y = STEP_LINE * math.sin(heading)
        vertical = trace_ray(grid, self.x, self.y, sign(move_y) * math.pi / 2)
        if vertical.distance < abs(move_y):
            move_y = 0.0
        horizontal = trace_ray(
            grid, self.x, self.y, (1 - (sign(move_x) + 1) // 2) * math.pi
        )
        if horizontal.distance < abs(move_x):
            move_x = 0.0
        self.x += move_x
        self.y -= move_y

    def turn(self, delta: float) -> None:
        """Rotate by ``delta`` radians, keeping the angle in [0, 2*pi)."""
        self.angle += delta
        if self.angle >= _FULL_TURN:
            self.angle -= _FULL_TURN
        if self.angle < 0:
            self.angle += _FULL_TURN


class Game:
    """A scene being played: the player, the textures and the view state."""

    WIDTH = WINDOW_WIDTH
    HEIGHT = WINDOW_HEIGHT

    def __init__(self, scene: Scene, textures: Sequence[Image]) -> None:
        if len(textures) != 4:
            raise ValueError("four wall textures are needed: north, east, south, west")
        self.scene = scene
        self.textures = list(textures)
        self.player = Player(scene.player_x, scene.player_y, scene.angle)
        self.minimap = False
        self.running = True
        self.image: Image | None = None

    def handle_key(self, key: int) -> bool:
        """Apply a key press given as a keysym; return True if it was used."""
        if key == KEY_ESCAPE:
            self.running = False
        elif key in _MOVES:
            self.player.move(self.scene.grid, _MOVES[key])
        elif key in _TURNS:
            self.player.turn(_TURNS[key])
        elif key == KEY_Q:
            self.minimap = not self.minimap
        else:
            return False
        return True

    def handle_mouse(self, mouse_x: int) -> None:
        """Turn towards the side of the window the pointer is on."""
        half = self.WIDTH // 2
        if mouse_x < half:
            self.player.turn(STEP_ANGLE - MOUSE_DAMPING)
        elif mouse_x > half:
            self.player.turn(MOUSE_DAMPING - STEP_ANGLE)

    def render(self) -> Image:
        """Draw the current view into a fresh image and return it."""
        image = Image(self.WIDTH, self.HEIGHT)
        draw_background(image, self.scene.ceiling_color, self.scene.floor_color)
        render_view(
            image,
            self.scene.grid,
            self.player.x,
            self.player.y,
            self.player.angle,
            self.textures,
        )
        if self.minimap:
            draw_minimap(image, self.scene.grid, self.player.x, self.player.y)
        self.image = image
        return image

    def run(self) -> None:
        """Open a window and play until the window is closed or Escape is pressed."""
        import pygame

        keys = {
            pygame.K_ESCAPE: KEY_ESCAPE,
            pygame.K_LEFT: KEY_LEFT,
            pygame.K_UP: KEY_UP,
            pygame.K_RIGHT: KEY_RIGHT,
            pygame.K_DOWN: KEY_DOWN,
        }
        size = (self.WIDTH, self.HEIGHT)
        centre = (self.WIDTH // 2, self.HEIGHT // 2)
        pygame.init()
        try:
            screen = pygame.display.set_mode(size)
            pygame.display.set_caption(TITLE)
            while self.running:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        self.running = False
                    elif event.type == pygame.KEYDOWN:
                        self.handle_key(keys.get(event.key, event.key))
                if not self.running:
                    break
                mouse_x, _ = pygame.mouse.get_pos()
                self.handle_mouse(mouse_x)
                pygame.mouse.set_pos(centre)
                image = self.render()
                surface = pygame.image.frombuffer(image.to_bytes(), size, "BGRA")
                screen.blit(surface.convert(), (0, 0))
                pygame.display.flip()
                pygame.time.wait(FRAME_DELAY_MS)
        finally:
            pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Load the scene named on the command line and play it."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        return 1
    try:
        scene = load_scene(args[0])
    except CubError as exc:
        print(f"Error\n{exc}", file=sys.stderr)
        return 1
    for row in scene.grid:
        print(row)
    textures = []
    for path in scene.texture_paths:
        try:
            textures.append(load_xpm(path))
        except XpmError:
            print(f"Error\nCan't read texture file: {path}", file=sys.stderr)
            return 1
    Game(scene, textures).run()
    return 0