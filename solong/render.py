"""Drawing the game with pygame and the command-line entry point."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Iterator, Mapping

import pygame

from solong.game import Game, Key
from solong.mapfile import TILE_SIZE, MapError, check_map, read_map
from solong.xpm import XpmImage, read_xpm_file

TEXTURE_FILES = {
    "back": "empty.xpm",
    "collectible": "item.xpm",
    "exit": "exit.xpm",
    "player": "player.xpm",
    "wall": "wall.xpm",
}

_TILE_TEXTURES = {"1": "wall", "C": "collectible", "E": "exit", "P": "player"}

_KEYS = {
    pygame.K_ESCAPE: Key.ESC,
    pygame.K_w: Key.W,
    pygame.K_a: Key.A,
    pygame.K_s: Key.S,
    pygame.K_d: Key.D,
}


def tiles_to_draw(game: Game) -> Iterator[tuple[int, int, str]]:
    """Yield (pixel x, pixel y, texture name) in drawing order."""
    for row in range(game.height // TILE_SIZE):
        for col in range(game.width // TILE_SIZE):
            px, py = col * TILE_SIZE, row * TILE_SIZE
            yield (px, py, "back")
            if row < len(game.grid) and col < len(game.grid[row]):
                name = _TILE_TEXTURES.get(game.grid[row][col])
                if name:
                    yield (px, py, name)


def load_textures(directory: str | Path) -> dict[str, XpmImage]:
    """Load the five tile textures from a directory."""
    base = Path(directory)
    return {name: read_xpm_file(base / file) for name, file in TEXTURE_FILES.items()}


def _to_surface(image: XpmImage) -> pygame.Surface:
    surface = pygame.Surface((image.width, image.height), pygame.SRCALPHA)
    for y in range(image.height):
        for x in range(image.width):
            value = image.pixel(x, y)
            alpha = 255 - ((value >> 24) & 0xFF)
            surface.set_at(
                (x, y), ((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF, alpha)
            )
    return surface


class Renderer:
    """Draws a game onto a pygame surface and runs the event loop."""

    def __init__(
        self,
        game: Game,
        textures: Mapping[str, XpmImage],
        screen: pygame.Surface | None = None,
    ) -> None:
        self.game = game
        self.surfaces = {name: _to_surface(image) for name, image in textures.items()}
        self.screen = screen or pygame.Surface(game.window_size(), pygame.SRCALPHA)

    def draw(self) -> None:
        """Draw every tile of the map."""
        for px, py, name in tiles_to_draw(self.game):
            self.screen.blit(self.surfaces[name], (px, py))

    def run(self) -> None:
        """Open the window and play until the game ends."""
        pygame.init()
        try:
            self.screen = pygame.display.set_mode(self.game.window_size())
            pygame.display.set_caption("So long")
            self.draw()
            pygame.display.flip()
            while self.game.running:
                event = pygame.event.wait()
                if event.type == pygame.QUIT:
                    self.game.close()
                elif event.type == pygame.KEYDOWN and event.key in _KEYS:
                    if self.game.handle_key(_KEYS[event.key]) and self.game.running:
                        self.draw()
                        pygame.display.flip()
        finally:
            pygame.quit()


def main(argv: list[str] | None = None) -> int:
    """Validate the map given on the command line and play it."""
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 1:
        print("Error\nIl faut un fichier en parametre.")
        return 1
    path = args[0]
    try:
        info = read_map(path)
    except MapError:
        print("Error\nProblème lors de l'ouverture du fichier vérifiez si il est valide.")
        return 1
    try:
        check_map(path, info)
        game = Game.from_file(path)
    except MapError as exc:
        print(f"Error\n{exc}")
        return 1
    Renderer(game, load_textures("textures")).run()
    return 0