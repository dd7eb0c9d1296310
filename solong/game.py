"""Game state and the rules for moving the player."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from enum import IntEnum
from pathlib import Path
from typing import TextIO

from solong.mapfile import (
    TILE_SIZE,
    WALL,
    MapError,
    count_columns,
    count_items,
    count_lines,
    is_surrounded_by_walls,
    load_map,
)
from solong.pathcheck import is_valid_path


class Key(IntEnum):
    """Key codes the game reacts to."""

    A = 0
    S = 1
    D = 2
    W = 13
    ESC = 53


@dataclass
class Game:
    """A running game: the grid, the player and the counters.

    player_x is the row of the player and player_y its column.
    """

    grid: list[list[str]]
    width: int
    height: int
    total_coll: int
    collected: int = 0
    moves: int = 0
    player_x: int = 0
    player_y: int = 0
    exit_x: int = -1
    exit_y: int = -1
    running: bool = True
    won: bool = False
    out: TextIO | None = field(default=None, repr=False)

    @classmethod
    def from_text(cls, text: str) -> "Game":
        """Build a game from map text, checking the walls and the path."""
        game = cls(
            grid=[list(row) for row in text.split("\n") if row],
            width=count_columns(text) * TILE_SIZE,
            height=count_lines(text) * TILE_SIZE,
            total_coll=count_items(text),
        )
        game.find_player()
        if not is_surrounded_by_walls(
            ["".join(row) for row in game.grid],
            game.width // TILE_SIZE,
            game.height // TILE_SIZE,
        ):
            raise MapError("Map doit être entourée de murs.")
        if not is_valid_path(game.grid):
            raise MapError("Pas de chemin valide.")
        return game

    @classmethod
    def from_file(cls, path: str | Path) -> "Game":
        """Build a game from a map file."""
        return cls.from_text(load_map(path))

    def _say(self, message: str) -> None:
        print(message, file=self.out or sys.stdout)

    def find_player(self) -> tuple[int, int]:
        """Locate the player, store and return (row, column)."""
        for row_index, row in enumerate(self.grid):
            for col_index, char in enumerate(row):
                if char == "P":
                    self.player_x, self.player_y = row_index, col_index
                    return (row_index, col_index)
        raise MapError("Il faut au moins une position de depart.")

    def _tile(self, row: int, col: int) -> str:
        if 0 <= row < len(self.grid) and 0 <= col < len(self.grid[row]):
            return self.grid[row][col]
        return WALL

    def move_player(self, new_x: int, new_y: int) -> bool:
        """Move the player to row new_x, column new_y; False if a wall blocks."""
        target = self._tile(new_x, new_y)
        if target == WALL:
            return False
        if target == "C":
            self.collected += 1
            self.grid[new_x][new_y] = "0"
        elif target == "E":
            if self.collected == self.total_coll:
                self._say("Félicitations,\ntu as GAGNÉ !!!!!")
                self.won = True
                self.close()
                return True
            self.exit_x, self.exit_y = new_x, new_y
        if (self.player_x, self.player_y) == (self.exit_x, self.exit_y):
            self.grid[self.player_x][self.player_y] = "E"
        else:
            self.grid[self.player_x][self.player_y] = "0"
        self.player_x, self.player_y = new_x, new_y
        self.grid[new_x][new_y] = "P"
        self.moves += 1
        self._say(f"Total moves : {self.moves}")
        return True

    def handle_key(self, key: int) -> bool:
        """React to a key code; True if the game state changed."""
        if key == Key.ESC:
            self.close()
            return True
        steps = {
            Key.W: (-1, 0),
            Key.A: (0, -1),
            Key.S: (1, 0),
            Key.D: (0, 1),
        }
        if key not in steps:
            return False
        drow, dcol = steps[Key(key)]
        return self.move_player(self.player_x + drow, self.player_y + dcol)

    def close(self) -> None:
        """End the game."""
        self._say("Fin du jeu...")
        self.running = False

    def window_size(self) -> tuple[int, int]:
        """Window (width, height) in pixels."""
        return (self.width, self.height)