"""Loading and validating .ber map files."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

TILE_SIZE = 32
WALL = "1"
VALID_CHARACTERS = "10PEC"
MAX_WINDOW_LINES = 1920
MAX_WINDOW_COLUMNS = 1080


class MapError(Exception):
    """Raised when a map file cannot be read or is not a valid map."""


@dataclass
class MapInfo:
    """The rows of a map file and the counts taken from its text."""

    rows: list[str] = field(default_factory=list)
    lines: int = 0
    columns: int = 0
    collectibles: int = 0


def has_ber_extension(path: str) -> bool:
    """True if everything from the first '.' of path on is exactly '.ber'."""
    dot = path.find(".")
    return dot != -1 and path[dot:] == ".ber"


def load_map(path: str | Path) -> str:
    """Return the whole text of a map file."""
    try:
        return Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise MapError(
            "Problème avec l'ouverture du fichier, vérifiez si il est valide."
        ) from exc


def count_lines(text: str) -> int:
    """Number of newline characters plus one."""
    return text.count("\n") + 1


def count_columns(text: str) -> int:
    """Length of the first line."""
    return len(text.partition("\n")[0])


def count_items(text: str) -> int:
    """Number of collectibles ('C') in the map text."""
    return text.count("C")


def check_exit(text: str) -> None:
    """Require exactly one exit."""
    exits = text.count("E")
    if exits > 1:
        raise MapError("Il doit y avoir une seule sortie (E).")
    if exits < 1:
        raise MapError("Il doit y avoir au moins une sortie (E).")


def check_items(text: str) -> None:
    """Require at least one collectible."""
    if count_items(text) < 1:
        raise MapError("Il faut au moins un item (C) a collecter.")


def check_start(text: str) -> None:
    """Require exactly one starting position."""
    starts = text.count("P")
    if starts < 1:
        raise MapError("Il faut au moins une position de depart.")
    if starts > 1:
        raise MapError("Il faut une seule position de depart.")


def check_rectangle(info: MapInfo) -> None:
    """Require all lines to have the width of the first; record that width."""
    if not info.rows or info.lines <= 0:
        raise MapError("La carte est vide ou non valide.")
    width = len(info.rows[0])
    for index in range(1, info.lines):
        if index >= len(info.rows) or len(info.rows[index]) != width:
            raise MapError("La carte doit être rectangulaire.")
    info.columns = width


def check_characters(info: MapInfo) -> None:
    """Require every tile to be one of 1, 0, P, E, C."""
    for row in info.rows:
        for char in row:
            if char not in VALID_CHARACTERS:
                raise MapError(f"Caractère invalide dans la map : '{char}'")


def check_size(info: MapInfo) -> None:
    """Reject maps too large for the window."""
    if (
        info.lines * TILE_SIZE > MAX_WINDOW_LINES
        or info.columns * TILE_SIZE > MAX_WINDOW_COLUMNS
    ):
        raise MapError("Map trop grande.")


def read_map(path: str | Path) -> MapInfo:
    """Load a map file into a MapInfo."""
    text = load_map(path)
    return MapInfo(
        rows=[row for row in text.split("\n") if row],
        lines=count_lines(text),
        columns=count_columns(text),
        collectibles=count_items(text),
    )


def check_map(path: str, info: MapInfo) -> MapInfo:
    """Run every map check in order, raising MapError on the first failure."""
    if not has_ber_extension(str(path)):
        raise MapError("La map doit avoir l'extension .ber")
    text = load_map(path)
    check_exit(text)
    check_items(text)
    check_start(text)
    check_rectangle(info)
    check_characters(info)
    check_size(info)
    return info


def _tile(rows: list[str], y: int, x: int) -> str:
    if 0 <= y < len(rows) and 0 <= x < len(rows[y]):
        return rows[y][x]
    return ""


def is_surrounded_by_walls(rows: list[str], width: int, height: int) -> bool:
    """True if the outer border of the width x height grid is all walls."""
    for x in range(width):
        if _tile(rows, 0, x) != WALL or _tile(rows, height - 1, x) != WALL:
            return False
    for y in range(height):
        if _tile(rows, y, 0) != WALL or _tile(rows, y, width - 1) != WALL:
            return False
    return True