"""Reader for XPM images, the texture format used by the game."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Iterator

from solong.colors import lookup_color

TRANSPARENT = 0xFF000000


class XpmError(ValueError):
    """Raised when XPM data cannot be parsed."""


@dataclass
class XpmImage:
    """A decoded image: row-major 0xAARRGGBB pixel values."""

    width: int
    height: int
    pixels: list[int] = field(default_factory=list)

    def pixel(self, x: int, y: int) -> int:
        """Return the colour at column x, row y."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return self.pixels[y * self.width + x]


def split_words(text: str) -> list[str]:
    """Split text into words separated by spaces or tabs."""
    return [word for word in re.split(r"[ \t]+", text) if word]


def find_unquoted(text: str, needle: str) -> int:
    """Return the first position of needle outside double quotes, or -1."""
    if not needle or len(needle) > len(text):
        return -1
    quoted = False
    for pos, char in enumerate(text[: len(text) - len(needle) + 1]):
        if char == '"':
            quoted = not quoted
        if not quoted and text.startswith(needle, pos):
            return pos
    return -1


def _blank(text: str, start: int, stop: int) -> str:
    return text[:start] + " " * (stop - start) + text[stop:]


def strip_comments(text: str) -> str:
    """Replace C-style comments outside strings by spaces, keeping the length."""
    while (begin := find_unquoted(text, "/*")) != -1:
        end = text.find("*/", begin + 2)
        stop = len(text) if end == -1 else end + 2
        text = _blank(text, begin, stop)
    while (begin := find_unquoted(text, "//")) != -1:
        end = text.find("\n", begin + 2)
        stop = len(text) if end == -1 else end + 1
        text = _blank(text, begin, stop)
    return text


def _hex_prefix(text: str) -> int:
    match = re.match(r"[ \t\n\r\f\v]*([+-]?)(?:0[xX])?([0-9a-fA-F]+)", text)
    if not match:
        return 0
    value = int(match.group(2), 16)
    return -value if match.group(1) == "-" else value


def text_to_rgb(name: str, end: str | None) -> int:
    """Turn an XPM colour spec into 0xRRGGBB; -1 for "None", 0 if unknown.

    A second word, when given, is joined to the name with a space before
    looking it up, so "light blue" may arrive split in two.
    """
    if name.startswith("#"):
        return _hex_prefix(name[1:])
    if end:
        name = f"{name} {end}"
    color = lookup_color(name)
    return 0 if color is None else color


def _atoi(word: str) -> int:
    match = re.match(r"[ \t\n\r\f\v]*([+-]?\d+)", word)
    return int(match.group(1)) if match else 0


def _next_line(lines: Iterator[str], what: str) -> str:
    try:
        return next(lines)
    except StopIteration:
        raise XpmError(f"missing {what}") from None


def parse_xpm(lines: Iterable[str]) -> XpmImage:
    """Decode an image from its XPM strings (header, colours, pixel rows)."""
    rows = iter(lines)
    header = split_words(_next_line(rows, "header"))
    values = [_atoi(word) for word in header[:4]]
    if len(values) < 4 or not all(values):
        raise XpmError(f"bad header: {' '.join(header)!r}")
    width, height, ncolors, cpp = values

    direct = cpp <= 2
    palette: dict[str, int] = {}
    for _ in range(ncolors):
        line = _next_line(rows, "colour definition")
        words = split_words(line[cpp:])
        try:
            index = words.index("c") + 1
        except ValueError:
            raise XpmError(f"no colour key in {line!r}") from None
        if index >= len(words):
            raise XpmError(f"no colour after key in {line!r}")
        rgb = text_to_rgb(words[index], words[index + 1] if index + 1 < len(words) else None)
        key = line[:cpp]
        if direct:
            palette[key] = rgb
        else:
            palette.setdefault(key, rgb)

    pixels: list[int] = []
    for _ in range(height):
        line = _next_line(rows, "pixel row")
        for x in range(width):
            color = palette.get(line[cpp * x : cpp * x + cpp], 0)
            pixels.append(TRANSPARENT if color == -1 else color)
    return XpmImage(width, height, pixels)


def quoted_strings(text: str) -> Iterator[str]:
    """Yield the contents of successive double-quoted strings in text."""
    pos = 0
    while (start := text.find('"', pos)) != -1:
        stop = text.find('"', start + 1)
        if stop == -1:
            return
        yield text[start + 1 : stop]
        pos = stop + 1


def read_xpm_file(path: str | Path) -> XpmImage:
    """Read and decode an XPM file. OSError propagates if it cannot be read."""
    text = Path(path).read_text(encoding="latin-1")
    return parse_xpm(quoted_strings(strip_comments(text)))