"""Reading XPM pixmaps, from C source files or from lists of strings."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from pathlib import Path

from tilecrawl.colors import NONE, parse_color
from tilecrawl.image import Image

# Pixel value written for the colour "none".
TRANSPARENT = 0xFF000000

_WORD_SEPARATORS = re.compile(r"[ \t]+")
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class XpmError(ValueError):
    """Raised when XPM data cannot be parsed."""


def split_words(text: str) -> list[str]:
    """Split ``text`` on spaces and tabs, dropping empty words."""
    return [word for word in _WORD_SEPARATORS.split(text) if word]


def find(text: str, needle: str) -> int:
    """Return the index of the first ``needle`` in ``text``, or -1."""
    return text.find(needle)


def find_unquoted(text: str, needle: str) -> int:
    """Return the index of the first ``needle`` outside double quotes, or -1."""
    quoted = False
    for pos in range(len(text) - len(needle) + 1):
        if text[pos] == '"':
            quoted = not quoted
        if not quoted and text.startswith(needle, pos):
            return pos
    return -1


def _blank(text: str, start: int, length: int) -> str:
    length = min(length, len(text) - start)
    return text[:start] + " " * length + text[start + length:]


def strip_comments(text: str) -> str:
    """Replace C comments outside strings with spaces, keeping the length."""
    for opener, closer, extra in (("/*", "*/", 4), ("//", "\n", 3)):
        while (begin := find_unquoted(text, opener)) != -1:
            end = find(text[begin + 2:], closer)
            text = _blank(text, begin, end + extra)
    return text


def quoted_lines(text: str) -> Iterator[str]:
    """Yield the contents of each double-quoted string in ``text``, in order."""
    pos = 0
    while (open_at := text.find('"', pos)) != -1:
        close_at = text.find('"', open_at + 1)
        if close_at == -1:
            return
        yield text[open_at + 1:close_at]
        pos = close_at + 1


def _atoi(word: str) -> int:
    match = _LEADING_INT.match(word)
    return int(match.group(1)) if match else 0


def _next_line(lines: Iterator[str], what: str) -> str:
    line = next(lines, None)
    if line is None:
        raise XpmError(f"XPM data ends before {what}")
    return line


def parse_xpm(lines: Iterable[str]) -> list[list[int]]:
    """Parse XPM strings into rows of 0xRRGGBB values.

    ``lines`` are the XPM strings without quotes: the header, the colour
    lines, then the pixel rows. Pixels of colour ``none`` become
    ``TRANSPARENT``; characters with no colour defined become 0.
    """
    source = iter(lines)
    words = split_words(_next_line(source, "the header"))
    if len(words) < 4:
        raise XpmError("XPM header needs width, height, colours and chars per pixel")
    width, height, ncolors, cpp = (_atoi(word) for word in words[:4])
    if min(width, height, ncolors, cpp) <= 0:
        raise XpmError(f"bad XPM header: {' '.join(words[:4])}")

    # One or two characters per pixel: later definitions replace earlier ones.
    # Longer keys: the first definition is the one used.
    replace = cpp <= 2
    palette: dict[str, int] = {}
    for _ in range(ncolors):
        line = _next_line(source, "all colours are defined")
        fields = split_words(line[cpp:])
        try:
            at = fields.index("c") + 1
        except ValueError:
            raise XpmError(f"colour line without a 'c' entry: {line!r}") from None
        if at >= len(fields):
            raise XpmError(f"colour line without a colour: {line!r}")
        suffix = fields[at + 1] if at + 1 < len(fields) else None
        value = parse_color(fields[at], suffix)
        key = line[:cpp]
        if replace:
            palette[key] = value
        else:
            palette.setdefault(key, value)

    rows = []
    for _ in range(height):
        line = _next_line(source, "all pixel rows are read")
        if len(line) < width * cpp:
            raise XpmError(f"pixel row too short: {line!r}")
        row = [palette.get(line[start:start + cpp], 0) for start in range(0, width * cpp, cpp)]
        rows.append([TRANSPARENT if color == NONE else color for color in row])
    return rows


def xpm_to_image(lines: Iterable[str]) -> Image:
    """Build an :class:`Image` from XPM strings."""
    rows = parse_xpm(lines)
    image = Image(len(rows[0]), len(rows))
    for y, row in enumerate(rows):
        for x, color in enumerate(row):
            image.set_pixel(x, y, color)
    return image


def xpm_file_to_image(path: str | Path) -> Image:
    """Load an XPM file, as written in C source form, into an :class:`Image`."""
    text = Path(path).read_bytes().decode("latin-1")
    return xpm_to_image(quoted_lines(strip_comments(text)))