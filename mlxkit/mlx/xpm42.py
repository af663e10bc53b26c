"""Reading the XPM42 image format.

An XPM42 file starts with the line ``!XPM42``, then a header line
``<width> <height> <colours> <chars-per-pixel> <mode>`` where mode is
``c`` for colour or ``m`` for monochrome. A colour table follows, one
``<key> #RRGGBBAA`` entry per line, then one line of keys per pixel row.
"""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from typing import IO, AnyStr

from mlxkit.libft.chars import is_alnum
from mlxkit.mlx.errors import MlxErrno, MlxError
from mlxkit.mlx.image import BPP, MAX_DIMENSION, Texture
from mlxkit.mlx.utils import fnv_hash, read_line, rgba_to_mono

HEADER_MAGIC = "!XPM42\n"
TABLE_SIZE = 65535
MAX_CPP = 10

_HEX_INT = re.compile(r"\s*([+-]?)0[xX]([0-9a-fA-F]+)")
_OCT_INT = re.compile(r"\s*([+-]?)(0[0-7]*)")
_DEC_INT = re.compile(r"\s*([+-]?)([1-9][0-9]*)")
_MODE_CHAR = re.compile(r"\s*(\S)")
_HEX_CHANNEL = re.compile(r"\s*([+-]?)([0-9a-fA-F]+)")


@dataclass
class Xpm:
    """A decoded XPM42 image."""

    texture: Texture
    color_count: int
    cpp: int
    mode: str


def _invalid() -> MlxError:
    return MlxError(MlxErrno.INVXPM)


def _next_line(stream: IO[AnyStr]) -> str:
    line = read_line(stream)
    if line is None:
        raise _invalid()
    return line.decode("latin-1") if isinstance(line, (bytes, bytearray)) else line


def _scan_int(text: str, pos: int) -> tuple[int, int] | None:
    """Read an integer the way ``%i`` does: hex, octal or decimal."""
    for pattern, base in ((_HEX_INT, 16), (_OCT_INT, 8), (_DEC_INT, 10)):
        match = pattern.match(text, pos)
        if match:
            value = int(match.group(2), base)
            return (-value if match.group(1) == "-" else value), match.end()
    return None


def _parse_header(line: str) -> tuple[int, int, int, int, str]:
    values = []
    pos = 0
    for _ in range(4):
        scanned = _scan_int(line, pos)
        if scanned is None:
            raise _invalid()
        value, pos = scanned
        values.append(value)
    match = _MODE_CHAR.match(line, pos)
    mode = match.group(1) if match else ""
    width, height, color_count, cpp = values
    if not (0 <= width <= MAX_DIMENSION and 0 <= height <= MAX_DIMENSION):
        raise _invalid()
    if mode not in ("c", "m") or not 1 <= cpp <= MAX_CPP or color_count < 0:
        raise _invalid()
    return width, height, color_count, cpp, mode


def _hex_channel(pair: str) -> int:
    match = _HEX_CHANNEL.match(pair)
    if match is None:
        return 0
    value = int(match.group(2), 16)
    return (-value if match.group(1) == "-" else value) & 0xFF


def _key(chars: str, cpp: int) -> int:
    try:
        return fnv_hash(chars, cpp) % TABLE_SIZE
    except UnicodeEncodeError as exc:
        raise _invalid() from exc


def _parse_entry(line: str, cpp: int, mode: str, table: dict[int, int]) -> None:
    if line.rfind(" ") != cpp or len(line) < cpp + 3:
        raise _invalid()
    if not line[cpp].isspace() or line[cpp + 1] != "#" or not is_alnum(line[cpp + 2]):
        raise _invalid()
    start = cpp + 2
    color = 0
    for shift, offset in ((24, 0), (16, 2), (8, 4), (0, 6)):
        color |= _hex_channel(line[start + offset : start + offset + 2]) << shift
    table[_key(line[:cpp], cpp)] = rgba_to_mono(color) if mode == "m" else color


def parse_xpm42(stream: IO[AnyStr]) -> Xpm:
    """Decode an XPM42 image from an open text or binary stream."""
    if _next_line(stream) != HEADER_MAGIC:
        raise _invalid()
    width, height, color_count, cpp, mode = _parse_header(_next_line(stream))

    table: dict[int, int] = {}
    for _ in range(color_count):
        _parse_entry(_next_line(stream), cpp, mode, table)

    rows = []
    for _ in range(height):
        line = _next_line(stream)
        if line.endswith("\n"):
            line = line[:-1]
        if len(line) != width * cpp:
            raise _invalid()
        rows.append(
            b"".join(
                table.get(_key(line[x : x + cpp], cpp), 0).to_bytes(BPP, "big")
                for x in range(0, len(line), cpp)
            )
        )
    texture = Texture(width, height, bytearray(b"".join(rows)))
    return Xpm(texture=texture, color_count=color_count, cpp=cpp, mode=mode)


def load_xpm42(path: str | os.PathLike[str]) -> Xpm:
    """Load an XPM42 file; the path must contain ``.xpm42``."""
    if ".xpm42" not in os.fsdecode(path):
        raise MlxError(MlxErrno.INVEXT)
    try:
        stream = open(path, "rb")
    except OSError as exc:
        raise MlxError(MlxErrno.INVFILE) from exc
    with stream:
        return parse_xpm42(stream)