"""Hashing, colour conversion, line reading and render-queue ordering."""

from __future__ import annotations

import bisect
import struct
from collections.abc import MutableSequence
from typing import IO, AnyStr, Protocol

FNV_PRIME = 0x100000001B3
FNV_OFFSET = 0xCBF29CE484222325
_MASK64 = 2**64 - 1


class _Layered(Protocol):
    @property
    def z(self) -> int: ...


def fnv_hash(data: str | bytes, length: int) -> int:
    """64-bit FNV-1a hash of the first ``length`` bytes of ``data``.

    Bytes of 0x80 and above are sign-extended before mixing, as a signed
    ``char`` would be.
    """
    raw = data.encode("latin-1") if isinstance(data, str) else bytes(data)
    if length < 0 or length > len(raw):
        raise ValueError(f"length {length} out of range for {len(raw)} bytes")
    value = FNV_OFFSET
    for byte in raw[:length]:
        if byte >= 0x80:
            byte = (byte - 0x100) & _MASK64
        value = ((value ^ byte) * FNV_PRIME) & _MASK64
    return value


def _f32(x: float) -> float:
    return struct.unpack("f", struct.pack("f", x))[0]


_WEIGHT_R = _f32(0.299)
_WEIGHT_G = _f32(0.587)
_WEIGHT_B = _f32(0.114)


def rgba_to_mono(color: int) -> int:
    """Convert an RGBA colour to grey, keeping its alpha channel."""
    if not 0 <= color <= 0xFFFFFFFF:
        raise ValueError(f"colour {color:#x} is not a 32-bit RGBA value")
    r = int(_f32(_WEIGHT_R * ((color >> 24) & 0xFF))) & 0xFF
    g = int(_f32(_WEIGHT_G * ((color >> 16) & 0xFF))) & 0xFF
    b = int(_f32(_WEIGHT_B * ((color >> 8) & 0xFF))) & 0xFF
    y = (r + g + b) & 0xFF
    return y << 24 | y << 16 | y << 8 | (color & 0xFF)


def read_line(stream: IO[AnyStr]) -> AnyStr | None:
    """Read one line, newline included; None once the stream is exhausted."""
    line = stream.readline()
    return line if line else None


def sort_render_queue(queue: MutableSequence[_Layered]) -> None:
    """Order draw calls by ascending ``z``, in place.

    Each entry is placed before the first already-sorted entry whose depth
    is not smaller, so entries of equal depth end up in reverse order.
    """
    ordered: list[_Layered] = []
    depths: list[int] = []
    for entry in queue:
        index = bisect.bisect_left(depths, entry.z)
        ordered.insert(index, entry)
        depths.insert(index, entry.z)
    queue[:] = ordered