"""Images, their on-screen instances, draw calls and raw textures."""

from __future__ import annotations

import struct
from dataclasses import dataclass

from mlxkit.mlx.errors import MlxErrno, MlxError

BPP = 4
MAX_DIMENSION = 32767


def _f32(x: float) -> float:
    """Round ``x`` to single precision."""
    return struct.unpack("f", struct.pack("f", x))[0]


def _check_dimensions(width: int, height: int) -> None:
    if not (0 < width <= MAX_DIMENSION and 0 < height <= MAX_DIMENSION):
        raise MlxError(MlxErrno.INVDIM)


def draw_pixel(pixels: bytearray | memoryview, offset: int, color: int) -> None:
    """Store an RGBA colour as four bytes, red first, at ``offset``."""
    if not 0 <= offset <= len(pixels) - BPP:
        raise IndexError(f"pixel offset {offset} outside a buffer of {len(pixels)} bytes")
    pixels[offset : offset + BPP] = (color & 0xFFFFFFFF).to_bytes(BPP, "big")


@dataclass
class Instance:
    """One placement of an image in the window."""

    x: int
    y: int
    z: int
    enabled: bool = True


@dataclass
class Texture:
    """Raw pixel data in memory, not shown anywhere."""

    width: int
    height: int
    pixels: bytearray
    bytes_per_pixel: int = BPP

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0 or self.bytes_per_pixel <= 0:
            raise ValueError("texture dimensions must not be negative")
        expected = self.width * self.height * self.bytes_per_pixel
        if len(self.pixels) != expected:
            raise ValueError(
                f"texture of {self.width}x{self.height} needs {expected} bytes, "
                f"got {len(self.pixels)}"
            )
        self.pixels = bytearray(self.pixels)


class Image:
    """An RGBA pixel buffer that can be placed in a window any number of times."""

    def __init__(self, width: int, height: int) -> None:
        _check_dimensions(width, height)
        self.width = width
        self.height = height
        self.pixels = bytearray(width * height * BPP)
        self.instances: list[Instance] = []
        self.enabled = True

    def __repr__(self) -> str:
        return (
            f"Image(width={self.width}, height={self.height}, "
            f"instances={len(self.instances)})"
        )

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Set the pixel at (``x``, ``y``) to an RGBA colour."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise MlxError(MlxErrno.INVPOS)
        draw_pixel(self.pixels, (y * self.width + x) * BPP, color)

    def resize(self, width: int, height: int) -> None:
        """Scale the pixel buffer to a new size by nearest-neighbour sampling."""
        _check_dimensions(width, height)
        if width == self.width and height == self.height:
            return
        wstep = _f32(_f32(self.width) / _f32(width))
        hstep = _f32(_f32(self.height) / _f32(height))
        columns = [int(_f32(i * wstep)) for i in range(width)]
        source = bytes(self.pixels)
        rows = []
        for j in range(height):
            base = int(_f32(j * hstep)) * self.width
            rows.append(
                b"".join(
                    source[(base + column) * BPP : (base + column + 1) * BPP]
                    for column in columns
                )
            )
        self.pixels = bytearray(b"".join(rows))
        self.width = width
        self.height = height


@dataclass
class DrawCall:
    """A request to draw one instance of an image."""

    image: Image
    instance_id: int

    @property
    def instance(self) -> Instance:
        return self.image.instances[self.instance_id]

    @property
    def z(self) -> int:
        return self.instance.z


def texture_to_image(texture: Texture) -> Image:
    """Create an image holding a copy of the texture's pixels."""
    if texture.bytes_per_pixel != BPP:
        raise ValueError(f"textures must have {BPP} bytes per pixel")
    image = Image(texture.width, texture.height)
    image.pixels[:] = texture.pixels
    return image