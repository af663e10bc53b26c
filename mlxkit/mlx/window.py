"""Window state, cursors, monitors and the view projection matrix."""

from __future__ import annotations

import math
import struct
from collections.abc import Sequence
from dataclasses import dataclass
from enum import IntEnum

from mlxkit.mlx.image import Texture

DONT_CARE = -1


def _f32(x: float) -> float:
    """Round ``x`` to single precision, keeping infinities and NaN."""
    if math.isinf(x) or math.isnan(x):
        return x
    return struct.unpack("f", struct.pack("f", x))[0]


def _div(a: float, b: float) -> float:
    """Floating-point division with IEEE results for a zero divisor."""
    if b != 0:
        return a / b
    if a == 0 or math.isnan(a):
        return math.nan
    negative = (a < 0) != (math.copysign(1.0, b) < 0)
    return -math.inf if negative else math.inf


class CursorShape(IntEnum):
    """Standard system cursor shapes."""

    ARROW = 0x36001
    IBEAM = 0x36002
    CROSSHAIR = 0x36003
    HAND = 0x36004
    HRESIZE = 0x36005
    VRESIZE = 0x36006


class CursorMode(IntEnum):
    """How the cursor behaves over the window."""

    NORMAL = 0x34001
    HIDDEN = 0x34002
    DISABLED = 0x34003


@dataclass(frozen=True)
class Cursor:
    """A cursor built either from a standard shape or from a texture."""

    shape: CursorShape | None = None
    texture: Texture | None = None

    @property
    def width(self) -> int:
        return self.texture.width if self.texture is not None else 0

    @property
    def height(self) -> int:
        return self.texture.height if self.texture is not None else 0


@dataclass(frozen=True)
class Monitor:
    """A display and the size of its current video mode."""

    width: int
    height: int


def create_std_cursor(shape: CursorShape | int) -> Cursor:
    """Create a cursor of a standard shape.

    Accepted shapes run from ARROW up to, but not including, VRESIZE.
    """
    if not CursorShape.ARROW <= shape < CursorShape.VRESIZE:
        raise ValueError(f"invalid standard cursor type: {shape!r}")
    return Cursor(shape=CursorShape(shape))


def create_cursor(texture: Texture) -> Cursor:
    """Create a cursor whose image is the given texture, hotspot at the top left."""
    if texture is None:
        raise TypeError("a texture is required")
    return Cursor(texture=texture)


def get_monitor_size(
    monitors: Sequence[Monitor | None], index: int
) -> tuple[int, int]:
    """Width and height of monitor ``index``; (0, 0) if it is absent."""
    if index < 0:
        raise ValueError("index out of bounds")
    if index >= len(monitors):
        return 0, 0
    monitor = monitors[index]
    if monitor is None:
        return 0, 0
    return monitor.width, monitor.height


def projection_matrix(width: float, height: float, depth: float) -> tuple[float, ...]:
    """Column-major orthographic projection mapping pixels to clip space.

    Values are single precision; a zero depth yields infinite and NaN
    entries, exactly as the float arithmetic does.
    """
    width = _f32(float(width))
    height = _f32(float(height))
    depth = _f32(float(depth))
    span = _f32(depth - -depth)
    values = (
        _div(2.0, width), 0.0, 0.0, 0.0,
        0.0, _div(2.0, -height), 0.0, 0.0,
        0.0, 0.0, _div(-2.0, span), 0.0,
        -1.0, -_div(height, -height), -_div(_f32(depth + -depth), span), 1.0,
    )
    return tuple(_f32(v) for v in values)


@dataclass
class Window:
    """The state of an application window."""

    width: int
    height: int
    title: str
    x: int = 0
    y: int = 0
    resizable: bool = False
    min_width: int = DONT_CARE
    min_height: int = DONT_CARE
    max_width: int = DONT_CARE
    max_height: int = DONT_CARE
    should_close: bool = False
    cursor: Cursor | None = None
    cursor_mode: CursorMode = CursorMode.NORMAL
    icon: Texture | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.title, str):
            raise TypeError("window title must be a string")
        if self.width <= 0:
            raise ValueError("window width must be positive")
        if self.height <= 0:
            raise ValueError("window height must be positive")

    @property
    def position(self) -> tuple[int, int]:
        return self.x, self.y

    def move(self, x: int, y: int) -> None:
        """Place the window's top-left corner at (``x``, ``y``)."""
        self.x = x
        self.y = y

    def resize(self, width: int, height: int) -> None:
        """Change the window's size."""
        self.width = width
        self.height = height

    def set_limits(self, min_w: int, min_h: int, max_w: int, max_h: int) -> None:
        """Set size limits; DONT_CARE (-1) leaves a bound unset."""
        for value in (min_w, min_h, max_w, max_h):
            if value < 0 and value != DONT_CARE:
                raise ValueError(f"invalid window size limit: {value}")
        if DONT_CARE not in (min_w, max_w) and min_w > max_w:
            raise ValueError("minimum width exceeds maximum width")
        if DONT_CARE not in (min_h, max_h) and min_h > max_h:
            raise ValueError("minimum height exceeds maximum height")
        self.min_width = min_w
        self.min_height = min_h
        self.max_width = max_w
        self.max_height = max_h

    def request_close(self) -> None:
        """Flag the window to close at the end of the current frame."""
        self.should_close = True