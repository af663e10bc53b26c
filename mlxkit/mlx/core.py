"""The application context: window, images, render queue, hooks and main loop.

The context keeps all state in memory. Input arrives through the ``emit_*``
methods, which update the pressed keys and buttons and dispatch to the
registered hooks. Each frame runs the loop hooks and returns the draw calls
that would be drawn, in depth order.
"""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass
from enum import IntEnum

from mlxkit.mlx.image import DrawCall, Image, Instance, Texture
from mlxkit.mlx.image import texture_to_image as _texture_to_image
from mlxkit.mlx.utils import sort_render_queue
from mlxkit.mlx.window import Window, projection_matrix


class Action(IntEnum):
    """What happened to a key or mouse button."""

    RELEASE = 0
    PRESS = 1
    REPEAT = 2


@dataclass(frozen=True)
class KeyData:
    """A key event as passed to the key hook."""

    key: int
    action: Action
    os_key: int
    modifier: int


@dataclass
class Settings:
    """Options applied when a context is created."""

    stretch_image: bool = False
    fullscreen: bool = False
    maximized: bool = False
    decorated: bool = True
    headless: bool = False


KeyFunc = Callable[[KeyData], None]
ScrollFunc = Callable[[float, float], None]
MouseFunc = Callable[[int, Action, int], None]
CursorFunc = Callable[[float, float], None]
CloseFunc = Callable[[], None]
ResizeFunc = Callable[[int, int], None]
LoopFunc = Callable[[], None]


def _require_callable(func: object) -> None:
    if not callable(func):
        raise TypeError("hook must be callable")


class Mlx:
    """A window together with its images and event hooks."""

    def __init__(
        self,
        width: int,
        height: int,
        title: str,
        resize: bool = False,
        settings: Settings | None = None,
    ) -> None:
        if not isinstance(title, str):
            raise TypeError("window title must be a string")
        self.settings = settings if settings is not None else Settings()
        self.window = Window(width, height, title, resizable=resize)
        self.initial_width = width
        self.initial_height = height
        self.images: list[Image] = []
        self.render_queue: list[DrawCall] = []
        self.delta_time = 0.0
        self.projection: tuple[float, ...] | None = None
        self.cursor_position: tuple[float, float] = (0.0, 0.0)
        self._zdepth = 0
        self._sort_pending = False
        self._loop_hooks: list[LoopFunc] = []
        self._key_hook: KeyFunc | None = None
        self._scroll_hook: ScrollFunc | None = None
        self._mouse_hook: MouseFunc | None = None
        self._cursor_hook: CursorFunc | None = None
        self._close_hook: CloseFunc | None = None
        self._resize_hook: ResizeFunc | None = None
        self._keys_down: set[int] = set()
        self._buttons_down: set[int] = set()
        self._epoch = time.monotonic()
        self._last_frame = 0.0
        self._alive = True

    def __enter__(self) -> Mlx:
        return self

    def __exit__(self, *exc_info: object) -> None:
        if self._alive:
            self.terminate()

    @property
    def width(self) -> int:
        return self.window.width

    @property
    def height(self) -> int:
        return self.window.height

    @property
    def terminated(self) -> bool:
        return not self._alive

    def _check_alive(self) -> None:
        if not self._alive:
            raise RuntimeError("the context has been terminated")

    # Images

    def new_image(self, width: int, height: int) -> Image:
        """Create a blank image owned by this context."""
        self._check_alive()
        image = Image(width, height)
        self.images.insert(0, image)
        return image

    def texture_to_image(self, texture: Texture) -> Image:
        """Create an image owned by this context from a texture's pixels."""
        self._check_alive()
        image = _texture_to_image(texture)
        self.images.insert(0, image)
        return image

    def image_to_window(self, image: Image, x: int, y: int) -> int:
        """Place a new instance of ``image`` at (``x``, ``y``); return its index."""
        self._check_alive()
        if image is None:
            raise TypeError("an image is required")
        index = len(image.instances)
        image.instances.append(Instance(x, y, self._zdepth))
        self._zdepth += 1
        self.render_queue.insert(0, DrawCall(image, index))
        self._sort_pending = True
        return index

    def delete_image(self, image: Image) -> None:
        """Remove ``image`` and all its draw calls from this context."""
        self._check_alive()
        self.render_queue = [call for call in self.render_queue if call.image is not image]
        self.images = [owned for owned in self.images if owned is not image]

    def set_instance_depth(self, instance: Instance, depth: int) -> None:
        """Change an instance's depth; the queue is re-sorted on the next frame."""
        if instance is None:
            raise TypeError("an instance is required")
        if instance.z == depth:
            return
        instance.z = depth
        self._sort_pending = True

    # Hooks

    def loop_hook(self, func: LoopFunc) -> None:
        """Add a function to be called once per frame, after those already added."""
        self._check_alive()
        _require_callable(func)
        self._loop_hooks.append(func)

    def key_hook(self, func: KeyFunc) -> None:
        """Set the function called with a KeyData on every key event."""
        _require_callable(func)
        self._key_hook = func

    def scroll_hook(self, func: ScrollFunc) -> None:
        """Set the function called with the scroll offsets."""
        _require_callable(func)
        self._scroll_hook = func

    def mouse_hook(self, func: MouseFunc) -> None:
        """Set the function called with button, action and modifiers."""
        _require_callable(func)
        self._mouse_hook = func

    def cursor_hook(self, func: CursorFunc) -> None:
        """Set the function called with the new cursor position."""
        _require_callable(func)
        self._cursor_hook = func

    def close_hook(self, func: CloseFunc) -> None:
        """Set the function called when the user asks to close the window."""
        _require_callable(func)
        self._close_hook = func

    def resize_hook(self, func: ResizeFunc) -> None:
        """Set the function called with the new window size."""
        _require_callable(func)
        self._resize_hook = func

    # Input events

    def emit_key(self, key: int, scancode: int, action: Action | int, mods: int) -> None:
        """Deliver a key event."""
        action = Action(action)
        if action is Action.RELEASE:
            self._keys_down.discard(key)
        else:
            self._keys_down.add(key)
        if self._key_hook is not None:
            self._key_hook(KeyData(key, action, scancode, mods))

    def emit_scroll(self, xdelta: float, ydelta: float) -> None:
        """Deliver a scroll event."""
        if self._scroll_hook is not None:
            self._scroll_hook(xdelta, ydelta)

    def emit_mouse(self, button: int, action: Action | int, mods: int) -> None:
        """Deliver a mouse button event."""
        action = Action(action)
        if action is Action.RELEASE:
            self._buttons_down.discard(button)
        else:
            self._buttons_down.add(button)
        if self._mouse_hook is not None:
            self._mouse_hook(button, action, mods)

    def emit_cursor(self, x: float, y: float) -> None:
        """Deliver a cursor movement."""
        self.cursor_position = (x, y)
        if self._cursor_hook is not None:
            self._cursor_hook(x, y)

    def emit_close(self) -> None:
        """Deliver a close request from the user: run the close hook, then flag closing."""
        if self._close_hook is not None:
            self._close_hook()
        self.window.request_close()

    def emit_resize(self, width: int, height: int) -> None:
        """Deliver a window size change."""
        self.window.resize(width, height)
        if self._resize_hook is not None:
            self._resize_hook(width, height)

    def is_key_down(self, key: int) -> bool:
        """True while ``key`` is held."""
        return key in self._keys_down

    def is_mouse_down(self, button: int) -> bool:
        """True while mouse ``button`` is held."""
        return button in self._buttons_down

    # Frames

    def render(self) -> list[DrawCall]:
        """Run one frame and return the draw calls drawn, in depth order."""
        self._check_alive()
        now = time.monotonic() - self._epoch
        self.delta_time = now - self._last_frame
        self._last_frame = now

        if self.width > 1 or self.height > 1:
            if self.settings.stretch_image:
                size = (self.initial_width, self.initial_height)
            else:
                size = (self.width, self.height)
            self.projection = projection_matrix(size[0], size[1], self._zdepth)

        for hook in self._loop_hooks:
            if self.window.should_close or not self._alive:
                break
            hook()
        self._check_alive()

        if self._sort_pending:
            self._sort_pending = False
            sort_render_queue(self.render_queue)

        return [
            call
            for call in self.render_queue
            if call.image.enabled and call.instance.enabled
        ]

    def loop(self) -> None:
        """Render frames until the window is flagged to close."""
        self._check_alive()
        self._last_frame = 0.0
        while not self.window.should_close:
            self.render()

    def close_window(self) -> None:
        """Flag the window to close; the loop ends after the current frame."""
        self._check_alive()
        self.window.request_close()

    def terminate(self) -> None:
        """Release every image, draw call and hook; the context is unusable after."""
        self._check_alive()
        self._loop_hooks.clear()
        self.render_queue.clear()
        self.images.clear()
        self._key_hook = self._scroll_hook = self._mouse_hook = None
        self._cursor_hook = self._close_hook = self._resize_hook = None
        self._alive = False