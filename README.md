# mlxkit

Draw into RGBA pixel images, place them in a window-like context, feed it input
events and step it frame by frame. PNG and XPM42 files load into textures. A
separate set of helpers covers character classification, text, byte buffers
and writing to file descriptors.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from mlxkit.mlx.core import Mlx, Settings

mlx = Mlx(400, 400, "demo", False, Settings(headless=True))
image = mlx.new_image(200, 200)
image.put_pixel(10, 10, 0xFF0000FF)
mlx.image_to_window(image, 100, 100)

frames = []

def tick():
    frames.append(len(frames))
    if len(frames) == 3:
        mlx.close_window()

mlx.loop_hook(tick)
mlx.loop()
mlx.terminate()
```

`Mlx` is also a context manager: leaving the `with` block terminates it.

## `mlxkit.mlx`

### `mlxkit.mlx.core`

- `Mlx(width, height, title, resize=False, settings=None)` holds a `Window`,
  the images it owns and a render queue of `DrawCall`s.
- Images: `new_image`, `texture_to_image`, `image_to_window` (returns the new
  instance's index; each instance gets the next depth), `delete_image`,
  `set_instance_depth`.
- Hooks: `loop_hook` (any number, run in order each frame), and one each of
  `key_hook` (called with a `KeyData`), `scroll_hook`, `mouse_hook`,
  `cursor_hook`, `close_hook` and `resize_hook`.
- Input: `emit_key`, `emit_scroll`, `emit_mouse`, `emit_cursor`, `emit_close`
  and `emit_resize` update state and call the matching hook. `is_key_down` and
  `is_mouse_down` report what is held; `cursor_position` holds the last cursor
  position.
- Frames: `render` runs one frame — it updates `delta_time` and `projection`,
  runs the loop hooks until the window is flagged to close, sorts the queue by
  depth when needed and returns the enabled draw calls. `loop` renders until
  `close_window` (or `emit_close`) flags the window. `terminate` releases
  everything; further use raises `RuntimeError`.
- `Action` (`RELEASE`, `PRESS`, `REPEAT`), `KeyData` and `Settings`
  (`stretch_image`, `fullscreen`, `maximized`, `decorated`, `headless`).
  With `stretch_image` the projection keeps the initial window size.

### `mlxkit.mlx.image`

- `Image(width, height)`: a zeroed RGBA buffer; sizes outside 1–32767 raise
  `MlxError` with `INVDIM`. `put_pixel(x, y, color)` stores a `0xRRGGBBAA`
  colour (out of bounds raises `INVPOS`); `resize(width, height)` rescales by
  nearest-neighbour sampling.
- `Texture(width, height, pixels, bytes_per_pixel=4)`, `Instance`,
  `DrawCall`, `draw_pixel(pixels, offset, color)` and
  `texture_to_image(texture)`.

### `mlxkit.mlx.png` and `mlxkit.mlx.xpm42`

- `load_png(path)` decodes a PNG into an RGBA `Texture`; failures raise
  `MlxError` with `INVPNG`.
- `parse_xpm42(stream)` and `load_xpm42(path)` read the XPM42 text format
  (`!XPM42`, a header `<width> <height> <colours> <chars-per-pixel> <c|m>`, a
  colour table of `<key> #RRGGBBAA` lines, then pixel rows) into an `Xpm`
  holding a `Texture`. Monochrome (`m`) colours are converted to grey.
  A path without `.xpm42` raises `INVEXT`, an unopenable file `INVFILE`, a
  malformed file `INVXPM`.

### `mlxkit.mlx.window`

- `Window` with `move`, `resize`, `set_limits` (`DONT_CARE` is `-1`),
  `request_close` and a `position` property.
- `CursorShape`, `CursorMode`, `Cursor`, `create_std_cursor(shape)` (shapes
  from `ARROW` up to but not including `VRESIZE`) and `create_cursor(texture)`.
- `Monitor` and `get_monitor_size(monitors, index)`, which gives `(0, 0)` for
  a missing monitor.
- `projection_matrix(width, height, depth)`: the column-major orthographic
  matrix, in single precision.

### `mlxkit.mlx.errors` and `mlxkit.mlx.utils`

- `MlxErrno`, `strerror(code)` and the `MlxError` exception, whose `code` is an
  `MlxErrno` and whose message is `strerror(code)`.
- `fnv_hash(data, length)` (64-bit FNV-1a), `rgba_to_mono(color)`,
  `read_line(stream)` (`None` at end of stream) and
  `sort_render_queue(queue)` (in place, ascending depth).

## `mlxkit.libft`

- `mlxkit.libft.chars`: `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`,
  `is_print`, `to_upper`, `to_lower` (each takes a one-character string or a
  code), `atoi` (wraps to signed 32-bit) and `itoa` (raises `OverflowError`
  outside 32-bit range).
- `mlxkit.libft.memory`: `memset`, `bzero`, `calloc`, `memchr`, `memcmp`,
  `memcpy`, `memmove` on `bytearray`/`memoryview` buffers. `memchr` returns an
  index or `None`.
- `mlxkit.libft.strings`: `split`, `strchr`, `strrchr`, `strdup`, `striteri`,
  `strjoin`, `strlcat`, `strlcpy`, `strlen`, `strmapi`, `strncmp`, `strnstr`,
  `strtrim`, `substr`. Searches return an index or `None`; `strlcat` and
  `strlcpy` return `(text, length)`.
- `mlxkit.libft.output`: `putchar_fd`, `putstr_fd`, `putendl_fd` and
  `putnbr_fd` write to a raw file descriptor.

## What it does not do

Nothing is shown on screen. The context keeps windows, images and the render
queue in memory; `render` returns the draw calls that would be drawn rather
than drawing them, and input only arrives through the `emit_*` methods. There
is no text rendering, and the package installs no command.