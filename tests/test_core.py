import pytest

from mlxkit.mlx.core import Action, KeyData, Mlx, Settings
from mlxkit.mlx.errors import MlxErrno, MlxError
from mlxkit.mlx.image import Texture
from mlxkit.mlx.window import projection_matrix

WIDTH = 400
HEIGHT = 400
NAME = "MLX42"


@pytest.fixture
def mlx():
    context = Mlx(WIDTH, HEIGHT, NAME, False, Settings(headless=True))
    yield context
    if not context.terminated:
        context.terminate()


def test_basic_window(mlx):
    assert mlx.width == WIDTH
    assert mlx.height == HEIGHT
    assert mlx.window.title == NAME
    assert mlx.window.resizable is False
    assert mlx.settings.headless is True


def test_settings_window():
    settings = Settings(
        stretch_image=True, maximized=True, decorated=True, fullscreen=True, headless=True
    )
    context = Mlx(400, 400, "MLX42", False, settings)
    assert context.settings.fullscreen is True
    assert context.settings.stretch_image is True
    context.terminate()
    assert context.terminated is True


def test_default_settings():
    assert Settings() == Settings(
        stretch_image=False, fullscreen=False, maximized=False, decorated=True, headless=False
    )


def test_single_image(mlx):
    img = mlx.new_image(WIDTH // 2, HEIGHT // 2)
    assert img.width == 200 and img.height == 200
    val = mlx.image_to_window(img, WIDTH // 4, HEIGHT // 4)
    assert val >= 0
    assert img.instances[val].x == 100
    mlx.delete_image(img)
    assert img not in mlx.images
    assert mlx.render_queue == []


def test_multiple_images(mlx):
    img1 = mlx.new_image(WIDTH // 2, HEIGHT // 2)
    img2 = mlx.new_image(WIDTH, HEIGHT)
    val1 = mlx.image_to_window(img1, WIDTH // 4, HEIGHT // 4)
    val2 = mlx.image_to_window(img2, 0, 0)
    assert val1 >= 0 and val2 >= 0
    assert len(mlx.render_queue) == 2
    mlx.delete_image(img1)
    assert [call.image for call in mlx.render_queue] == [img2]
    mlx.delete_image(img2)
    assert mlx.images == []


def test_string_torture_loop(mlx):
    img = mlx.new_image(WIDTH // 2, HEIGHT // 2)
    img.pixels[:] = b"\xff" * len(img.pixels)
    assert mlx.image_to_window(img, WIDTH // 4, HEIGHT // 4) >= 0

    state = {"count": 0, "img": None}

    def draw():
        if state["img"] is not None:
            mlx.delete_image(state["img"])
        text = str(state["count"])
        state["img"] = mlx.new_image(len(text) * 10, 20)
        mlx.image_to_window(state["img"], 0, 0)
        if state["count"] >= 420:
            mlx.close_window()
        state["count"] += 1

    mlx.loop_hook(draw)
    mlx.loop()
    assert state["count"] == 421
    assert mlx.window.should_close is True
    mlx.delete_image(img)
    assert [call.image for call in mlx.render_queue] == [state["img"]]


def test_instance_depth_increases(mlx):
    img = mlx.new_image(10, 10)
    first = mlx.image_to_window(img, 0, 0)
    second = mlx.image_to_window(img, 5, 5)
    assert (first, second) == (0, 1)
    assert img.instances[1].z == img.instances[0].z + 1


def test_render_orders_by_depth(mlx):
    a = mlx.new_image(4, 4)
    b = mlx.new_image(4, 4)
    mlx.image_to_window(a, 0, 0)
    mlx.image_to_window(b, 0, 0)
    drawn = mlx.render()
    assert [call.image for call in drawn] == [a, b]
    mlx.set_instance_depth(a.instances[0], 10)
    drawn = mlx.render()
    assert [call.image for call in drawn] == [b, a]


def test_disabled_instances_are_not_drawn(mlx):
    a = mlx.new_image(4, 4)
    b = mlx.new_image(4, 4)
    mlx.image_to_window(a, 0, 0)
    mlx.image_to_window(b, 0, 0)
    a.instances[0].enabled = False
    assert [call.image for call in mlx.render()] == [b]
    b.enabled = False
    assert mlx.render() == []


def test_new_image_invalid_dimensions(mlx):
    with pytest.raises(MlxError) as info:
        mlx.new_image(0, 10)
    assert info.value.code == MlxErrno.INVDIM


def test_texture_to_image(mlx):
    texture = Texture(1, 2, bytearray(b"\x01\x02\x03\x04\x05\x06\x07\x08"))
    image = mlx.texture_to_image(texture)
    assert bytes(image.pixels) == b"\x01\x02\x03\x04\x05\x06\x07\x08"
    assert mlx.images[0] is image


def test_invalid_window_size():
    with pytest.raises(ValueError):
        Mlx(0, 10, "x")


def test_title_must_be_string():
    with pytest.raises(TypeError):
        Mlx(10, 10, None)


def test_key_events(mlx):
    received = []
    mlx.key_hook(received.append)
    mlx.emit_key(65, 38, Action.PRESS, 0)
    assert mlx.is_key_down(65) is True
    mlx.emit_key(65, 38, Action.RELEASE, 1)
    assert mlx.is_key_down(65) is False
    assert received == [
        KeyData(65, Action.PRESS, 38, 0),
        KeyData(65, Action.RELEASE, 38, 1),
    ]


def test_mouse_scroll_and_cursor_events(mlx):
    log = []
    mlx.mouse_hook(lambda b, a, m: log.append(("mouse", b, a, m)))
    mlx.scroll_hook(lambda x, y: log.append(("scroll", x, y)))
    mlx.cursor_hook(lambda x, y: log.append(("cursor", x, y)))
    mlx.emit_mouse(0, 1, 0)
    assert mlx.is_mouse_down(0) is True
    mlx.emit_scroll(0.0, -1.5)
    mlx.emit_cursor(12.0, 34.0)
    mlx.emit_mouse(0, Action.RELEASE, 0)
    assert mlx.is_mouse_down(0) is False
    assert mlx.cursor_position == (12.0, 34.0)
    assert log == [
        ("mouse", 0, Action.PRESS, 0),
        ("scroll", 0.0, -1.5),
        ("cursor", 12.0, 34.0),
        ("mouse", 0, Action.RELEASE, 0),
    ]


def test_close_and_resize_hooks(mlx):
    log = []
    mlx.close_hook(lambda: log.append("close"))
    mlx.resize_hook(lambda w, h: log.append((w, h)))
    mlx.emit_resize(300, 200)
    mlx.emit_close()
    assert log == [(300, 200), "close"]
    assert (mlx.width, mlx.height) == (300, 200)
    assert mlx.window.should_close is True


def test_hooks_after_close_are_skipped(mlx):
    calls = []
    mlx.loop_hook(lambda: (calls.append("first"), mlx.close_window()))
    mlx.loop_hook(lambda: calls.append("second"))
    mlx.loop()
    assert calls == ["first"]


def test_projection_follows_window_size(mlx):
    img = mlx.new_image(2, 2)
    mlx.image_to_window(img, 0, 0)
    mlx.emit_resize(800, 600)
    mlx.render()
    assert mlx.projection == projection_matrix(800, 600, 1)


def test_projection_with_stretch_keeps_initial_size():
    context = Mlx(400, 300, "s", True, Settings(stretch_image=True, headless=True))
    img = context.new_image(2, 2)
    context.image_to_window(img, 0, 0)
    context.emit_resize(800, 600)
    context.render()
    assert context.projection == projection_matrix(400, 300, 1)


def test_hook_must_be_callable(mlx):
    with pytest.raises(TypeError):
        mlx.key_hook(42)


def test_terminate_clears_and_blocks(mlx):
    img = mlx.new_image(2, 2)
    mlx.image_to_window(img, 0, 0)
    mlx.terminate()
    assert mlx.images == [] and mlx.render_queue == []
    with pytest.raises(RuntimeError):
        mlx.render()


def test_context_manager_terminates():
    with Mlx(10, 10, "cm") as context:
        context.new_image(1, 1)
    assert context.terminated is True
    with pytest.raises(RuntimeError):
        context.new_image(1, 1)