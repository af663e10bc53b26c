"""Loading PNG files into textures."""

from __future__ import annotations

import os

from PIL import Image as PILImage

from mlxkit.mlx.errors import MlxErrno, MlxError
from mlxkit.mlx.image import Texture


def load_png(path: str | os.PathLike[str]) -> Texture:
    """Decode a PNG file into an RGBA texture."""
    try:
        with PILImage.open(path) as picture:
            if picture.format != "PNG":
                raise MlxError(MlxErrno.INVPNG)
            rgba = picture.convert("RGBA")
            return Texture(rgba.width, rgba.height, bytearray(rgba.tobytes()))
    except (OSError, ValueError, PILImage.DecompressionBombError) as exc:
        raise MlxError(MlxErrno.INVPNG) from exc