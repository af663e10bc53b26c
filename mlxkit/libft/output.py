"""Writing characters, strings and numbers straight to file descriptors."""

from __future__ import annotations

import os

from mlxkit.libft.chars import itoa


def _write_all(fd: int, data: bytes) -> None:
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def putchar_fd(c: str, fd: int) -> None:
    """Write the single character ``c`` to ``fd``."""
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    _write_all(fd, c.encode("utf-8"))


def putstr_fd(s: str, fd: int) -> None:
    """Write ``s`` to ``fd``."""
    _write_all(fd, s.encode("utf-8"))


def putendl_fd(s: str, fd: int) -> None:
    """Write ``s`` followed by a newline to ``fd``."""
    _write_all(fd, s.encode("utf-8") + b"\n")


def putnbr_fd(n: int, fd: int) -> None:
    """Write the signed 32-bit integer ``n`` in decimal to ``fd``."""
    _write_all(fd, itoa(n).encode("ascii"))