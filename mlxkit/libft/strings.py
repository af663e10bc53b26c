"""Text helpers modelled on the classic C string routines.

Searches return indices (or None) instead of pointers, and routines that
would write into a caller's buffer return the new text instead.
"""

from __future__ import annotations

from collections.abc import Callable, MutableSequence

NUL = "\0"


def _code_at(s: str, index: int) -> int:
    """Character code at ``index``, or 0 past the end (the terminator)."""
    return ord(s[index]) if index < len(s) else 0


def _single_char(c: str) -> str:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return c


def split(s: str, c: str) -> list[str]:
    """Split ``s`` on the delimiter character ``c``, dropping empty pieces."""
    _single_char(c)
    return [piece for piece in s.split(c) if piece]


def strchr(s: str, c: str) -> int | None:
    """Index of the first ``c`` in ``s``; searching for NUL finds the end."""
    _single_char(c)
    if c == NUL:
        return len(s)
    index = s.find(c)
    return None if index < 0 else index


def strrchr(s: str, c: str) -> int | None:
    """Index of the last ``c`` in ``s``; searching for NUL finds the end."""
    _single_char(c)
    if c == NUL:
        return len(s)
    index = s.rfind(c)
    return None if index < 0 else index


def strdup(s: str) -> str:
    """Return a copy of ``s``."""
    if not isinstance(s, str):
        raise TypeError(f"expected str, got {type(s).__name__}")
    return "".join(s)


def striteri(chars: MutableSequence[str], f: Callable[[int, str], str | None]) -> None:
    """Call ``f(index, char)`` for each element, in place.

    A non-None return value replaces the character at that index.
    """
    for index, ch in enumerate(list(chars)):
        replacement = f(index, ch)
        if replacement is not None:
            chars[index] = replacement


def strjoin(s1: str, s2: str) -> str:
    """Concatenate two strings."""
    if s1 is None or s2 is None:
        raise TypeError("both strings are required")
    return s1 + s2


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    Returns the resulting text and the length it tried to create. When
    ``size`` does not exceed the length of ``dst`` nothing is appended and
    the returned length is ``size + len(src)``.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    if size <= len(dst):
        return dst, size + len(src)
    room = size - len(dst) - 1
    return dst + src[:room], len(dst) + len(src)


def strlcpy(dst: str, src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters.

    Returns the resulting text and ``len(src)``. With ``size`` 0 the
    destination is left unchanged.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    if size == 0:
        return dst, len(src)
    return src[: size - 1], len(src)


def strlen(s: str) -> int:
    """Length of ``s``."""
    return len(s)


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Build a new string from ``f(index, char)`` for each character."""
    return "".join(f(index, ch) for index, ch in enumerate(s))


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters; return the difference of the first mismatch."""
    if n < 0:
        raise ValueError(f"count must not be negative, got {n}")
    for index in range(n):
        a = _code_at(s1, index)
        b = _code_at(s2, index)
        if a != b or a == 0:
            return a - b
    return 0


def strnstr(big: str, little: str, length: int) -> int | None:
    """Index of ``little`` within the first ``length`` characters of ``big``.

    An empty ``little`` is found at index 0.
    """
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    if not little:
        return 0
    index = big[:length].find(little)
    return None if index < 0 else index


def strtrim(s: str, charset: str) -> str:
    """Remove characters in ``charset`` from both ends of ``s``."""
    return s.strip(charset)


def substr(s: str, start: int, length: int) -> str:
    """Up to ``length`` characters of ``s`` beginning at ``start``.

    A start beyond the end yields an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(s):
        return ""
    return s[start : start + length]