import pytest

from mlxkit.libft.memory import (
    bzero,
    calloc,
    memchr,
    memcmp,
    memcpy,
    memmove,
    memset,
)


def test_memset_fills_prefix_and_returns_buffer():
    buf = bytearray(b"hello")
    result = memset(buf, ord("A"), 3)
    assert result is buf
    assert buf[:3] == bytes([ord("A")]) * 3
    assert buf[3:] == b"lo"


def test_memset_uses_low_byte():
    buf = bytearray(4)
    memset(buf, 0x1FF, 4)
    assert buf == bytes([0xFF]) * 4


def test_memset_too_long():
    with pytest.raises(IndexError):
        memset(bytearray(2), 0, 3)


def test_memset_negative_length():
    with pytest.raises(ValueError):
        memset(bytearray(2), 0, -1)


def test_bzero():
    buf = bytearray(b"abcdef")
    bzero(buf, 4)
    assert buf[:4] == bytes(4)
    assert buf[4:] == b"ef"


def test_calloc_zeroed():
    buf = calloc(3, 4)
    assert len(buf) == 3 * 4
    assert not any(buf)


def test_calloc_zero_size():
    assert calloc(0, 8) == bytearray()
    assert calloc(8, 0) == bytearray()


def test_calloc_overflow():
    with pytest.raises(OverflowError):
        calloc(2**63, 4)


def test_calloc_negative():
    with pytest.raises(ValueError):
        calloc(-1, 4)


def test_memchr_found():
    data = b"abcabc"
    assert memchr(data, ord("c"), len(data)) == data.index(b"c")


def test_memchr_respects_limit():
    data = b"abcabc"
    assert memchr(data, ord("c"), 2) is None


def test_memchr_missing():
    assert memchr(b"abc", ord("z"), 3) is None


def test_memchr_low_byte():
    data = b"\x00\x7f\xff"
    assert memchr(data, -1, 3) == data.index(b"\xff")


def test_memcmp_equal():
    assert memcmp(b"abc", b"abc", 3) == 0


def test_memcmp_zero_length():
    assert memcmp(b"a", b"b", 0) == 0


def test_memcmp_sign_and_value():
    assert memcmp(b"abd", b"abc", 3) == ord("d") - ord("c")
    assert memcmp(b"abc", b"abd", 3) < 0


def test_memcmp_unsigned_bytes():
    assert memcmp(b"\xff", b"\x00", 1) == 0xFF


def test_memcmp_only_prefix():
    assert memcmp(b"abX", b"abY", 2) == 0


def test_memcmp_too_long():
    with pytest.raises(IndexError):
        memcmp(b"ab", b"abc", 3)


def test_memcpy():
    dest = bytearray(b"xxxxx")
    result = memcpy(dest, b"abc", 3)
    assert result is dest
    assert dest == b"abc" + b"xx"


def test_memcpy_source_too_short():
    with pytest.raises(IndexError):
        memcpy(bytearray(5), b"ab", 3)


def test_memmove_overlap_forward():
    buf = bytearray(b"abcdef")
    view = memoryview(buf)
    result = memmove(view[2:], view, 4)
    assert bytes(result) == b"abcd"
    assert buf == b"ab" + b"abcd"


def test_memmove_overlap_backward():
    buf = bytearray(b"abcdef")
    view = memoryview(buf)
    result = memmove(view, view[2:], 4)
    assert bytes(result) == b"cdef" + b"ef"
    assert buf == b"cdef" + b"ef"


def test_memmove_matches_memcpy_without_overlap():
    src = b"hello"
    a = memcpy(bytearray(5), src, 5)
    b = memmove(bytearray(5), src, 5)
    assert a == b == bytearray(src)