import pytest

from fractview.memory import (
    SIZE_MAX,
    allocate_zeroed,
    compare,
    copy,
    fill,
    find_byte,
    move,
    zero,
)


def test_fill_sets_prefix_only():
    buf = bytearray(6)
    result = fill(buf, ord("x"), 4)
    assert result is buf
    assert buf[:4] == b"x" * 4
    assert buf[4:] == bytes(2)


def test_fill_uses_low_byte():
    buf = bytearray(3)
    fill(buf, 0x141, 3)
    assert buf == bytes([0x41]) * 3


def test_fill_past_end_raises():
    with pytest.raises(ValueError):
        fill(bytearray(2), 1, 3)


def test_zero_clears_prefix():
    buf = bytearray(b"abcdef")
    zero(buf, 3)
    assert buf == bytes(3) + b"def"


def test_copy_prefix():
    dest = bytearray(b"......")
    copy(dest, b"hello world", 5)
    assert dest == b"hello."


def test_copy_zero_count_leaves_dest():
    dest = bytearray(b"keep")
    copy(dest, b"xxxx", 0)
    assert dest == b"keep"


def test_copy_count_too_large_raises():
    with pytest.raises(ValueError):
        copy(bytearray(2), b"abc", 3)


def test_move_overlapping_forward():
    buf = bytearray(b"abcdef")
    move(buf, 2, 0, 4)
    assert buf == b"ababcd"


def test_move_overlapping_backward():
    buf = bytearray(b"abcdef")
    move(buf, 0, 2, 4)
    assert buf == b"cdefef"


def test_move_preserves_length_and_source_bytes():
    original = bytes(range(20))
    buf = bytearray(original)
    move(buf, 5, 3, 10)
    assert len(buf) == len(original)
    assert buf[5:15] == original[3:13]
    assert buf[:5] == original[:5]


def test_move_out_of_range_raises():
    with pytest.raises(ValueError):
        move(bytearray(4), 2, 0, 3)


def test_find_byte_found_and_missing():
    data = b"hello"
    assert find_byte(data, ord("l"), 5) == data.index(b"l")
    assert find_byte(data, ord("z"), 5) is None


def test_find_byte_respects_count():
    assert find_byte(b"abcd", ord("d"), 3) is None
    assert find_byte(b"abcd", ord("d"), 4) == 3


def test_find_byte_low_byte():
    assert find_byte(b"\x00A", 0x141, 2) == 1


def test_compare_equal_and_ordered():
    assert compare(b"abc", b"abc", 3) == 0
    assert compare(b"abc", b"abd", 3) == ord("c") - ord("d")
    assert compare(b"abd", b"abc", 3) > 0


def test_compare_only_within_count():
    assert compare(b"abX", b"abY", 2) == 0


def test_compare_is_unsigned():
    assert compare(b"\x80", b"\x00", 1) == 0x80


def test_compare_antisymmetric():
    a, b = b"\x10\x20\x30", b"\x10\x25\x01"
    assert compare(a, b, 3) == -compare(b, a, 3)


def test_allocate_zeroed_size_and_contents():
    buf = allocate_zeroed(4, 8)
    assert len(buf) == 4 * 8
    assert not any(buf)


@pytest.mark.parametrize("count,size", [(0, 5), (5, 0), (0, 0)])
def test_allocate_zeroed_empty(count, size):
    assert allocate_zeroed(count, size) == bytearray()


def test_allocate_zeroed_overflow():
    with pytest.raises(OverflowError):
        allocate_zeroed(SIZE_MAX // 2 + 1, 2)


def test_allocate_zeroed_negative():
    with pytest.raises(ValueError):
        allocate_zeroed(-1, 4)