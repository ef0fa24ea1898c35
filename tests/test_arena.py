import pytest

from memfix.arena import Arena
from memfix.memory import AllocatorError, OutOfMemoryError


def test_first_allocation_at_start():
    arena = Arena(bytearray(64))
    assert arena.alloc(10, 8) == 0
    assert arena.offset == 10
    assert arena.last_allocation == 0


@pytest.mark.parametrize("align", [1, 2, 4, 8, 16, 32])
def test_allocations_are_aligned_and_disjoint(align):
    arena = Arena(bytearray(512))
    first = arena.alloc(3, 1)
    second = arena.alloc(5, align)
    assert second % align == 0
    assert second >= first + 3
    assert arena.offset == second + 5


def test_allocation_is_zeroed():
    buf = bytearray(b"\xff" * 32)
    arena = Arena(buf)
    ptr = arena.alloc(16, 4)
    assert bytes(arena.view(ptr, 16)) == bytes(16)
    assert buf[16:] == b"\xff" * 16


def test_out_of_memory():
    arena = Arena(bytearray(16))
    arena.alloc(12, 1)
    with pytest.raises(OutOfMemoryError):
        arena.alloc(8, 1)
    assert arena.offset == 12


def test_exact_fit():
    arena = Arena(bytearray(16))
    arena.alloc(16, 1)
    assert arena.offset == arena.capacity


def test_free_last_allocation_rolls_back():
    arena = Arena(bytearray(64))
    arena.alloc(8, 8)
    ptr = arena.alloc(8, 8)
    assert arena.free(ptr, 8, 8) is True
    assert arena.offset == ptr


def test_free_other_allocation_fails():
    arena = Arena(bytearray(64))
    first = arena.alloc(8, 8)
    arena.alloc(8, 8)
    before = arena.offset
    assert arena.free(first, 8, 8) is False
    assert arena.offset == before


def test_free_on_empty_arena_fails():
    arena = Arena(bytearray(8))
    assert arena.free(None, 0, 1) is False


def test_free_all_resets():
    arena = Arena(bytearray(64))
    arena.alloc(20, 4)
    assert arena.free_all() is True
    assert arena.offset == 0
    assert arena.last_allocation is None
    assert arena.alloc(4, 4) == 0


def test_resize_last_allocation_grows_and_shrinks():
    arena = Arena(bytearray(64))
    ptr = arena.alloc(8, 8)
    assert arena.resize(ptr, 8, 32) is True
    assert arena.offset == ptr + 32
    assert arena.resize(ptr, 32, 4) is True
    assert arena.offset == ptr + 4


def test_resize_beyond_capacity_fails():
    arena = Arena(bytearray(32))
    ptr = arena.alloc(8, 8)
    assert arena.resize(ptr, 8, 64) is False
    assert arena.offset == ptr + 8


def test_resize_non_last_fails():
    arena = Arena(bytearray(64))
    first = arena.alloc(8, 8)
    arena.alloc(8, 8)
    assert arena.resize(first, 8, 16) is False


def test_resize_foreign_pointer_raises():
    arena = Arena(bytearray(32))
    arena.alloc(8, 8)
    with pytest.raises(AllocatorError):
        arena.resize(100, 8, 16)


def test_view_writes_into_buffer():
    buf = bytearray(16)
    arena = Arena(buf)
    ptr = arena.alloc(4, 4)
    arena.view(ptr, 4)[:] = b"data"
    assert buf[ptr : ptr + 4] == bytearray(b"data")


def test_view_out_of_range():
    arena = Arena(bytearray(8))
    with pytest.raises(IndexError):
        arena.view(4, 8)


def test_readonly_buffer_rejected():
    with pytest.raises(TypeError):
        Arena(b"readonly")