import pytest

from ftkit.arena import Arena


def test_new_arena_is_empty():
    arena = Arena(64)
    assert arena.size == 64
    assert arena.used == 0
    assert arena.remaining == 64


def test_alloc_returns_block_of_requested_length():
    arena = Arena(64)
    block = arena.alloc(10)
    assert len(block) == 10
    assert arena.used == 10


def test_second_block_starts_on_alignment_boundary():
    arena = Arena(64)
    arena.alloc(1)
    arena.alloc(1)
    assert arena.used == Arena.alignment + 1


def test_blocks_do_not_overlap():
    arena = Arena(32)
    first = arena.alloc(4)
    second = arena.alloc(4)
    first[:] = b"aaaa"
    second[:] = b"bbbb"
    assert bytes(first) == b"aaaa"
    assert bytes(second) == b"bbbb"


def test_exact_fit_succeeds():
    arena = Arena(16)
    block = arena.alloc(16)
    assert len(block) == 16
    assert arena.remaining == 0


def test_alloc_beyond_capacity_raises():
    arena = Arena(16)
    arena.alloc(9)
    with pytest.raises(MemoryError):
        arena.alloc(8)
    assert arena.used == 9


def test_failed_alloc_leaves_arena_usable():
    arena = Arena(16)
    with pytest.raises(MemoryError):
        arena.alloc(17)
    assert len(arena.alloc(16)) == 16


def test_reset_makes_space_available_again():
    arena = Arena(8)
    arena.alloc(8)
    with pytest.raises(MemoryError):
        arena.alloc(1)
    arena.reset()
    assert arena.used == 0
    assert len(arena.alloc(8)) == 8


def test_memory_is_reused_after_reset():
    arena = Arena(8)
    arena.alloc(4)[:] = b"wxyz"
    arena.reset()
    assert bytes(arena.alloc(4)) == b"wxyz"


def test_zero_size_alloc_consumes_nothing():
    arena = Arena(8)
    block = arena.alloc(0)
    assert len(block) == 0
    assert arena.used == 0


def test_negative_arena_size_rejected():
    with pytest.raises(ValueError):
        Arena(-1)


def test_negative_alloc_rejected():
    arena = Arena(8)
    with pytest.raises(ValueError):
        arena.alloc(-3)


def test_non_integer_size_rejected():
    with pytest.raises(TypeError):
        Arena(4.5)