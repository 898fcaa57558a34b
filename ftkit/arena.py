"""A fixed-size bump allocator handing out aligned slices of one buffer."""

from __future__ import annotations


class Arena:
    """A region of ``size`` bytes from which blocks are carved in order.

    Each block starts at the next offset aligned to :attr:`alignment`.
    Blocks stay valid until :meth:`reset` is called. After that, later
    allocations reuse the same memory.
    """

    alignment = 8

    def __init__(self, size: int) -> None:
        if isinstance(size, bool) or not isinstance(size, int):
            raise TypeError(f"arena size must be an integer, got {type(size).__name__}")
        if size < 0:
            raise ValueError("arena size must not be negative")
        self._buffer = bytearray(size)
        self._used = 0

    @property
    def size(self) -> int:
        """Total capacity in bytes."""
        return len(self._buffer)

    @property
    def used(self) -> int:
        """Bytes consumed so far, including alignment padding."""
        return self._used

    @property
    def remaining(self) -> int:
        """Bytes not yet handed out."""
        return self.size - self._used

    def alloc(self, size: int) -> memoryview:
        """Return a writable view of ``size`` bytes from the arena.

        Raises MemoryError when the aligned block does not fit.
        """
        if isinstance(size, bool) or not isinstance(size, int):
            raise TypeError(f"allocation size must be an integer, got {type(size).__name__}")
        if size < 0:
            raise ValueError("allocation size must not be negative")
        mask = self.alignment - 1
        start = (self._used + mask) & ~mask
        if start + size > self.size:
            raise MemoryError(
                f"arena exhausted: {size} bytes requested at offset {start}, "
                f"capacity {self.size}"
            )
        self._used = start + size
        return memoryview(self._buffer)[start:start + size]

    def reset(self) -> None:
        """Forget every allocation; the whole buffer becomes available again."""
        self._used = 0

    def __repr__(self) -> str:
        return f"Arena(size={self.size}, used={self._used})"