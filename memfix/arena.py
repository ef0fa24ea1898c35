"""Linear (bump) allocator over a caller-supplied buffer."""

from __future__ import annotations

from .memory import Allocator, AllocatorError, OutOfMemoryError, align_forward, mem_set

__all__ = ["Arena"]


def _writable_view(buffer) -> memoryview:
    view = memoryview(buffer)
    if view.readonly:
        raise TypeError("buffer must be writable")
    return view.cast("B") if view.format != "B" else view


class Arena(Allocator):
    """Hands out memory by bumping an offset; only the latest allocation can be freed."""

    def __init__(self, buffer) -> None:
        self._memory = _writable_view(buffer)
        self.capacity = len(self._memory)
        self.offset = 0
        self.last_allocation: int | None = None

    def alloc(self, size: int, align: int) -> int:
        available = self.capacity - self.offset
        aligned = align_forward(self.offset, align)
        required = (aligned - self.offset) + size
        if required > available:
            raise OutOfMemoryError(
                f"arena cannot fit {size} bytes aligned to {align}"
            )
        self.offset += required
        mem_set(self._memory[aligned:], 0, size)
        self.last_allocation = aligned
        return aligned

    def free(self, ptr: int | None, size: int = 0, align: int = 0) -> bool:
        if self.last_allocation is not None and ptr == self.last_allocation:
            self.offset = self.last_allocation
            return True
        return False

    def free_all(self) -> bool:
        self.offset = 0
        self.last_allocation = None
        return True

    def resize(self, ptr: int | None, old_size: int, new_size: int) -> bool:
        if ptr is None or not 0 <= ptr < self.capacity:
            raise AllocatorError("Pointer is not owned by arena")
        if ptr != self.last_allocation:
            return False
        last_size = self.offset - ptr
        if ptr + new_size > self.capacity:
            return False
        self.offset += new_size - last_size
        return True

    def view(self, ptr: int, size: int) -> memoryview:
        """Return a writable view of ``size`` bytes starting at ``ptr``."""
        if ptr < 0 or size < 0 or ptr + size > self.capacity:
            raise IndexError("range is outside the arena")
        return self._memory[ptr : ptr + size]