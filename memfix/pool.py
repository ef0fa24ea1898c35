"""Fixed-size block allocator over a caller-supplied buffer."""

from __future__ import annotations

from .memory import Allocator, AllocatorError, OutOfMemoryError, align_forward, mem_set

__all__ = ["Pool"]

_NODE_SIZE = 8


def _writable_view(buffer) -> memoryview:
    view = memoryview(buffer)
    if view.readonly:
        raise TypeError("buffer must be writable")
    return view.cast("B") if view.format != "B" else view


class Pool(Allocator):
    """Splits a buffer into equal blocks and hands them out from a free list."""

    def __init__(self, buffer, block_size: int, block_align: int) -> None:
        self._memory = _writable_view(buffer)
        buf_size = len(self._memory)
        aligned_start = align_forward(0, block_align)
        buf_size -= aligned_start

        block_size = align_forward(block_size, block_align)
        if block_size < _NODE_SIZE:
            raise AllocatorError("Block size is too small")
        if block_size >= buf_size:
            raise AllocatorError("Backing buffer cannot contain one block")

        self.capacity = buf_size
        self.block_size = block_size
        self.block_align = block_align
        self._free: list[int] = []
        self.free_all()

    def alloc_block(self) -> int:
        """Take one block from the free list and zero it."""
        if not self._free:
            raise OutOfMemoryError("pool has no free blocks")
        node = self._free.pop()
        block = self._memory[node : node + self.block_size]
        mem_set(block, 0, len(block))
        return node

    def alloc(self, size: int, align: int) -> int:
        if size > self.block_size or align == 0 or align > self.block_align:
            raise AllocatorError(
                f"request of {size} bytes aligned to {align} does not fit a block"
            )
        return self.alloc_block()

    def _owns(self, ptr: int | None) -> bool:
        return ptr is not None and 0 <= ptr < self.capacity

    def free(self, ptr: int | None, size: int = 0, align: int = 0) -> bool:
        if not self._owns(ptr):
            return False
        self._free.append(ptr)
        return True

    def free_all(self) -> bool:
        block_count = self.capacity // self.block_size
        self._free = [i * self.block_size for i in range(block_count)]
        return True

    def resize(self, ptr: int | None, old_size: int, new_size: int) -> bool:
        if not self._owns(ptr):
            return False
        return new_size <= self.block_size

    def view(self, ptr: int, size: int) -> memoryview:
        """Return a writable view of ``size`` bytes starting at ``ptr``."""
        if ptr < 0 or size < 0 or ptr + size > self.capacity:
            raise IndexError("range is outside the pool")
        return self._memory[ptr : ptr + size]