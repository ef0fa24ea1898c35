"""Core allocator interface and raw byte-buffer helpers.

Allocators hand out integer offsets into a caller-supplied writable buffer.
An offset plays the role of an address: alignment is measured from the start
of the buffer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

__all__ = [
    "AllocatorError",
    "OutOfMemoryError",
    "Allocator",
    "align_forward",
    "mem_copy",
    "mem_set",
    "mem_compare",
]


class AllocatorError(Exception):
    """An allocator was misused or cannot satisfy a request."""


class OutOfMemoryError(AllocatorError):
    """The allocator has no room left for the requested allocation."""


def align_forward(value: int, alignment: int) -> int:
    """Round ``value`` up to the next multiple of ``alignment`` (a power of two)."""
    if alignment <= 0 or alignment & (alignment - 1):
        raise ValueError(f"Invalid alignment: {alignment}")
    remainder = value & (alignment - 1)
    if remainder:
        value += alignment - remainder
    return value


def _check_count(count: int, *buffers) -> None:
    if count < 0:
        raise ValueError("count cannot be negative")
    for buf in buffers:
        if count > len(buf):
            raise IndexError("count goes beyond the end of the buffer")


def mem_copy(dest, source, count: int) -> None:
    """Copy ``count`` bytes from ``source`` into ``dest``; overlapping views are safe."""
    _check_count(count, dest, source)
    dest[:count] = bytes(source[:count])


def mem_set(dest, value: int, count: int) -> None:
    """Fill the first ``count`` bytes of ``dest`` with ``value``."""
    if not 0 <= value <= 0xFF:
        raise ValueError(f"byte value out of range: {value}")
    _check_count(count, dest)
    dest[:count] = bytes((value,)) * count


def mem_compare(lhs, rhs, count: int) -> int:
    """Compare the first ``count`` bytes; negative, zero or positive like ``memcmp``."""
    _check_count(count, lhs, rhs)
    for left, right in zip(bytes(lhs[:count]), bytes(rhs[:count])):
        if left != right:
            return left - right
    return 0


class Allocator(ABC):
    """Interface shared by all allocators."""

    @abstractmethod
    def alloc(self, size: int, align: int) -> int:
        """Allocate ``size`` zeroed bytes aligned to ``align`` and return the offset."""

    @abstractmethod
    def free(self, ptr: int | None, size: int, align: int) -> bool:
        """Release an allocation; return whether it was released."""

    @abstractmethod
    def free_all(self) -> bool:
        """Release every allocation; return whether that succeeded."""

    @abstractmethod
    def resize(self, ptr: int | None, old_size: int, new_size: int) -> bool:
        """Resize an allocation in place; return whether that succeeded."""