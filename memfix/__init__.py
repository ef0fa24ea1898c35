"""Arena and pool allocators that hand out offsets into a fixed writable buffer."""

__version__ = "0.1.0"
__all__ = ["memory", "arena", "pool", "cli"]