"""Command-line demonstration of the pool allocator."""

from __future__ import annotations

import argparse

from .pool import Pool

__all__ = ["main"]


def main(argv=None) -> int:
    """Create a pool over a 5000-byte buffer and show one allocation."""
    parser = argparse.ArgumentParser(
        prog="memfix", description="Demonstrate the pool allocator."
    )
    parser.parse_args(argv)

    arena_memory = bytearray(5000)
    pool = Pool(arena_memory, 128, 16)
    print(f"N:{pool.block_size} A:{pool.block_align}")
    print(f"{pool.alloc(4, 4):#x}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())