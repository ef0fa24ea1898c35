# memfix

Fixed-buffer memory allocators. Each allocator carves its allocations out of
one writable buffer, such as a `bytearray`, that you pass in. An allocation is
an integer offset into that buffer. Alignment is measured from the start of
the buffer. You read and write an allocation through a `memoryview` returned
by `view(ptr, size)`.

## Allocators

Both allocators implement the `memfix.memory.Allocator` interface:
`alloc(size, align)`, `free(ptr, size, align)`, `free_all()` and
`resize(ptr, old_size, new_size)`. `alloc` returns the offset of a zero-filled
allocation. The other three methods return `True` or `False`.

### `memfix.arena.Arena(buffer)`

A bump allocator.

- `alloc` aligns the current offset up to `align` and moves it forward. If the
  allocation does not fit, it raises `memfix.memory.OutOfMemoryError`.
- `free` succeeds only for the most recent allocation. It rolls the offset back
  to that allocation. The `size` and `align` arguments are ignored.
- `resize` raises `memfix.memory.AllocatorError` when `ptr` lies outside the
  buffer. It returns `False` unless `ptr` is the most recent allocation and the
  new size fits.
- `free_all` resets the arena to empty.
- The `capacity`, `offset` and `last_allocation` attributes show the arena's
  state.

### `memfix.pool.Pool(buffer, block_size, block_align)`

A fixed-size block allocator with a free list.

- `block_size` is rounded up to a multiple of `block_align`. The rounded size
  must be at least 8 bytes and smaller than the buffer. Otherwise the
  constructor raises `memfix.memory.AllocatorError`.
- `alloc` raises `AllocatorError` in these cases: `size` is larger than a
  block, `align` is 0, or `align` is larger than `block_align`. It raises
  `OutOfMemoryError` when no blocks are left. `alloc_block()` takes a block
  with no size check.
- `free` returns a block to the free list. It accepts any offset inside the
  buffer and does not detect double frees or offsets that are not the start of
  a block.
- `resize` succeeds for an offset inside the buffer when `new_size` is no
  larger than a block.
- `free_all` rebuilds the free list with every block.

## Buffer helpers

`memfix.memory` also provides functions for working on buffers directly:

- `align_forward(value, alignment)` rounds `value` up to a multiple of
  `alignment`. `alignment` must be a power of two, otherwise it raises
  `ValueError`.
- `mem_copy(dest, source, count)` copies `count` bytes. It is safe for
  overlapping views.
- `mem_set(dest, value, count)` fills `count` bytes with `value`.
- `mem_compare(lhs, rhs, count)` returns a negative number, zero or a positive
  number, in the same way as `memcmp`.

A `count` that goes past the end of a buffer raises `IndexError`.

## Example

```python
from memfix.arena import Arena
from memfix.pool import Pool

arena = Arena(bytearray(256))
ptr = arena.alloc(16, 8)
arena.view(ptr, 16)[:5] = b"hello"
arena.free(ptr, 16, 8)

pool = Pool(bytearray(5000), 128, 16)
block = pool.alloc(4, 4)
pool.free(block, 4, 4)
```

## Command line

```
memfix
```

The command builds a pool over a 5000-byte buffer, using 128-byte blocks
aligned to 16 bytes. It prints the block size and alignment as `N:128 A:16`.
It then prints the offset of one allocated block in hexadecimal. It takes no
options except `--help`.

## Tests

```
pip install -e .[test]
pytest
```