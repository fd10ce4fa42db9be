"""Conversions between chunk, local and global block coordinates."""

from __future__ import annotations

from collections.abc import Sequence

CHUNK_SIZE = 32
CHUNK_AREA = CHUNK_SIZE * CHUNK_SIZE
CHUNK_VOLUME = CHUNK_SIZE * CHUNK_SIZE * CHUNK_SIZE


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    q = abs(a) // b
    return q if a >= 0 else -q


def to_global_block_position(
    chunk_position: Sequence[int], block_position: Sequence[int]
) -> tuple[int, int, int]:
    """Global block coordinates of a block inside a chunk."""
    cx, cz = chunk_position
    x, y, z = block_position
    return (cx * CHUNK_SIZE + x, y, cz * CHUNK_SIZE + z)


def to_local_voxel_position(global_position: Sequence[float]) -> tuple[int, int, int]:
    """Block coordinates within its chunk for a global position."""
    x, y, z = (int(v) for v in global_position)
    return (x % CHUNK_SIZE, y, z % CHUNK_SIZE)


def to_chunk_position(global_position: Sequence[float]) -> tuple[int, int]:
    """Chunk coordinates for a global position, truncating toward zero."""
    x, _, z = (int(v) for v in global_position)
    return (_trunc_div(x, CHUNK_SIZE), _trunc_div(z, CHUNK_SIZE))