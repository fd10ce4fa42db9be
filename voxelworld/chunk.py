"""Chunk storage: fixed-size sections, column chunks and the chunk map."""

from __future__ import annotations

from collections.abc import ItemsView, Sequence

from voxelworld.blocks import BlockID
from voxelworld.coords import CHUNK_AREA, CHUNK_SIZE, CHUNK_VOLUME
from voxelworld.mesh import ChunkMesh

_IDS = tuple(BlockID)

ChunkPosition = tuple[int, int]


def _in_bounds(x: int, y: int, z: int) -> bool:
    return 0 <= x < CHUNK_SIZE and 0 <= y < CHUNK_SIZE and 0 <= z < CHUNK_SIZE


class ChunkSection:
    """A cube of CHUNK_SIZE blocks per side, initially all air."""

    def __init__(self) -> None:
        self._blocks = bytearray(CHUNK_VOLUME)

    def get_block(self, x: int, y: int, z: int) -> BlockID:
        """The block at local coordinates, or air outside the section."""
        if not _in_bounds(x, y, z):
            return BlockID.AIR
        return _IDS[self._blocks[z * CHUNK_AREA + y * CHUNK_SIZE + x]]

    def set_block(self, x: int, y: int, z: int, block: BlockID) -> None:
        """Set a block; positions outside the section are ignored."""
        if _in_bounds(x, y, z):
            self._blocks[z * CHUNK_AREA + y * CHUNK_SIZE + x] = int(block)


class Chunk:
    """A vertical column of sections at a chunk position."""

    def __init__(self, position: Sequence[int]) -> None:
        x, z = position
        self.position: ChunkPosition = (int(x), int(z))
        self.is_generated = False
        self.mesh: ChunkMesh | None = None
        self._sections: list[ChunkSection] = []
        self._top_blocks = [0] * CHUNK_AREA

    def get_block(self, x: int, y: int, z: int) -> BlockID:
        if y < 0:
            return BlockID.AIR
        index = y // CHUNK_SIZE
        if index >= len(self._sections):
            return BlockID.AIR
        return self._sections[index].get_block(x, y % CHUNK_SIZE, z)

    def set_block(self, x: int, y: int, z: int, block: BlockID) -> None:
        """Set a block, growing the column as needed; negative heights are ignored."""
        if y < 0:
            return
        index = y // CHUNK_SIZE
        while index >= len(self._sections):
            self._sections.append(ChunkSection())
        self._sections[index].set_block(x, y % CHUNK_SIZE, z, block)

    def _top_index(self, x: int, z: int) -> int:
        if not (0 <= x < CHUNK_SIZE and 0 <= z < CHUNK_SIZE):
            raise IndexError(f"column ({x}, {z}) is outside the chunk")
        return z * CHUNK_SIZE + x

    def set_top_block(self, x: int, z: int, height: int) -> None:
        self._top_blocks[self._top_index(x, z)] = height

    def get_top_block(self, x: int, z: int) -> int:
        return self._top_blocks[self._top_index(x, z)]

    def world_position(self) -> ChunkPosition:
        """Global block coordinates of the chunk's corner."""
        return (self.position[0] * CHUNK_SIZE, self.position[1] * CHUNK_SIZE)

    def section_count(self) -> int:
        return len(self._sections)

    def generate_mesh(self) -> ChunkMesh:
        """Build and keep the chunk's mesh."""
        self.mesh = ChunkMesh(self)
        return self.mesh


class ChunkMap:
    """Chunks keyed by their chunk position."""

    def __init__(self) -> None:
        self._chunks: dict[ChunkPosition, Chunk] = {}

    @staticmethod
    def _key(position: Sequence[int]) -> ChunkPosition:
        x, z = position
        return (int(x), int(z))

    def __getitem__(self, position: Sequence[int]) -> Chunk:
        return self._chunks[self._key(position)]

    def __contains__(self, position: object) -> bool:
        try:
            return self._key(position) in self._chunks  # type: ignore[arg-type]
        except (TypeError, ValueError):
            return False

    def __len__(self) -> int:
        return len(self._chunks)

    def add_chunk(self, position: Sequence[int]) -> Chunk:
        """Create the chunk if it is missing and return it."""
        key = self._key(position)
        chunk = self._chunks.get(key)
        if chunk is None:
            chunk = self._chunks[key] = Chunk(key)
        return chunk

    def set_block(self, chunk: Chunk, x: int, y: int, z: int, block_id: BlockID) -> None:
        """Set a block relative to a chunk, spilling into the neighbouring chunk's edge."""
        if 0 <= x < CHUNK_SIZE and 0 <= z < CHUNK_SIZE:
            chunk.set_block(x, y, z, block_id)
            return
        cx, cz = chunk.position
        if x < 0:
            cx, x = cx - 1, CHUNK_SIZE - 1
        elif x >= CHUNK_SIZE:
            cx, x = cx + 1, 0
        if z < 0:
            cz, z = cz - 1, CHUNK_SIZE - 1
        elif z >= CHUNK_SIZE:
            cz, z = cz + 1, 0
        self.add_chunk((cx, cz)).set_block(x, y, z, block_id)

    def items(self) -> ItemsView[ChunkPosition, Chunk]:
        return self._chunks.items()