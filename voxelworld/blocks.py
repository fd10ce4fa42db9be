"""Block identifiers and the static table of per-block render data."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

UV = tuple[int, int]


class BlockType(IntEnum):
    """How a block behaves for face culling and transparency."""

    SOLID = 0
    LIQUID = 1
    FLORA = 2


class BlockMeshType(IntEnum):
    """Which geometry a block is meshed with."""

    DEFAULT = 0
    LIQUID = 1
    SPRITE = 2


class BlockID(IntEnum):
    """Identifier of every block kind; stored as a single byte."""

    AIR = 0
    WATER = 1
    STONE = 2
    GRASS = 3
    SAND = 4
    WOOD = 5
    LEAVES = 6
    TALL_GRASS = 7
    ROSE = 8
    YELLOW_FLOWER = 9
    SNOW = 10
    LAVA = 11
    DIRT = 12


BLOCK_COUNT = len(BlockID)


@dataclass(frozen=True)
class BlockAtlas:
    """Texture atlas tile of each of the six faces."""

    front: UV
    back: UV
    left: UV
    right: UV
    top: UV
    bottom: UV

    @classmethod
    def uniform(cls, uv: UV) -> BlockAtlas:
        """An atlas using the same tile on every face."""
        return cls(uv, uv, uv, uv, uv, uv)


@dataclass(frozen=True)
class BlockData:
    """Render data of one block kind."""

    atlas: BlockAtlas
    block_type: BlockType
    mesh_type: BlockMeshType


_DATABASE: dict[BlockID, BlockData] = {
    BlockID.AIR: BlockData(BlockAtlas.uniform((0, 0)), BlockType.SOLID, BlockMeshType.DEFAULT),
    BlockID.WATER: BlockData(BlockAtlas.uniform((0, 0)), BlockType.LIQUID, BlockMeshType.LIQUID),
    BlockID.STONE: BlockData(BlockAtlas.uniform((3, 15)), BlockType.SOLID, BlockMeshType.DEFAULT),
    BlockID.GRASS: BlockData(
        BlockAtlas((1, 15), (1, 15), (1, 15), (1, 15), (0, 15), (2, 15)),
        BlockType.SOLID,
        BlockMeshType.DEFAULT,
    ),
    BlockID.SAND: BlockData(BlockAtlas.uniform((0, 14)), BlockType.SOLID, BlockMeshType.DEFAULT),
    BlockID.WOOD: BlockData(
        BlockAtlas((2, 14), (2, 14), (2, 14), (2, 14), (3, 14), (3, 14)),
        BlockType.SOLID,
        BlockMeshType.DEFAULT,
    ),
    BlockID.LEAVES: BlockData(BlockAtlas.uniform((4, 14)), BlockType.FLORA, BlockMeshType.DEFAULT),
    BlockID.TALL_GRASS: BlockData(
        BlockAtlas.uniform((2, 12)), BlockType.FLORA, BlockMeshType.SPRITE
    ),
    BlockID.ROSE: BlockData(BlockAtlas.uniform((0, 12)), BlockType.FLORA, BlockMeshType.SPRITE),
    BlockID.YELLOW_FLOWER: BlockData(
        BlockAtlas.uniform((1, 12)), BlockType.FLORA, BlockMeshType.SPRITE
    ),
    BlockID.SNOW: BlockData(BlockAtlas.uniform((3, 13)), BlockType.SOLID, BlockMeshType.DEFAULT),
    BlockID.LAVA: BlockData(BlockAtlas.uniform((0, 1)), BlockType.SOLID, BlockMeshType.DEFAULT),
    BlockID.DIRT: BlockData(BlockAtlas.uniform((2, 15)), BlockType.SOLID, BlockMeshType.DEFAULT),
}


def block_data(block_id: int) -> BlockData:
    """Return the render data of a block; raises ValueError for unknown ids."""
    return _DATABASE[BlockID(block_id)]