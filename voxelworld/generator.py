"""Procedural terrain and decoration generation for chunks."""

from __future__ import annotations

import random
from collections.abc import Callable

from voxelworld.blocks import BlockID
from voxelworld.chunk import Chunk, ChunkMap
from voxelworld.coords import CHUNK_SIZE
from voxelworld.perlin import PerlinNoise

SEED = 12345
OCEAN_LEVEL = 12
MIN_HEIGHT = 2
MAX_HEIGHT = 105
MOUNTAIN_HEIGHT = 35
SNOW_HEIGHT = 64

RandomSource = Callable[[], int]


def _default_rng() -> RandomSource:
    source = random.Random(1)
    return lambda: source.getrandbits(31)


class WorldGenerator:
    """Fills chunks with noise-driven terrain, trees, grass and flowers.

    ``rng`` is a callable returning non-negative integers; it drives the
    placement of decorations.
    """

    SEED = SEED
    OCEAN_LEVEL = OCEAN_LEVEL
    MIN_HEIGHT = MIN_HEIGHT
    MAX_HEIGHT = MAX_HEIGHT
    MOUNTAIN_HEIGHT = MOUNTAIN_HEIGHT
    SNOW_HEIGHT = SNOW_HEIGHT

    def __init__(self, seed: int = SEED, rng: RandomSource | None = None) -> None:
        self.seed = seed
        self._perlin = PerlinNoise(seed)
        self._rand = rng if rng is not None else _default_rng()

    def height(self, x: int, z: int) -> int:
        """Terrain surface height of the global column (x, z)."""
        continentalness = self._perlin.octave2d_01(x * 0.0009, z * 0.0009, 4, 0.7)
        raw = int(self._perlin.octave2d_01(x * 0.004, z * 0.004, 4, 0.7) * MAX_HEIGHT * continentalness)
        return min(max(raw, MIN_HEIGHT), MAX_HEIGHT)

    def block_at(self, x: int, y: int, z: int, max_height: int) -> BlockID:
        """The terrain block at a global position in a column of the given height."""
        blend = self._perlin.octave2d_01(x * 0.05, z * 0.05, 4, 0.09) * 10.0

        if MOUNTAIN_HEIGHT + blend < y <= max_height:
            if y == max_height and y >= SNOW_HEIGHT - blend:
                return BlockID.SNOW
            return BlockID.STONE
        if y < max_height - 3:
            return BlockID.STONE
        if y < max_height:
            return BlockID.DIRT
        if y == max_height:
            return BlockID.SAND if max_height < OCEAN_LEVEL + 1 else BlockID.GRASS
        if MIN_HEIGHT <= y < OCEAN_LEVEL:
            return BlockID.WATER
        return BlockID.AIR

    def generate(self, chunks: ChunkMap, chunk: Chunk) -> None:
        """Generate terrain and then decorations for a chunk."""
        self._generate_terrain(chunk)
        self._generate_decorations(chunks, chunk)

    def _generate_terrain(self, chunk: Chunk) -> None:
        wx, wz = chunk.world_position()
        for z in range(CHUNK_SIZE):
            for x in range(CHUNK_SIZE):
                gx, gz = x + wx, z + wz
                max_height = self.height(gx, gz)
                chunk.set_top_block(x, z, max_height)
                check_height = max(max_height, OCEAN_LEVEL)
                for y in range(check_height + 1):
                    chunk.set_block(x, y, z, self.block_at(gx, y, gz, max_height))

    def _generate_decorations(self, chunks: ChunkMap, chunk: Chunk) -> None:
        rand = self._rand
        for z in range(CHUNK_SIZE):
            for x in range(CHUNK_SIZE):
                top = chunk.get_top_block(x, z)
                if not OCEAN_LEVEL + 2 < top < MOUNTAIN_HEIGHT:
                    continue
                if rand() % 125 > 123:
                    self._generate_tree(chunks, chunk, x, top + 1, z)
                elif rand() % 100 > 90:
                    chunk.set_block(x, top + 1, z, BlockID.TALL_GRASS)
                elif rand() % 100 > 97:
                    flower = BlockID.YELLOW_FLOWER if rand() % 3 > 1 else BlockID.ROSE
                    chunk.set_block(x, top + 1, z, flower)

    def _generate_tree(self, chunks: ChunkMap, chunk: Chunk, x: int, y: int, z: int) -> None:
        rand = self._rand
        height = rand() % 3 + 3
        for i in range(height):
            chunk.set_block(x, y + i, z, BlockID.WOOD)

        crown = y + height
        leave_height = rand() % 2 + 2
        for xx in range(x - 2, x + 3):
            for zz in range(z - 2, z + 3):
                for yy in range(crown, crown + 2):
                    corner = (xx in (x - 2, x + 2)) and (zz in (z - 2, z + 2))
                    on_trunk = xx == x and zz == z and yy <= crown
                    if on_trunk:
                        continue
                    if corner and yy == crown + 1 and rand() % 100 > 40:
                        continue
                    chunks.set_block(chunk, xx, yy, zz, BlockID.LEAVES)

        top = crown + leave_height
        for xx in range(x - 1, x + 2):
            for zz in range(z - 1, z + 2):
                for yy in range(crown + 2, top + 1):
                    corner = (xx in (x - 1, x + 1)) and (zz in (z - 1, z + 1))
                    if corner and yy == top and rand() % 100 > 20:
                        continue
                    chunks.set_block(chunk, xx, yy, zz, BlockID.LEAVES)