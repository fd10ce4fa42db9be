"""The world: chunk streaming around the camera."""

from __future__ import annotations

import math
from collections.abc import Callable, Sequence
from typing import Protocol

from voxelworld.camera import Camera
from voxelworld.chunk import Chunk, ChunkMap
from voxelworld.coords import to_chunk_position
from voxelworld.generator import WorldGenerator

ChunkPosition = tuple[int, int]


class _Generator(Protocol):
    def generate(self, chunks: ChunkMap, chunk: Chunk) -> None: ...


class World:
    """Keeps the chunks within a render distance of the camera generated and meshed."""

    RENDER_DISTANCE = 15
    CHUNK_UPDATE_MOVE_THRESHOLD = 20.0

    def __init__(
        self,
        camera: Camera,
        generator: _Generator | None = None,
        render_distance: int = RENDER_DISTANCE,
    ) -> None:
        self.camera = camera
        self.generator = generator if generator is not None else WorldGenerator()
        self.render_distance = render_distance
        self._chunks = ChunkMap()
        self._visited: set[ChunkPosition] = set()
        self._old_position = camera.position
        self.update_chunks()

    @property
    def chunks(self) -> ChunkMap:
        return self._chunks

    def update(self, is_closed: Callable[[], bool]) -> None:
        """Stream chunks whenever the camera moves far enough, until is_closed() is true.

        Meant to run on its own thread.
        """
        while not is_closed():
            if math.dist(self._old_position, self.camera.position) > self.CHUNK_UPDATE_MOVE_THRESHOLD:
                self.update_chunks()
                self._old_position = self.camera.position

    def update_chunks(self) -> None:
        """Generate every chunk within the render distance of the camera."""
        start = to_chunk_position(self.camera.position)
        self.generate_chunks(start, start, self.render_distance)
        self._visited.clear()

    def generate_chunks(
        self, start: Sequence[int], current: Sequence[int], distance: float
    ) -> None:
        """Flood-fill from current, generating chunks no farther than distance from start."""
        sx, sz = start
        stack: list[ChunkPosition] = [(int(current[0]), int(current[1]))]
        while stack:
            pos = stack.pop()
            if pos in self._visited or math.dist((sx, sz), pos) > distance:
                continue
            self._visited.add(pos)

            chunk = self._chunks.add_chunk(pos)
            if not chunk.is_generated:
                self.generator.generate(self._chunks, chunk)
                chunk.generate_mesh()
                chunk.is_generated = True

            x, z = pos
            # Pushed in reverse so +x is explored first, then -x, +z, -z.
            stack.extend([(x, z - 1), (x, z + 1), (x - 1, z), (x + 1, z)])