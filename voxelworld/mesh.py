"""Vertex buffers and the packed-vertex mesh builder for chunks."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from enum import Enum
from typing import Protocol

from voxelworld.blocks import BlockData, BlockID, BlockMeshType, BlockType, block_data
from voxelworld.coords import CHUNK_AREA

Vertex = int
FaceVertex = tuple[int, int, int, int]

_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF
_LIQUID_FLAG = 1

FRONT_FACE: tuple[FaceVertex, ...] = (
    (0, 0, 1, 4), (1, 0, 1, 4), (1, 1, 1, 4),
    (0, 0, 1, 4), (1, 1, 1, 4), (0, 1, 1, 4),
)
BACK_FACE: tuple[FaceVertex, ...] = (
    (1, 0, 0, 4), (0, 0, 0, 4), (0, 1, 0, 4),
    (1, 0, 0, 4), (0, 1, 0, 4), (1, 1, 0, 4),
)
LEFT_FACE: tuple[FaceVertex, ...] = (
    (0, 0, 0, 3), (0, 0, 1, 3), (0, 1, 1, 3),
    (0, 0, 0, 3), (0, 1, 1, 3), (0, 1, 0, 3),
)
RIGHT_FACE: tuple[FaceVertex, ...] = (
    (1, 0, 1, 3), (1, 0, 0, 3), (1, 1, 0, 3),
    (1, 0, 1, 3), (1, 1, 0, 3), (1, 1, 1, 3),
)
TOP_FACE: tuple[FaceVertex, ...] = (
    (0, 1, 1, 5), (1, 1, 1, 5), (1, 1, 0, 5),
    (0, 1, 1, 5), (1, 1, 0, 5), (0, 1, 0, 5),
)
BOTTOM_FACE: tuple[FaceVertex, ...] = (
    (0, 0, 0, 2), (1, 0, 0, 2), (1, 0, 1, 2),
    (0, 0, 0, 2), (1, 0, 1, 2), (0, 0, 1, 2),
)
SPRITE_FACES: tuple[tuple[FaceVertex, ...], ...] = (
    (
        (1, 0, 0, 5), (0, 0, 1, 5), (0, 1, 1, 5),
        (1, 0, 0, 5), (0, 1, 1, 5), (1, 1, 0, 5),
    ),
    (
        (0, 0, 0, 5), (1, 0, 1, 5), (1, 1, 1, 5),
        (0, 0, 0, 5), (1, 1, 1, 5), (0, 1, 0, 5),
    ),
)
FACE_UVS: tuple[tuple[int, int], ...] = ((0, 0), (1, 0), (1, 1), (0, 0), (1, 1), (0, 1))


class Mesh:
    """A list of packed vertices that can be frozen into an uploaded buffer."""

    def __init__(self) -> None:
        self.pending: list[Vertex] = []
        self.buffer: tuple[Vertex, ...] = ()

    @property
    def vertex_count(self) -> int:
        return len(self.buffer)

    def add_vertex(self, vertex: Vertex) -> None:
        self.pending.append(vertex)

    def insert_vertices(self, vertices: Iterable[Vertex]) -> None:
        self.pending.extend(vertices)

    def generate(self) -> tuple[Vertex, ...]:
        """Move the pending vertices into the buffer and return it."""
        self.buffer = tuple(self.pending)
        self.pending.clear()
        return self.buffer


class MeshPart(Enum):
    BASE = "base"
    TRANSPARENT = "transparent"


class _BlockSource(Protocol):
    def get_block(self, x: int, y: int, z: int) -> BlockID: ...

    def section_count(self) -> int: ...


def can_add_face(data: BlockData, adjacent_block: BlockID) -> bool:
    """Whether a face of a block of this kind is visible next to the adjacent block."""
    if adjacent_block == BlockID.AIR or data.block_type is BlockType.FLORA:
        return True
    adjacent = block_data(adjacent_block)
    if adjacent.block_type is BlockType.SOLID:
        return False
    return not (data.block_type is BlockType.LIQUID and adjacent.block_type is BlockType.LIQUID)


def pack_vertex(
    face_vertex: Sequence[int], uv_corner: Sequence[int], uvs: Sequence[int], pos: Sequence[int]
) -> Vertex:
    """Pack one vertex's position, normal and texture tile into a 64-bit integer."""
    fx, fy, fz, normal = face_vertex
    cu, cv = uv_corner
    ux, uy = uvs
    x, y, z = pos
    vertex = 0
    vertex ^= ((fx + x) << 26) & _MASK32
    vertex ^= ((fy + y) << 52) & _MASK64
    vertex ^= ((fz + z) << 14) & _MASK32
    vertex ^= (normal << 11) & _MASK32
    vertex ^= ((cu + ux) << 6) & _MASK32
    vertex ^= ((cv + uy) << 1) & _MASK32
    return vertex


class ChunkMesh:
    """Visible-face geometry of a chunk, split into opaque and transparent parts."""

    def __init__(self, chunk: _BlockSource) -> None:
        self._base = Mesh()
        self._transparent = Mesh()
        self.generated = False

        height = CHUNK_AREA * chunk.section_count() // CHUNK_AREA * 32
        size = 32
        for y in range(height):
            for z in range(size):
                for x in range(size):
                    self._add_block(chunk, x, y, z)

    def _add_block(self, chunk: _BlockSource, x: int, y: int, z: int) -> None:
        block = chunk.get_block(x, y, z)
        if block == BlockID.AIR:
            return
        data = block_data(block)
        pos = (x, y, z)
        atlas = data.atlas

        if data.mesh_type is BlockMeshType.SPRITE:
            for face in SPRITE_FACES:
                self._add_face(face, BlockType.FLORA, atlas.front, pos)
            return

        if data.mesh_type is BlockMeshType.DEFAULT:
            sides = (
                (FRONT_FACE, atlas.front, (x, y, z + 1)),
                (BACK_FACE, atlas.back, (x, y, z - 1)),
                (RIGHT_FACE, atlas.right, (x + 1, y, z)),
                (LEFT_FACE, atlas.left, (x - 1, y, z)),
                (BOTTOM_FACE, atlas.bottom, (x, y - 1, z)),
            )
            for face, uvs, neighbour in sides:
                if can_add_face(data, chunk.get_block(*neighbour)):
                    self._add_face(face, data.block_type, uvs, pos)

        if can_add_face(data, chunk.get_block(x, y + 1, z)):
            self._add_face(TOP_FACE, data.block_type, atlas.top, pos)

    def _add_face(
        self,
        face: Sequence[FaceVertex],
        block_type: BlockType,
        uvs: Sequence[int],
        pos: Sequence[int],
    ) -> None:
        for face_vertex, corner in zip(face, FACE_UVS):
            vertex = pack_vertex(face_vertex, corner, uvs, pos)
            if block_type in (BlockType.LIQUID, BlockType.FLORA):
                if block_type is BlockType.LIQUID:
                    vertex ^= _LIQUID_FLAG
                self._transparent.add_vertex(vertex)
            else:
                self._base.add_vertex(vertex)

    def generate_mesh(self) -> None:
        """Freeze both parts into their buffers."""
        self._base.generate()
        self._transparent.generate()
        self.generated = True

    def vertices(self, part: MeshPart) -> tuple[Vertex, ...]:
        """The vertices of one part, frozen or still pending."""
        mesh = self._base if part is MeshPart.BASE else self._transparent
        return mesh.buffer if self.generated else tuple(mesh.pending)