import math

from voxelworld.blocks import BlockID
from voxelworld.camera import Camera
from voxelworld.generator import WorldGenerator
from voxelworld.mesh import MeshPart
from voxelworld.world import World


class RecordingGenerator:
    def __init__(self):
        self.calls = []

    def generate(self, chunks, chunk):
        self.calls.append(chunk.position)


def test_radius_zero_generates_only_camera_chunk():
    gen = RecordingGenerator()
    world = World(Camera((70.0, 40.0, -5.0)), gen, render_distance=0)
    assert set(dict(world.chunks.items())) == {(2, 0)}
    assert gen.calls == [(2, 0)]
    assert world.chunks[(2, 0)].is_generated


def test_radius_one_generates_plus_shape_in_order():
    gen = RecordingGenerator()
    world = World(Camera(), gen, render_distance=1)
    assert len(world.chunks) == 5
    assert gen.calls == [(0, 0), (1, 0), (-1, 0), (0, 1), (0, -1)]


def test_generate_chunks_covers_disc():
    gen = RecordingGenerator()
    world = World(Camera(), gen, render_distance=0)
    world.generate_chunks((0, 0), (0, 0), 2)
    keys = set(dict(world.chunks.items()))
    assert len(keys) == 13
    assert all(math.dist((0, 0), k) <= 2 for k in keys)


def test_chunks_are_generated_once():
    gen = RecordingGenerator()
    world = World(Camera(), gen, render_distance=1)
    world.update_chunks()
    world.update_chunks()
    assert len(gen.calls) == 5
    assert len(set(gen.calls)) == 5


def test_update_streams_after_large_move():
    gen = RecordingGenerator()
    camera = Camera()
    world = World(camera, gen, render_distance=0)
    camera.position = (64.0, 0.0, 0.0)
    flags = iter([False, True])
    world.update(lambda: next(flags))
    assert (2, 0) in world.chunks
    assert len(world.chunks) == 2


def test_update_ignores_small_move():
    gen = RecordingGenerator()
    camera = Camera()
    world = World(camera, gen, render_distance=0)
    camera.position = (40.0, 0.0, 0.0)
    camera.position = (10.0, 0.0, 0.0)
    flags = iter([False, False, True])
    world.update(lambda: next(flags))
    assert len(world.chunks) == 1


def test_update_stops_immediately_when_closed():
    gen = RecordingGenerator()
    camera = Camera()
    world = World(camera, gen, render_distance=0)
    camera.position = (500.0, 0.0, 500.0)
    world.update(lambda: True)
    assert (15, 15) not in world.chunks


def test_real_generator_builds_terrain_and_mesh():
    world = World(Camera(), WorldGenerator(rng=lambda: 0), render_distance=0)
    chunk = world.chunks[(0, 0)]
    assert chunk.is_generated
    assert chunk.get_block(0, 0, 0) != BlockID.AIR
    assert chunk.mesh is not None
    assert len(chunk.mesh.vertices(MeshPart.BASE)) % 6 == 0
    assert len(chunk.mesh.vertices(MeshPart.BASE)) > 0