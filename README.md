# voxelworld

A pure-Python library for generating, storing and meshing a block-based
voxel world. It has no third-party dependencies.

## Modules

- `voxelworld.perlin`: improved Perlin noise.
  - `Mt19937` is a 32-bit Mersenne Twister. `Mt19937(seed)()` returns the same
    sequence as the standard `mt19937` engine.
  - `PerlinNoise(seed)` takes an integer seed, any callable that returns
    integers, or `None` for the built-in reference permutation. It provides:
    - `noise1d`/`noise2d`/`noise3d` (results in [-1, 1]) and their `_01`
      variants, remapped to [0, 1];
    - `octave1d`/`octave2d`/`octave3d`, with `_11` (clamped) and `_01`
      (clamped and remapped) variants;
    - `normalized_octave1d`/`2d`/`3d` and their `_01` variants.

    `reseed()` rebuilds the permutation table. `serialize()` returns it as
    256 bytes. `deserialize()` loads it back and raises `ValueError` unless it
    gets 256 values in 0..255.
  - Helpers: `fade`, `lerp`, `grad`, `remap_01`, `clamp_11`, `remap_clamp_01`,
    `max_amplitude`.
- `voxelworld.blocks`: the block enums `BlockID`, `BlockType` and
  `BlockMeshType`, and the frozen dataclasses `BlockAtlas` and `BlockData`.
  `block_data(block_id)` returns a block's texture tiles, type and mesh type.
  It raises `ValueError` for an unknown id.
- `voxelworld.coords`: `CHUNK_SIZE` (32) and conversions between positions:
  - `to_global_block_position(chunk_position, block_position)`;
  - `to_local_voxel_position(global_position)`;
  - `to_chunk_position(global_position)`, which truncates toward zero.
- `voxelworld.chunk`: block storage.
  - `ChunkSection` is a 32×32×32 cube of blocks, all air at first. Reads
    outside it give air and writes outside it are ignored.
  - `Chunk(position)` is a vertical column that grows sections as blocks are
    set. Negative heights read as air and are ignored on write. It also
    offers `set_top_block`/`get_top_block` (these raise `IndexError` outside
    the chunk), `world_position()`, `section_count()` and `generate_mesh()`.
  - `ChunkMap` holds chunks keyed by `(x, z)` chunk position. It supports
    `in`, `len`, indexing, `add_chunk()` and `items()`. Its
    `set_block(chunk, x, y, z, block_id)` writes into the edge of the
    neighbouring chunk when `x` or `z` falls outside the chunk.
- `voxelworld.mesh`: turns blocks into vertices.
  - `ChunkMesh(chunk)` collects the visible faces of a chunk as packed 64-bit
    integer vertices, split into `MeshPart.BASE` and `MeshPart.TRANSPARENT`.
    Liquid and flora go to the transparent part. Liquid vertices also have
    bit 0 set.
  - `generate_mesh()` freezes both parts. `vertices(part)` returns them,
    whether frozen or still pending.
  - `pack_vertex` and `can_add_face` expose the packing and face-culling
    rules.
  - `Mesh` is the underlying vertex list.
- `voxelworld.generator`: `WorldGenerator(seed=12345, rng=None)` fills a chunk
  with the following:
  - noise-driven terrain of stone, dirt, grass, sand, snow and water;
  - trees, tall grass and flowers.

  `rng` is a callable that returns non-negative integers and places the
  decorations. By default it is a `random.Random(1)` stream.
  `height(x, z)` and `block_at(x, y, z, max_height)` expose the terrain rules.
- `voxelworld.camera`: `Camera` is a first-person camera.
  - `update(delta_time, controls)` moves it with `Key.W`/`A`/`S`/`D` and
    toggles `wireframe_mode` with `Key.R`. When the cursor is hidden, it also
    turns the view with the mouse: pitch is clamped to ±89° and the mouse is
    re-centred.
  - `Controls` is a plain snapshot of pressed keys, mouse position, cursor
    visibility and window size.
  - `view_matrix()` returns a look-at matrix as four rows. `look_at()` is also
    available on its own.
- `voxelworld.world`: `World(camera, generator=None, render_distance=15)`
  generates and meshes every chunk within the render distance of the camera
  when it is created.
  - `update_chunks()` does this again on demand.
  - `update(is_closed)` loops until `is_closed()` returns true. It re-streams
    chunks each time the camera has moved more than 20 units. It is meant to
    run on its own thread.
  - The chunks are available as `world.chunks`.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from voxelworld.camera import Camera
from voxelworld.generator import WorldGenerator
from voxelworld.mesh import MeshPart
from voxelworld.world import World

camera = Camera((0.0, 40.0, 30.0))
world = World(camera, WorldGenerator(), render_distance=2)

for position, chunk in world.chunks.items():
    base = chunk.mesh.vertices(MeshPart.BASE)
    print(position, chunk.section_count(), len(base))
```

Noise on its own:

```python
from voxelworld.perlin import PerlinNoise

noise = PerlinNoise(12345)
value = noise.octave2d_01(10.5, 3.25, 4, 0.7)   # in [0, 1]
```

## What it does not do

This is a library for world data only. It does not open a window, read real
keyboard or mouse input, load textures, fonts or shaders, or draw anything.
The meshes are lists of packed integers for a renderer of your own to upload.
The `Controls` object given to the camera must be filled in by your own input
handling. There is no command-line program, and worlds are not saved to disk.

Generation is pure Python, so large render distances take a while.