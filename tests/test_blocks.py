import pytest

from voxelworld.blocks import (
    BLOCK_COUNT,
    BlockAtlas,
    BlockID,
    BlockMeshType,
    BlockType,
    block_data,
)


def test_every_block_has_data():
    assert len(BlockID) == BLOCK_COUNT
    for block in BlockID:
        assert block_data(block).atlas.front == block_data(int(block)).atlas.front


def test_grass_faces_differ_on_top_and_bottom():
    atlas = block_data(BlockID.GRASS).atlas
    assert atlas.top == (0, 15)
    assert atlas.bottom == block_data(BlockID.DIRT).atlas.front
    assert atlas.front == atlas.back == atlas.left == atlas.right


def test_water_is_liquid():
    data = block_data(BlockID.WATER)
    assert data.block_type is BlockType.LIQUID
    assert data.mesh_type is BlockMeshType.LIQUID


@pytest.mark.parametrize("block", [BlockID.TALL_GRASS, BlockID.ROSE, BlockID.YELLOW_FLOWER])
def test_plants_are_sprites(block):
    data = block_data(block)
    assert data.mesh_type is BlockMeshType.SPRITE
    assert data.block_type is BlockType.FLORA


def test_leaves_are_flora_cubes():
    data = block_data(BlockID.LEAVES)
    assert data.block_type is BlockType.FLORA
    assert data.mesh_type is BlockMeshType.DEFAULT


def test_uniform_atlas():
    atlas = BlockAtlas.uniform((7, 9))
    assert {atlas.front, atlas.back, atlas.left, atlas.right, atlas.top, atlas.bottom} == {(7, 9)}


def test_unknown_block_raises():
    with pytest.raises(ValueError):
        block_data(BLOCK_COUNT)