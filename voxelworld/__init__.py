"""Voxel world generation: Perlin noise, block data, chunk storage, chunk meshing, a camera and chunk streaming."""

__version__ = "0.1.0"