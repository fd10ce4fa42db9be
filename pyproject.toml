[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "voxelworld"
version = "0.1.0"
description = "Procedural voxel world generation: Perlin noise terrain, chunked block storage and packed chunk meshes"
requires-python = ">=3.10"
dependencies = []
keywords = ["voxel", "perlin", "noise", "terrain", "procedural", "chunk", "mesh"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Simulation",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["voxelworld"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
