[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "raytools"
version = "0.1.0"
description = "Vectors, points, normals, matrices, rays and transformations for a ray tracer"
requires-python = ">=3.10"
dependencies = []
keywords = ["ray tracing", "linear algebra", "3d", "geometry", "matrix", "transformation"]
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
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["raytools"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
