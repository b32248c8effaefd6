[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "scivis"
version = "0.1.0"
description = "Building blocks for scientific visualization: volumes, QVis loading, plane clipping, arcball rotation, flow fields and marching-squares/cubes tables"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = [
    "visualization",
    "volume",
    "marching cubes",
    "marching squares",
    "flow field",
    "arcball",
    "clipping",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Visualization",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.setuptools.packages.find]
include = ["scivis*"]

[tool.pytest.ini_options]
addopts = "-ra"
