[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "figurekit"
version = "0.1.0"
description = "Triangles and quadrilaterals whose angles and sides are checked when they are built"
requires-python = ">=3.10"
dependencies = []
keywords = ["geometry", "triangle", "quadrilateral", "shapes", "validation"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Environment :: Console",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
figurekit = "figurekit.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["figurekit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
