[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "starfighter"
version = "0.1.0"
description = "Building blocks for a top-down arcade space shooter: vectors, regions, input definitions, resources, sprite batching and collision rules."
requires-python = ">=3.10"
keywords = ["game", "shooter", "arcade", "sprites", "collision", "2d"]
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
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]
dependencies = [
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["starfighter"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
