[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "steerai"
version = "0.1.0"
description = "Steering behaviours, combined steering, flocking and spatial partitioning for 2D game agents"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "steering",
    "flocking",
    "boids",
    "game-ai",
    "agents",
    "spatial-partitioning",
    "path-following",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
steerai = "steerai.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["steerai"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
