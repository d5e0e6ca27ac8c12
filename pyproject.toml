[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "spellcrawl"
version = "0.2.0"
description = "Spell system, grimoire and button-driven menus for a small wizard dungeon crawler"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "dungeon-crawler", "roguelike", "spells", "rpg", "menu"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Role-Playing",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["spellcrawl"]

[tool.hatch.build.targets.sdist]
include = ["spellcrawl", "tests"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
