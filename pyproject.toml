[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "labworks"
version = "0.1.0"
description = "Small console programs: a game of War, a copyable pointer demo, a crafting inventory and a dungeon simulation."
requires-python = ">=3.10"
dependencies = []
keywords = ["card game", "war", "crafting", "dungeon", "simulation", "console"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
labworks-war = "labworks.war:main"
labworks-pointer = "labworks.pointer:main"
labworks-recipes = "labworks.recipes_cli:main"
labworks-dungeon = "labworks.dungeon:main"

[tool.hatch.build.targets.wheel]
packages = ["labworks"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
