[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "outlaw"
version = "0.1.0"
description = "XP tables, class and skill tree definitions, reserve ammo, stat bars and pooled projectiles for action role-playing games"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "rpg", "arpg", "leveling", "skill-tree", "projectiles", "object-pool"]
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
    "Topic :: Games/Entertainment :: Role-Playing",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["outlaw"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
