[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "birbrpg"
version = "1.0.0"
description = "A small turn-based text role-playing game where a brave bird fights three villains."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "rpg", "text-adventure", "turn-based", "terminal"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Portuguese (Brazilian)",
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

[project.scripts]
birbrpg = "birbrpg.game:main"

[tool.hatch.build.targets.wheel]
packages = ["birbrpg"]

[tool.pytest.ini_options]
addopts = "-ra"
