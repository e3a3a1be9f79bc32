[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "periodicity"
version = "0.1.0"
description = "A small spell-casting role-playing game with an entity-component core and a pygame front end."
requires-python = ">=3.10"
keywords = ["game", "rpg", "pygame", "entity-component", "spells"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Role-Playing",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
periodicity = "periodicity.app:main"

[tool.hatch.build.targets.wheel]
packages = ["periodicity"]

[tool.pytest.ini_options]
addopts = "-ra"
