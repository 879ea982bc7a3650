[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lcftools"
version = "0.1.0"
description = "Tools for RPG Maker 2000/2003 game folders: gettext catalogue handling, map teleport graphs and JSON directory caches"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "rpg-maker",
    "gettext",
    "po",
    "translation",
    "localization",
    "graphviz",
    "dot",
    "json",
    "cache",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Localization",
    "Topic :: Games/Entertainment :: Role-Playing",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
gencache = "lcftools.gencache:main"

[tool.hatch.build.targets.wheel]
packages = ["lcftools"]

[tool.hatch.build.targets.sdist]
include = ["lcftools", "tests", "pyproject.toml"]

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
