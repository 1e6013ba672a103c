[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gemswap"
version = "0.1.0"
description = "A match-three gem swapping puzzle game built on pygame"
requires-python = ">=3.10"
keywords = ["game", "puzzle", "match-three", "gems", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
gemswap = "gemswap.game:main"

[tool.hatch.build.targets.wheel]
packages = ["gemswap"]

[tool.pytest.ini_options]
addopts = "-ra"
