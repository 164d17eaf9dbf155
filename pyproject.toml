[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "galaxia"
version = "0.1.0"
description = "Galaxia Classic front end: player sign-in, saved level progress and a title menu"
requires-python = ">=3.10"
keywords = ["game", "arcade", "space", "shooter", "pygame", "menu"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: French",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
galaxia = "galaxia.app:main"

[tool.hatch.build.targets.wheel]
packages = ["galaxia"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
