[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minigfx"
version = "0.1.0"
description = "A small in-memory graphics toolkit: windows, images, XPM loading, colour names and event hooks"
requires-python = ">=3.10"
dependencies = []
keywords = ["graphics", "xpm", "image", "window", "events", "colors"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["minigfx"]

[tool.pytest.ini_options]
addopts = "-ra"
