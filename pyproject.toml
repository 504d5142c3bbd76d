[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "loopset"
version = "0.1.0"
description = "A looping playlist manager with an interactive text menu"
requires-python = ">=3.10"
keywords = ["playlist", "music", "queue", "cli", "shuffle"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio :: Players",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
loopset = "loopset.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["loopset"]

[tool.pytest.ini_options]
addopts = "-ra"
