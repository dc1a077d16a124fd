[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "skyraid"
version = "1.0.0"
description = "A vertical scrolling shoot-'em-up: fly, shoot down enemy planes and don't let too many slip past."
requires-python = ">=3.10"
keywords = ["game", "arcade", "shooter", "shmup", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: End Users/Desktop",
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
skyraid = "skyraid.app:main"

[tool.hatch.build.targets.wheel]
packages = ["skyraid"]

[tool.pytest.ini_options]
addopts = "-ra"
