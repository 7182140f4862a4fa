[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rainsim"
version = "0.1.0"
description = "A small weather simulation of falling rain, hail and snow drawn with pygame"
requires-python = ">=3.10"
keywords = ["rain", "snow", "hail", "weather", "simulation", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
rainsim = "rainsim.app:main"

[tool.hatch.build.targets.wheel]
packages = ["rainsim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
