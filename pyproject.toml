[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "taynguyen"
version = "0.1.0"
description = "Tay Nguyen campaign simulation: force gathering, target decoding, logistics, attack planning and resupply"
requires-python = ">=3.10"
dependencies = []
keywords = ["simulation", "campaign", "exercises", "strategy"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
taynguyen = "taynguyen.runner:main"

[tool.hatch.build.targets.wheel]
packages = ["taynguyen"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
