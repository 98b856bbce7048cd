[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "untree"
version = "0.9.10"
description = "Create directory trees from the textual output of tree."
requires-python = ">=3.10"
dependencies = [
    "termcolor",
]
keywords = ["tree", "directory", "filesystem", "scaffolding", "cli"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
untree = "untree.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["untree"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
