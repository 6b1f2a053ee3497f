[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "base100"
version = "0.1.0"
description = "Encode bytes as emoji and back again with the base100 scheme"
requires-python = ">=3.10"
keywords = ["base100", "emoji", "encoding", "codec"]
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
dependencies = []

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[project.scripts]
base100 = "base100.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["base100"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
