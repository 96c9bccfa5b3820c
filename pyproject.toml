[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tinytext"
version = "0.1.0"
description = "Small text filters and toys: ciphers, hex and URL codecs, NATO and Morse spelling, word splitting, passwords and clock greetings."
requires-python = ">=3.10"
dependencies = []
keywords = ["text", "filter", "caesar", "rot13", "hex", "morse", "nato", "urlencode"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Filters",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tinytext = "tinytext.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["tinytext"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
