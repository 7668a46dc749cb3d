[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "invertedsearch"
version = "0.1.0"
description = "Build, search, save and reload a word-to-file inverted index of text files"
requires-python = ">=3.10"
dependencies = []
keywords = ["inverted index", "search", "text", "indexing", "word count"]
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
    "Topic :: Text Processing :: Indexing",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
invertedsearch = "invertedsearch.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["invertedsearch"]

[tool.pytest.ini_options]
addopts = "-ra"
