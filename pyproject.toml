[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fuzzc"
version = "0.1.0"
description = "Fuzzy string matching: edit distances, similarity scores, best matches and longest common subsequences."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "fuzzy",
    "string-matching",
    "levenshtein",
    "damerau-levenshtein",
    "hamming",
    "similarity",
    "lcs",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: General",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["fuzzc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
