[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cpalgos"
version = "0.1.0"
description = "Classic competitive-programming algorithms and data structures: tries, segment trees, sieves, graph algorithms and more."
requires-python = ">=3.10"
keywords = [
    "algorithms",
    "data-structures",
    "competitive-programming",
    "segment-tree",
    "trie",
    "sieve",
    "graphs",
    "lca",
    "kmp",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = [
    "sortedcontainers",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[tool.hatch.build.targets.wheel]
packages = ["cpalgos"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
