[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "graphcore"
version = "0.1.0"
description = "Core data structures for graphs: nodes, edges, edge containers and graphs."
requires-python = ">=3.10"
dependencies = []
keywords = ["graph", "nodes", "edges", "data structures"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
graphcore = "graphcore.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["graphcore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
