[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cgraph"
version = "0.1.0"
description = "Building blocks for graph-style pipelines: status objects, lifecycle base objects and an ANN node template"
requires-python = ">=3.10"
dependencies = []
keywords = ["graph", "pipeline", "framework", "ann", "status"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Application Frameworks",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cgraph"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
