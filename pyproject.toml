[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "utilkit"
version = "0.1.0"
description = "Small helpers: a portable path type with filesystem operations, string joining and scope-exit callbacks."
requires-python = ">=3.10"
dependencies = []
keywords = ["filesystem", "path", "join", "scope-exit", "utilities"]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["utilkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
