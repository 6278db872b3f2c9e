[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fastparsex"
version = "1.0.0"
description = "Small readers and parsers for CSV, log and binary files"
requires-python = ">=3.10"
dependencies = []
keywords = ["csv", "log", "parser", "binary", "benchmark"]
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

[project.scripts]
fastparsex = "fastparsex.cli:main"
fastparsex-bench = "fastparsex.bench:main"

[tool.hatch.build.targets.wheel]
packages = ["fastparsex"]

[tool.hatch.build.targets.sdist]
include = ["fastparsex", "tests", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
