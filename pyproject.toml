[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cwdaemon"
version = "0.1.0"
description = "Bech32 encoding and reference CosmWasm contracts that run against in-memory storage"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "cosmwasm",
    "cosmos",
    "bech32",
    "blockchain",
    "smart-contracts",
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
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["cwdaemon"]

[tool.hatch.build.targets.sdist]
include = [
    "cwdaemon",
    "tests",
]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
