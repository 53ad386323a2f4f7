[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fixeduint"
version = "0.1.0"
description = "Fixed-width unsigned big integers (U128, U256, U512 and custom widths) with explicit overflow semantics"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "bigint",
    "uint256",
    "fixed-width",
    "unsigned integer",
    "overflow",
    "arithmetic",
    "modular arithmetic",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[project.scripts]
fixeduint-modular = "fixeduint.modular:main"

[tool.hatch.build.targets.wheel]
packages = ["fixeduint"]

[tool.hatch.build.targets.sdist]
include = [
    "fixeduint",
    "tests",
    "pyproject.toml",
]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
