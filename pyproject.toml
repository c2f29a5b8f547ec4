[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "floatbits"
version = "0.1.0"
description = "Inspect and convert IEEE 754 half, single, double and x87 extended precision bit patterns, plus a configurable-width software float."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "ieee754",
    "floating-point",
    "fp16",
    "half-precision",
    "extended-precision",
    "bits",
    "binary",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Education",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[project.scripts]
floatbits-showcase = "floatbits.showcase:main"
floatbits-myfloat-demo = "floatbits.myfloat_demo:main"

[tool.hatch.build.targets.wheel]
packages = ["floatbits"]

[tool.hatch.build.targets.sdist]
include = ["floatbits", "tests", "pyproject.toml"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
files = ["floatbits"]
