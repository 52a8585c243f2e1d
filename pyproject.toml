[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "numbertoolkit"
version = "0.1.0"
description = "Small number utilities: unit conversions, primes, digit puzzles, sequences and text patterns"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "math",
    "primes",
    "fibonacci",
    "unit-conversion",
    "tower-of-hanoi",
    "armstrong",
    "palindrome",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
numbertoolkit = "numbertoolkit.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["numbertoolkit"]

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
