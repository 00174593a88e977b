[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "plaindate"
version = "0.1.0"
description = "Calendar dates without time of day, from 0001-01-01 to 9999-12-31, with day-count durations."
requires-python = ">=3.10"
dependencies = []
keywords = ["date", "calendar", "gregorian", "duration", "iso8601"]
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
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["plaindate"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
