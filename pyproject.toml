[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "atspikit"
version = "0.1.0"
description = "Accessibility roles, state sets and their wire encoding, with tree rendering helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["accessibility", "a11y", "at-spi", "screen-reader", "dbus"]
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
    "Topic :: Adaptive Technologies",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["atspikit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
