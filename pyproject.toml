[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "emojivshuman"
version = "0.1.0"
description = "A lane-defence game: plant emoji on a grid and hold back waves of advancing humans."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "tower defense", "lane defense", "emoji", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Real Time Strategy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
emojivshuman = "emojivshuman.app:main"

[tool.hatch.build.targets.wheel]
packages = ["emojivshuman"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
