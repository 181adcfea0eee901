[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "split_tui"
version = "0.1.0"
description = "Pane layout tree, screen geometry, key encoding and resume-hint scraping for a split-pane terminal workspace"
requires-python = ">=3.10"
dependencies = []
keywords = ["terminal", "tui", "split", "panes", "layout", "pty"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Terminals :: Terminal Emulators/X Terminals",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["split_tui"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
