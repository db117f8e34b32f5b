[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "quickedit"
version = "0.1.0"
description = "Core pieces of a modal terminal text editor: syntax highlighting, literal search, crash-recovery snapshots and screen rendering helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["editor", "text-editor", "syntax-highlighting", "search", "recovery", "ansi"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Editors",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["quickedit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
