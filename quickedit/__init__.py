"""Core pieces of a modal terminal text editor: syntax highlighting, search, crash recovery and rendering helpers."""

__version__ = "0.1.0"