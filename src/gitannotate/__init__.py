"""gitannotate: annotate file paths with their status from a git change summary."""

__version__ = "0.1.0"
