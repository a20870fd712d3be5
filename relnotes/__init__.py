"""Release notes for a version range, gathered from GitHub releases."""

__version__ = "0.1.0"
