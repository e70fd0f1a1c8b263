"""Launcher UI host: plugin descriptors and themes served to the launcher UI."""

__version__ = "0.1.0"
