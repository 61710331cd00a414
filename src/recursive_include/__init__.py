"""Discover Gradle builds and modules in a directory tree."""

__version__ = "0.1.0"
