# src/loaders/errors.py
from __future__ import annotations


class SourceError(Exception):
    """Base for per-source load failures. Never fatal: the loader skips the source."""

    def __init__(self, source: str, message: str):
        super().__init__(f"{source}: {message}")
        self.source = source


class SourceUnavailable(SourceError):
    """A listed data file does not exist."""


class SourceMalformed(SourceError):
    """A data file exists but could not be parsed."""
