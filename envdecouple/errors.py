"""Exceptions raised by :mod:`envdecouple`."""
from __future__ import annotations

import os


class EnvDecoupleError(Exception):
    """Base class for errors raised by this package."""


class DotenvSyntaxError(EnvDecoupleError, ValueError):
    """A dotenv file contains a statement that cannot be parsed."""

    def __init__(self, path: str | os.PathLike, line: int) -> None:
        self.path = os.fspath(path)
        self.line = line
        super().__init__(f"{self.path}:{line}: could not parse dotenv statement")


__all__ = ["DotenvSyntaxError", "EnvDecoupleError"]
