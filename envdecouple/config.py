"""Typed accessors for configuration held in environment variables.

Lookups go through an :class:`EnvAccessor`, which applies an optional name
prefix, converts the raw string and falls back to a caller supplied default.
Every lookup returns a :class:`~envdecouple.result.Lookup` telling the caller
whether the variable was found and accepted.

The module level helpers (:func:`get_int`, :func:`set_prefix`, ...) operate on
a single process-wide accessor bound to :data:`os.environ`::

    from envdecouple import config

    config.load()
    workers, found = config.get_int("WORKERS", 4)
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Iterable, List, MutableMapping, Optional, Sequence, Tuple

from . import loader
from .convert import clamp, parse_bool, parse_csv_row, parse_int
from .result import Lookup

LOGGER = logging.getLogger(__name__)


@dataclass
class EnvAccessor:
    """Read typed values from an environment mapping.

    Parameters
    ----------
    prefix:
        Prepended to every variable name before it is looked up.
    environ:
        The mapping to read from. Defaults to the live :data:`os.environ`.
    """

    prefix: str = ""
    environ: MutableMapping[str, str] = field(default_factory=lambda: os.environ)

    def set_prefix(self, prefix: str) -> None:
        """Use ``prefix`` for all subsequent lookups."""

        self.prefix = prefix

    def lookup_env(self, name: str) -> Tuple[Optional[str], bool]:
        """Return the raw value of the prefixed variable and whether it exists."""

        value = self.environ.get(f"{self.prefix}{name}")
        return value, value is not None

    def get_string(self, name: str, default: str) -> Lookup[str]:
        """Return the variable as a string, or ``default`` when it is unset."""

        value, exists = self.lookup_env(name)
        if not exists:
            return Lookup.miss(default)
        return Lookup.hit(value)

    def get_string_choices(self, name: str, default: str, choices: Iterable[str]) -> Lookup[str]:
        """Return the variable if it is one of ``choices``, else ``default``.

        Membership is exact; a bare string counts as a single choice.

        ``found`` only reports whether the variable is set: a value outside
        ``choices`` yields ``(default, True)`` while an unset variable yields
        ``(default, False)``.
        """

        allowed = frozenset((choices,) if isinstance(choices, str) else choices)
        value, found = self.get_string(name, default)
        if value in allowed:
            return Lookup(value, found)
        if found:
            LOGGER.debug("%s%s is not one of the allowed choices", self.prefix, name)
        return Lookup(default, found)

    def get_int(self, name: str, default: int) -> Lookup[int]:
        """Return the variable parsed as an integer literal."""

        value, exists = self.lookup_env(name)
        if not exists:
            return Lookup.miss(default)

        number = parse_int(value)
        if number is None:
            LOGGER.debug("%s%s is not a valid integer", self.prefix, name)
            return Lookup.miss(default)
        return Lookup.hit(number)

    def get_int_in_range(self, name: str, default: int, minval: int, maxval: int) -> Lookup[int]:
        """Return :meth:`get_int` clamped into ``[minval, maxval]``.

        Clamping never changes ``found``, and a substituted default is clamped
        as well.
        """

        number, found = self.get_int(name, default)
        return Lookup(clamp(number, minval, maxval), found)

    def get_bool(self, name: str, default: bool) -> Lookup[bool]:
        """Return the variable parsed as ``1/t/true`` or ``0/f/false``."""

        value, exists = self.lookup_env(name)
        if not exists:
            return Lookup.miss(default)

        flag = parse_bool(value)
        if flag is None:
            LOGGER.debug("%s%s is not a valid boolean", self.prefix, name)
            return Lookup.miss(default)
        return Lookup.hit(flag)

    def get_csv_string(self, name: str, default: Sequence[str]) -> Lookup[Sequence[str]]:
        """Return the variable parsed as a single row of comma separated values.

        Example: ``alice,"bob, jr",carol`` gives ``["alice", "bob, jr", "carol"]``.
        """

        value, exists = self.lookup_env(name)
        if not exists:
            return Lookup.miss(default)

        fields: Optional[List[str]] = parse_csv_row(value)
        if fields is None:
            LOGGER.debug("%s%s is not a valid CSV row", self.prefix, name)
            return Lookup.miss(default)
        return Lookup.hit(fields)

    def load(self, *filenames: str | os.PathLike) -> None:
        """Load dotenv ``filenames`` (default ``.env``) into :attr:`environ`.

        Existing variables are not overridden. File and syntax errors are
        raised unchanged; see :func:`envdecouple.loader.load`.
        """

        loader.load(*filenames, environ=self.environ)


_DEFAULT_ACCESSOR = EnvAccessor()


def default_accessor() -> EnvAccessor:
    """Return the process-wide accessor used by the module level helpers."""

    return _DEFAULT_ACCESSOR


def set_prefix(prefix: str) -> None:
    _DEFAULT_ACCESSOR.set_prefix(prefix)


def get_prefix() -> str:
    return _DEFAULT_ACCESSOR.prefix


def lookup_env(name: str) -> Tuple[Optional[str], bool]:
    return _DEFAULT_ACCESSOR.lookup_env(name)


def get_string(name: str, default: str) -> Lookup[str]:
    return _DEFAULT_ACCESSOR.get_string(name, default)


def get_string_choices(name: str, default: str, choices: Iterable[str]) -> Lookup[str]:
    return _DEFAULT_ACCESSOR.get_string_choices(name, default, choices)


def get_int(name: str, default: int) -> Lookup[int]:
    return _DEFAULT_ACCESSOR.get_int(name, default)


def get_int_in_range(name: str, default: int, minval: int, maxval: int) -> Lookup[int]:
    return _DEFAULT_ACCESSOR.get_int_in_range(name, default, minval, maxval)


def get_bool(name: str, default: bool) -> Lookup[bool]:
    return _DEFAULT_ACCESSOR.get_bool(name, default)


def get_csv_string(name: str, default: Sequence[str]) -> Lookup[Sequence[str]]:
    return _DEFAULT_ACCESSOR.get_csv_string(name, default)


def load(*filenames: str | os.PathLike) -> None:
    """Load dotenv ``filenames`` (default ``.env``) into :data:`os.environ`."""

    _DEFAULT_ACCESSOR.load(*filenames)


__all__ = [
    "EnvAccessor",
    "default_accessor",
    "get_bool",
    "get_csv_string",
    "get_int",
    "get_int_in_range",
    "get_prefix",
    "get_string",
    "get_string_choices",
    "load",
    "lookup_env",
    "set_prefix",
]
