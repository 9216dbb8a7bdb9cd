"""Populate an environment mapping from dotenv files.

Parsing is delegated to :mod:`dotenv` (python-dotenv). This module only adds
the loading policy: files are applied in order, variables that are already
set are never overridden, and read or syntax errors are raised to the caller.
"""

from __future__ import annotations

import io
import logging
import os
from pathlib import Path
from typing import Dict, MutableMapping, Optional

from dotenv import dotenv_values
from dotenv.parser import parse_stream

from .errors import DotenvSyntaxError

LOGGER = logging.getLogger(__name__)

DEFAULT_FILENAME = ".env"


def read_dotenv(path: str | os.PathLike) -> Dict[str, str]:
    """Return the variables declared in the dotenv file at ``path``.

    Parameters
    ----------
    path:
        Location of the file. Errors raised while opening or reading it
        (:class:`FileNotFoundError`, :class:`PermissionError`, ...) propagate
        unchanged.

    Raises
    ------
    DotenvSyntaxError
        If any statement in the file cannot be parsed.
    """

    text = Path(path).read_text(encoding="utf-8")

    for binding in parse_stream(io.StringIO(text)):
        if binding.error:
            raise DotenvSyntaxError(path, binding.original.line)

    values = dotenv_values(stream=io.StringIO(text))
    # Keys declared without ``=`` have no value.
    return {key: value for key, value in values.items() if value is not None}


def load(*filenames: str | os.PathLike, environ: Optional[MutableMapping[str, str]] = None) -> None:
    """Load variables from ``filenames`` into ``environ``.

    ``.env`` in the working directory is used when no filename is given and
    :data:`os.environ` when no mapping is given. A variable already present in
    ``environ`` keeps its value, so the first file that declares a key wins.
    Loading stops at the first failing file; files before it stay applied.
    """

    target = os.environ if environ is None else environ

    for filename in filenames or (DEFAULT_FILENAME,):
        values = read_dotenv(filename)
        applied = 0
        for key, value in values.items():
            if key in target:
                continue
            target[key] = value
            applied += 1
        LOGGER.debug(
            "Loaded %d of %d variable(s) from %s", applied, len(values), os.fspath(filename)
        )


__all__ = ["DEFAULT_FILENAME", "load", "read_dotenv"]
