"""envdecouple package initialization.

Typed, default-aware access to environment variables, optionally loaded from
dotenv files.
"""

from .config import (
    EnvAccessor,
    default_accessor,
    get_bool,
    get_csv_string,
    get_int,
    get_int_in_range,
    get_prefix,
    get_string,
    get_string_choices,
    load,
    lookup_env,
    set_prefix,
)
from .errors import DotenvSyntaxError, EnvDecoupleError
from .result import Lookup

__all__ = [
    "DotenvSyntaxError",
    "EnvAccessor",
    "EnvDecoupleError",
    "Lookup",
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
