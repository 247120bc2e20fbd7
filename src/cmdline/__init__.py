"""Declarative command-line option binding for experiment runners.

Runners declare an options dataclass with ``argument()`` fields; the binder
matches ``-flag value`` tokens against the derived schema and returns a
populated entity, or raises ``ParseFailure`` carrying the usage text.
"""

from .exceptions import (
    CmdLineError,
    FailureKind,
    OptionsFileError,
    ParseFailure,
    SchemaError,
)
from .coercion import coerce, register_coercer
from .fields import ArgumentSpec, OptionField, argument
from .schema import OptionSchema, build_schema, lookup
from .help import render_help
from .binder import OptionBinder, bind
from .config import load_options_file, options_from_mapping
from .serialize import as_flag_mapping, build_command, to_tokens
from .entrypoint import parse_or_exit

__all__ = [
    # Errors
    "CmdLineError",
    "FailureKind",
    "OptionsFileError",
    "ParseFailure",
    "SchemaError",
    # Declaration and schema
    "ArgumentSpec",
    "OptionField",
    "OptionSchema",
    "argument",
    "build_schema",
    "lookup",
    "render_help",
    # Coercion
    "coerce",
    "register_coercer",
    # Binding
    "OptionBinder",
    "bind",
    "load_options_file",
    "options_from_mapping",
    "parse_or_exit",
    # Serialization
    "as_flag_mapping",
    "build_command",
    "to_tokens",
]
