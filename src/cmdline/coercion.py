"""
@meta
name: cmdline_coercion
type: utility
domain: cmdline
responsibility:
  - Convert raw command-line tokens into typed option values
  - Keep an extensible table of supported declared types
inputs:
  - Declared Python types and raw string tokens
outputs:
  - Typed values
tags:
  - utility
  - cmdline
  - coercion
lifecycle:
  status: active
"""

"""Type-coercion table keyed by declared option type."""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Callable, Dict

TRUE_TOKENS = frozenset({"true", "yes", "1"})
FALSE_TOKENS = frozenset({"false", "no", "0"})
BOOLEAN_TOKENS = TRUE_TOKENS | FALSE_TOKENS


@dataclass(frozen=True)
class Coercer:
    type_name: str
    convert: Callable[[str], Any]


def parse_text(raw: str) -> str:
    return raw


def parse_integer(raw: str) -> int:
    return int(raw.strip(), 10)


def parse_real(raw: str) -> float:
    return float(raw)


def parse_boolean(raw: str) -> bool:
    token = raw.strip().lower()
    if token in TRUE_TOKENS:
        return True
    if token in FALSE_TOKENS:
        return False
    raise ValueError(f"not a boolean: {raw!r}")


def parse_path(raw: str) -> Path:
    if not raw:
        raise ValueError("empty path")
    return Path(raw)


_COERCERS: Dict[type, Coercer] = {
    str: Coercer("text", parse_text),
    bool: Coercer("boolean", parse_boolean),
    int: Coercer("integer", parse_integer),
    float: Coercer("real", parse_real),
    Path: Coercer("path", parse_path),
}


def register_coercer(py_type: type, type_name: str, convert: Callable[[str], Any]) -> None:
    """
    Register (or replace) the conversion used for a declared type.

    Args:
        py_type: Python type used in option annotations.
        type_name: Human-readable type name used in help and error messages.
        convert: Pure function from the raw token to a value, raising
            ValueError when the token cannot be converted.
    """
    _COERCERS[py_type] = Coercer(type_name, convert)


def _is_enum(py_type: Any) -> bool:
    return isinstance(py_type, type) and issubclass(py_type, Enum)


def is_supported(py_type: Any) -> bool:
    return py_type in _COERCERS or _is_enum(py_type)


def type_name(py_type: Any) -> str:
    if _is_enum(py_type):
        return "choice"
    try:
        return _COERCERS[py_type].type_name
    except KeyError:
        raise TypeError(f"No coercer registered for {py_type!r}") from None


def _parse_enum(py_type: type, raw: str) -> Enum:
    for member in py_type:
        if str(member.value) == raw:
            return member
    lowered = raw.lower()
    for member in py_type:
        if member.name.lower() == lowered:
            return member
    choices = ", ".join(str(member.value) for member in py_type)
    raise ValueError(f"{raw!r} is not one of: {choices}")


def coerce(py_type: Any, raw: str) -> Any:
    """
    Convert a raw token to a value of the declared type.

    Raises:
        ValueError: If the token cannot be converted.
        TypeError: If no coercer is registered for the type.
    """
    if _is_enum(py_type):
        return _parse_enum(py_type, raw)
    try:
        coercer = _COERCERS[py_type]
    except KeyError:
        raise TypeError(f"No coercer registered for {py_type!r}") from None
    return coercer.convert(raw)


def coerce_native(py_type: Any, value: Any) -> Any:
    """
    Convert a value that may already be typed (e.g., loaded from YAML).

    Strings go through ``coerce``. Native values are accepted when they
    already satisfy the declared type; ints are promoted for real-typed
    options. Booleans are only accepted for boolean options.
    """
    if value is None:
        return None
    if isinstance(value, str):
        return coerce(py_type, value)
    if _is_enum(py_type):
        if isinstance(value, py_type):
            return value
        return _parse_enum(py_type, str(value))
    if isinstance(value, bool):
        if py_type is bool:
            return value
        raise ValueError(f"boolean {value!r} given for a {type_name(py_type)} option")
    if py_type is float and isinstance(value, int):
        return float(value)
    if py_type is str and isinstance(value, (int, float)):
        return str(value)
    if isinstance(py_type, type) and isinstance(value, py_type):
        return value
    raise ValueError(f"{value!r} is not a valid {type_name(py_type)}")
