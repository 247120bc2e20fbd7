"""Serialize bound options back to command-line tokens."""

import sys
from enum import Enum
from typing import Any, Dict, List, Optional

from cmdline.schema import build_schema


def _format_value(value: Any) -> str:
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, float):
        return repr(value)
    return str(value)


def as_flag_mapping(options: Any) -> Dict[str, Any]:
    """Bound values of an options entity keyed by flag name, in schema order."""
    schema = build_schema(type(options))
    return {option.flag_name: getattr(options, option.attribute) for option in schema.fields}


def to_tokens(options: Any) -> List[str]:
    """
    Render an options entity as ``-flag value`` tokens.

    Options whose value is None are skipped. Booleans are emitted as a bare
    flag when true; a false value is emitted as ``-flag false`` unless the
    declared default is already false.
    Binding the returned tokens yields an equal entity.
    """
    schema = build_schema(type(options))
    tokens: List[str] = []
    for option in schema.fields:
        value = getattr(options, option.attribute)
        if value is None:
            continue
        if option.is_flag:
            if value:
                tokens.append(option.flag_name)
            elif option.effective_default is not False:
                tokens.extend([option.flag_name, "false"])
            continue
        tokens.extend([option.flag_name, _format_value(value)])
    return tokens


def build_command(
    module: str,
    options: Any,
    executable: Optional[str] = None,
) -> List[str]:
    """
    Build the argv that runs ``python -m <module>`` with the given options.

    Args:
        module: Dotted module name of the runner.
        options: Populated options entity.
        executable: Python interpreter (default: ``sys.executable``).

    Returns:
        Command list suitable for ``subprocess.run``.
    """
    return [executable or sys.executable, "-m", module, *to_tokens(options)]
