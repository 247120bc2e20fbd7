"""Usage text rendering for option schemas."""

from enum import Enum
from typing import TYPE_CHECKING, Any, List, Optional

if TYPE_CHECKING:
    from cmdline.fields import OptionField
    from cmdline.schema import OptionSchema


def format_default(value: Any) -> str:
    """Render a default value the way it would be typed on the command line."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def render_option_line(option: "OptionField") -> str:
    if option.required:
        return f"{option.flag_name}\t{option.description} (required)"
    line = f"[{option.flag_name}]\t{option.description}"
    if option.default is not None:
        line += f" (default: {format_default(option.default)})"
    return line


def render_help(schema: "OptionSchema", prog: Optional[str] = None) -> str:
    """
    Render the usage listing of a schema.

    The first line is ``Usage: <prog>``; each following line describes one
    option in schema order (inherited options first). Optional flags are
    bracketed. Rendering has no side effects and is deterministic.

    Args:
        schema: Schema to describe.
        prog: Program name for the header (default: the entity type name).

    Returns:
        Help text without a trailing newline.
    """
    lines: List[str] = [f"Usage: {prog or schema.entity_type.__qualname__}"]
    lines.extend(render_option_line(option) for option in schema.fields)
    return "\n".join(lines)
