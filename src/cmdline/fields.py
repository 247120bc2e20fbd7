"""Declaration of command-line options on dataclass-based options entities."""

import dataclasses
from dataclasses import dataclass
from typing import Any, Optional

from cmdline.coercion import type_name as _type_name

ARGUMENT_METADATA_KEY = "cmdline.argument"


@dataclass(frozen=True)
class ArgumentSpec:
    """Metadata attached to a dataclass field by ``argument()``."""

    name: str
    description: str = ""
    required: bool = False
    default: Any = None


def argument(
    name: str,
    description: str = "",
    required: bool = False,
    default: Any = None,
) -> Any:
    """
    Declare a dataclass field as a command-line option.

    Example:
        @dataclass
        class LearnerOptions:
            train_path: Optional[str] = argument("-t", "train set path", required=True)
            output_model_path: str = argument("-o", "output model path", default="model.out")

    Args:
        name: Flag token, including the leading dash (e.g., "-t").
        description: Description shown in help text.
        required: Whether the flag must be supplied.
        default: Value used when the flag is absent (ignored when required).

    Returns:
        A ``dataclasses.field`` carrying an ``ArgumentSpec`` in its metadata.
    """
    spec = ArgumentSpec(name=name, description=description, required=required, default=default)
    field_default = None if required else default
    return dataclasses.field(
        default=field_default,
        metadata={ARGUMENT_METADATA_KEY: spec},
    )


def get_argument_spec(field: dataclasses.Field) -> Optional[ArgumentSpec]:
    return field.metadata.get(ARGUMENT_METADATA_KEY)


@dataclass(frozen=True)
class OptionField:
    """One declared configuration knob of an options entity."""

    flag_name: str
    attribute: str
    description: str
    required: bool
    declared_type: Any
    default: Any
    owner: str

    @property
    def type_name(self) -> str:
        return _type_name(self.declared_type)

    @property
    def is_flag(self) -> bool:
        """Boolean options are presence switches on the command line."""
        return self.declared_type is bool

    @property
    def effective_default(self) -> Any:
        return None if self.required else self.default
