"""
@meta
name: cmdline_options_file
type: utility
domain: cmdline
responsibility:
  - Load option values for a schema from a YAML options file
  - Validate keys and coerce values with the coercion table
inputs:
  - YAML options files
  - Option schemas or options entity types
outputs:
  - Values keyed by attribute name, usable as binder defaults
tags:
  - utility
  - cmdline
  - config
lifecycle:
  status: active
"""

"""Options files: YAML mappings supplying option values below the command line."""

from pathlib import Path
from typing import Any, Dict, Mapping, Union

import yaml

from common.shared.logging_utils import get_logger
from common.shared.yaml_utils import load_yaml

from cmdline.coercion import coerce_native
from cmdline.exceptions import OptionsFileError
from cmdline.fields import OptionField
from cmdline.schema import OptionSchema, build_schema

logger = get_logger(__name__)


def _find_option(schema: OptionSchema, key: str) -> OptionField:
    option = schema.lookup(key)
    if option is not None:
        return option
    for candidate in schema.fields:
        if candidate.attribute == key:
            return candidate
    raise OptionsFileError(
        f"Unknown option '{key}' for {schema.entity_type.__qualname__}"
    )


def options_from_mapping(
    raw: Mapping[str, Any],
    schema_or_type: Union[OptionSchema, type],
) -> Dict[str, Any]:
    """
    Convert a mapping of option values into binder defaults.

    Keys may be flag names (``-t``) or attribute names (``train_path``).

    Returns:
        Typed values keyed by attribute name.

    Raises:
        OptionsFileError: On an unknown key, a key given twice under both
            spellings, or a value that cannot be converted.
    """
    schema = schema_or_type if isinstance(schema_or_type, OptionSchema) else build_schema(schema_or_type)
    values: Dict[str, Any] = {}
    for key, value in raw.items():
        option = _find_option(schema, str(key))
        if option.attribute in values:
            raise OptionsFileError(
                f"Option {option.flag_name} ({option.attribute}) is given more than once"
            )
        try:
            values[option.attribute] = coerce_native(option.declared_type, value)
        except ValueError as e:
            raise OptionsFileError(
                f"Invalid value for {option.flag_name}: {value!r} "
                f"is not a valid {option.type_name}"
            ) from e
    return values


def load_options_file(
    path: Union[str, Path],
    schema_or_type: Union[OptionSchema, type],
) -> Dict[str, Any]:
    """
    Load option values from a YAML options file.

    Example file:
        -t: data/train.txt
        learning_rate: 0.05
        -V: false

    Args:
        path: Path to the YAML file.
        schema_or_type: Schema (or options entity type) the values belong to.

    Returns:
        Typed values keyed by attribute name, to pass as ``defaults`` to the binder.

    Raises:
        FileNotFoundError: If the file does not exist.
        OptionsFileError: If the file is not valid YAML, is not a mapping or
            holds invalid entries.
    """
    try:
        raw = load_yaml(Path(path))
    except yaml.YAMLError as e:
        raise OptionsFileError(f"Options file is not valid YAML: {path}: {e}") from e
    if not isinstance(raw, dict):
        raise OptionsFileError(f"Options file must contain a mapping: {path}")
    values = options_from_mapping(raw, schema_or_type)
    logger.debug(f"Loaded {len(values)} option values from {path}")
    return values
