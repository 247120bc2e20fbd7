"""
@meta
name: cmdline_schema
type: utility
domain: cmdline
responsibility:
  - Derive the ordered option schema of an options entity type
  - Compose inherited option declarations (base fields first)
  - Reject duplicate or malformed flag declarations
inputs:
  - Dataclass-based options entity types
outputs:
  - Immutable OptionSchema instances
tags:
  - utility
  - cmdline
  - schema
lifecycle:
  status: active
"""

"""Option schema extraction with inheritance composition."""

import dataclasses
import inspect
import types
import typing
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple

from common.shared.logging_utils import get_logger

from cmdline.coercion import is_supported
from cmdline.exceptions import SchemaError
from cmdline.fields import OptionField, get_argument_spec
from cmdline.help import render_help

logger = get_logger(__name__)


@dataclass(frozen=True)
class OptionSchema:
    """
    Ordered, immutable set of option fields belonging to one options entity type.

    Fields inherited from base types come first, in declaration order, followed
    by the fields declared on each subclass down to ``entity_type``.
    """

    entity_type: type
    fields: Tuple[OptionField, ...]
    _index: Mapping[str, OptionField] = field(
        init=False, repr=False, compare=False, hash=False
    )

    def __post_init__(self) -> None:
        index = {option.flag_name: option for option in self.fields}
        object.__setattr__(self, "_index", types.MappingProxyType(index))

    def __len__(self) -> int:
        return len(self.fields)

    def __iter__(self) -> Iterator[OptionField]:
        return iter(self.fields)

    def __contains__(self, flag_name: object) -> bool:
        return flag_name in self._index

    def lookup(self, flag_name: str) -> Optional[OptionField]:
        return self._index.get(flag_name)

    @property
    def flag_names(self) -> Tuple[str, ...]:
        return tuple(option.flag_name for option in self.fields)

    @property
    def required_fields(self) -> Tuple[OptionField, ...]:
        return tuple(option for option in self.fields if option.required)

    @property
    def optional_fields(self) -> Tuple[OptionField, ...]:
        return tuple(option for option in self.fields if not option.required)

    def help(self, prog: Optional[str] = None) -> str:
        return render_help(self, prog=prog)


def lookup(schema: OptionSchema, flag_name: str) -> Optional[OptionField]:
    """Find the field declared for an exact flag token, or None."""
    return schema.lookup(flag_name)


def _unwrap_optional(annotation: Any) -> Any:
    origin = typing.get_origin(annotation)
    if origin is typing.Union or origin is types.UnionType:
        args = [arg for arg in typing.get_args(annotation) if arg is not type(None)]
        if len(args) == 1:
            return args[0]
    return annotation


def _own_option_fields(cls: type) -> List[dataclasses.Field]:
    """Fields declared directly on ``cls`` that carry an argument spec."""
    own_fields = cls.__dict__.get("__dataclass_fields__")
    if not own_fields:
        return []
    own_names = inspect.get_annotations(cls)
    result = []
    for name in own_names:
        dc_field = own_fields.get(name)
        if dc_field is not None and get_argument_spec(dc_field) is not None:
            result.append(dc_field)
    return result


def _resolve_type_hints(entity_type: type) -> Dict[str, Any]:
    try:
        return typing.get_type_hints(entity_type)
    except NameError as e:
        raise SchemaError(
            f"Cannot resolve option annotations of {entity_type.__qualname__}: {e}"
        ) from e


def _make_option(cls: type, dc_field: dataclasses.Field, annotation: Any) -> OptionField:
    spec = get_argument_spec(dc_field)
    owner = cls.__qualname__

    if not spec.name.startswith("-") or len(spec.name) < 2:
        raise SchemaError(
            f"{owner}.{dc_field.name}: flag name must start with '-' "
            f"and name the option, got {spec.name!r}"
        )

    declared_type = _unwrap_optional(annotation)
    if not is_supported(declared_type):
        raise SchemaError(
            f"{owner}.{dc_field.name}: unsupported option type {declared_type!r}"
        )

    if spec.required and spec.default is not None:
        logger.warning(
            f"{owner}.{dc_field.name} ({spec.name}) is required; "
            f"its default {spec.default!r} is ignored"
        )

    return OptionField(
        flag_name=spec.name,
        attribute=dc_field.name,
        description=spec.description,
        required=spec.required,
        declared_type=declared_type,
        default=None if spec.required else spec.default,
        owner=owner,
    )


def _check_constructible(entity_type: type) -> None:
    """Every init field needs a default so the binder can build the entity by type."""
    for dc_field in dataclasses.fields(entity_type):
        if (
            dc_field.init
            and dc_field.default is dataclasses.MISSING
            and dc_field.default_factory is dataclasses.MISSING
        ):
            raise SchemaError(
                f"{entity_type.__qualname__}.{dc_field.name} has no default; "
                f"plain fields of an options entity must declare one"
            )


@lru_cache(maxsize=None)
def _build_schema(entity_type: type) -> OptionSchema:
    _check_constructible(entity_type)
    hints = _resolve_type_hints(entity_type)
    options: List[OptionField] = []
    seen_flags: Dict[str, OptionField] = {}
    seen_attributes: Dict[str, OptionField] = {}

    # Most base type first so inherited flags precede subclass flags
    for cls in reversed(entity_type.__mro__):
        for dc_field in _own_option_fields(cls):
            option = _make_option(cls, dc_field, hints.get(dc_field.name, dc_field.type))

            previous = seen_flags.get(option.flag_name)
            if previous is not None:
                raise SchemaError(
                    f"Duplicate flag {option.flag_name} in {entity_type.__qualname__}: "
                    f"declared by {previous.owner}.{previous.attribute} "
                    f"and {option.owner}.{option.attribute}"
                )
            previous = seen_attributes.get(option.attribute)
            if previous is not None:
                raise SchemaError(
                    f"{option.owner}.{option.attribute} redeclares option "
                    f"{previous.flag_name} inherited from {previous.owner}"
                )

            seen_flags[option.flag_name] = option
            seen_attributes[option.attribute] = option
            options.append(option)

    schema = OptionSchema(entity_type=entity_type, fields=tuple(options))
    logger.debug(f"Built option schema for {entity_type.__qualname__}: {schema.flag_names}")
    return schema


def build_schema(entity_type: type) -> OptionSchema:
    """
    Build (or fetch from cache) the option schema of an options entity type.

    Args:
        entity_type: A dataclass whose fields are declared with ``argument()``.

    Returns:
        The immutable ``OptionSchema`` for ``entity_type``.

    Raises:
        SchemaError: If the type is not a dataclass, a flag name is declared
            twice anywhere in the inheritance chain, a flag name is malformed,
            an option type has no registered coercer, or a plain field has
            no default.
    """
    if not isinstance(entity_type, type) or not dataclasses.is_dataclass(entity_type):
        raise SchemaError(f"Options entity must be a dataclass type, got {entity_type!r}")
    return _build_schema(entity_type)
