"""
@meta
name: cmdline_binder
type: utility
domain: cmdline
responsibility:
  - Bind a raw token vector against an option schema
  - Convert tokens to typed values and enforce required options
  - Apply options-file values and declared defaults to unassigned options
inputs:
  - Options entity types (or schemas / empty instances)
  - Command-line token vectors
outputs:
  - Populated options entities
  - ParseFailure on usage errors
tags:
  - utility
  - cmdline
  - binding
lifecycle:
  status: active
"""

"""Binding of command-line tokens to options entities."""

import dataclasses
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Sequence

from common.shared.logging_utils import get_logger

from cmdline.coercion import BOOLEAN_TOKENS, coerce, parse_boolean
from cmdline.exceptions import FailureKind, ParseFailure
from cmdline.fields import OptionField
from cmdline.help import render_help
from cmdline.schema import OptionSchema, build_schema

logger = get_logger(__name__)


class BindState(Enum):
    EXPECT_FLAG = "expect_flag"
    EXPECT_VALUE = "expect_value"
    DONE = "done"
    FAILED = "failed"


class _TokenScanner:
    """
    Single left-to-right pass over the token vector.

    ``ExpectFlag`` reads one token and looks it up by exact flag name;
    ``ExpectValue`` consumes the value of the current field (boolean fields
    are presence switches that may take an explicit true/false token).
    Repeated flags overwrite earlier values.
    """

    def __init__(self, schema: OptionSchema, tokens: Sequence[str], prog: Optional[str]):
        self.schema = schema
        self.tokens = list(tokens)
        self.prog = prog
        self.position = 0
        self.state = BindState.EXPECT_FLAG
        self.current: Optional[OptionField] = None
        self.assigned: Dict[str, Any] = {}

    def fail(self, kind: FailureKind, **context: Any) -> ParseFailure:
        self.state = BindState.FAILED
        return ParseFailure(kind, help_text=render_help(self.schema, self.prog), **context)

    def _has_next(self) -> bool:
        return self.position < len(self.tokens)

    def _next(self) -> str:
        token = self.tokens[self.position]
        self.position += 1
        return token

    def _expect_flag(self) -> None:
        if not self._has_next():
            self.state = BindState.DONE
            return
        token = self._next()
        option = self.schema.lookup(token)
        if option is None:
            raise self.fail(FailureKind.UNKNOWN_FLAG, flag=token)
        self.current = option
        self.state = BindState.EXPECT_VALUE

    def _expect_value(self) -> None:
        option = self.current
        if option.is_flag:
            value = True
            if self._has_next() and self.tokens[self.position].strip().lower() in BOOLEAN_TOKENS:
                value = parse_boolean(self._next())
        else:
            if not self._has_next():
                raise self.fail(
                    FailureKind.INVALID_VALUE,
                    flag=option.flag_name,
                    expected_type=option.type_name,
                )
            raw = self._next()
            try:
                value = coerce(option.declared_type, raw)
            except ValueError as e:
                failure = self.fail(
                    FailureKind.INVALID_VALUE,
                    flag=option.flag_name,
                    raw_value=raw,
                    expected_type=option.type_name,
                )
                raise failure from e

        if option.attribute in self.assigned:
            logger.debug(f"{option.flag_name} given more than once; keeping last value")
        self.assigned[option.attribute] = value
        self.current = None
        self.state = BindState.EXPECT_FLAG

    def scan(self) -> Dict[str, Any]:
        while self.state is not BindState.DONE:
            if self.state is BindState.EXPECT_FLAG:
                self._expect_flag()
            else:
                self._expect_value()
        return self.assigned


def _resolve_schema(target: Any) -> OptionSchema:
    if isinstance(target, OptionSchema):
        return target
    if isinstance(target, type):
        return build_schema(target)
    return build_schema(type(target))


def bind(
    target: Any,
    tokens: Sequence[str],
    defaults: Optional[Mapping[str, Any]] = None,
    prog: Optional[str] = None,
) -> Any:
    """
    Bind command-line tokens to a populated options entity.

    Args:
        target: Options entity type, its ``OptionSchema``, or an empty
            instance of it. An instance is never mutated; a new one is
            returned with its non-option state carried over.
        tokens: Raw token vector (typically ``sys.argv[1:]``).
        defaults: Optional values keyed by attribute name (e.g., from an
            options file). They take precedence over declared defaults and
            satisfy required options; command-line values win over both.
        prog: Program name used in the help text attached to failures.

    Returns:
        A new options entity with every option assigned.

    Raises:
        ParseFailure: On an unknown flag, an unconvertible value or missing
            required flags. No entity is produced on failure.
        SchemaError: If the entity type is declared incorrectly.
    """
    schema = _resolve_schema(target)
    scanner = _TokenScanner(schema, tokens, prog)
    assigned = scanner.scan()
    defaults = defaults or {}

    missing: List[str] = [
        option.flag_name
        for option in schema.required_fields
        if option.attribute not in assigned and defaults.get(option.attribute) is None
    ]
    if missing:
        raise scanner.fail(FailureKind.MISSING_REQUIRED, missing=missing)

    values: Dict[str, Any] = {}
    for option in schema.fields:
        if option.attribute in assigned:
            values[option.attribute] = assigned[option.attribute]
        elif defaults.get(option.attribute) is not None:
            values[option.attribute] = defaults[option.attribute]
        else:
            values[option.attribute] = option.effective_default

    logger.debug(
        f"Bound {len(assigned)} of {len(schema)} options for "
        f"{schema.entity_type.__qualname__}"
    )

    if isinstance(target, (type, OptionSchema)):
        return schema.entity_type(**values)
    return dataclasses.replace(target, **values)


class OptionBinder:
    """Reusable binder for one options entity type."""

    def __init__(self, entity_type: type, prog: Optional[str] = None):
        self.schema = build_schema(entity_type)
        self.prog = prog

    def parse(self, tokens: Sequence[str], defaults: Optional[Mapping[str, Any]] = None) -> Any:
        return bind(self.schema, tokens, defaults=defaults, prog=self.prog)

    def help(self, prog: Optional[str] = None) -> str:
        return render_help(self.schema, prog or self.prog)
