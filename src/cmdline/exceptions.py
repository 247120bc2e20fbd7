"""Exceptions raised while declaring, loading and binding command-line options."""

from enum import Enum
from typing import Optional, Sequence, Tuple


class CmdLineError(Exception):
    """Base exception for all command-line option errors."""
    pass


class SchemaError(CmdLineError):
    """Raised when an options entity is declared incorrectly (e.g., duplicate flag)."""
    pass


class OptionsFileError(CmdLineError):
    """Raised when an options file cannot be applied to a schema."""
    pass


class FailureKind(Enum):
    UNKNOWN_FLAG = "unknown_flag"
    INVALID_VALUE = "invalid_value"
    MISSING_REQUIRED = "missing_required"


class ParseFailure(CmdLineError):
    """
    Structured usage error produced by the binder.

    Carries the failure kind plus enough context (offending flag, raw token,
    expected type or missing flags) to render a precise message, and the
    rendered help text of the schema that was being bound.
    """

    def __init__(
        self,
        kind: FailureKind,
        flag: Optional[str] = None,
        raw_value: Optional[str] = None,
        expected_type: Optional[str] = None,
        missing: Sequence[str] = (),
        help_text: str = "",
    ) -> None:
        self.kind = kind
        self.flag = flag
        self.raw_value = raw_value
        self.expected_type = expected_type
        self.missing: Tuple[str, ...] = tuple(missing)
        self.help_text = help_text
        super().__init__(self.message)

    @property
    def message(self) -> str:
        if self.kind is FailureKind.UNKNOWN_FLAG:
            return f"Unknown flag: {self.flag}"
        if self.kind is FailureKind.MISSING_REQUIRED:
            return f"Missing required flags: {', '.join(self.missing)}"
        if self.raw_value is None:
            return f"Flag {self.flag} expects a {self.expected_type} value"
        return (
            f"Invalid value for {self.flag}: '{self.raw_value}' "
            f"is not a valid {self.expected_type}"
        )

    def report(self) -> str:
        """Message followed by the help text, as printed by a runner on failure."""
        if not self.help_text:
            return self.message
        return f"{self.message}\n{self.help_text}"
