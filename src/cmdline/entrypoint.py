"""Process boundary for runnable programs: bind argv or print usage and exit."""

import sys
from pathlib import Path
from typing import Any, Optional, Sequence, TextIO, Union

from common.shared.logging_utils import get_logger

from cmdline.binder import bind
from cmdline.config import load_options_file
from cmdline.exceptions import OptionsFileError, ParseFailure
from cmdline.schema import build_schema

logger = get_logger(__name__)

USAGE_EXIT_CODE = 1


def parse_or_exit(
    entity_type: type,
    argv: Optional[Sequence[str]] = None,
    prog: Optional[str] = None,
    options_file: Optional[Union[str, Path]] = None,
    stream: Optional[TextIO] = None,
) -> Any:
    """
    Bind the process arguments to an options entity, exiting on usage errors.

    Args:
        entity_type: Options entity type of the runner.
        argv: Tokens to bind (default: ``sys.argv[1:]``).
        prog: Program name for the usage header.
        options_file: Optional YAML options file supplying values below the
            command line.
        stream: Where the failure report goes (default: ``sys.stderr``).

    Returns:
        The populated options entity.

    Raises:
        SystemExit: With code 1 after printing the failure and the usage text.
    """
    stream = stream if stream is not None else sys.stderr
    tokens = list(sys.argv[1:] if argv is None else argv)
    schema = build_schema(entity_type)

    try:
        defaults = load_options_file(options_file, schema) if options_file else None
        return bind(schema, tokens, defaults=defaults, prog=prog)
    except ParseFailure as e:
        logger.debug(f"Usage error ({e.kind.value}): {e.message}")
        print(e.report(), file=stream)
    except (OptionsFileError, FileNotFoundError) as e:
        logger.debug(f"Options file rejected: {e}")
        print(str(e), file=stream)
        print(schema.help(prog), file=stream)
    raise SystemExit(USAGE_EXIT_CODE)
