"""Shared utilities used by the option binding engine and runners."""

from .logging_utils import get_logger
from .yaml_utils import load_yaml

__all__ = [
    "get_logger",
    "load_yaml",
]
