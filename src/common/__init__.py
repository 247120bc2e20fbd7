"""Generic shared utilities module.

This module contains generic, domain-agnostic utilities (logging, YAML loading).
"""

from common.shared import *
