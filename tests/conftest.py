"""Shared pytest fixtures for all tests."""

import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import pytest

from cmdline import argument


@dataclass
class BaseRunnerOptions:
    """Base options used throughout the binder tests."""

    attribute_path: Optional[str] = argument("-r", "attribute file path")
    train_path: Optional[str] = argument("-t", "train set path", required=True)
    output_model_path: Optional[str] = argument("-o", "output model path", default="model.out")
    verbose: bool = argument("-V", "verbose output", default=True)


@dataclass
class ValidatedRunnerOptions(BaseRunnerOptions):
    valid_path: Optional[str] = argument("-v", "valid set path", required=True)
    metric: Optional[str] = argument("-e", "evaluation metric")


@dataclass
class NumericRunnerOptions:
    iterations: int = argument("-m", "maximum number of iterations", default=10)
    learning_rate: float = argument("-l", "learning rate", default=0.01)
    probability: bool = argument("-P", "output probability", default=False)


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def base_options_type():
    return BaseRunnerOptions


@pytest.fixture
def validated_options_type():
    return ValidatedRunnerOptions


@pytest.fixture
def numeric_options_type():
    return NumericRunnerOptions
