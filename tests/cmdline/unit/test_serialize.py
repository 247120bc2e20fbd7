"""Tests for rendering bound options back to command-line tokens."""

import sys
from dataclasses import dataclass
from typing import Optional

from cmdline import argument, as_flag_mapping, bind, build_command, to_tokens
from cmdline.options import (
    BoostingLearnerOptions,
    HoldoutValidatedLearnerWithTaskOptions,
    PredictorOptions,
    Task,
)


class TestToTokens:
    """Tests for to_tokens function."""

    def test_skips_unset_values(self, base_options_type):
        """Test that None values are omitted and true booleans are bare flags."""
        options = bind(base_options_type, ["-t", "train.txt"])

        assert to_tokens(options) == ["-t", "train.txt", "-o", "model.out", "-V"]

    def test_false_boolean_with_true_default(self, base_options_type):
        """Test that false is spelled out when the default is true."""
        options = bind(base_options_type, ["-t", "train.txt", "-V", "false"])

        assert to_tokens(options)[-2:] == ["-V", "false"]

    def test_false_boolean_with_false_default_omitted(self):
        """Test that false is omitted when it is already the default."""
        options = bind(PredictorOptions, ["-d", "data.txt", "-m", "model.bin"])

        assert "-P" not in to_tokens(options)

    def test_enum_and_numbers(self):
        """Test that enums emit their value and numbers their text form."""
        options = BoostingLearnerOptions(train_path="t", max_num_iters=10, learning_rate=0.1)

        tokens = to_tokens(options)

        assert tokens[tokens.index("-m") + 1] == "10"
        assert tokens[tokens.index("-l") + 1] == "0.1"

    def test_round_trip(self):
        """Test that binding serialized tokens yields an equal entity."""
        original = bind(
            HoldoutValidatedLearnerWithTaskOptions,
            ["-t", "train.txt", "-v", "val.txt", "-g", "c", "-S", "-1e-4", "-V", "false"],
        )

        restored = bind(HoldoutValidatedLearnerWithTaskOptions, to_tokens(original))

        assert restored == original
        assert restored.task is Task.CLASSIFICATION

    def test_round_trip_false_boolean_without_default(self):
        """Test that an explicit false survives a round trip when no default is declared."""

        @dataclass
        class Switch:
            quiet: Optional[bool] = argument("-q", "quiet mode")

        original = bind(Switch, ["-q", "false"])

        assert to_tokens(original) == ["-q", "false"]
        assert bind(Switch, to_tokens(original)) == original

    def test_round_trip_numeric(self):
        """Test round trip of integer and real values."""
        original = bind(BoostingLearnerOptions, ["-t", "t", "-m", "300", "-l", "0.3", "-s", "-5"])

        assert bind(BoostingLearnerOptions, to_tokens(original)) == original


class TestAsFlagMapping:
    """Tests for as_flag_mapping function."""

    def test_keys_in_schema_order(self, validated_options_type):
        """Test that the mapping is keyed by flag in schema order."""
        options = bind(validated_options_type, ["-t", "a", "-v", "b"])

        mapping = as_flag_mapping(options)

        assert list(mapping) == ["-r", "-t", "-o", "-V", "-v", "-e"]
        assert mapping["-v"] == "b"
        assert mapping["-e"] is None


class TestBuildCommand:
    """Tests for build_command function."""

    def test_default_executable(self, base_options_type):
        """Test that the current interpreter runs the module."""
        options = bind(base_options_type, ["-t", "train.txt"])

        command = build_command("runners.lsboost", options)

        assert command[:3] == [sys.executable, "-m", "runners.lsboost"]
        assert command[3:] == to_tokens(options)

    def test_custom_executable(self, base_options_type):
        """Test that a custom interpreter can be given."""
        options = bind(base_options_type, ["-t", "train.txt"])

        assert build_command("m", options, executable="python3")[0] == "python3"
