"""Tests for the runner process boundary."""

import io

import pytest

from cmdline import parse_or_exit
from cmdline.options import LearnerOptions


class TestParseOrExit:
    """Tests for parse_or_exit function."""

    def test_success(self):
        """Test that valid arguments return the populated entity."""
        options = parse_or_exit(LearnerOptions, ["-t", "train.txt"])

        assert options.train_path == "train.txt"

    def test_reads_sys_argv(self, monkeypatch):
        """Test that sys.argv[1:] is bound by default."""
        monkeypatch.setattr("sys.argv", ["learner", "-t", "argv.txt"])

        options = parse_or_exit(LearnerOptions)

        assert options.train_path == "argv.txt"

    def test_failure_prints_report_and_exits(self):
        """Test that a usage error prints message and help, then exits with 1."""
        stream = io.StringIO()

        with pytest.raises(SystemExit) as exc_info:
            parse_or_exit(LearnerOptions, ["-x"], prog="LSBoostLearner", stream=stream)

        assert exc_info.value.code == 1
        output = stream.getvalue()
        assert output.startswith("Unknown flag: -x\nUsage: LSBoostLearner\n")
        assert "-t\ttrain set path (required)" in output

    def test_options_file(self, temp_dir):
        """Test that an options file supplies values below the command line."""
        options_file = temp_dir / "learner.yaml"
        options_file.write_text("train_path: file.txt\noutput_model_path: file.out\n")

        options = parse_or_exit(
            LearnerOptions,
            ["-o", "cli.out"],
            options_file=options_file,
        )

        assert options.train_path == "file.txt"
        assert options.output_model_path == "cli.out"

    def test_bad_options_file_exits(self, temp_dir):
        """Test that an invalid options file is reported with the usage text."""
        options_file = temp_dir / "learner.yaml"
        options_file.write_text("unknown: 1\n")
        stream = io.StringIO()

        with pytest.raises(SystemExit) as exc_info:
            parse_or_exit(LearnerOptions, [], options_file=options_file, stream=stream)

        assert exc_info.value.code == 1
        assert "Unknown option 'unknown'" in stream.getvalue()
        assert "Usage: LearnerOptions" in stream.getvalue()

    def test_invalid_yaml_options_file_exits(self, temp_dir):
        """Test that an options file with broken YAML exits with the usage text."""
        options_file = temp_dir / "learner.yaml"
        options_file.write_text('"-t": [unclosed\n')
        stream = io.StringIO()

        with pytest.raises(SystemExit) as exc_info:
            parse_or_exit(LearnerOptions, [], options_file=options_file, stream=stream)

        assert exc_info.value.code == 1
        assert "not valid YAML" in stream.getvalue()
        assert "Usage: LearnerOptions" in stream.getvalue()
