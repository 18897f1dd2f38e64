# pylint: disable=missing-docstring
# pylint: disable=attribute-defined-outside-init
from importlib.metadata import version
from unittest import mock

import pytest
from click.testing import CliRunner

from collectkit.run_collectkit import cli
from collectkit.util.defaults import EXITCODES
from tests.testdata.metadata import path_to_config, path_to_invalid_batch_size_config


class TestRunCollectkitCli:
    def setup_method(self):
        self.cli_runner = CliRunner()

    def test_without_command_prints_help(self):
        result = self.cli_runner.invoke(cli, [])
        assert result.exit_code == 0
        assert "Usage:" in result.output

    def test_version(self):
        result = self.cli_runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "collectkit version:" in result.output
        assert version("collectkit") in result.output
        assert "no configuration file given" in result.output

    def test_version_with_config(self):
        result = self.cli_runner.invoke(cli, ["--config", path_to_config, "--version"])
        assert result.exit_code == 0
        assert f"config-1.0, {path_to_config}" in result.output

    def test_batch_with_default_size(self):
        result = self.cli_runner.invoke(cli, ["batch", "abcdefg"])
        assert result.exit_code == 0, result.output
        assert result.output.splitlines() == ["abc", "def", "g"]

    def test_batch_with_size_option(self):
        result = self.cli_runner.invoke(cli, ["batch", "abcdefg", "--size", "1"])
        assert result.exit_code == 0
        assert result.output.splitlines() == list("abcdefg")

    def test_batch_with_size_from_config(self):
        result = self.cli_runner.invoke(cli, ["--config", path_to_config, "batch", "abcde"])
        assert result.exit_code == 0
        assert "ab\ncd\ne\n" in result.output

    @pytest.mark.parametrize("size", ["0", "-2"])
    def test_batch_with_invalid_size_exits_with_precondition_error(self, size):
        result = self.cli_runner.invoke(cli, ["batch", "abcdefg", "--size", size])
        assert result.exit_code == EXITCODES.PRECONDITION_ERROR.value
        assert "InvalidBatchSizeError" in result.output
        assert "abcdefg" not in result.output

    def test_invalid_config_exits_with_configuration_error(self):
        result = self.cli_runner.invoke(
            cli, ["--config", path_to_invalid_batch_size_config, "batch", "abc"]
        )
        assert result.exit_code == EXITCODES.CONFIGURATION_ERROR.value
        assert "InvalidConfigurationError" in result.output

    def test_missing_config_exits_with_configuration_error(self):
        result = self.cli_runner.invoke(cli, ["--config", "does/not/exist.yml", "print"])
        assert result.exit_code == EXITCODES.CONFIGURATION_ERROR.value
        assert "does not exist: does/not/exist.yml" in result.output

    def test_words(self):
        result = self.cli_runner.invoke(cli, ["words", "the quick  brown fox"])
        assert result.exit_code == 0
        assert result.output.splitlines() == ["the", "quick", "brown", "fox"]

    def test_queue(self):
        result = self.cli_runner.invoke(cli, ["queue", "a", "b", "c"])
        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert lines[0] == "queue: a, b, c"
        assert lines[1:4] == ["dequeued: a", "dequeued: b", "dequeued: c"]
        assert "queue is empty" in lines[4]

    def test_html_escapes_values(self):
        result = self.cli_runner.invoke(
            cli,
            [
                "html",
                "<li>Username{star}:{}</li>",
                "<script>alert('Oops!')</script>",
                "--raw",
                "star=<sup>*</sup>",
            ],
        )
        assert result.exit_code == 0
        assert result.output == (
            "<li>Username<sup>*</sup>:&lt;script&gt;alert('Oops!')&lt;/script&gt;</li>\n"
        )

    def test_html_with_malformed_raw_option(self):
        result = self.cli_runner.invoke(cli, ["html", "{}", "x", "--raw", "novalue"])
        assert result.exit_code == 2
        assert "expected NAME=VALUE" in result.output

    def test_html_with_missing_value(self):
        result = self.cli_runner.invoke(cli, ["html", "{}{}", "x"])
        assert result.exit_code == 2
        assert "template field without value" in result.output

    def test_html_with_invalid_format_spec(self):
        result = self.cli_runner.invoke(cli, ["html", "{:{}}", "x", "b"])
        assert result.exit_code == 2
        assert "invalid template" in result.output

    def test_demo(self):
        result = self.cli_runner.invoke(cli, ["demo"])
        assert result.exit_code == 0
        assert "['abc', 'def', 'g']" in result.output
        assert "['the', 'quick', 'brown', 'fox']" in result.output
        assert "dequeued 1, remaining [2, 3, 4]" in result.output
        assert "&lt;script&gt;" in result.output

    def test_print(self):
        result = self.cli_runner.invoke(cli, ["--config", path_to_config, "print"])
        assert result.exit_code == 0
        assert "batch_size: 2" in result.output
        assert "version: config-1.0" in result.output

    def test_configuration_sets_up_logging(self):
        with mock.patch("collectkit.util.configuration.LoggerConfig.setup_logging") as setup:
            result = self.cli_runner.invoke(cli, ["words", "a"])
        assert result.exit_code == 0
        setup.assert_called_once()
