# pylint: disable=missing-docstring
import sys
from importlib.metadata import version

from colorama import Back, Fore

from collectkit.util.configuration import Configuration
from collectkit.util.helper import color_print_line, color_print_title, get_versions_string


class TestColorPrint:
    def test_color_print_line_resets_colors(self, capsys):
        color_print_line(Back.RED, Fore.WHITE, "message")
        captured = capsys.readouterr()
        assert captured.out == f"{Back.RED}{Fore.WHITE}message{Fore.RESET}{Back.RESET}\n"

    def test_color_print_title(self, capsys):
        color_print_title(Back.CYAN, "title")
        assert "------ title ------" in capsys.readouterr().out


class TestGetVersionsString:
    def test_without_configuration(self):
        versions = get_versions_string()
        assert sys.version.split()[0] in versions
        assert version("collectkit") in versions
        assert "no configuration file given, using defaults" in versions

    def test_with_configuration(self):
        config = Configuration(version="config-1.0")
        versions = get_versions_string(config, "my/config.yml")
        assert versions.splitlines()[-1].endswith("config-1.0, my/config.yml")
