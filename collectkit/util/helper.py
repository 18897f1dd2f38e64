"""This module contains helper functions that are shared by different modules."""

import sys
from importlib.metadata import version
from typing import TYPE_CHECKING, Optional, Union

from colorama import Back, Fore
from colorama.ansi import AnsiBack, AnsiFore

if TYPE_CHECKING:  # pragma: no cover
    from collectkit.util.configuration import Configuration


def color_print_line(
    back: Optional[Union[str, AnsiBack]], fore: Optional[Union[str, AnsiFore]], message: str
):
    """Print string with colors and reset the color afterwards."""
    color = ""
    if back:
        color += back
    if fore:
        color += fore

    print(color + message + Fore.RESET + Back.RESET)


def color_print_title(background: Union[str, AnsiBack], message: str):
    message = f"------ {message} ------"
    color_print_line(background, Fore.BLACK, message)


def print_fcolor(fore: AnsiFore, message: str):
    """Print string with colored font and reset the color afterwards."""
    color_print_line(None, fore, message)


def get_versions_string(config: "Configuration" = None, config_path: Optional[str] = None) -> str:
    """
    Returns the python and collectkit versions. If a configuration was loaded then its version
    is added as well
    """
    padding = 25
    version_string = f"{'python version:'.ljust(padding)}{sys.version.split()[0]}"
    version_string += f"\n{'collectkit version:'.ljust(padding)}{version('collectkit')}"
    if config and config_path:
        config_version = f"{config.version}, {config_path}"
    else:
        config_version = "no configuration file given, using defaults"
    version_string += f"\n{'configuration version:'.ljust(padding)}{config_version}"
    return version_string
