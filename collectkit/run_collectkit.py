# pylint: disable=logging-fstring-interpolation
"""This module can be used to run the collectkit demonstrations."""
import logging
import logging.config
import sys
from typing import Optional

import click
from colorama import Back, Fore

from collectkit.abc.exceptions import PreconditionError
from collectkit.batching import split_batches
from collectkit.containers.fifo_queue import FIFOQueue
from collectkit.containers.words import Words
from collectkit.safe_html import Raw, SafeHTML
from collectkit.util.configuration import Configuration, InvalidConfigurationError
from collectkit.util.defaults import DEFAULT_DEMO_TEXT, DEFAULT_LOG_CONFIG, EXITCODES
from collectkit.util.helper import color_print_title, get_versions_string, print_fcolor

logging.captureWarnings(True)
logging.config.dictConfig(DEFAULT_LOG_CONFIG)
logger = logging.getLogger("collectkit")


def _get_configuration(config_path: Optional[str]) -> Configuration:
    try:
        config = Configuration.from_source(config_path) if config_path else Configuration()
        config.logger.setup_logging()
        logger.debug(f"Log level set to '{config.logger.level}'")
        return config
    except InvalidConfigurationError as error:
        print(f"InvalidConfigurationError: {error}", file=sys.stderr)
        sys.exit(EXITCODES.CONFIGURATION_ERROR.value)


def _exit_on_precondition_error(error: PreconditionError) -> None:
    print(f"{type(error).__name__}: {error}", file=sys.stderr)
    sys.exit(EXITCODES.PRECONDITION_ERROR.value)


def _parse_raw_fields(raw: tuple[str, ...]) -> dict[str, Raw]:
    fields = {}
    for item in raw:
        name, separator, value = item.partition("=")
        if not separator or not name:
            raise click.BadParameter(f"expected NAME=VALUE, got '{item}'", param_hint="--raw")
        fields[name] = Raw(value)
    return fields


@click.group(name="collectkit", invoke_without_command=True)
@click.option(
    "--config",
    "config_path",
    type=str,
    default=None,
    help="Path to a yaml configuration file. The defaults are used if omitted.",
)
@click.option(
    "--version",
    is_flag=True,
    default=False,
    help="Print version and exit (includes also config version)",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Optional[str], version: bool) -> None:
    """
    collectkit demonstrates a two-buffer FIFO queue, a lazy word sequence, generic batching
    of sliceable collections and HTML escaping.
    """
    ctx.obj = _get_configuration(config_path)
    if version:
        print(get_versions_string(ctx.obj, config_path))
        sys.exit(EXITCODES.SUCCESS.value)
    if ctx.invoked_subcommand is None:
        print(ctx.get_help())


@cli.command(name="queue", short_help="Enqueue elements and dequeue them in order")
@click.argument("elements", nargs=-1)
def run_queue(elements: tuple[str, ...]) -> None:
    """
    Enqueue all ELEMENTS, print the queue and dequeue until it is empty.
    """
    fifo_queue: FIFOQueue[str] = FIFOQueue()
    for element in elements:
        fifo_queue.enqueue(element)
    print(f"queue: {', '.join(fifo_queue)}")
    while (element := fifo_queue.dequeue()) is not None:
        print(f"dequeued: {element}")
    print_fcolor(Fore.GREEN, "queue is empty")


@cli.command(name="words", short_help="Print the space separated words of a text")
@click.argument("text")
def run_words(text: str) -> None:
    """
    Print each word of TEXT on its own line. Only spaces separate words.
    """
    for word in Words(text):
        print(word)


@cli.command(name="batch", short_help="Split the characters of a text into batches")
@click.argument("text")
@click.option(
    "--size",
    type=int,
    default=None,
    help="Number of characters per batch. Defaults to the configured batch_size.",
)
@click.pass_obj
def run_batch(config: Configuration, text: str, size: Optional[int]) -> None:
    """
    Print the batches of the characters of TEXT, one batch per line.
    """
    batch_size = config.batch_size if size is None else size
    try:
        batches = split_batches(text, batch_size)
    except PreconditionError as error:
        _exit_on_precondition_error(error)
    else:
        logger.debug(f"Split {len(text)} characters into {len(batches)} batches")
        for batch in batches:
            print(batch)


@cli.command(name="html", short_help="Interpolate values into an html template")
@click.argument("template")
@click.argument("values", nargs=-1)
@click.option(
    "--raw",
    multiple=True,
    help="NAME=VALUE pair for a named template field which is inserted without escaping.",
)
def run_html(template: str, values: tuple[str, ...], raw: tuple[str, ...]) -> None:
    """
    Fill TEMPLATE with VALUES. The template uses python format syntax, e.g. '<li>{}</li>'.
    VALUES are escaped, values passed with --raw are not.
    """
    raw_fields = _parse_raw_fields(raw)
    try:
        html = SafeHTML.format(template, *values, **raw_fields)
    except (IndexError, KeyError) as error:
        raise click.UsageError(f"template field without value: {error}") from error
    except ValueError as error:
        raise click.UsageError(f"invalid template: {error}") from error
    print(html)


@cli.command(name="demo", short_help="Run all demonstrations")
@click.pass_obj
def run_demo(config: Configuration) -> None:
    """
    Run the batching, word, queue and html demonstrations with built-in values.
    """
    color_print_title(Back.CYAN, "batching")
    batches = split_batches(DEFAULT_DEMO_TEXT, config.batch_size)
    print([str(batch) for batch in batches])
    color_print_title(Back.CYAN, "words")
    print([str(word) for word in Words("the quick  brown fox")])
    color_print_title(Back.CYAN, "queue")
    fifo_queue = FIFOQueue([1, 2, 3])
    fifo_queue.enqueue(4)
    print(f"dequeued {fifo_queue.dequeue()}, remaining {list(fifo_queue)}")
    color_print_title(Back.CYAN, "html")
    unsafe_input = "<script>alert('Oops!')</script>"
    print(SafeHTML.format("<li>Username{}:{}</li>", Raw("<sup>*</sup>"), unsafe_input))


@cli.command(name="print", short_help="Print the effective configuration")
@click.pass_obj
def print_config(config: Configuration) -> None:
    """
    Prints the effective configuration as yaml.
    """
    print(config.as_yaml())


if __name__ == "__main__":
    cli()
