"""
Configuration is done via a YAML file passed to the command line with :code:`--config`.
Without a configuration file the defaults are used.

..  code-block:: bash
    :caption: Valid Run Examples

    collectkit --config /path/to/collectkit.yml batch abcdefg
    collectkit --config /path/to/collectkit.yml print

Configuration File Structure
----------------------------

..  code-block:: yaml
    :caption: Example of a complete configuration file

    version: config-1.0
    batch_size: 3
    logger:
        level: INFO
        loggers:
            FIFOQueue: {level: DEBUG}
            Batching: {level: DEBUG}

"""

import logging
from copy import deepcopy
from logging.config import dictConfig
from pathlib import Path
from typing import Any

from attrs import asdict, define, field, validators
from ruamel.yaml import YAML
from ruamel.yaml.compat import StringIO
from ruamel.yaml.parser import ParserError
from ruamel.yaml.scanner import ScannerError

from collectkit.abc.exceptions import CollectkitException
from collectkit.util.defaults import DEFAULT_BATCH_SIZE, DEFAULT_LOG_CONFIG

logger = logging.getLogger("Config")


class MyYAML(YAML):
    """helper class to dump yaml with ruamel.yaml"""

    def dump(self, data: Any, stream: Any | None = None, **kw: Any) -> Any:
        inefficient = False
        if stream is None:
            inefficient = True
            stream = StringIO()
        YAML.dump(self, data, stream, **kw)
        if inefficient:
            return stream.getvalue()


yaml = MyYAML(pure=True)


class InvalidConfigurationError(CollectkitException):
    """Raise if configuration is invalid."""


class ConfigGetterException(InvalidConfigurationError):
    """Raise if the configuration file can not be read."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


@define(kw_only=True)
class LoggerConfig:
    """The logger config class used in Configuration.
    The schema for this class is derived from the python logging module:
    https://docs.python.org/3/library/logging.config.html#dictionary-schema-details
    """

    _LOG_LEVELS = (
        logging.NOTSET,  # 0
        logging.DEBUG,  # 10
        logging.INFO,  # 20
        logging.WARNING,  # 30
        logging.ERROR,  # 40
        logging.CRITICAL,  # 50
    )

    version: int = field(validator=validators.instance_of(int), default=1)
    formatters: dict = field(validator=validators.instance_of(dict), factory=dict)
    filters: dict = field(validator=validators.instance_of(dict), factory=dict)
    handlers: dict = field(validator=validators.instance_of(dict), factory=dict)
    disable_existing_loggers: bool = field(validator=validators.instance_of(bool), default=False)
    level: str = field(
        default="INFO",
        validator=[
            validators.instance_of(str),
            validators.in_([logging.getLevelName(level) for level in _LOG_LEVELS]),
        ],
        eq=False,
    )
    """The log level of the root logger. Defaults to :code:`INFO`."""
    format: str = field(default="", validator=(validators.instance_of(str)), eq=False)
    """The format of the log message as supported by the :code:`CollectkitFormatter`.
    Defaults to :code:`"%(asctime)-15s %(name)-10s %(levelname)-8s: %(message)s"`.
    """
    datefmt: str = field(default="", validator=(validators.instance_of(str)), eq=False)
    """The date format of the log message. Defaults to :code:`"%Y-%m-%d %H:%M:%S"`."""
    loggers: dict = field(validator=validators.instance_of(dict), factory=dict)
    """The loggers loglevel configuration. Loggers are named after the component they log for,
    e.g. :code:`FIFOQueue`, :code:`Batching` or :code:`Config`.

    .. code-block:: yaml
        :caption: Example of a custom logger configuration

        logger:
            level: ERROR
            format: "%(asctime)-15s %(hostname)-5s %(name)-10s %(levelname)-8s: %(message)s"
            loggers:
                "FIFOQueue": {"level": "DEBUG"}

    """

    def __attrs_post_init__(self) -> None:
        self._set_defaults()
        loggers = deepcopy(DEFAULT_LOG_CONFIG["loggers"])
        for logger_name, logger_config in self.loggers.items():
            loggers.setdefault(logger_name, {}).update(logger_config)
        self.loggers = loggers
        self.loggers["root"]["level"] = self.level
        formatter = self.formatters["collectkit"]
        if self.format:
            formatter["format"] = self.format
        if self.datefmt:
            formatter["datefmt"] = self.datefmt

    def setup_logging(self) -> None:
        """Setup the logging configuration.
        is called in the :code:`collectkit.run_collectkit` module.
        """
        dictConfig(asdict(self))

    def _set_defaults(self) -> None:
        """resets all keys to the defined defaults except :code:`loggers`."""
        for key, value in DEFAULT_LOG_CONFIG.items():
            if key == "loggers":
                continue
            setattr(self, key, deepcopy(value))


@define(kw_only=True)
class Configuration:
    """the configuration class"""

    version: str = field(validator=validators.instance_of(str), converter=str, default="unset")
    """The version of the configuration file. Defaults to :code:`unset`."""
    batch_size: int = field(
        validator=(validators.instance_of(int), validators.ge(1)),
        default=DEFAULT_BATCH_SIZE,
        eq=False,
    )
    """Batch size used by the :code:`batch` command if none is given. Defaults to :code:`3`."""
    logger: LoggerConfig = field(
        validator=validators.instance_of(LoggerConfig),
        factory=LoggerConfig,
        eq=False,
        converter=lambda x: LoggerConfig(**x) if isinstance(x, dict) else x,
    )
    """Logger configuration.

    .. autoclass:: collectkit.util.configuration.LoggerConfig
       :no-index:
       :no-undoc-members:
       :members: level, format, datefmt, loggers

    """

    @classmethod
    def from_source(cls, config_path: str) -> "Configuration":
        """Create configuration from a yaml file.

        Parameters
        ----------
        config_path : str
            path of the file to create the configuration from.

        Returns
        -------
        config : Configuration
            Configuration object attrs class.

        Raises
        ------
        ConfigGetterException
            If the file does not exist or is not valid yaml.
        InvalidConfigurationError
            If the file content is not a valid configuration.
        """
        logger.debug("Loading configuration from %s", config_path)
        try:
            config_dict = yaml.load(Path(config_path).read_text(encoding="utf8"))
        except FileNotFoundError as error:
            raise ConfigGetterException(
                f"One or more of the given config file(s) does not exist: {error.filename}"
            ) from error
        except (ScannerError, ParserError) as error:
            raise ConfigGetterException(
                f"Invalid yaml file: {config_path} {error.problem}"
            ) from error
        if config_dict is None:
            config_dict = {}
        if not isinstance(config_dict, dict):
            raise InvalidConfigurationError(
                f"Invalid configuration file: {config_path} must contain a mapping"
            )
        try:
            return Configuration(**config_dict)
        except TypeError as error:
            raise InvalidConfigurationError(
                f"Invalid configuration file: {config_path} {error.args[0]}"
            ) from error
        except ValueError as error:
            raise InvalidConfigurationError(
                f"Invalid configuration file: {config_path} {str(error)}"
            ) from error

    def as_dict(self) -> dict:
        """Return the configuration as dict."""
        return asdict(self, recurse=True)

    def as_yaml(self) -> str:
        """Return the configuration as yaml string."""
        return yaml.dump(self.as_dict())
