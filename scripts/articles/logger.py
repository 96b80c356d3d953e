from typing import NotRequired, TypedDict
import logging
from scripts.articles.utils import resolve_config


class LoggerConfig(TypedDict):
    name: NotRequired[str]
    is_enabled: NotRequired[bool]
    level: NotRequired[int]
    format: NotRequired[str]


class LoggerConfigRequired(TypedDict):
    name: str
    is_enabled: bool
    level: int
    format: str


DEFAULT_LOGGER_CONFIG: LoggerConfigRequired = {
    "name": "logger",
    "is_enabled": True,
    "level": logging.DEBUG,
    "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
}


class ComponentLogger(logging.LoggerAdapter):
    """View of a shared named logger with its own on/off switch and threshold.

    Tokenizers and parsers share one logger per name, so enabling or
    silencing one instance must not touch the others.
    """

    def __init__(self, logger: logging.Logger, is_enabled: bool, level: int):
        super().__init__(logger, {})
        self.is_enabled = is_enabled
        self.level = level

    def isEnabledFor(self, level: int) -> bool:
        return self.is_enabled and level >= self.level and self.logger.isEnabledFor(level)


class Logger:
    def __init__(self, config: LoggerConfig | None = None):
        self.config = resolve_config(config or {}, DEFAULT_LOGGER_CONFIG)
        shared = logging.getLogger(self.config["name"])
        self.logger = ComponentLogger(shared, self.config["is_enabled"], self.config["level"])
        self.set_configuration(shared)

    def set_configuration(self, shared: logging.Logger):
        if not self.config["is_enabled"]:
            return

        # only ever lower the shared threshold; each instance filters on its own level
        if shared.level == logging.NOTSET or shared.level > self.config["level"]:
            shared.setLevel(self.config["level"])
        if any(getattr(handler, "_articles_handler", False) for handler in shared.handlers):
            return
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(self.config["format"]))
        handler._articles_handler = True  # type: ignore[attr-defined]
        shared.addHandler(handler)
