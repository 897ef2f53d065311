# version_app/logging_config.py
import logging
from typing import Union

LOG_FORMAT = "%(asctime)s | {service} | %(levelname)s | %(name)s | %(message)s"

# third-party loggers kept at WARNING
QUIET_LOGGERS = ("sqlalchemy.engine.Engine", "uvicorn.access")


def resolve_level(level: Union[int, str]) -> int:
    """'debug' / 'INFO' / 10 -> logging level, INFO when unknown"""
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def init_logging(service_name: str, level: Union[int, str] = logging.INFO):
    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)

    logging.basicConfig(
        level=resolve_level(level),
        format=LOG_FORMAT.format(service=service_name),
    )
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logging.getLogger(__name__).info("Logging initialized for %s", service_name)
