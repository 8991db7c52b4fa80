from __future__ import annotations

import logging
import os
import sys
from enum import Enum
from typing import Any, cast


class LogTarget(str, Enum):
    STDOUT = "stdout"
    STDERR = "stderr"


NOTICE = (logging.WARNING + logging.INFO) // 2

_config_to_level = {
    "critical": logging.CRITICAL,
    "error": logging.ERROR,
    "warning": logging.WARNING,
    "notice": NOTICE,
    "info": logging.INFO,
    "debug": logging.DEBUG,
}

_level_to_name = {
    logging.CRITICAL: "CRIT",
    logging.ERROR: "ERRO",
    logging.WARNING: "WARN",
    NOTICE: "NOTI",
    logging.INFO: "INFO",
    logging.DEBUG: "DEBG",
}


class JsonRfcLogger(logging.Logger):
    def notice(self, message: str, *args: Any, **kwargs: Any) -> None:
        if self.isEnabledFor(NOTICE):
            self._log(NOTICE, message, args, **kwargs)


logging.setLoggerClass(JsonRfcLogger)


for level, name in _level_to_name.items():
    logging.addLevelName(level, name)


def get_logger(name: str) -> JsonRfcLogger:
    return cast(JsonRfcLogger, logging.getLogger(name))


LOG_LEVELS = list(_config_to_level.keys())

NO_PREFIX_FORMAT_ENV_VAR = "JSONRFC_LOGGING_NO_PREFIX_FORMAT"

BASIC_FORMAT = "%(name)s: %(message)s"
NO_PREFIX_FORMAT = f"[%(levelname)s] {BASIC_FORMAT}"
PRETTY_FORMAT = f"%(asctime)s [%(levelname)s] {BASIC_FORMAT}"


def get_formatter(target: LogTarget) -> logging.Formatter:
    no_prefix = bool(os.environ.get(NO_PREFIX_FORMAT_ENV_VAR) == "true")

    if no_prefix:
        return logging.Formatter(NO_PREFIX_FORMAT)
    return logging.Formatter(PRETTY_FORMAT)


def get_logging_handler(target: LogTarget) -> logging.Handler:
    if target == LogTarget.STDOUT:
        return logging.StreamHandler(sys.stdout)
    return logging.StreamHandler(sys.stderr)


def start_logging(loglevel: str, logtarget: str) -> None:
    level = _config_to_level[loglevel]
    target = LogTarget(logtarget)

    handler = get_logging_handler(target)
    handler.setFormatter(get_formatter(target))

    root = logging.getLogger()
    root.setLevel(level)
    root.addHandler(handler)
