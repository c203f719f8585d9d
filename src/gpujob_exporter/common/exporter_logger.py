# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
import logging
import os
from collections.abc import Callable
from inspect import currentframe

_TRACE = logging.DEBUG - 5
_DEBUG = logging.DEBUG
_INFO = logging.INFO
_NOTICE = logging.WARNING - 5
_WARNING = logging.WARNING
_SUCCESS = logging.WARNING + 5
_ERROR = logging.ERROR
_CRITICAL = logging.CRITICAL

# Extra levels selectable through LogLevel
logging.addLevelName(_TRACE, "TRACE")
logging.addLevelName(_NOTICE, "NOTICE")
logging.addLevelName(_SUCCESS, "SUCCESS")

_LEVELS_BY_NAME = {
    "TRACE": _TRACE,
    "DEBUG": _DEBUG,
    "INFO": _INFO,
    "NOTICE": _NOTICE,
    "WARNING": _WARNING,
    "SUCCESS": _SUCCESS,
    "ERROR": _ERROR,
    "CRITICAL": _CRITICAL,
}

LogMessage = str | Callable[[], str]


class ExporterLogger:
    """Wrapper around a logging.Logger that accepts lazily built messages.

    A message may be a string or a zero-argument callable. The callable is only
    invoked when the level is enabled, so per-metric debug output of the
    enrichment pass costs nothing when debug logging is off.

    Usage:
        logger = ExporterLogger(__name__)
        logger.debug(lambda: f"GPU to job mapping: {job_index.jobs}")
    """

    def __init__(self, logger_name: str):
        self._logger = logging.getLogger(logger_name)
        self._logger.findCaller = self.find_caller
        self.is_enabled_for = self._logger.isEnabledFor
        self.set_level = self._logger.setLevel

    def _log(self, level: int, msg: LogMessage, **kwargs) -> None:
        if callable(msg):
            msg = msg()
        # Logger._log takes the %-format args as a tuple, messages here are preformatted
        self._logger._log(level, msg, (), **kwargs)

    @classmethod
    def get_level_number(cls, level: int | str) -> int:
        """Numeric level for a level name (any case, extra levels included) or number."""
        if isinstance(level, str):
            return _LEVELS_BY_NAME[level.upper()]
        return level

    def find_caller(
        self, stack_info=False, stacklevel=1
    ) -> tuple[str, int, str, str | None]:
        """Replacement for logging.Logger.findCaller.

        Walks up from the current frame past logging itself, this module and
        any module registered in `_ignored_files`, so records carry the file,
        line and function that asked for the log message.
        """
        frame = currentframe()
        while frame is not None:
            code = frame.f_code
            if os.path.normcase(code.co_filename) not in _ignored_files:
                return code.co_filename, frame.f_lineno, code.co_name, None
            frame = frame.f_back
        return "(unknown file)", 0, "(unknown function)", None

    def debug(self, msg: LogMessage, **kwargs) -> None:
        if self.is_enabled_for(_DEBUG):
            self._log(_DEBUG, msg, **kwargs)

    def info(self, msg: LogMessage, **kwargs) -> None:
        if self.is_enabled_for(_INFO):
            self._log(_INFO, msg, **kwargs)

    def warning(self, msg: LogMessage, **kwargs) -> None:
        if self.is_enabled_for(_WARNING):
            self._log(_WARNING, msg, **kwargs)

    def error(self, msg: LogMessage, **kwargs) -> None:
        if self.is_enabled_for(_ERROR):
            self._log(_ERROR, msg, **kwargs)


# Frames from these files are never reported as the caller
_ignored_files = [
    logging._srcfile,
    os.path.normcase(ExporterLogger.find_caller.__code__.co_filename),
]
