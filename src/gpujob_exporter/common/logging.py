# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

from gpujob_exporter.common.enums import LogLevel
from gpujob_exporter.common.exporter_logger import ExporterLogger

logger = ExporterLogger(__name__)


def setup_rich_logging(level: LogLevel | str, log_file: Path | None = None) -> None:
    """Set up rich console logging on the root logger, plus an optional log file.

    The console handler writes to stderr so rendered metrics on stdout stay
    clean.
    """
    level_number = ExporterLogger.get_level_number(str(level))
    logging.root.setLevel(level_number)

    # Remove all existing handlers to avoid duplicate logs
    for existing_handler in logging.root.handlers[:]:
        logging.root.removeHandler(existing_handler)

    rich_handler = RichHandler(
        rich_tracebacks=True,
        show_path=True,
        console=Console(stderr=True),
        show_time=True,
        show_level=True,
        tracebacks_show_locals=False,
        log_time_format="%H:%M:%S.%f",
        omit_repeated_times=False,
    )
    rich_handler.setLevel(level_number)
    logging.root.addHandler(rich_handler)

    if log_file is not None:
        logging.root.addHandler(create_file_handler(log_file, level_number))

    logger.debug(lambda: f"Logging initialized with level: {level}")


def create_file_handler(log_file: Path, level: str | int) -> logging.FileHandler:
    """Configure a file handler for logging."""
    log_file.parent.mkdir(parents=True, exist_ok=True)
    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(level)
    file_handler.setFormatter(
        logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    return file_handler
