# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
import os

from gpujob_exporter.common import exporter_logger
from gpujob_exporter.common.exporter_logger import ExporterLogger, LogMessage
from gpujob_exporter.common.mixins.base_mixin import BaseMixin


class ExporterLoggerMixin(BaseMixin):
    """Gives a component `self.debug(...)` to `self.error(...)` on a logger named
    after its class, e.g. "HPCJobMapper" or "JobDirectoryReader".
    """

    def __init__(self, logger_name: str | None = None, **kwargs) -> None:
        self.logger = ExporterLogger(logger_name or self.__class__.__name__)
        super().__init__(**kwargs)

    def debug(self, message: LogMessage, **kwargs) -> None:
        self.logger.debug(message, **kwargs)

    def info(self, message: LogMessage, **kwargs) -> None:
        self.logger.info(message, **kwargs)

    def warning(self, message: LogMessage, **kwargs) -> None:
        self.logger.warning(message, **kwargs)

    def error(self, message: LogMessage, **kwargs) -> None:
        self.logger.error(message, **kwargs)


exporter_logger._ignored_files.append(os.path.normcase(__file__))
