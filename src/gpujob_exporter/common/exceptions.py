# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0


class ExporterError(Exception):
    """Base class for all exceptions raised by the exporter."""

    def raw_str(self) -> str:
        """Return the raw string representation of the exception."""
        return super().__str__()

    def __str__(self) -> str:
        """Return the string representation of the exception with the class name."""
        return f"{self.__class__.__name__}: {super().__str__()}"


class ConfigurationError(ExporterError):
    """Exception raised when something fails to configure, or there is a configuration error."""


class TopologyError(ConfigurationError):
    """Exception raised when a sample references a device the topology does not know.

    This means the collection layer produced an inconsistent snapshot. It is
    fatal for the enrichment pass: continuing would attribute jobs to the
    wrong device.
    """

    def __init__(self, message: str, gpu: str, instance_id: str | None = None) -> None:
        super().__init__(message)
        self.gpu = gpu
        self.instance_id = instance_id


class JobMappingError(ExporterError):
    """Exception raised when the job mapping directory cannot be listed or one of its files cannot be read."""

    def __init__(self, message: str, path: str) -> None:
        super().__init__(f"{message} ({path})")
        self.path = path


class RenderError(ExporterError):
    """Exception raised when a metric group cannot be rendered."""


class NotFoundError(ExporterError):
    """Exception raised when something is not found or not available."""
