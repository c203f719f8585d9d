# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""
Environment Configuration Module

Hierarchical, type-safe settings built on Pydantic BaseSettings. Every setting
can be overridden through an environment variable with the GPUJOB_ prefix.

Structure:
    Environment.HPC.*      - HPC job attribution
    Environment.LOGGING.*  - Logging configuration

Examples:
    # Via environment variables:
    GPUJOB_HPC_JOB_MAPPING_DIR=/var/run/dcgm-job-mapping
    GPUJOB_LOGGING_LEVEL=DEBUG

    # In code:
    print(f"Mapping dir: {Environment.HPC.JOB_MAPPING_DIR}")
"""

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from gpujob_exporter.common.enums import LogLevel

__all__ = ["Environment"]


class _HPCSettings(BaseSettings):
    """HPC job attribution.

    When JOB_MAPPING_DIR is set, every file in it names a GPU (by UUID or
    index) and lists the jobs running on it, one per line.
    """

    model_config = SettingsConfigDict(
        env_prefix="GPUJOB_HPC_",
    )

    JOB_MAPPING_DIR: Path | None = Field(
        default=None,
        description="Directory of per-GPU job mapping files. Unset disables job attribution.",
    )
    UUID_LABEL: str = Field(
        default="UUID",
        min_length=1,
        description="Name of the label carrying the GPU UUID on GPU metrics",
    )


class _LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(
        env_prefix="GPUJOB_LOGGING_",
        env_parse_enums=True,
    )

    LEVEL: LogLevel = Field(
        default=LogLevel.INFO,
        description="Root log level",
    )
    FILE: Path | None = Field(
        default=None,
        description="Optional file to write logs to in addition to the console",
    )

    @field_validator("LEVEL", mode="before")
    @classmethod
    def _normalize_level(cls, value):
        return value.upper() if isinstance(value, str) else value


class _Environment(BaseSettings):
    """Root of all exporter settings.

    Example:
        GPUJOB_HPC_JOB_MAPPING_DIR=/run/gpujobs
        GPUJOB_LOGGING_LEVEL=DEBUG
    """

    model_config = SettingsConfigDict(
        env_prefix="GPUJOB_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="allow",
    )

    HPC: _HPCSettings = Field(
        default_factory=_HPCSettings,
        description="HPC job attribution settings",
    )
    LOGGING: _LoggingSettings = Field(
        default_factory=_LoggingSettings,
        description="Logging system settings",
    )


# Global singleton instance
Environment = _Environment()
