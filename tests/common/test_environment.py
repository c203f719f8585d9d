# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from pathlib import Path

import pytest
from pydantic import ValidationError
from pytest import param

from gpujob_exporter.common.enums import LogLevel
from gpujob_exporter.common.environment import (
    _Environment,
    _HPCSettings,
    _LoggingSettings,
)
from gpujob_exporter.common.models import Counter, Metric


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch, tmp_path):
    """Keep the developer's environment and .env file out of the settings."""
    for name in (
        "GPUJOB_HPC_JOB_MAPPING_DIR",
        "GPUJOB_HPC_UUID_LABEL",
        "GPUJOB_LOGGING_LEVEL",
        "GPUJOB_LOGGING_FILE",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


class TestHPCSettings:
    def test_defaults(self):
        settings = _HPCSettings()

        assert settings.JOB_MAPPING_DIR is None
        assert settings.UUID_LABEL == "UUID"

    def test_from_environment(self, monkeypatch):
        monkeypatch.setenv("GPUJOB_HPC_JOB_MAPPING_DIR", "/run/gpujobs")
        monkeypatch.setenv("GPUJOB_HPC_UUID_LABEL", "uuid")

        settings = _HPCSettings()

        assert settings.JOB_MAPPING_DIR == Path("/run/gpujobs")
        assert settings.UUID_LABEL == "uuid"

    def test_empty_uuid_label_rejected(self, monkeypatch):
        monkeypatch.setenv("GPUJOB_HPC_UUID_LABEL", "")

        with pytest.raises(ValidationError):
            _HPCSettings()

    def test_uuid_label_is_metric_default(self, monkeypatch):
        from gpujob_exporter.common.environment import Environment

        monkeypatch.setattr(Environment.HPC, "UUID_LABEL", "gpu_uuid")
        counter = Counter(field_id=1, field_name="X")

        assert Metric(counter=counter, value="1", gpu="0").uuid == "gpu_uuid"


class TestLoggingSettings:
    def test_defaults(self):
        settings = _LoggingSettings()

        assert settings.LEVEL == LogLevel.INFO
        assert settings.FILE is None

    @pytest.mark.parametrize(
        "value,expected",
        [
            param("debug", LogLevel.DEBUG, id="lowercase"),
            param("TRACE", LogLevel.TRACE, id="uppercase"),
            param("Notice", LogLevel.NOTICE, id="mixed_case"),
        ],
    )
    def test_level_from_environment(self, monkeypatch, value, expected):
        monkeypatch.setenv("GPUJOB_LOGGING_LEVEL", value)

        assert _LoggingSettings().LEVEL is expected

    def test_invalid_level_rejected(self, monkeypatch):
        monkeypatch.setenv("GPUJOB_LOGGING_LEVEL", "verbose")

        with pytest.raises(ValidationError):
            _LoggingSettings()


class TestEnvironment:
    def test_nested_settings(self, monkeypatch):
        monkeypatch.setenv("GPUJOB_HPC_JOB_MAPPING_DIR", "/run/gpujobs")
        monkeypatch.setenv("GPUJOB_LOGGING_LEVEL", "error")

        environment = _Environment()

        assert environment.HPC.JOB_MAPPING_DIR == Path("/run/gpujobs")
        assert environment.LOGGING.LEVEL is LogLevel.ERROR

    def test_reads_dotenv_file(self, tmp_path):
        (tmp_path / ".env").write_text(
            "GPUJOB_HPC_JOB_MAPPING_DIR=/from/dotenv\n", encoding="utf-8"
        )

        assert _HPCSettings(_env_file=".env").JOB_MAPPING_DIR == Path("/from/dotenv")
