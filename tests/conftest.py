# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""
Shared fixtures for testing the GPU job exporter.

This file contains fixtures that are automatically discovered by pytest
and made available to test functions in the same directory and subdirectories.
"""

import logging
from collections.abc import Callable
from pathlib import Path

import pytest

from gpujob_exporter.common.exporter_logger import _TRACE
from gpujob_exporter.common.models import (
    Counter,
    DeviceTopology,
    GPUInfo,
    GPUInstanceInfo,
    Metric,
)
from gpujob_exporter.transformation import TopologyResolver
from tests.utils.gpu_constants import (
    GPU0_UUID,
    GPU1_UUID,
    HOSTNAME,
    MIG1_UUID,
    MIG2_UUID,
    MODEL_NAME,
)

logging.basicConfig(level=_TRACE)


@pytest.fixture
def gpu_util_counter() -> Counter:
    """Utilization counter with an alternate name and no scaling."""
    return Counter(
        field_id=203,
        field_name="DCGM_FI_DEV_GPU_UTIL",
        help="GPU utilization (in %).",
        alter_field_name="nvidia_gpu_duty_cycle",
        alter_help="GPU utilization duty cycle",
    )


@pytest.fixture
def fb_used_counter() -> Counter:
    """Framebuffer counter in MiB, exposed in bytes under its alternate name."""
    return Counter(
        field_id=252,
        field_name="DCGM_FI_DEV_FB_USED",
        help="Framebuffer memory used (in MiB).",
        alter_field_name="nvidia_gpu_memory_used_bytes",
        alter_help="GPU memory used in bytes",
        multiplier=1024 * 1024,
    )


@pytest.fixture
def sm_clock_counter() -> Counter:
    """Counter without an alternate name."""
    return Counter(
        field_id=100,
        field_name="DCGM_FI_DEV_SM_CLOCK",
        help="SM clock frequency (in MHz).",
    )


@pytest.fixture
def make_metric() -> Callable[..., Metric]:
    """Factory for GPU metrics with realistic defaults for GPU 0."""

    def _make_metric(counter: Counter, value: str = "42", **kwargs) -> Metric:
        defaults = {
            "gpu": "0",
            "gpu_uuid": GPU0_UUID,
            "gpu_device": "nvidia0",
            "gpu_model_name": MODEL_NAME,
            "gpu_pci_bus_id": "00000000:07:00.0",
            "hostname": HOSTNAME,
        }
        defaults.update(kwargs)
        return Metric(counter=counter, value=value, **defaults)

    return _make_metric


@pytest.fixture
def topology() -> DeviceTopology:
    """Two GPUs, the second one partitioned into two MIG instances."""
    return DeviceTopology(
        gpus=[
            GPUInfo(index=0, uuid=GPU0_UUID),
            GPUInfo(
                index=1,
                uuid=GPU1_UUID,
                gpu_instances=[
                    GPUInstanceInfo(instance_id=1, uuid=MIG1_UUID, profile="3g.20gb"),
                    GPUInstanceInfo(instance_id=2, uuid=MIG2_UUID, profile="3g.20gb"),
                ],
            ),
        ]
    )


@pytest.fixture
def resolver(topology: DeviceTopology) -> TopologyResolver:
    return TopologyResolver(topology)


@pytest.fixture
def job_dir(tmp_path: Path) -> Path:
    """Empty job mapping directory."""
    directory = tmp_path / "jobs"
    directory.mkdir()
    return directory


@pytest.fixture
def write_jobs(job_dir: Path) -> Callable[[str, str], Path]:
    """Write a job mapping file named after a device key."""

    def _write_jobs(device_key: str, content: str) -> Path:
        path = job_dir / device_key
        path.write_text(content, encoding="utf-8")
        return path

    return _write_jobs


@pytest.fixture(autouse=True)
def _wide_terminal(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep rich from wrapping long tmp paths inside CLI error panels."""
    monkeypatch.setenv("COLUMNS", "300")
