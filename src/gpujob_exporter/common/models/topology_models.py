# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from pydantic import Field

from gpujob_exporter.common.models.base_models import ExporterBaseModel


class GPUInstanceInfo(ExporterBaseModel):
    """A MIG GPU instance carved out of a physical GPU."""

    instance_id: int = Field(ge=0, description="NVML GPU instance id")
    uuid: str = Field(description="MIG device UUID (e.g., 'MIG-...')")
    profile: str = Field(default="", description="MIG profile name (e.g., '1g.10gb')")


class GPUInfo(ExporterBaseModel):
    """Static description of one physical GPU."""

    index: int = Field(ge=0, description="GPU index on this node")
    uuid: str = Field(description="GPU UUID (e.g., 'GPU-...')")
    gpu_instances: list[GPUInstanceInfo] = Field(
        default_factory=list, description="MIG instances, empty if MIG is disabled"
    )


class DeviceTopology(ExporterBaseModel):
    """Device topology reported by the collection layer for one node.

    GPUs are stored in index order, so `gpus[i]` describes GPU `i`.
    """

    gpus: list[GPUInfo] = Field(default_factory=list)

    @property
    def gpu_count(self) -> int:
        return len(self.gpus)
