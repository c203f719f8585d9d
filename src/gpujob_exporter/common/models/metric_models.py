# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from typing import TypeAlias

from pydantic import ConfigDict, Field

from gpujob_exporter.common.enums import MetricKind
from gpujob_exporter.common.environment import Environment
from gpujob_exporter.common.models.base_models import ExporterBaseModel


class Counter(ExporterBaseModel):
    """Definition of one exported field.

    Counters are immutable and hashable so they can key a MetricsByCounter
    mapping. Every metric collected for the field references the same counter.
    """

    model_config = ConfigDict(frozen=True)

    field_id: int = Field(description="DCGM field identifier (e.g., 203)")
    field_name: str = Field(
        description="Primary metric name (e.g., 'DCGM_FI_DEV_GPU_UTIL')"
    )
    prom_type: MetricKind = Field(
        default=MetricKind.GAUGE, description="Prometheus metric type"
    )
    help: str = Field(default="", description="HELP text for the primary metric")
    alter_field_name: str = Field(
        default="",
        description="Alternate metric name exposing the same sample (e.g., 'nvidia_gpu_duty_cycle'). Empty if none.",
    )
    alter_help: str = Field(
        default="", description="HELP text for the alternate metric"
    )
    multiplier: int = Field(
        default=1,
        description="Integer scale factor applied to the value for the alternate metric",
    )


class Metric(ExporterBaseModel):
    """One sample of a counter for a single device, MIG instance, link or core."""

    counter: Counter = Field(description="Counter this sample belongs to")
    value: str = Field(
        description="Sample value as collected. Kept as text so its int or float format is preserved."
    )
    gpu: str = Field(
        description="Entity index (GPU, switch, link, CPU or core index) as a string"
    )
    gpu_uuid: str = Field(default="", description="Physical GPU UUID (e.g., 'GPU-...')")
    uuid: str = Field(
        default_factory=lambda: Environment.HPC.UUID_LABEL,
        description="Name of the label carrying the device UUID",
    )
    gpu_device: str = Field(
        default="",
        description="Device name (e.g., 'nvidia0'). For links and cores this is the parent entity.",
    )
    gpu_model_name: str = Field(default="", description="GPU model name")
    gpu_pci_bus_id: str = Field(default="", description="PCI bus id")
    mig_profile: str = Field(
        default="", description="MIG profile name. Empty if the GPU is not partitioned."
    )
    gpu_instance_id: str = Field(default="", description="MIG GPU instance id")
    hostname: str = Field(default="", description="Host the sample was collected on")
    labels: dict[str, str] = Field(
        default_factory=dict,
        description="Additional labels, rendered in insertion order",
    )
    attributes: dict[str, str] = Field(
        default_factory=dict,
        description="Enrichment attributes (e.g., HPC job and user), rendered after the labels",
    )
    alter_value: str = Field(
        default="", description="Value scaled by the counter multiplier"
    )
    alter_uuid: str = Field(
        default="",
        description="Resolved device identity: the GPU UUID, or the MIG UUID for partitioned samples",
    )

    def clone(self) -> "Metric":
        """Return an independent copy. The counter is shared, the label and
        attribute mappings are not.
        """
        return self.model_copy(
            update={"labels": dict(self.labels), "attributes": dict(self.attributes)}
        )


MetricsByCounter: TypeAlias = dict[Counter, list[Metric]]
"""Samples of one collection cycle grouped by counter, in collection order."""
