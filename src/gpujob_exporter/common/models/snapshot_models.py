# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from typing import Any

from pydantic import Field, model_validator

from gpujob_exporter.common.enums import FieldEntityGroup
from gpujob_exporter.common.models.base_models import ExporterBaseModel
from gpujob_exporter.common.models.metric_models import (
    Counter,
    Metric,
    MetricsByCounter,
)
from gpujob_exporter.common.models.topology_models import DeviceTopology


class CounterMetrics(ExporterBaseModel):
    """A counter and the samples collected for it.

    Samples in the serialized form may omit their counter, it is filled in
    from the enclosing entry.
    """

    counter: Counter
    metrics: list[Metric] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def _inject_counter(cls, data: Any) -> Any:
        if isinstance(data, dict) and "counter" in data:
            data = dict(data)
            data["metrics"] = [
                {"counter": data["counter"], **metric}
                if isinstance(metric, dict) and "counter" not in metric
                else metric
                for metric in data.get("metrics", [])
            ]
        return data


class MetricsSnapshot(ExporterBaseModel):
    """One collection cycle as handed over by the collection layer."""

    group: FieldEntityGroup = Field(
        default=FieldEntityGroup.GPU, description="Entity group of every sample"
    )
    topology: DeviceTopology = Field(default_factory=DeviceTopology)
    counters: list[CounterMetrics] = Field(default_factory=list)

    def to_metrics_by_counter(self) -> MetricsByCounter:
        metrics: MetricsByCounter = {}
        for entry in self.counters:
            metrics.setdefault(entry.counter, []).extend(entry.metrics)
        return metrics
