# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
from gpujob_exporter.common.models.base_models import ExporterBaseModel
from gpujob_exporter.common.models.job_models import JobIndex, JobRecord
from gpujob_exporter.common.models.metric_models import (
    Counter,
    Metric,
    MetricsByCounter,
)
from gpujob_exporter.common.models.snapshot_models import (
    CounterMetrics,
    MetricsSnapshot,
)
from gpujob_exporter.common.models.topology_models import (
    DeviceTopology,
    GPUInfo,
    GPUInstanceInfo,
)

__all__ = [
    "Counter",
    "CounterMetrics",
    "DeviceTopology",
    "ExporterBaseModel",
    "GPUInfo",
    "GPUInstanceInfo",
    "JobIndex",
    "JobRecord",
    "Metric",
    "MetricsByCounter",
    "MetricsSnapshot",
]
