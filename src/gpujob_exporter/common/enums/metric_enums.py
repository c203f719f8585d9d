# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from gpujob_exporter.common.enums.base_enums import CaseInsensitiveStrEnum


class MetricKind(CaseInsensitiveStrEnum):
    """Prometheus type of a counter, as written on its TYPE line."""

    GAUGE = "gauge"
    COUNTER = "counter"
    LABEL = "label"


class FieldEntityGroup(CaseInsensitiveStrEnum):
    """Class of device a sample set was collected for.

    Each group renders with its own label layout.
    """

    GPU = "gpu"
    SWITCH = "switch"
    LINK = "link"
    CPU = "cpu"
    CPU_CORE = "cpu_core"
