# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
from gpujob_exporter.common.enums.base_enums import CaseInsensitiveStrEnum
from gpujob_exporter.common.enums.logging_enums import LogLevel
from gpujob_exporter.common.enums.metric_enums import FieldEntityGroup, MetricKind

__all__ = [
    "CaseInsensitiveStrEnum",
    "FieldEntityGroup",
    "LogLevel",
    "MetricKind",
]
