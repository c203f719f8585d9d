# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from gpujob_exporter.render.constants import (
    JOB_ID_GAUGE,
    JOB_ID_GAUGE_HELP,
    JOB_UID_GAUGE,
    JOB_UID_GAUGE_HELP,
)
from gpujob_exporter.render.render_metrics import (
    escape_help,
    escape_label_value,
    format_group,
    format_job_gauges,
    format_labels,
    render_group,
)

__all__ = [
    "JOB_ID_GAUGE",
    "JOB_ID_GAUGE_HELP",
    "JOB_UID_GAUGE",
    "JOB_UID_GAUGE_HELP",
    "escape_help",
    "escape_label_value",
    "format_group",
    "format_job_gauges",
    "format_labels",
    "render_group",
]
