# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Enrichment of raw GPU samples with device identity and HPC job attribution."""

from gpujob_exporter.transformation.constants import (
    HPC_JOB_ATTRIBUTE,
    HPC_USER_ATTRIBUTE,
)
from gpujob_exporter.transformation.hpc_mapper import (
    HPCJobMapper,
    device_key,
    scale_value,
)
from gpujob_exporter.transformation.job_directory import JobDirectoryReader
from gpujob_exporter.transformation.topology import TopologyResolver

__all__ = [
    "HPCJobMapper",
    "HPC_JOB_ATTRIBUTE",
    "HPC_USER_ATTRIBUTE",
    "JobDirectoryReader",
    "TopologyResolver",
    "device_key",
    "scale_value",
]
