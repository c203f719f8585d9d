# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Names of the job attribution gauges appended to GPU output.

These keep dashboards built for the older per-job gauges working.
"""

JOB_ID_GAUGE = "nvidia_gpu_jobId"
JOB_ID_GAUGE_HELP = "JobId number of a job currently using this GPU as reported by Slurm"

JOB_UID_GAUGE = "nvidia_gpu_jobUid"
JOB_UID_GAUGE_HELP = "Uid number of user running jobs on this GPU"
