# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Constants shared by the enrichment stage and the renderer."""

# Attribute names set on metrics attributed to an HPC job
HPC_JOB_ATTRIBUTE = "hpc_job"
HPC_USER_ATTRIBUTE = "hpc_user"

# Separator between GPU index and GPU instance id in a MIG device key ("2.11")
MIG_DEVICE_KEY_SEPARATOR = "."
