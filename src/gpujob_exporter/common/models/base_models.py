# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
from pydantic import BaseModel, ConfigDict


class ExporterBaseModel(BaseModel):
    """Base model for all exporter Pydantic models.

    Assignment is validated so that enrichment writing derived fields onto a
    metric cannot store a non-string value by accident.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, validate_assignment=True)
