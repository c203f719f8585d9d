# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
from gpujob_exporter.common.mixins.base_mixin import BaseMixin
from gpujob_exporter.common.mixins.exporter_logger_mixin import ExporterLoggerMixin

__all__ = [
    "BaseMixin",
    "ExporterLoggerMixin",
]
