# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from pathlib import Path
from typing import TextIO

from gpujob_exporter.common.enums import FieldEntityGroup
from gpujob_exporter.common.environment import Environment
from gpujob_exporter.common.exceptions import JobMappingError
from gpujob_exporter.common.mixins import ExporterLoggerMixin
from gpujob_exporter.common.models import JobIndex, MetricsByCounter
from gpujob_exporter.render import render_group
from gpujob_exporter.transformation import HPCJobMapper, TopologyResolver


class MetricsPipeline(ExporterLoggerMixin):
    """One enrichment-and-render pass over a collected snapshot.

    GPU groups are enriched by the HPC job mapper before rendering, other
    groups are rendered as collected. If the job mapping directory cannot be
    read the pass still renders, without job attribution.

    Args:
        job_mapping_dir: Directory of job mapping files. Defaults to
            Environment.HPC.JOB_MAPPING_DIR.
    """

    def __init__(self, job_mapping_dir: Path | None = None, **kwargs) -> None:
        super().__init__(**kwargs)
        self.mapper = HPCJobMapper(job_mapping_dir or Environment.HPC.JOB_MAPPING_DIR)

    def run(
        self,
        sink: TextIO,
        group: FieldEntityGroup,
        metrics: MetricsByCounter,
        resolver: TopologyResolver,
    ) -> None:
        """Enrich `metrics` in place and render them to `sink`.

        Raises:
            TopologyError: If a sample references a GPU the topology does not know.
            RenderError: If the group is not a known entity group.
        """
        if group == FieldEntityGroup.GPU:
            self.enrich(metrics, resolver)
        render_group(sink, group, metrics)

    def enrich(self, metrics: MetricsByCounter, resolver: TopologyResolver) -> None:
        try:
            self.mapper.process(metrics, resolver)
        except JobMappingError as e:
            self.error(f"Skipping HPC job attribution for this pass: {e}")
            self.mapper.process(metrics, resolver, job_index=JobIndex())
