# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

import math
import re
from pathlib import Path

from gpujob_exporter.common.mixins import ExporterLoggerMixin
from gpujob_exporter.common.models import (
    Counter,
    JobIndex,
    JobRecord,
    Metric,
    MetricsByCounter,
)
from gpujob_exporter.transformation.constants import (
    HPC_JOB_ATTRIBUTE,
    HPC_USER_ATTRIBUTE,
    MIG_DEVICE_KEY_SEPARATOR,
)
from gpujob_exporter.transformation.job_directory import JobDirectoryReader
from gpujob_exporter.transformation.topology import TopologyResolver

# ASCII decimal literals only: no underscores, padding, inf or nan
_INT_VALUE = re.compile(r"[+-]?[0-9]+")
_FLOAT_VALUE = re.compile(r"[+-]?([0-9]+\.[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")


def scale_value(value: str, multiplier: int) -> str:
    """Scale a sample value by an integer multiplier, keeping its numeric type.

    Values written with a decimal point are scaled as floats and formatted with
    six decimals. Other values are scaled as integers.

    Examples:
        >>> scale_value("139", 1)
        '139'
        >>> scale_value("2", 1048576)
        '2097152'
        >>> scale_value("0.5", 100)
        '50.000000'

    Raises:
        ValueError: If the value is not a number in the detected format.
    """
    if multiplier == 1:
        return value
    if "." in value:
        if not _FLOAT_VALUE.fullmatch(value):
            raise ValueError(f"invalid float value: {value!r}")
        scaled = float(value) * multiplier
        if not math.isfinite(scaled):
            raise ValueError(f"float value out of range: {value!r}")
        return f"{scaled:f}"
    if not _INT_VALUE.fullmatch(value):
        raise ValueError(f"invalid integer value: {value!r}")
    return f"{int(value) * multiplier:d}"


def device_key(metric: Metric) -> str:
    """Key identifying the device of a metric: the GPU index, or
    "<gpu>.<gpu instance id>" for MIG samples.
    """
    if metric.mig_profile:
        return f"{metric.gpu}{MIG_DEVICE_KEY_SEPARATOR}{metric.gpu_instance_id}"
    return metric.gpu


class HPCJobMapper(ExporterLoggerMixin):
    """Enriches GPU metrics with the HPC jobs running on each device.

    For every metric it computes the scaled alternate value, resolves the
    device identity (GPU UUID, or MIG UUID through the topology) and, when the
    job mapping directory lists jobs for the device, replaces the metric with
    one copy per job carrying the job and user attributes. Metrics without
    jobs are kept as they are.

    Args:
        job_mapping_dir: Directory of job mapping files. None disables job
            attribution, the mapper then only computes alternate values and
            identities.
    """

    name = "hpc_mapper"

    def __init__(self, job_mapping_dir: Path | None = None, **kwargs) -> None:
        super().__init__(**kwargs)
        self.job_mapping_dir = job_mapping_dir
        if job_mapping_dir is not None:
            self.info(
                f"HPC job mapping is enabled and watches the '{job_mapping_dir}' directory"
            )

    def load_job_index(self) -> JobIndex:
        """Read the job mapping directory into a fresh index.

        Raises:
            JobMappingError: If the directory cannot be listed or a file read.
        """
        if self.job_mapping_dir is None:
            return JobIndex()
        return JobDirectoryReader(self.job_mapping_dir).read()

    def process(
        self,
        metrics: MetricsByCounter,
        resolver: TopologyResolver,
        job_index: JobIndex | None = None,
    ) -> None:
        """Enrich `metrics` in place.

        The job index is loaded before any metric is touched, so a failed load
        leaves `metrics` unchanged.

        Args:
            metrics: Samples of one collection cycle. Each counter's list is
                replaced by the enriched, possibly longer, list.
            resolver: Topology used to resolve MIG UUIDs.
            job_index: Index to use instead of reading the mapping directory.

        Raises:
            JobMappingError: If the mapping directory cannot be read.
            TopologyError: If a MIG sample references an unknown GPU.
        """
        if job_index is None:
            job_index = self.load_job_index()

        # Device key -> GPU or MIG UUID, only for this pass
        gpu_uuids: dict[str, str] = {}

        for counter, counter_metrics in list(metrics.items()):
            metrics[counter] = self._process_counter(
                counter, counter_metrics, resolver, job_index, gpu_uuids
            )

    def _process_counter(
        self,
        counter: Counter,
        counter_metrics: list[Metric],
        resolver: TopologyResolver,
        job_index: JobIndex,
        gpu_uuids: dict[str, str],
    ) -> list[Metric]:
        modified_metrics: list[Metric] = []
        for metric in counter_metrics:
            metric.alter_value = self._alter_value(counter, metric)

            key = device_key(metric)
            if key not in gpu_uuids:
                if metric.mig_profile:
                    gpu_uuids[key] = resolver.find_mig_uuid(
                        metric.gpu, metric.gpu_instance_id
                    )
                else:
                    gpu_uuids[key] = metric.gpu_uuid
            metric.alter_uuid = gpu_uuids[key]

            jobs = job_index.lookup(metric.alter_uuid, key)
            if not jobs:
                modified_metrics.append(metric)
                continue

            for job in jobs:
                modified_metric = self._attach_job(metric, job)
                if modified_metric is not None:
                    modified_metrics.append(modified_metric)
        return modified_metrics

    def _alter_value(self, counter: Counter, metric: Metric) -> str:
        try:
            return scale_value(metric.value, counter.multiplier)
        except ValueError:
            self.warning(
                f"Can not scale value '{metric.value}' of {counter.field_name} for GPU {metric.gpu} "
                f"by {counter.multiplier}, using it unscaled"
            )
            return metric.value

    def _attach_job(self, metric: Metric, job: JobRecord) -> Metric | None:
        try:
            modified_metric = metric.clone()
        except Exception as e:
            self.error(f"Can not create a copy of the metric {metric!r}: {e}")
            return None

        modified_metric.attributes[HPC_JOB_ATTRIBUTE] = job.job_id
        if job.user_id is not None:
            modified_metric.attributes[HPC_USER_ATTRIBUTE] = job.user_id
        return modified_metric
