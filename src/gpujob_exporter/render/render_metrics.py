# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Prometheus Exposition Format renderer for collected metric groups.

Produces, for every counter in the order of the MetricsByCounter mapping:

    # HELP FIELD_NAME HELP_MSG
    # TYPE FIELD_NAME PROM_TYPE
    FIELD_NAME{gpu="GPU_INDEX_0",UUID="GPU_UUID",...,attr...} VALUE
    FIELD_NAME{gpu="GPU_INDEX_N",UUID="GPU_UUID",...,attr...} VALUE

GPU counters with an alternate name get a second block using the alternate
name, help and value. The label layout depends on the entity group.
"""

from collections.abc import Callable
from typing import TextIO

from gpujob_exporter.common.enums import FieldEntityGroup
from gpujob_exporter.common.exceptions import RenderError
from gpujob_exporter.common.models import Counter, Metric, MetricsByCounter
from gpujob_exporter.render.constants import (
    JOB_ID_GAUGE,
    JOB_ID_GAUGE_HELP,
    JOB_UID_GAUGE,
    JOB_UID_GAUGE_HELP,
)
from gpujob_exporter.transformation.constants import (
    HPC_JOB_ATTRIBUTE,
    HPC_USER_ATTRIBUTE,
)

LabelPairs = list[tuple[str, str]]
LayoutFunc = Callable[[Metric], LabelPairs]


def escape_label_value(value: str) -> str:
    """Escape a label value: backslash, double quote and line feed."""
    return value.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n")


def escape_help(text: str) -> str:
    """Escape HELP text: backslash and line feed."""
    return text.replace("\\", "\\\\").replace("\n", "\\n")


def format_labels(labels: LabelPairs) -> str:
    """Format label pairs as {key1="value1",key2="value2"}, in the given order."""
    return (
        "{"
        + ",".join(f'{key}="{escape_label_value(value)}"' for key, value in labels)
        + "}"
    )


def _uuid(metric: Metric) -> str:
    # An unresolved MIG instance must not be labelled as its physical GPU
    if metric.mig_profile:
        return metric.alter_uuid
    return metric.alter_uuid or metric.gpu_uuid


def _optional_labels(metric: Metric, with_attributes: bool = True) -> LabelPairs:
    labels: LabelPairs = []
    if metric.mig_profile:
        labels.append(("GPU_I_PROFILE", metric.mig_profile))
        labels.append(("GPU_I_ID", metric.gpu_instance_id))
    if metric.hostname:
        labels.append(("Hostname", metric.hostname))
    labels.extend(metric.labels.items())
    if with_attributes:
        labels.extend(metric.attributes.items())
    return labels


def _gpu_labels(metric: Metric) -> LabelPairs:
    return [
        ("gpu", metric.gpu),
        (metric.uuid, _uuid(metric)),
        ("pci_bus_id", metric.gpu_pci_bus_id),
        ("device", metric.gpu_device),
        ("modelName", metric.gpu_model_name),
        *_optional_labels(metric),
    ]


def _gpu_alter_labels(metric: Metric) -> LabelPairs:
    return [
        ("minor_number", metric.gpu),
        ("uuid", _uuid(metric)),
        ("device", metric.gpu_device),
        ("modelName", metric.gpu_model_name),
        *_optional_labels(metric),
    ]


def _host_and_labels(metric: Metric) -> LabelPairs:
    labels: LabelPairs = []
    if metric.hostname:
        labels.append(("Hostname", metric.hostname))
    labels.extend(metric.labels.items())
    return labels


def _switch_labels(metric: Metric) -> LabelPairs:
    return [("nvswitch", metric.gpu), *_host_and_labels(metric)]


def _link_labels(metric: Metric) -> LabelPairs:
    return [
        ("nvlink", metric.gpu),
        ("nvswitch", metric.gpu_device),
        *_host_and_labels(metric),
    ]


def _cpu_labels(metric: Metric) -> LabelPairs:
    return [("cpu", metric.gpu), *_host_and_labels(metric)]


def _cpu_core_labels(metric: Metric) -> LabelPairs:
    return [
        ("cpucore", metric.gpu),
        ("cpu", metric.gpu_device),
        *_host_and_labels(metric),
    ]


_LAYOUTS: dict[FieldEntityGroup, LayoutFunc] = {
    FieldEntityGroup.GPU: _gpu_labels,
    FieldEntityGroup.SWITCH: _switch_labels,
    FieldEntityGroup.LINK: _link_labels,
    FieldEntityGroup.CPU: _cpu_labels,
    FieldEntityGroup.CPU_CORE: _cpu_core_labels,
}


def _format_block(
    name: str,
    help_text: str,
    counter: Counter,
    metrics: list[Metric],
    layout: LayoutFunc,
    value_of: Callable[[Metric], str],
) -> list[str]:
    lines = [
        f"# HELP {name} {escape_help(help_text)}",
        f"# TYPE {name} {counter.prom_type}",
    ]
    lines.extend(
        f"{name}{format_labels(layout(metric))} {value_of(metric)}"
        for metric in metrics
    )
    return lines


def format_group(group: FieldEntityGroup | str, metrics: MetricsByCounter) -> str:
    """Convert the metrics of one entity group to exposition text.

    GPU groups also get the job id and job owner gauges appended.

    Raises:
        RenderError: If the group is not a known entity group.
    """
    try:
        group = FieldEntityGroup(group)
    except ValueError as e:
        raise RenderError(f"unexpected group: {group}") from e
    layout = _LAYOUTS[group]

    lines: list[str] = []
    for counter, counter_metrics in metrics.items():
        lines.extend(
            _format_block(
                counter.field_name,
                counter.help,
                counter,
                counter_metrics,
                layout,
                lambda metric: metric.value,
            )
        )
        if group == FieldEntityGroup.GPU and counter.alter_field_name:
            lines.extend(
                _format_block(
                    counter.alter_field_name,
                    counter.alter_help,
                    counter,
                    counter_metrics,
                    _gpu_alter_labels,
                    lambda metric: metric.alter_value,
                )
            )

    text = "\n".join(lines) + "\n" if lines else ""
    if group == FieldEntityGroup.GPU:
        text += format_job_gauges(metrics)
    return text


def format_job_gauges(metrics: MetricsByCounter) -> str:
    """Format the job id and job owner gauges for job-attributed GPU metrics.

    Every metric carrying a job attribute contributes one line per unique
    (device, job, user) combination. A gauge without lines is omitted
    entirely, headers included.
    """
    seen: set[tuple[tuple[str, ...], str, str]] = set()
    job_lines: list[str] = []
    uid_lines: list[str] = []

    for counter_metrics in metrics.values():
        for metric in counter_metrics:
            job_id = metric.attributes.get(HPC_JOB_ATTRIBUTE, "")
            if not job_id:
                continue
            user_id = metric.attributes.get(HPC_USER_ATTRIBUTE, "")

            device = (
                metric.gpu,
                _uuid(metric),
                metric.gpu_device,
                metric.gpu_model_name,
                metric.mig_profile,
                metric.gpu_instance_id,
            )
            if (device, job_id, user_id) in seen:
                continue
            seen.add((device, job_id, user_id))

            labels: LabelPairs = [
                ("minor_number", metric.gpu),
                ("uuid", _uuid(metric)),
                ("device", metric.gpu_device),
                ("modelName", metric.gpu_model_name),
                ("GPU_I_PROFILE", metric.mig_profile),
                ("GPU_I_ID", metric.gpu_instance_id),
                ("jobid", job_id),
            ]
            if user_id:
                labels.append(("userid", user_id))
                uid_lines.append(f"{JOB_UID_GAUGE}{format_labels(labels)} {user_id}")
            job_lines.append(f"{JOB_ID_GAUGE}{format_labels(labels)} {job_id}")

    lines: list[str] = []
    if job_lines:
        lines.append(f"# HELP {JOB_ID_GAUGE} {JOB_ID_GAUGE_HELP}")
        lines.append(f"# TYPE {JOB_ID_GAUGE} gauge")
        lines.extend(job_lines)
    if uid_lines:
        lines.append(f"# HELP {JOB_UID_GAUGE} {JOB_UID_GAUGE_HELP}")
        lines.append(f"# TYPE {JOB_UID_GAUGE} gauge")
        lines.extend(uid_lines)
    return "\n".join(lines) + "\n" if lines else ""


def render_group(
    sink: TextIO, group: FieldEntityGroup | str, metrics: MetricsByCounter
) -> None:
    """Render the metrics of one entity group and write them to `sink`.

    The text is built completely before the single write, so a render error
    writes nothing. Errors raised by the sink propagate to the caller.

    Raises:
        RenderError: If the group is not a known entity group.
    """
    sink.write(format_group(group, metrics))
