# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from gpujob_exporter.common.exceptions import TopologyError
from gpujob_exporter.common.mixins import ExporterLoggerMixin
from gpujob_exporter.common.models import DeviceTopology


def _parse_index(text: str) -> int | None:
    """Parse a non-negative decimal index, or return None."""
    if not (text.isascii() and text.isdecimal()):
        return None
    return int(text)


class TopologyResolver(ExporterLoggerMixin):
    """Answers device identity questions against the node's device topology.

    Args:
        topology: Topology reported by the collection layer. It is read only
            and assumed stable for the duration of an enrichment pass.
    """

    def __init__(self, topology: DeviceTopology, **kwargs) -> None:
        super().__init__(**kwargs)
        self.topology = topology

    @property
    def gpu_count(self) -> int:
        return self.topology.gpu_count

    def find_mig_uuid(self, gpu: str, instance_id: str) -> str:
        """Return the UUID of MIG instance `instance_id` on GPU `gpu`.

        Returns an empty string (and logs a warning) if the GPU has no such
        instance.

        Raises:
            TopologyError: If `gpu` is not an index below the GPU count, or
                `instance_id` is not a non-negative integer.
        """
        gpu_index = _parse_index(gpu)
        if gpu_index is None:
            raise TopologyError(
                f"Got metric with GPU id {gpu!r} that is not a non-negative integer",
                gpu=gpu,
                instance_id=instance_id,
            )
        if gpu_index >= self.gpu_count:
            raise TopologyError(
                f"Got metric with GPU id {gpu} which is not below the number of GPUs {self.gpu_count}",
                gpu=gpu,
                instance_id=instance_id,
            )
        mig_id = _parse_index(instance_id)
        if mig_id is None:
            raise TopologyError(
                f"Got metric for GPU #{gpu} and MIG instance id {instance_id!r} that is not a non-negative integer",
                gpu=gpu,
                instance_id=instance_id,
            )

        for gpu_instance in self.topology.gpus[gpu_index].gpu_instances:
            if gpu_instance.instance_id == mig_id:
                return gpu_instance.uuid

        self.warning(
            f"Got metric for GPU #{gpu} and MIG instance id {instance_id} that is not in the device topology"
        )
        return ""
