# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from pydantic import ConfigDict, Field

from gpujob_exporter.common.models.base_models import ExporterBaseModel


class JobRecord(ExporterBaseModel):
    """One line of a job mapping file: a job id, optionally with its owner."""

    model_config = ConfigDict(frozen=True)

    job_id: str = Field(min_length=1, description="Scheduler job id")
    user_id: str | None = Field(default=None, description="Uid of the job owner")


class JobIndex(ExporterBaseModel):
    """Jobs running on each device, keyed by GPU/MIG UUID or by raw device key
    ("0", "1.3", ...), in file order.
    """

    jobs: dict[str, list[JobRecord]] = Field(default_factory=dict)

    def add(self, device_key: str, records: list[JobRecord]) -> None:
        self.jobs.setdefault(device_key, []).extend(records)

    def lookup(self, uuid: str, device_key: str) -> list[JobRecord]:
        """Return the jobs for a device, matching its UUID first and its raw key second."""
        if uuid in self.jobs:
            return self.jobs[uuid]
        return self.jobs.get(device_key, [])

    def __len__(self) -> int:
        return len(self.jobs)

    def __contains__(self, device_key: str) -> bool:
        return device_key in self.jobs
