# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Reader for the HPC job mapping directory.

The scheduler (e.g. a Slurm prolog/epilog) keeps one file per device in a
directory. The file name is the device key, either a GPU/MIG UUID or a raw
device key such as "0" or "1.3". Each line names one job running on it:

    job1
    job2

or, with the uid of the job owner:

    jobid1 uid1
    jobid2 uid2
"""

import stat
from pathlib import Path

from gpujob_exporter.common.exceptions import JobMappingError
from gpujob_exporter.common.mixins import ExporterLoggerMixin
from gpujob_exporter.common.models import JobIndex, JobRecord


class JobDirectoryReader(ExporterLoggerMixin):
    """Loads a job mapping directory into a JobIndex.

    Args:
        directory: Directory holding one job mapping file per device.
    """

    def __init__(self, directory: Path, **kwargs) -> None:
        super().__init__(**kwargs)
        self.directory = Path(directory)

    def read(self) -> JobIndex:
        """Read every regular file directly inside the directory.

        A missing directory is not an error: it is logged and an empty index
        is returned, so enrichment becomes a pass-through.

        Raises:
            JobMappingError: If the directory cannot be listed or a mapping
                file cannot be read.
        """
        job_index = JobIndex()
        if not self.directory.is_dir():
            self.error(
                f"Unable to access HPC job mapping file directory '{self.directory}' - directory not found. Ignoring."
            )
            return job_index

        for path in self._mapping_files():
            job_index.add(path.name, self.read_file(path))

        self.debug(lambda: f"GPU to job mapping: {job_index.jobs}")
        return job_index

    def _mapping_files(self) -> list[Path]:
        try:
            entries = sorted(self.directory.iterdir())
        except OSError as e:
            raise JobMappingError(
                f"Unable to list HPC job mapping directory: {e}", str(self.directory)
            ) from e

        self.debug(
            lambda: f"HPC mapper: {len(entries)} files in the '{self.directory}' found"
        )

        mapping_files = []
        for entry in entries:
            try:
                mode = entry.stat().st_mode
            except OSError as e:
                self.warning(
                    f"HPC mapper: can not get file info for the {entry.name} file: {e}"
                )
                continue

            if stat.S_ISDIR(mode):
                self.debug(lambda entry=entry: f"HPC mapper: '{entry.name}' is a directory")
                continue
            if not stat.S_ISREG(mode):
                self.debug(
                    lambda entry=entry: f"HPC mapper: '{entry.name}' is not a regular file"
                )
                continue

            mapping_files.append(entry)
        return mapping_files

    def read_file(self, path: Path) -> list[JobRecord]:
        """Parse one mapping file into job records.

        Blank lines are ignored. Lines with more than two whitespace separated
        tokens are logged and skipped, the rest of the file still loads.

        Raises:
            JobMappingError: If the file cannot be opened or decoded.
        """
        try:
            with open(path, encoding="utf-8") as f:
                lines = f.readlines()
        except (OSError, UnicodeDecodeError) as e:
            raise JobMappingError(
                f"Unable to read HPC job mapping file: {e}", str(path)
            ) from e

        records = []
        for line_num, line in enumerate(lines, start=1):
            tokens = line.split()
            if not tokens:
                continue
            if len(tokens) > 2:
                self.error(
                    f"Invalid job+user '{line.strip()}' on line {line_num} of {path}: "
                    f"expected 'job-id' or 'job-id user-id', got {len(tokens)} values"
                )
                continue
            records.append(
                JobRecord(
                    job_id=tokens[0], user_id=tokens[1] if len(tokens) == 2 else None
                )
            )
        return records
