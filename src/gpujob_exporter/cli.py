# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Main CLI entry point for the GPU job exporter."""

################################################################################
# NOTE: Keep the imports here to a minimum. This file is read every time
# the CLI is run, including to generate the help text.
################################################################################

import io
import sys
from pathlib import Path

from cyclopts import App

from gpujob_exporter.cli_utils import exit_on_error
from gpujob_exporter.common.enums import FieldEntityGroup, LogLevel

app = App(name="gpujob-exporter", help="GPU metrics exporter with HPC job attribution")


@app.command(name="render")
def render(
    snapshot: Path,
    *,
    group: FieldEntityGroup | None = None,
    job_dir: Path | None = None,
    output: Path | None = None,
    log_level: LogLevel | None = None,
) -> None:
    """Enrich a collected metrics snapshot and print it in Prometheus format.

    Args:
        snapshot: JSON snapshot of one collection cycle (topology and samples).
        group: Entity group to render. Defaults to the group stored in the snapshot.
        job_dir: HPC job mapping directory. Defaults to GPUJOB_HPC_JOB_MAPPING_DIR.
        output: File to write the metrics to. Defaults to stdout.
        log_level: Log level. Defaults to GPUJOB_LOGGING_LEVEL.
    """
    with exit_on_error(title="Error Rendering Metrics"):
        from gpujob_exporter.common.environment import Environment
        from gpujob_exporter.common.exceptions import NotFoundError
        from gpujob_exporter.common.logging import setup_rich_logging
        from gpujob_exporter.common.models import MetricsSnapshot
        from gpujob_exporter.pipeline import MetricsPipeline
        from gpujob_exporter.transformation import TopologyResolver

        setup_rich_logging(
            log_level or Environment.LOGGING.LEVEL, Environment.LOGGING.FILE
        )

        if not snapshot.is_file():
            raise NotFoundError(f"Snapshot file '{snapshot}' not found")
        metrics_snapshot = MetricsSnapshot.model_validate_json(
            snapshot.read_text(encoding="utf-8")
        )

        pipeline = MetricsPipeline(job_dir)
        resolver = TopologyResolver(metrics_snapshot.topology)
        metrics = metrics_snapshot.to_metrics_by_counter()
        group = group or metrics_snapshot.group

        # Nothing is written unless the whole pass succeeds
        buffer = io.StringIO()
        pipeline.run(buffer, group, metrics, resolver)

        if output is None:
            sys.stdout.write(buffer.getvalue())
        else:
            output.write_text(buffer.getvalue(), encoding="utf-8")


if __name__ == "__main__":
    sys.exit(app())
