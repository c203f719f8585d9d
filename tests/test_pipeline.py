# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

import io
import logging
from unittest.mock import patch

import pytest

from gpujob_exporter.common.enums import FieldEntityGroup
from gpujob_exporter.common.environment import Environment
from gpujob_exporter.common.exceptions import JobMappingError, TopologyError
from gpujob_exporter.pipeline import MetricsPipeline
from gpujob_exporter.render import JOB_ID_GAUGE, JOB_UID_GAUGE
from gpujob_exporter.transformation import HPC_JOB_ATTRIBUTE
from tests.utils.gpu_constants import GPU0_UUID, GPU1_UUID, MIG2_UUID


class TestMetricsPipeline:
    """Tests for one enrichment-and-render pass."""

    def test_gpu_group_is_enriched(
        self, job_dir, write_jobs, fb_used_counter, make_metric, resolver
    ):
        write_jobs(GPU0_UUID, "100 200\n")
        metrics = {fb_used_counter: [make_metric(fb_used_counter, value="2")]}
        sink = io.StringIO()

        MetricsPipeline(job_dir).run(sink, FieldEntityGroup.GPU, metrics, resolver)

        text = sink.getvalue()
        assert 'hpc_job="100",hpc_user="200"} 2\n' in text
        assert 'hpc_job="100",hpc_user="200"} 2097152\n' in text
        assert f"# TYPE {JOB_ID_GAUGE} gauge" in text
        assert f"# TYPE {JOB_UID_GAUGE} gauge" in text

    def test_mig_sample_rendered_with_mig_identity(
        self, job_dir, write_jobs, sm_clock_counter, make_metric, resolver
    ):
        write_jobs("1.2", "42\n")
        metric = make_metric(
            sm_clock_counter, gpu="1", mig_profile="3g.20gb", gpu_instance_id="2"
        )
        sink = io.StringIO()

        MetricsPipeline(job_dir).run(
            sink, FieldEntityGroup.GPU, {sm_clock_counter: [metric]}, resolver
        )

        text = sink.getvalue()
        assert f'UUID="{MIG2_UUID}"' in text
        assert 'GPU_I_ID="2",jobid="42"} 42' in text

    def test_unknown_mig_instance_is_not_labelled_as_its_gpu(
        self, job_dir, write_jobs, sm_clock_counter, make_metric, resolver
    ):
        write_jobs("1.9", "5\n")
        metric = make_metric(
            sm_clock_counter,
            gpu="1",
            gpu_uuid=GPU1_UUID,
            mig_profile="3g.20gb",
            gpu_instance_id="9",
        )
        sink = io.StringIO()

        MetricsPipeline(job_dir).run(
            sink, FieldEntityGroup.GPU, {sm_clock_counter: [metric]}, resolver
        )

        text = sink.getvalue()
        assert GPU1_UUID not in text
        assert 'UUID="",pci_bus_id=' in text
        assert 'hpc_job="5"} 42\n' in text
        assert f'{JOB_ID_GAUGE}{{minor_number="1",uuid="",' in text

    def test_other_groups_are_not_enriched(
        self, job_dir, write_jobs, gpu_util_counter, make_metric, resolver
    ):
        write_jobs("0", "100\n")
        metric = make_metric(gpu_util_counter)
        metrics = {gpu_util_counter: [metric]}
        sink = io.StringIO()

        MetricsPipeline(job_dir).run(sink, FieldEntityGroup.SWITCH, metrics, resolver)

        assert metrics[gpu_util_counter] == [metric]
        assert metric.alter_value == ""
        assert HPC_JOB_ATTRIBUTE not in sink.getvalue()

    def test_unreadable_directory_still_renders(
        self, job_dir, fb_used_counter, make_metric, resolver, caplog
    ):
        metrics = {fb_used_counter: [make_metric(fb_used_counter, value="2")]}
        sink = io.StringIO()

        with (
            patch(
                "gpujob_exporter.transformation.hpc_mapper.JobDirectoryReader.read",
                side_effect=JobMappingError("Unable to list", str(job_dir)),
            ),
            caplog.at_level(logging.ERROR),
        ):
            MetricsPipeline(job_dir).run(sink, FieldEntityGroup.GPU, metrics, resolver)

        text = sink.getvalue()
        assert "} 2097152\n" in text
        assert HPC_JOB_ATTRIBUTE not in text
        assert "Unable to list" in caplog.text

    def test_topology_error_is_fatal(self, sm_clock_counter, make_metric, resolver):
        metric = make_metric(
            sm_clock_counter, gpu="7", mig_profile="1g.5gb", gpu_instance_id="1"
        )
        sink = io.StringIO()

        with pytest.raises(TopologyError):
            MetricsPipeline().run(
                sink, FieldEntityGroup.GPU, {sm_clock_counter: [metric]}, resolver
            )

        assert sink.getvalue() == ""

    def test_job_mapping_dir_defaults_to_environment(self, job_dir, monkeypatch):
        monkeypatch.setattr(Environment.HPC, "JOB_MAPPING_DIR", job_dir)

        assert MetricsPipeline().mapper.job_mapping_dir == job_dir
