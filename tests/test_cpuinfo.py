import os
import sys
from unittest.mock import mock_open, patch

import pytest

from fastmatch.cpuinfo import (
    Core,
    CpuInfo,
    PhysicalCpu,
    Processor,
    generic_cpu_info,
    get_cpu_info,
    parse_proc_cpuinfo,
)

SAMPLE = """\
processor\t: 0
vendor_id\t: GenuineIntel
physical id\t: 0
core id\t\t: 0
cpu cores\t: 2

processor\t: 1
physical id\t: 0
core id\t\t: 1

processor\t: 2
physical id\t: 0
core id\t\t: 0

processor\t: 3
physical id\t: 0
core id\t\t: 1
"""


def _processor_ids(info):
    return sorted(
        p.processor_id
        for cpu in info.physical_cpus.values()
        for core in cpu.cores.values()
        for p in core.processors
    )


def test_parse_groups_processors_by_core():
    info = parse_proc_cpuinfo(SAMPLE.splitlines())
    assert list(info.physical_cpus) == [0]
    cores = info.physical_cpus[0].cores
    assert sorted(cores) == [0, 1]
    assert [p.processor_id for p in cores[0].processors] == [0, 2]
    assert [p.processor_id for p in cores[1].processors] == [1, 3]


def test_parse_keeps_every_processor_once():
    info = parse_proc_cpuinfo(SAMPLE.splitlines(keepends=True))
    assert _processor_ids(info) == [0, 1, 2, 3]


def test_parse_records_ids_on_containers():
    info = parse_proc_cpuinfo(SAMPLE.splitlines())
    physical = info.physical_cpus[0]
    assert physical.physical_id == 0
    assert {core_id: core.core_id for core_id, core in physical.cores.items()} == {0: 0, 1: 1}


def test_parse_multiple_sockets():
    lines = [
        "processor : 0", "physical id : 0", "core id : 0",
        "processor : 1", "physical id : 1", "core id : 0",
    ]
    info = parse_proc_cpuinfo(lines)
    assert sorted(info.physical_cpus) == [0, 1]
    assert info.physical_cpus[1].cores[0].processors == [Processor(1)]


def test_parse_without_core_ids_is_empty():
    lines = ["processor : 0", "BogoMIPS : 48.00", "processor : 1"]
    assert parse_proc_cpuinfo(lines) == CpuInfo()


def test_parse_line_without_colon_is_ignored():
    lines = ["processor", "physical id : 0", "core id : 0"]
    assert parse_proc_cpuinfo(lines) == CpuInfo()


def test_parse_non_numeric_value_raises():
    with pytest.raises(ValueError):
        parse_proc_cpuinfo(["processor : ARMv7"])


def test_generic_cpu_info_one_core_per_processor():
    info = generic_cpu_info(4)
    cores = info.physical_cpus[0].cores
    assert sorted(cores) == [0, 1, 2, 3]
    for core_id, core in cores.items():
        assert core == Core(core_id=core_id, processors=[Processor(core_id)])


def test_generic_cpu_info_zero_is_empty():
    assert generic_cpu_info(0).physical_cpus == {}


def test_get_cpu_info_non_linux_uses_cpu_count():
    with patch.object(sys, "platform", "darwin"), patch.object(os, "cpu_count", return_value=3):
        info = get_cpu_info()
    assert info == generic_cpu_info(3)


def test_get_cpu_info_linux_reads_proc():
    with patch.object(sys, "platform", "linux"), patch("builtins.open", mock_open(read_data=SAMPLE)):
        info = get_cpu_info()
    assert info == parse_proc_cpuinfo(SAMPLE.splitlines())


def test_get_cpu_info_linux_unreadable_is_empty():
    with patch.object(sys, "platform", "linux"), patch("builtins.open", side_effect=OSError):
        info = get_cpu_info()
    assert info == CpuInfo()


def test_physical_cpu_defaults_are_independent():
    first = PhysicalCpu()
    second = PhysicalCpu()
    first.cores[0] = Core(core_id=0)
    assert second.cores == {}