"""Layout of the processors in the system: sockets, cores and hardware threads."""

from __future__ import annotations

import os
import re
import sys
from collections.abc import Iterable
from dataclasses import dataclass, field

_PROC_CPUINFO = "/proc/cpuinfo"
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


@dataclass
class Processor:
    """A logical processor (hardware thread)."""

    processor_id: int


@dataclass
class Core:
    """A physical core; usually holds two processors with hyperthreading, one without."""

    core_id: int = -1
    processors: list[Processor] = field(default_factory=list)


@dataclass
class PhysicalCpu:
    """A CPU package (socket) and its cores, keyed by core id."""

    physical_id: int = -1
    cores: dict[int, Core] = field(default_factory=dict)


@dataclass
class CpuInfo:
    """All physical CPUs in the system, keyed by physical id."""

    physical_cpus: dict[int, PhysicalCpu] = field(default_factory=dict)


def _extract_value(line: str) -> int:
    """Return the integer after the first colon, or -1 if there is no colon."""
    _, colon, rest = line.partition(":")
    if not colon:
        return -1
    match = _LEADING_INT.match(rest)
    if match is None:
        raise ValueError(f"no integer value in cpuinfo line: {line.rstrip()!r}")
    return int(match.group(1))


def parse_proc_cpuinfo(lines: Iterable[str]) -> CpuInfo:
    """Build a :class:`CpuInfo` from the lines of a /proc/cpuinfo listing.

    A processor is recorded once its "processor", "core id" and "physical id"
    entries have all been seen.
    """
    cpu_info = CpuInfo()
    processor_id = core_id = physical_id = -1

    for line in lines:
        if "processor" in line:
            processor_id = _extract_value(line)
        elif "core id" in line:
            core_id = _extract_value(line)
        elif "physical id" in line:
            physical_id = _extract_value(line)

        if core_id != -1 and processor_id != -1 and physical_id != -1:
            physical = cpu_info.physical_cpus.setdefault(
                physical_id, PhysicalCpu(physical_id=physical_id)
            )
            core = physical.cores.setdefault(core_id, Core(core_id=core_id))
            core.processors.append(Processor(processor_id))
            processor_id = core_id = physical_id = -1

    return cpu_info


def generic_cpu_info(count: int) -> CpuInfo:
    """Describe ``count`` processors as single-threaded cores of one physical CPU."""
    physical = PhysicalCpu(physical_id=0)
    for index in range(count):
        physical.cores[index] = Core(core_id=index, processors=[Processor(index)])
    cpu_info = CpuInfo()
    if count > 0:
        cpu_info.physical_cpus[0] = physical
    return cpu_info


def get_cpu_info() -> CpuInfo:
    """Return the processor layout of this machine.

    On Linux it is read from /proc/cpuinfo (an unreadable file gives an empty
    layout); elsewhere every logical processor is treated as its own core.
    """
    if sys.platform.startswith("linux"):
        try:
            with open(_PROC_CPUINFO, encoding="utf-8") as handle:
                return parse_proc_cpuinfo(handle)
        except OSError:
            return CpuInfo()

    return generic_cpu_info(os.cpu_count() or 0)