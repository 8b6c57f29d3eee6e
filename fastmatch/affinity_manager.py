"""Handing out processors to engine processes so they do not share cores."""

from __future__ import annotations

import threading
from collections.abc import Sequence
from enum import IntEnum
from typing import Optional

from .cpuinfo import CpuInfo, get_cpu_info
from .scope import ScopeEntry


class _Group(IntEnum):
    HT_1 = 0
    HT_2 = 1


class AffinityProcessor(ScopeEntry):
    """A set of processors that can be borrowed; starts available."""

    def __init__(self, cpus: Sequence[int]) -> None:
        super().__init__(True)
        self.cpus = list(cpus)


class AffinityManager:
    """Pool of processors split into two hyperthread groups.

    The first processor of every core goes to group HT_1, the second to HT_2,
    alternating further. Processors in one group lie on different physical
    cores, so HT_1 is used up before HT_2 is touched.
    """

    def __init__(self, use_affinity: bool, tpe: int, cpu_info: Optional[CpuInfo] = None) -> None:
        self._lock = threading.Lock()
        self._cores: tuple[list[AffinityProcessor], list[AffinityProcessor]] = ([], [])
        # Returned when affinity is disabled.
        self._null_core = AffinityProcessor([])
        self.use_affinity = bool(use_affinity) and tpe <= 1

        if self.use_affinity:
            self._setup_cores(cpu_info if cpu_info is not None else get_cpu_info())

    def consume(self) -> AffinityProcessor:
        """Borrow a free processor; release it (or use a ScopeGuard) when done.

        Raises RuntimeError when no processor is free.
        """
        if not self.use_affinity:
            return self._null_core

        with self._lock:
            if not any(self._cores):
                raise RuntimeError("No cores available")

            for group in _Group:
                for core in self._cores[group]:
                    if core.available:
                        core.available = False
                        return core

        raise RuntimeError("No cores available")

    def _setup_cores(self, cpu_info: CpuInfo) -> None:
        with self._lock:
            for _, physical in sorted(cpu_info.physical_cpus.items()):
                for _, core in sorted(physical.cores.items()):
                    for index, processor in enumerate(core.processors):
                        group = _Group.HT_1 if index % 2 == 0 else _Group.HT_2
                        self._cores[group].append(AffinityProcessor([processor.processor_id]))