"""Fault injection points for the inet layer."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Sequence


class InetFault(enum.IntEnum):
    """Fault points of the inet layer."""

    BIND = 0
    LISTEN = 1
    SEND = 2


INET_FAULT_NAMES = ("bind", "listen", "send")
INET_FAULT_MANAGER_NAME = "Inet"


@dataclass
class _Record:
    calls_to_skip: int = 0
    calls_to_fail: int = 0
    times_checked: int = 0


class FaultManager:
    """Keeps a set of named fault points and decides when each one fires."""

    def __init__(self, name: str, fault_names: Sequence[str]) -> None:
        self.name = name
        self.fault_names = tuple(fault_names)
        self._records = [_Record() for _ in self.fault_names]

    def num_faults(self) -> int:
        return len(self._records)

    def _record(self, fault: int) -> _Record:
        index = int(fault)
        if not 0 <= index < len(self._records):
            raise ValueError(f"unknown fault {fault!r} for manager {self.name}")
        return self._records[index]

    def fail_at_fault(self, fault: int, num_calls_to_skip: int, num_calls_to_fail: int) -> None:
        """Arm ``fault``: let ``num_calls_to_skip`` checks pass, then fail ``num_calls_to_fail``."""
        if num_calls_to_skip < 0 or num_calls_to_fail < 0:
            raise ValueError("call counts must not be negative")
        record = self._record(fault)
        record.calls_to_skip = num_calls_to_skip
        record.calls_to_fail = num_calls_to_fail

    def check_fault(self, fault: int) -> bool:
        """Return True if ``fault`` should fire on this call."""
        record = self._record(fault)
        record.times_checked += 1
        if record.calls_to_skip > 0:
            record.calls_to_skip -= 1
            return False
        if record.calls_to_fail > 0:
            record.calls_to_fail -= 1
            return True
        return False

    def times_checked(self, fault: int) -> int:
        """Return how many times ``fault`` has been checked."""
        return self._record(fault).times_checked

    def reset(self) -> None:
        """Disarm every fault and clear the check counters."""
        self._records = [_Record() for _ in self.fault_names]


_INET_FAULT_MANAGER = FaultManager(INET_FAULT_MANAGER_NAME, INET_FAULT_NAMES)


def get_manager() -> FaultManager:
    """Return the process-wide inet fault manager."""
    return _INET_FAULT_MANAGER