"""The system layer and its process-wide instance."""

from __future__ import annotations

import enum

from .errors import IncorrectStateError


class _LifeCycle(enum.Enum):
    UNINITIALIZED = enum.auto()
    INITIALIZING = enum.auto()
    INITIALIZED = enum.auto()


class SystemLayer:
    """Tracks whether the system layer has been brought up."""

    def __init__(self) -> None:
        self._state = _LifeCycle.UNINITIALIZED

    def init(self) -> None:
        """Initialise the layer; raises IncorrectStateError if already up."""
        if self._state is not _LifeCycle.UNINITIALIZED:
            raise IncorrectStateError("system layer already initialised")
        self._state = _LifeCycle.INITIALIZING
        self._state = _LifeCycle.INITIALIZED

    def shutdown(self) -> None:
        if self._state is _LifeCycle.INITIALIZED:
            self._state = _LifeCycle.UNINITIALIZED

    def is_initialized(self) -> bool:
        return self._state is _LifeCycle.INITIALIZED


_GLOBAL_SYSTEM_LAYER = SystemLayer()


def system_layer() -> SystemLayer:
    """Return the process-wide system layer."""
    return _GLOBAL_SYSTEM_LAYER