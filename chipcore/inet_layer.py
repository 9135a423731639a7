"""The inet layer's end point manager backed by a fixed-size pool."""

from __future__ import annotations

import enum
import logging
from typing import Callable, Generic, Iterator, TypeVar

from .errors import EndPointPoolFullError, IncorrectStateError
from .system_layer import SystemLayer

INET_CONFIG_NUM_TEST_ENDPOINTS = 8

_log = logging.getLogger(__name__)

T = TypeVar("T")


class Loop(enum.Enum):
    """Outcome of one step of, or a whole, iteration over end points."""

    CONTINUE = enum.auto()
    BREAK = enum.auto()
    FINISH = enum.auto()


class _LayerState(enum.Enum):
    UNINITIALIZED = enum.auto()
    INITIALIZED = enum.auto()


class EndPointManager(Generic[T]):
    """Creates end points from ``factory`` into a pool of ``capacity`` slots."""

    def __init__(
        self,
        factory: Callable[[EndPointManager[T]], T],
        capacity: int = INET_CONFIG_NUM_TEST_ENDPOINTS,
    ) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._factory = factory
        self.capacity = capacity
        self._slots: list[T | None] = [None] * capacity
        self._state = _LayerState.UNINITIALIZED
        self._system_layer: SystemLayer | None = None

    def init(self, system_layer: SystemLayer) -> None:
        """Bind the manager to an initialised system layer."""
        if self._state is not _LayerState.UNINITIALIZED:
            raise IncorrectStateError("end point manager already initialised")
        if not system_layer.is_initialized():
            raise IncorrectStateError("system layer is not initialised")
        self._system_layer = system_layer
        self._state = _LayerState.INITIALIZED
        _log.info("init inet layer")

    def shut_down(self) -> None:
        if self._state is _LayerState.INITIALIZED:
            self._state = _LayerState.UNINITIALIZED
        self._system_layer = None

    def system_layer(self) -> SystemLayer | None:
        return self._system_layer

    def new_end_point(self) -> T:
        """Create an end point; raise if uninitialised or the pool is full."""
        if self._state is not _LayerState.INITIALIZED:
            raise IncorrectStateError("end point manager is not initialised")
        for index, slot in enumerate(self._slots):
            if slot is None:
                end_point = self._factory(self)
                self._slots[index] = end_point
                return end_point
        raise EndPointPoolFullError()

    def release_end_point(self, end_point: T) -> None:
        """Return ``end_point``'s slot to the pool."""
        for index, slot in enumerate(self._slots):
            if slot is end_point:
                self._slots[index] = None
                return
        raise ValueError("end point does not belong to this manager")

    def delete_end_point(self, end_point: T) -> None:
        self.release_end_point(end_point)

    def _active(self) -> Iterator[T]:
        return iter([slot for slot in self._slots if slot is not None])

    def for_each_end_point(self, func: Callable[[T], Loop]) -> Loop:
        """Call ``func`` on each live end point until it returns ``Loop.BREAK``."""
        for end_point in self._active():
            if func(end_point) is Loop.BREAK:
                return Loop.BREAK
        return Loop.FINISH