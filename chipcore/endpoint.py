"""A test end point that lives in an inet end point manager's pool."""

from __future__ import annotations

import enum
from typing import Any, Callable, Optional

from .buffer_handle import PacketBufferHandle
from .errors import (
    InboundMessageTooBigError,
    IncorrectStateError,
    UnknownInterfaceError,
    WrongAddressTypeError,
)
from .fault_injection import InetFault, get_manager
from .inet_layer import INET_CONFIG_NUM_TEST_ENDPOINTS, EndPointManager
from .ip_address import InterfaceId, IPAddress, IPAddressType, IPPacketInfo
from .system_layer import SystemLayer

OnMessageReceived = Callable[["EndPoint", PacketBufferHandle, IPPacketInfo], None]
OnReceiveError = Callable[["EndPoint", Exception, IPPacketInfo], None]
SendHandler = Callable[[IPPacketInfo, PacketBufferHandle], Any]


class EndPointState(enum.Enum):
    READY = enum.auto()
    BOUND = enum.auto()
    LISTENING = enum.auto()
    CLOSED = enum.auto()


class EndPoint:
    """An end point that records bindings and hands messages to callbacks.

    It starts with one reference; when the last reference is released the
    end point gives its slot back to its manager.
    """

    NAME = "TEST"
    NUM_END_POINTS = INET_CONFIG_NUM_TEST_ENDPOINTS
    SYSTEM_STATE_KEY = 0

    def __init__(self, manager: EndPointManager[EndPoint]) -> None:
        self.manager = manager
        self.app_state: Any = None
        self._state = EndPointState.READY
        self._on_message_received: Optional[OnMessageReceived] = None
        self._on_receive_error: Optional[OnReceiveError] = None
        self._bound_port = 0
        self._bound_interface: Optional[InterfaceId] = None
        self._count = 1
        self._send_handler: Optional[SendHandler] = None

    @property
    def state(self) -> EndPointState:
        return self._state

    @property
    def bound_interface(self) -> Optional[InterfaceId]:
        return self._bound_interface

    def bind(
        self,
        addr_type: IPAddressType,
        addr: IPAddress,
        port: int,
        interface: Optional[InterfaceId] = None,
    ) -> None:
        """Bind to ``addr``:``port``; the address must match ``addr_type``."""
        if get_manager().check_fault(InetFault.BIND):
            raise IncorrectStateError("injected bind fault")
        if self._state not in (EndPointState.READY, EndPointState.BOUND):
            raise IncorrectStateError("end point cannot be bound in its state")
        if (
            addr != IPAddress.ANY
            and addr.ip_type() is not IPAddressType.ANY
            and addr.ip_type() is not addr_type
        ):
            raise WrongAddressTypeError()
        self._state = EndPointState.BOUND
        self._bound_port = port
        self._bound_interface = interface

    def bound_port(self) -> int:
        return self._bound_port

    def listen(
        self,
        on_message_received: Optional[OnMessageReceived] = None,
        on_receive_error: Optional[OnReceiveError] = None,
        app_state: Any = None,
    ) -> None:
        """Start listening; the end point must already be bound."""
        if get_manager().check_fault(InetFault.LISTEN):
            raise IncorrectStateError("injected listen fault")
        if self._state is EndPointState.LISTENING:
            return
        if self._state is not EndPointState.BOUND:
            raise IncorrectStateError("end point must be bound before listening")
        self._on_message_received = on_message_received
        self._on_receive_error = on_receive_error
        self.app_state = app_state
        self._state = EndPointState.LISTENING

    def send_to(
        self,
        addr: IPAddress,
        port: int,
        msg: PacketBufferHandle,
        interface: Optional[InterfaceId] = None,
    ) -> Any:
        """Send ``msg`` to ``addr``:``port``."""
        pkt_info = IPPacketInfo(dest_address=addr, dest_port=port, interface=interface)
        return self.send_msg(pkt_info, msg)

    def send_msg(self, pkt_info: IPPacketInfo, msg: PacketBufferHandle) -> Any:
        """Hand ``msg`` to the send handler, or drop it if there is none."""
        if get_manager().check_fault(InetFault.SEND):
            msg.free()
            raise UnknownInterfaceError()
        if self._send_handler is not None:
            return self._send_handler(pkt_info, msg)
        msg.free()
        return None

    def close(self) -> None:
        if self._state is not EndPointState.CLOSED:
            self._state = EndPointState.CLOSED

    def free(self) -> None:
        """Close the end point and drop one reference to it."""
        self.close()
        self.release()

    def deliver(self, pkt_info: IPPacketInfo, msg: PacketBufferHandle) -> None:
        """Pass an inbound message to the receive callback, or report an error."""
        if self._on_message_received is not None:
            self._on_message_received(self, msg, pkt_info)
            return
        msg.free()
        if self._on_receive_error is not None:
            self._on_receive_error(self, InboundMessageTooBigError(), pkt_info)

    def set_send_handler(self, handler: Optional[SendHandler]) -> None:
        self._send_handler = handler

    def system_layer(self) -> Optional[SystemLayer]:
        return self.manager.system_layer()

    def retain(self) -> int:
        """Add a reference; return the new count."""
        self._count += 1
        return self._count

    def release(self) -> int:
        """Drop a reference; at zero the end point leaves its manager."""
        if self._count <= 0:
            raise IncorrectStateError("end point is already released")
        self._count -= 1
        if self._count == 0:
            self.manager.delete_end_point(self)
        return self._count

    def reference_count(self) -> int:
        return self._count


def create_manager() -> EndPointManager[EndPoint]:
    """Return an uninitialised manager with room for the test end points."""
    return EndPointManager(EndPoint, INET_CONFIG_NUM_TEST_ENDPOINTS)