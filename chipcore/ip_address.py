"""IP addresses, interfaces and packet metadata."""

from __future__ import annotations

import enum
import sys
from dataclasses import dataclass, field
from typing import ClassVar

_MASK32 = 0xFFFFFFFF
# Third word of an IPv4-mapped IPv6 address, as stored in host byte order.
_V4_MAPPED_WORD = int.from_bytes(b"\x00\x00\xff\xff", sys.byteorder)


class IPAddressType(enum.Enum):
    UNKNOWN = 0
    IPV4 = 1
    IPV6 = 2
    ANY = 3


@dataclass(frozen=True)
class IPAddress:
    """An address held as four 32-bit words."""

    addr: tuple[int, int, int, int] = (0, 0, 0, 0)

    ANY: ClassVar[IPAddress]
    ANY_IPV4: ClassVar[IPAddress]

    def __post_init__(self) -> None:
        words = tuple(self.addr)
        if len(words) != 4 or any(not 0 <= w <= _MASK32 for w in words):
            raise ValueError("an address is four 32-bit words")
        object.__setattr__(self, "addr", words)

    def ip_type(self) -> IPAddressType:
        if self.addr == IPAddress.ANY.addr:
            return IPAddressType.ANY
        first, second, third, _ = self.addr
        if first == 0 and second == 0 and third == _V4_MAPPED_WORD:
            return IPAddressType.IPV4
        return IPAddressType.IPV6

    def __str__(self) -> str:
        return "IPAddress ( {}.{}.{}.{} )".format(*self.addr)


IPAddress.ANY = IPAddress((0, 0, 0, 0))
IPAddress.ANY_IPV4 = IPAddress((0, 0, _V4_MAPPED_WORD, 0))


class InterfaceType(enum.Enum):
    UNKNOWN = enum.auto()
    WIFI = enum.auto()
    ETHERNET = enum.auto()
    CELLULAR = enum.auto()
    THREAD = enum.auto()


@dataclass(frozen=True)
class InterfaceId:
    """Identifies a network interface."""

    MAX_IF_NAME_LENGTH: ClassVar[int] = 13

    def __str__(self) -> str:
        return "InterfaceId: default"


@dataclass
class IPPacketInfo:
    """Addressing information that travels with a packet."""

    src_address: IPAddress = field(default_factory=lambda: IPAddress.ANY)
    dest_address: IPAddress = field(default_factory=lambda: IPAddress.ANY)
    interface: InterfaceId | None = None
    src_port: int = 0
    dest_port: int = 0

    def clear(self) -> None:
        self.src_address = IPAddress.ANY
        self.dest_address = IPAddress.ANY
        self.interface = None
        self.src_port = 0
        self.dest_port = 0