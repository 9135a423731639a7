"""Protocol identifiers."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import ClassVar


class VendorId(enum.IntEnum):
    """Vendor identifiers used to scope protocols."""

    COMMON = 0x0000
    NOT_SPECIFIED = 0xFFFF


@dataclass(frozen=True)
class ProtocolId:
    """A protocol identified by vendor and protocol number."""

    vendor_id: VendorId
    protocol_id: int

    VENDOR_ID_SHIFT: ClassVar[int] = 16

    @classmethod
    def not_specified(cls) -> ProtocolId:
        return cls(VendorId.NOT_SPECIFIED, 0xFFFF)


SECURE_CHANNEL = ProtocolId(VendorId.COMMON, 0x0000)
INTERACTION_MODEL = ProtocolId(VendorId.COMMON, 0x0001)
BDX = ProtocolId(VendorId.COMMON, 0x0002)
USER_DIRECTED_COMMISSIONING = ProtocolId(VendorId.COMMON, 0x0003)
ECHO = ProtocolId(VendorId.COMMON, 0x0004)

NOT_SPECIFIED = ProtocolId.not_specified()