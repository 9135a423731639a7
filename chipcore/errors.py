"""Error types raised by the chip layers."""

from __future__ import annotations


class ChipError(Exception):
    """Base class for every error reported by the chip layers."""

    code: int | None = None
    description: str = "chip error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message if message is not None else self.description
        super().__init__(self.message)


class IncorrectStateError(ChipError):
    """An operation was attempted in a state that does not allow it."""

    description = "incorrect state"


class EndPointPoolFullError(ChipError):
    """No free slot is left in an end point pool."""

    description = "end point pool full"


class InboundMessageTooBigError(ChipError):
    """An inbound message could not be accepted because of its size."""

    description = "inbound message too big"


class InetError(ChipError):
    """Base class for errors of the inet layer."""

    description = "inet error"


class WrongAddressTypeError(InetError):
    """An address does not match the requested address type."""

    code = 0x01
    description = "wrong address type"


class UnknownInterfaceError(InetError):
    """A network interface could not be resolved."""

    code = 0x0E
    description = "unknown interface"