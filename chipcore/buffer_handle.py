"""Owning handles over chains of pooled packet buffers."""

from __future__ import annotations

from .errors import IncorrectStateError
from .packet_buffer import BufferPool, PacketBuffer, default_pool


class PacketBufferHandle:
    """Holds one reference to the head of a packet buffer chain.

    A handle frees its reference when :meth:`free` is called or when it is
    used as a context manager and the block ends.
    """

    def __init__(self, buffer: PacketBuffer | None = None) -> None:
        self._buffer = buffer

    @classmethod
    def new(
        cls,
        available_size: int,
        reserved_size: int,
        pool: BufferPool | None = None,
    ) -> PacketBufferHandle | None:
        """Allocate a buffer; None if the sizes are too large or the pool is empty."""
        pool = pool if pool is not None else default_pool()
        buffer = pool.allocate(available_size, reserved_size)
        if buffer is None:
            return None
        return cls(buffer)

    @classmethod
    def new_with_default_header(
        cls, available_size: int, pool: BufferPool | None = None
    ) -> PacketBufferHandle | None:
        """Allocate a buffer with the default header reserve."""
        return cls.new(available_size, PacketBuffer.DEFAULT_HEADER_RESERVE, pool)

    @classmethod
    def new_with_data(
        cls,
        data: bytes,
        additional_size: int = 0,
        reserved_size: int = PacketBuffer.DEFAULT_HEADER_RESERVE,
        pool: BufferPool | None = None,
    ) -> PacketBufferHandle | None:
        """Allocate a buffer and fill it with ``data``."""
        handle = cls.new(len(data) + additional_size, reserved_size, pool)
        if handle is not None:
            handle._require().set_data(bytes(data))
        return handle

    def _require(self) -> PacketBuffer:
        if self._buffer is None:
            raise IncorrectStateError("packet buffer handle is empty")
        return self._buffer

    def is_null(self) -> bool:
        return self._buffer is None

    def buffer(self) -> PacketBuffer | None:
        """Return the head buffer without giving up ownership."""
        return self._buffer

    def retain(self) -> PacketBufferHandle:
        """Return a second handle sharing the same chain."""
        buffer = self._require()
        buffer.add_ref()
        return PacketBufferHandle(buffer)

    def pop_head(self) -> PacketBufferHandle:
        """Detach the head buffer into its own handle; keep the rest here."""
        head = self._require()
        self._buffer = head.next
        head.next = None
        head.total_length = head.length
        return PacketBufferHandle(head)

    def free_head(self) -> None:
        """Free the head buffer and keep the rest of the chain."""
        self._buffer = self._require().free_head()

    def add_to_end(self, other: PacketBufferHandle) -> None:
        """Take over ``other``'s chain and append it to this one."""
        if self._buffer is None:
            self._buffer = other.release()
            return
        packet = other.release()
        if packet is not None:
            self._buffer.add_to_end(packet)

    def release(self) -> PacketBuffer | None:
        """Give up ownership of the chain and return its head."""
        buffer = self._buffer
        self._buffer = None
        return buffer

    def consume(self, length: int) -> None:
        """Drop ``length`` bytes from the front of the chain."""
        self._buffer = self._require().consume(length)

    def advance(self) -> None:
        """Move to the next buffer in the chain, freeing the current head."""
        current = self._require()
        following = current.next
        if following is not None:
            following.add_ref()
        self._buffer = following
        current.free()

    def has_chained_buffer(self) -> bool:
        return self._require().has_chained_buffer()

    def clone(self) -> PacketBufferHandle:
        """Deep-copy the chain into freshly allocated buffers.

        Returns an empty handle if any buffer cannot be allocated.
        """
        clone_head = PacketBufferHandle()
        original = self._buffer
        while original is not None:
            data_size = original.max_data_length()
            reserved = original.reserved_size()
            if data_size + reserved > PacketBuffer.MAX_ALLOC_SIZE:
                if reserved + original.data_len() > PacketBuffer.MAX_ALLOC_SIZE:
                    clone_head.free()
                    return PacketBufferHandle()
                data_size = PacketBuffer.MAX_ALLOC_SIZE - reserved
            copy = PacketBufferHandle.new(data_size, reserved, original.pool)
            if copy is None:
                clone_head.free()
                return PacketBufferHandle()
            target = copy._require()
            target.length = original.length
            target.total_length = original.length
            target.block[:] = original.block
            clone_head.add_to_end(copy)
            original = original.next
        return clone_head

    def free(self) -> None:
        """Drop this handle's reference to the chain."""
        if self._buffer is not None:
            self._buffer.free()
        self._buffer = None

    def __enter__(self) -> PacketBufferHandle:
        return self

    def __exit__(self, *args: object) -> None:
        self.free()