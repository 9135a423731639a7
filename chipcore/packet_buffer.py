"""Fixed-size packet buffers drawn from a shared pool."""

from __future__ import annotations

from typing import ClassVar

PACKETBUFFER_CAPACITY_MAX = 256
PACKETBUFFER_POOL_SIZE = 15
HEADER_RESERVE_SIZE = 26 + 12
MAX_LARGE_BUFFER_SIZE_BYTES = 2048

_U32_MAX = 0xFFFFFFFF
# Bytes taken by the bookkeeping header that precedes each buffer's data area.
_HEADER_BYTES = 32


def align_size(value: int, alignment: int) -> int:
    """Round ``value`` up to a multiple of ``alignment`` (a power of two)."""
    if alignment <= 0 or alignment & (alignment - 1):
        raise ValueError("alignment must be a positive power of two")
    return (value + alignment - 1) & ~(alignment - 1)


class PacketBuffer:
    """One buffer of a pool: a reserved header area followed by payload data.

    ``start`` is the payload offset from the beginning of the reserve area,
    ``length`` is the payload size of this buffer and ``total_length`` is the
    payload size of this buffer and every buffer chained after it.
    """

    STRUCTURE_SIZE: ClassVar[int] = align_size(_HEADER_BYTES, 4)
    MAX_SIZE_WITHOUT_RESERVE: ClassVar[int] = PACKETBUFFER_CAPACITY_MAX
    BLOCK_SIZE: ClassVar[int] = STRUCTURE_SIZE + PACKETBUFFER_CAPACITY_MAX
    DEFAULT_HEADER_RESERVE: ClassVar[int] = HEADER_RESERVE_SIZE
    MAX_ALLOC_SIZE: ClassVar[int] = PACKETBUFFER_CAPACITY_MAX
    MAX_SIZE: ClassVar[int] = PACKETBUFFER_CAPACITY_MAX - HEADER_RESERVE_SIZE
    LARGE_BUFFER_MAX_SIZE_WITHOUT_RESERVE: ClassVar[int] = MAX_LARGE_BUFFER_SIZE_BYTES
    LARGE_BUF_MAX_SIZE: ClassVar[int] = MAX_LARGE_BUFFER_SIZE_BYTES - HEADER_RESERVE_SIZE

    def __init__(self, pool: BufferPool) -> None:
        self.pool = pool
        self.block = bytearray(self.MAX_SIZE_WITHOUT_RESERVE)
        self.start = 0
        self.length = 0
        self.total_length = 0
        self.next: PacketBuffer | None = None
        self.ref_count = 0

    def alloc_size(self) -> int:
        return self.MAX_SIZE_WITHOUT_RESERVE

    def max_data_length(self) -> int:
        return self.alloc_size() - self.reserved_size()

    def reserved_size(self) -> int:
        return self.start

    def data(self) -> bytes:
        """Return this buffer's payload bytes."""
        return bytes(self.block[self.start : self.start + self.length])

    def data_len(self) -> int:
        return self.length

    def set_data(self, data: bytes) -> None:
        """Replace the payload with ``data``."""
        size = len(data)
        if size > self.max_data_length():
            raise ValueError("data does not fit in the buffer")
        self.block[self.start : self.start + size] = data
        self.length = size
        self.total_length = size

    def clear(self) -> None:
        self.length = 0
        self.total_length = 0

    def add_ref(self) -> None:
        self.ref_count += 1

    def free(self) -> None:
        """Drop one reference along the chain, returning unreferenced buffers."""
        packet: PacketBuffer | None = self
        while packet is not None:
            if packet.ref_count <= 0:
                raise ValueError("buffer is not referenced")
            following = packet.next
            packet.ref_count -= 1
            if packet.ref_count != 0:
                break
            packet.pool.release(packet)
            packet = following

    def free_head(self) -> PacketBuffer | None:
        """Detach and free this buffer; return the buffer that followed it."""
        following = self.next
        self.next = None
        self.free()
        return following

    def consume_head(self, length: int) -> None:
        """Drop up to ``length`` bytes from the front of this buffer."""
        length = min(max(length, 0), self.length)
        self.start += length
        self.length -= length
        self.total_length -= length

    def consume(self, length: int) -> PacketBuffer | None:
        """Drop ``length`` bytes from the chain; return the new head."""
        packet: PacketBuffer | None = self
        while packet is not None and length > 0:
            size = packet.length
            if length >= size:
                packet = packet.free_head()
                length -= size
            else:
                packet.consume_head(length)
                break
        return packet

    def has_chained_buffer(self) -> bool:
        return self.next is not None

    def add_to_end(self, other: PacketBuffer) -> None:
        """Append ``other`` (and its chain) to the end of this chain."""
        cursor: PacketBuffer | None = self
        while cursor is not None:
            cursor.total_length += other.total_length
            if cursor.next is None:
                cursor.next = other
                break
            cursor = cursor.next

    def set_start(self, offset: int) -> None:
        """Move the payload start to ``offset`` within the reserve area."""
        offset = min(max(offset, 0), self.alloc_size())
        delta = offset - self.start
        if delta > 0 and self.length < delta:
            delta = self.length
        self.length -= delta
        self.total_length -= delta
        self.start = offset

    def ensure_reserved_size(self, reserved_size: int) -> bool:
        """Make room for ``reserved_size`` header bytes, moving data if needed."""
        current = self.reserved_size()
        if reserved_size <= current:
            return True
        if reserved_size + self.length > self.alloc_size():
            return False
        shift = reserved_size - current
        payload = self.block[self.start : self.start + self.length]
        self.start += shift
        self.block[self.start : self.start + self.length] = payload
        return True


class BufferPool:
    """A fixed number of packet buffers handed out from a free list."""

    def __init__(self, size: int = PACKETBUFFER_POOL_SIZE) -> None:
        if size < 0:
            raise ValueError("pool size must not be negative")
        self.size = size
        self._free: list[PacketBuffer] = []
        self.reset()

    def allocate(self, available_size: int, reserved_size: int) -> PacketBuffer | None:
        """Take a buffer with the given room; None if too large or none is free."""
        if available_size < 0 or reserved_size < 0:
            raise ValueError("sizes must not be negative")
        if available_size + reserved_size + PacketBuffer.STRUCTURE_SIZE > _U32_MAX:
            return None
        if available_size + reserved_size > PacketBuffer.MAX_ALLOC_SIZE:
            return None
        if not self._free:
            return None
        buffer = self._free.pop()
        buffer.start = reserved_size
        buffer.length = 0
        buffer.total_length = 0
        buffer.next = None
        buffer.ref_count = 1
        return buffer

    def release(self, buffer: PacketBuffer) -> None:
        """Return ``buffer`` to the free list."""
        if buffer.pool is not self:
            raise ValueError("buffer belongs to another pool")
        if any(free is buffer for free in self._free):
            raise ValueError("buffer is already free")
        buffer.clear()
        buffer.next = None
        buffer.ref_count = 0
        self._free.append(buffer)

    def free_count(self) -> int:
        return len(self._free)

    def reset(self) -> None:
        """Discard every buffer and start again with a full, zeroed pool."""
        self._free = [PacketBuffer(self) for _ in range(self.size)]


_DEFAULT_POOL = BufferPool(PACKETBUFFER_POOL_SIZE)


def default_pool() -> BufferPool:
    """Return the process-wide buffer pool."""
    return _DEFAULT_POOL