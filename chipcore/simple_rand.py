"""A small deterministic xorshift random number generator."""

from __future__ import annotations

_MASK32 = 0xFFFFFFFF
DEFAULT_SEED = 1234321


class SimpleRng:
    """Xorshift32 generator; not suitable for real cryptography."""

    def __init__(self, seed: int = DEFAULT_SEED) -> None:
        if seed == 0:
            raise ValueError("seed must be nonzero")
        if not 0 < seed <= _MASK32:
            raise ValueError("seed must fit in 32 bits")
        self._state = seed

    @classmethod
    def from_seed(cls, seed: bytes) -> SimpleRng:
        """Build a generator from four little-endian seed bytes."""
        if len(seed) != 4:
            raise ValueError("seed must be exactly 4 bytes")
        return cls(int.from_bytes(seed, "little"))

    def next_u32(self) -> int:
        state = self._state
        state ^= (state << 13) & _MASK32
        state ^= state >> 17
        state ^= (state << 5) & _MASK32
        self._state = state
        return state

    def next_u64(self) -> int:
        high = self.next_u32()
        low = self.next_u32()
        return (high << 32) | low

    def fill_bytes(self, size: int) -> bytes:
        """Return ``size`` random bytes, four at a time in little-endian order."""
        if size < 0:
            raise ValueError("size must not be negative")
        out = bytearray()
        while len(out) < size:
            out += self.next_u32().to_bytes(4, "little")
        return bytes(out[:size])