from __future__ import annotations

from abc import ABC, abstractmethod
import hashlib

from artevo.entropy.clock import TickClock

WORD_BYTES = 32


def integer_bytes(value: int) -> bytes:
    """Encode *value* as a signed big-endian word of at least 32 bytes.

    Negative values use two's complement; wider values grow to their minimal
    signed length so every integer has an encoding.
    """
    length = max(WORD_BYTES, (value.bit_length() + 8) // 8)
    return value.to_bytes(length, "big", signed=True)


def hash_words(*values: int | bytes) -> int:
    """SHA3-256 over the concatenated encodings, as an unsigned integer."""
    h = hashlib.sha3_256()
    for v in values:
        h.update(v if isinstance(v, bytes) else integer_bytes(v))
    return int.from_bytes(h.digest(), "big")


class EntropyProvider(ABC):
    """Abstract source of unpredictable-but-reproducible seed material."""

    @abstractmethod
    def fresh_entropy(self, discriminator: int) -> int:
        """Return a 256-bit value for the current tick and *discriminator*."""

    @abstractmethod
    def chain_state(self) -> int:
        """Secondary chain-state scalar used to decorrelate genomes."""


class HashChainEntropy(EntropyProvider):
    """Simulated block-hash chain keyed by a secret seed.

    ``block_hash(t)`` is a hash of the seed and the tick, so any historical
    value can be recomputed, while future values stay unknown without the seed.
    """

    def __init__(self, seed: bytes | str | int, clock: TickClock) -> None:
        if isinstance(seed, int):
            seed = integer_bytes(seed)
        elif isinstance(seed, str):
            seed = seed.encode("utf-8")
        if not seed:
            raise ValueError("Entropy seed must not be empty")
        self.seed = seed
        self.clock = clock

    def block_hash(self, tick: int) -> int:
        if tick < 0:
            # Parent of the first block is still keyed by the seed.
            return hash_words(self.seed, b"pre-genesis")
        return hash_words(self.seed, tick)

    def fresh_entropy(self, discriminator: int) -> int:
        tick = self.clock.current_tick()
        return hash_words(self.block_hash(tick - 1), tick, discriminator)

    def chain_state(self) -> int:
        tick = self.clock.current_tick()
        return hash_words(self.block_hash(tick), b"state") & 0xFFFFFFFFFFFFFFFF
