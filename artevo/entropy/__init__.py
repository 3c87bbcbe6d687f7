from artevo.entropy.clock import ManualClock, TickClock
from artevo.entropy.provider import (
    EntropyProvider,
    HashChainEntropy,
    hash_words,
    integer_bytes,
)

__all__ = [
    "EntropyProvider",
    "HashChainEntropy",
    "ManualClock",
    "TickClock",
    "hash_words",
    "integer_bytes",
]
