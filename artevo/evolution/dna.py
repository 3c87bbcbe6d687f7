"""Genome derivation from entropy."""

from __future__ import annotations

from artevo.artifacts.constants import GENOME_MODULUS
from artevo.entropy.provider import hash_words

__all__ = ["DnaGenerator"]


class DnaGenerator:
    """Derive bounded genomes from seed material.

    ``generate`` is a pure function of its arguments: the same seed,
    discriminator, tick and chain state always give the same genome.
    """

    def __init__(self, modulus: int = GENOME_MODULUS) -> None:
        if modulus <= 0:
            raise ValueError("Genome modulus must be positive")
        self.modulus = modulus

    def generate(
        self, seed: int, discriminator: int, tick: int, chain_state: int
    ) -> int:
        return hash_words(seed, discriminator, tick, chain_state) % self.modulus
