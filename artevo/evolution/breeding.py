"""Offspring genome arithmetic: crossover followed by occasional mutation."""

from __future__ import annotations

from loguru import logger

from artevo.artifacts.constants import (
    MUTATION_CHANCE_PERCENT,
    MUTATION_FACTOR_BASE,
    MUTATION_FACTOR_SCALE,
    MUTATION_FACTOR_SPAN,
    MUTATION_ROLL_SCALE,
    RANDOM_FACTOR_SCALE,
)

__all__ = ["BreedingEngine"]


class BreedingEngine:
    """Combine two parent genomes and optionally mutate the result.

    Crossover averages the parents and scales the average up by
    ``random_factor / 1000`` (0 to 99.9%), which gives every lineage an upward
    drift. Mutation fires on a 10% roll and rescales by 0.900x to 1.099x.
    Neither step clamps the result back into the genesis genome range.
    """

    def __init__(
        self,
        mutation_chance_percent: int = MUTATION_CHANCE_PERCENT,
        mutation_factor_base: int = MUTATION_FACTOR_BASE,
        mutation_factor_span: int = MUTATION_FACTOR_SPAN,
    ) -> None:
        if not 0 <= mutation_chance_percent <= MUTATION_ROLL_SCALE:
            raise ValueError(
                f"mutation_chance_percent must be in [0, {MUTATION_ROLL_SCALE}]"
            )
        if mutation_factor_span <= 0:
            raise ValueError("mutation_factor_span must be positive")
        self.mutation_chance_percent = mutation_chance_percent
        self.mutation_factor_base = mutation_factor_base
        self.mutation_factor_span = mutation_factor_span

    def breed(self, genome_a: int, genome_b: int, fresh_entropy: int) -> int:
        if genome_a < 0 or genome_b < 0:
            raise ValueError("Parent genomes must be non-negative")
        combined = (genome_a + genome_b) // 2
        random_factor = fresh_entropy % RANDOM_FACTOR_SCALE
        return combined * (RANDOM_FACTOR_SCALE + random_factor) // RANDOM_FACTOR_SCALE

    def would_mutate(self, entropy_for_mutation: int) -> bool:
        return entropy_for_mutation % MUTATION_ROLL_SCALE < self.mutation_chance_percent

    def mutation_factor(self, clock_value: int) -> int:
        return clock_value % self.mutation_factor_span + self.mutation_factor_base

    def mutate(self, genome: int, entropy_for_mutation: int, clock_value: int) -> int:
        if genome < 0:
            raise ValueError("Genome must be non-negative")
        if not self.would_mutate(entropy_for_mutation):
            return genome
        factor = self.mutation_factor(clock_value)
        mutated = genome * factor // MUTATION_FACTOR_SCALE
        logger.debug(
            "[BreedingEngine] Mutation | factor={}, genome {} -> {}",
            factor,
            genome,
            mutated,
        )
        return mutated
