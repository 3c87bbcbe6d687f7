from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from artevo.artifacts.constants import DEFAULT_EVOLUTION_INTERVAL, DEFAULT_MAX_GENESIS
from artevo.evolution.breeding import BreedingEngine
from artevo.evolution.dna import DnaGenerator
from artevo.evolution.parent_selector import (
    ParentSelector,
    PopularityParentSelector,
)


class SchedulerConfig(BaseModel):
    """Configuration options controlling EvolutionScheduler behaviour."""

    evolution_interval: int = Field(
        default=DEFAULT_EVOLUTION_INTERVAL,
        gt=0,
        description="Ticks that must pass between two evolutions",
    )
    max_genesis: int = Field(
        default=DEFAULT_MAX_GENESIS,
        ge=2,
        description="Upper bound (and default) for genesis seeding",
    )
    parent_selector: ParentSelector = Field(
        default_factory=PopularityParentSelector
    )
    breeding_engine: BreedingEngine = Field(default_factory=BreedingEngine)
    dna_generator: DnaGenerator = Field(default_factory=DnaGenerator)
    model_config = ConfigDict(arbitrary_types_allowed=True)
