from artevo.evolution.breeding import BreedingEngine
from artevo.evolution.dna import DnaGenerator
from artevo.evolution.fitness import FitnessTracker
from artevo.evolution.parent_selector import ParentSelector, PopularityParentSelector

__all__ = [
    "BreedingEngine",
    "DnaGenerator",
    "FitnessTracker",
    "ParentSelector",
    "PopularityParentSelector",
]
