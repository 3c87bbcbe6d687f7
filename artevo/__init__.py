"""Deterministic generative-art evolution engine."""

from artevo.artifacts import Artifact, VisualProperties, derive_properties
from artevo.entropy import EntropyProvider, HashChainEntropy, ManualClock, TickClock
from artevo.events import (
    ArtifactCreated,
    CollectingEventSink,
    EventSink,
    EvolutionTriggered,
    Interaction,
    LoggingEventSink,
)
from artevo.evolution.scheduler import (
    EvolutionScheduler,
    SchedulerConfig,
    SchedulerState,
)
from artevo.registry import ArtifactRegistry

__version__ = "0.1.0"

__all__ = [
    "Artifact",
    "ArtifactCreated",
    "ArtifactRegistry",
    "CollectingEventSink",
    "EntropyProvider",
    "EventSink",
    "EvolutionScheduler",
    "EvolutionTriggered",
    "HashChainEntropy",
    "Interaction",
    "LoggingEventSink",
    "ManualClock",
    "SchedulerConfig",
    "SchedulerState",
    "TickClock",
    "VisualProperties",
    "derive_properties",
]
