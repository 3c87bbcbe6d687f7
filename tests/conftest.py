"""Pytest fixtures for ArtEvo tests."""

import pytest

from artevo.entropy import HashChainEntropy, ManualClock
from artevo.events import CollectingEventSink
from artevo.evolution.scheduler import EvolutionScheduler, SchedulerConfig
from artevo.registry import ArtifactRegistry


@pytest.fixture
def clock() -> ManualClock:
    return ManualClock(start=0)


@pytest.fixture
def entropy(clock: ManualClock) -> HashChainEntropy:
    return HashChainEntropy(seed=b"artevo-tests", clock=clock)


@pytest.fixture
def registry() -> ArtifactRegistry:
    return ArtifactRegistry()


@pytest.fixture
def sink() -> CollectingEventSink:
    return CollectingEventSink()


@pytest.fixture
def scheduler(
    registry: ArtifactRegistry,
    entropy: HashChainEntropy,
    clock: ManualClock,
    sink: CollectingEventSink,
) -> EvolutionScheduler:
    """Unseeded scheduler with interval 100 and up to 10 genesis artifacts."""
    return EvolutionScheduler(
        registry=registry,
        entropy=entropy,
        clock=clock,
        config=SchedulerConfig(evolution_interval=100, max_genesis=10),
        event_sink=sink,
    )


@pytest.fixture
def seeded(scheduler: EvolutionScheduler, sink: CollectingEventSink) -> EvolutionScheduler:
    """Scheduler with 10 genesis artifacts seeded at tick 0 and events cleared."""
    scheduler.seed_genesis(10)
    sink.clear()
    return scheduler
