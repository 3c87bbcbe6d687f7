from __future__ import annotations

from collections import deque
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Iterator

from loguru import logger

from artevo.artifacts.artifact import Artifact
from artevo.artifacts.properties import VisualProperties, derive_properties
from artevo.entropy.clock import TickClock
from artevo.entropy.provider import EntropyProvider
from artevo.events import (
    ArtifactCreated,
    Event,
    EventSink,
    EvolutionTriggered,
    Interaction,
    LoggingEventSink,
)
from artevo.evolution.fitness import FitnessTracker
from artevo.evolution.scheduler.config import SchedulerConfig
from artevo.evolution.scheduler.metrics import SchedulerMetrics
from artevo.evolution.scheduler.state import SchedulerState, state_for
from artevo.exceptions import (
    ArtifactNotFoundError,
    CadenceNotReachedError,
    GenesisAlreadySeededError,
    InsufficientPopulationError,
)
from artevo.registry.artifact_registry import ArtifactRegistry

__all__ = ["EvolutionScheduler"]


class EvolutionScheduler:
    """
    Generation lifecycle on top of an ArtifactRegistry:
    - Every mutating call runs inside one registry write section and either
      commits completely or leaves no trace.
    - Events are buffered during the write section and published, in commit
      order, once the outermost operation has committed. A failing sink is
      logged and never undoes a committed operation.
    - ``interact`` chains into ``evolve`` when the cadence is due, so a single
      interaction can give birth to the next generation.
    """

    def __init__(
        self,
        registry: ArtifactRegistry,
        entropy: EntropyProvider,
        clock: TickClock,
        config: SchedulerConfig | None = None,
        event_sink: EventSink | None = None,
    ):
        self.registry = registry
        self.entropy = entropy
        self.clock = clock
        self.config = config or SchedulerConfig()
        self.event_sink = event_sink or LoggingEventSink(level="DEBUG")

        self.fitness = FitnessTracker(registry)
        self.metrics = SchedulerMetrics()

        self._depth = 0
        self._pending: list[Event] = []

        logger.info(
            "[EvolutionScheduler] Init | interval={}, max_genesis={}, selector={}",
            self.config.evolution_interval,
            self.config.max_genesis,
            type(self.config.parent_selector).__name__,
        )

    # ------------------------------------------------------------------
    # Mutating operations
    # ------------------------------------------------------------------

    def seed_genesis(
        self, count: int | None = None, entropy: EntropyProvider | None = None
    ) -> list[int]:
        """Create the genesis cohort. Allowed exactly once per registry."""
        count = self.config.max_genesis if count is None else count
        if not 1 <= count <= self.config.max_genesis:
            raise ValueError(
                f"Genesis count must be in [1, {self.config.max_genesis}], got {count}"
            )
        entropy = entropy or self.entropy

        with self._transaction():
            if self.registry.genesis_seeded or self.registry.total_supply:
                raise GenesisAlreadySeededError("Genesis has already been seeded")

            tick = self.clock.current_tick()
            chain_state = entropy.chain_state()
            dna = self.config.dna_generator

            cohort = []
            for artifact_id in range(1, count + 1):
                genome = dna.generate(
                    entropy.fresh_entropy(artifact_id), artifact_id, tick, chain_state
                )
                cohort.append(Artifact.create_genesis(artifact_id, genome, tick))

            for artifact in cohort:
                self.registry.insert(artifact)
                self._emit(
                    ArtifactCreated(
                        tick=tick,
                        artifact_id=artifact.id,
                        generation=0,
                        genome=artifact.genome,
                    )
                )
            self.registry.mark_genesis(tick)

        logger.info("[EvolutionScheduler] Genesis seeded | count={}, tick={}", count, tick)
        return [a.id for a in cohort]

    def interact(self, artifact_id: int) -> None:
        """Record an interaction and evolve right away if the cadence is due."""
        with self._transaction():
            tick = self.clock.current_tick()
            if not self.registry.exists(artifact_id):
                raise ArtifactNotFoundError(artifact_id)

            due = self._is_due(tick)
            if due:
                # Chained evolution must not fail after the counter moved.
                self._check_population()

            count = self.registry.increment_interactions(artifact_id)
            self.metrics.interactions += 1
            self._emit(
                Interaction(tick=tick, artifact_id=artifact_id, interaction_count=count)
            )

            if due:
                try:
                    self._evolve(tick, auto=True)
                except Exception:
                    # Undo the increment so a failed chain commits nothing.
                    self.registry.revert_interaction(artifact_id)
                    self.metrics.interactions -= 1
                    raise

    def evolve(self) -> int:
        """Breed a new artifact from the two most popular ones."""
        with self._transaction():
            return self._evolve(self.clock.current_tick(), auto=False)

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def can_evolve(self) -> bool:
        with self.registry.reading():
            return self._is_due(self.clock.current_tick())

    @property
    def state(self) -> SchedulerState:
        with self.registry.reading():
            return state_for(
                self.clock.current_tick(),
                self.registry.last_evolution_tick,
                self.config.evolution_interval,
            )

    @property
    def current_generation(self) -> int:
        return self.registry.current_generation

    def ticks_until_due(self) -> int:
        with self.registry.reading():
            due_tick = self._due_tick()
            return max(0, due_tick - self.clock.current_tick())

    def get_artifact(self, artifact_id: int) -> Artifact:
        return self.registry.get(artifact_id)

    def get_properties(self, artifact_id: int) -> VisualProperties:
        return derive_properties(self.registry.get(artifact_id).genome)

    def lineage(self, artifact_id: int) -> list[int]:
        """Ancestor ids of *artifact_id*, nearest first, each listed once."""
        with self.registry.reading():
            seen: set[int] = set()
            order: list[int] = []
            queue = deque(p for p in self.registry.get(artifact_id).parents if p)
            while queue:
                ancestor = queue.popleft()
                if ancestor in seen:
                    continue
                seen.add(ancestor)
                order.append(ancestor)
                queue.extend(p for p in self.registry.get(ancestor).parents if p)
            return order

    def children_of(self, artifact_id: int) -> list[int]:
        return self.registry.children_of(artifact_id)

    def get_status(self) -> dict[str, object]:
        """Light status snapshot for UIs/health checks."""
        with self.registry.reading():
            return {
                "state": self.state.value,
                "tick": self.clock.current_tick(),
                "total_supply": self.registry.total_supply,
                "current_generation": self.registry.current_generation,
                "last_evolution_tick": self.registry.last_evolution_tick,
                "ticks_until_due": self.ticks_until_due(),
                **self.metrics.to_dict(),
            }

    # ------------------------------------------------------------------
    # Internals (write section held)
    # ------------------------------------------------------------------

    def _evolve(self, tick: int, *, auto: bool) -> int:
        if not self._is_due(tick):
            self.metrics.cadence_rejections += 1
            raise CadenceNotReachedError(tick, self._due_tick())
        self._check_population()

        parent_a_id, parent_b_id = self.config.parent_selector.select_parents(
            self.fitness
        )
        parent_a = self.registry.get(parent_a_id)
        parent_b = self.registry.get(parent_b_id)
        new_id = self.registry.next_id()
        breeder = self.config.breeding_engine

        bred = breeder.breed(
            parent_a.genome, parent_b.genome, self.entropy.fresh_entropy(new_id)
        )
        genome = breeder.mutate(bred, self.entropy.fresh_entropy(bred), tick)
        generation = self.registry.current_generation + 1

        child = Artifact.create_child(
            new_id, (parent_a, parent_b), genome, generation, tick
        )
        self.registry.insert(child)
        self.registry.record_evolution(generation, tick)

        self.metrics.evolutions += 1
        self.metrics.auto_evolutions += int(auto)
        self.metrics.mutations_applied += int(genome != bred)
        self.metrics.last_evolution_time = datetime.now(timezone.utc)

        self._emit(
            ArtifactCreated(
                tick=tick,
                artifact_id=new_id,
                generation=generation,
                genome=genome,
                parent_a=parent_a_id,
                parent_b=parent_b_id,
            )
        )
        self._emit(
            EvolutionTriggered(tick=tick, artifact_id=new_id, generation=generation)
        )
        logger.info(
            "[EvolutionScheduler] Evolved | id={}, generation={}, parents=({}, {}), tick={}, auto={}",
            new_id,
            generation,
            parent_a_id,
            parent_b_id,
            tick,
            auto,
        )
        return new_id

    def _check_population(self) -> None:
        supply = self.registry.total_supply
        if supply < 2:
            logger.error(
                "[EvolutionScheduler] Cannot select parents from {} artifact(s)", supply
            )
            raise InsufficientPopulationError(
                f"Need at least 2 artifacts to breed, have {supply}"
            )

    def _due_tick(self) -> int:
        return self.registry.last_evolution_tick + self.config.evolution_interval

    def _is_due(self, tick: int) -> bool:
        return tick >= self._due_tick()

    def _emit(self, event: Event) -> None:
        self._pending.append(event)

    @contextmanager
    def _transaction(self) -> Iterator[None]:
        """Outermost write section owns the event buffer.

        Events are published before the write section is released, so the
        stream follows commit order across threads.
        """
        with self.registry.writing():
            outermost = self._depth == 0
            self._depth += 1
            try:
                yield
            except BaseException:
                if outermost:
                    self._pending.clear()
                raise
            finally:
                self._depth -= 1
            if outermost:
                published, self._pending = self._pending, []
                self._publish(published)

    def _publish(self, events: list[Event]) -> None:
        for event in events:
            try:
                self.event_sink.publish(event)
            except Exception:
                # The operation already committed; keep delivering the rest.
                logger.exception(
                    "[EvolutionScheduler] Event sink failed on {} for artifact {}",
                    event.kind,
                    event.artifact_id,
                )
