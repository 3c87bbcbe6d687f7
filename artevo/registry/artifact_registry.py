"""Canonical in-memory store of artifacts and evolution counters."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Iterator

from loguru import logger

from artevo.artifacts.artifact import Artifact
from artevo.exceptions import ArtifactNotFoundError, RegistryError
from artevo.registry.rwlock import ReadWriteLock

__all__ = ["ArtifactRegistry"]


class ArtifactRegistry:
    """Dict-backed artifact registry.

    Owns every :class:`Artifact` record plus the aggregate counters
    (``total_supply``, ``current_generation``, ``last_evolution_tick``).
    Callers only ever receive copies. Mutations run under the write section of
    a :class:`ReadWriteLock`; compound operations wrap several calls in
    :meth:`writing` so they commit as one unit.
    """

    def __init__(self) -> None:
        # id -> Artifact, insertion order == id order
        self._artifacts: dict[int, Artifact] = {}
        self._current_generation = 0
        self._last_evolution_tick = 0
        self._genesis_seeded = False
        self._lock = ReadWriteLock()

    # ------------------------------------------------------------------
    @contextmanager
    def reading(self) -> Iterator["ArtifactRegistry"]:
        with self._lock.read_locked():
            yield self

    @contextmanager
    def writing(self) -> Iterator["ArtifactRegistry"]:
        with self._lock.write_locked():
            yield self

    # --- counters -----------------------------------------------------

    @property
    def total_supply(self) -> int:
        with self._lock.read_locked():
            return len(self._artifacts)

    @property
    def current_generation(self) -> int:
        with self._lock.read_locked():
            return self._current_generation

    @property
    def last_evolution_tick(self) -> int:
        with self._lock.read_locked():
            return self._last_evolution_tick

    @property
    def genesis_seeded(self) -> bool:
        with self._lock.read_locked():
            return self._genesis_seeded

    def next_id(self) -> int:
        with self._lock.read_locked():
            return len(self._artifacts) + 1

    def mark_genesis(self, tick: int) -> None:
        with self._lock.write_locked():
            self._genesis_seeded = True
            self._last_evolution_tick = tick

    def record_evolution(self, generation: int, tick: int) -> None:
        with self._lock.write_locked():
            if generation != self._current_generation + 1:
                raise RegistryError(
                    f"Generation must advance by one (current={self._current_generation}, got={generation})"
                )
            self._current_generation = generation
            self._last_evolution_tick = tick

    # --- artifacts ----------------------------------------------------

    def insert(self, artifact: Artifact) -> None:
        with self._lock.write_locked():
            expected = len(self._artifacts) + 1
            if artifact.id != expected:
                raise RegistryError(
                    f"Artifact id {artifact.id} out of sequence (expected {expected})"
                )
            for parent_id in artifact.parents:
                if parent_id and parent_id not in self._artifacts:
                    raise RegistryError(
                        f"Parent {parent_id} of artifact {artifact.id} does not exist"
                    )
            self._artifacts[artifact.id] = artifact.copy_view()
            logger.debug(
                "[ArtifactRegistry] Inserted artifact {} (generation={})",
                artifact.id,
                artifact.generation,
            )

    def get(self, artifact_id: int) -> Artifact:
        with self._lock.read_locked():
            return self._require(artifact_id).copy_view()

    def exists(self, artifact_id: int) -> bool:
        with self._lock.read_locked():
            return artifact_id in self._artifacts

    def increment_interactions(self, artifact_id: int) -> int:
        """Add one interaction to *artifact_id* and return the new count."""
        with self._lock.write_locked():
            artifact = self._require(artifact_id)
            artifact.interaction_count += 1
            return artifact.interaction_count

    def revert_interaction(self, artifact_id: int) -> int:
        """Take back one interaction recorded inside the current write section."""
        with self._lock.write_locked():
            artifact = self._require(artifact_id)
            if not artifact.interaction_count:
                raise RegistryError(f"Artifact {artifact_id} has no interaction to revert")
            artifact.interaction_count -= 1
            return artifact.interaction_count

    def interaction_counts(self) -> list[tuple[int, int]]:
        """``(id, interaction_count)`` pairs in increasing id order."""
        with self._lock.read_locked():
            return [(a.id, a.interaction_count) for a in self._artifacts.values()]

    def all(self) -> list[Artifact]:
        with self._lock.read_locked():
            return [a.copy_view() for a in self._artifacts.values()]

    def children_of(self, artifact_id: int) -> list[int]:
        with self._lock.read_locked():
            self._require(artifact_id)
            return [
                a.id for a in self._artifacts.values() if artifact_id in a.parents
            ]

    def snapshot(self) -> dict[str, Any]:
        """Plain-data view of the whole registry."""
        with self._lock.read_locked():
            return {
                "total_supply": len(self._artifacts),
                "current_generation": self._current_generation,
                "last_evolution_tick": self._last_evolution_tick,
                "genesis_seeded": self._genesis_seeded,
                "artifacts": [a.to_dict() for a in self._artifacts.values()],
            }

    def _require(self, artifact_id: int) -> Artifact:
        artifact = self._artifacts.get(artifact_id)
        if artifact is None:
            raise ArtifactNotFoundError(artifact_id)
        return artifact
