from __future__ import annotations

from typing import Iterable

from artevo.registry.artifact_registry import ArtifactRegistry

__all__ = ["FitnessTracker"]


def _first_strict_max(
    counts: Iterable[tuple[int, int]], exclude: int | None = None
) -> int | None:
    best_id: int | None = None
    best_count = 0
    for artifact_id, count in counts:
        if artifact_id == exclude:
            continue
        # First candidate always seeds the winner; later ones need a strictly
        # higher count, so ties stay with the lowest id.
        if best_id is None or count > best_count:
            best_id, best_count = artifact_id, count
    return best_id


class FitnessTracker:
    """Popularity queries over the registry's interaction counters.

    Every query is a linear scan in increasing id order.
    """

    def __init__(self, registry: ArtifactRegistry) -> None:
        self.registry = registry

    def most_popular(self) -> int | None:
        return _first_strict_max(self.registry.interaction_counts())

    def second_most_popular(self, exclude: int) -> int | None:
        return _first_strict_max(self.registry.interaction_counts(), exclude=exclude)

    def ranking(self) -> list[int]:
        """All ids ordered by interaction count (desc), then id (asc)."""
        counts = self.registry.interaction_counts()
        return [i for i, _ in sorted(counts, key=lambda pair: (-pair[1], pair[0]))]
