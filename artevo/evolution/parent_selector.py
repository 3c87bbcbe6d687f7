from abc import ABC, abstractmethod

from artevo.evolution.fitness import FitnessTracker
from artevo.exceptions import InsufficientPopulationError


class ParentSelector(ABC):
    """Abstract base class for selecting the two parents of a new artifact."""

    @abstractmethod
    def select_parents(self, tracker: FitnessTracker) -> tuple[int, int]:
        """Pick two distinct parent ids.

        Args:
            tracker: Fitness view over the current population

        Returns:
            ``(parent_a, parent_b)`` artifact ids

        Raises:
            InsufficientPopulationError: if two distinct parents are not available
        """


class PopularityParentSelector(ParentSelector):
    """Breeds the most popular artifact with the runner-up."""

    def select_parents(self, tracker: FitnessTracker) -> tuple[int, int]:
        first = tracker.most_popular()
        if first is None:
            raise InsufficientPopulationError("No artifacts available for breeding")
        second = tracker.second_most_popular(first)
        if second is None or second == first:
            raise InsufficientPopulationError(
                f"Need two distinct parents, only artifact {first} is available"
            )
        return first, second
