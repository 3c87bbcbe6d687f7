import pytest

from artevo.artifacts import Artifact
from artevo.evolution.fitness import FitnessTracker
from artevo.evolution.parent_selector import PopularityParentSelector
from artevo.exceptions import InsufficientPopulationError
from artevo.registry import ArtifactRegistry


def make_registry(*counts: int) -> ArtifactRegistry:
    registry = ArtifactRegistry()
    for artifact_id, count in enumerate(counts, start=1):
        registry.insert(Artifact.create_genesis(artifact_id, genome=artifact_id, tick=0))
        for _ in range(count):
            registry.increment_interactions(artifact_id)
    return registry


def test_tie_goes_to_first_seen():
    tracker = FitnessTracker(make_registry(5, 5, 3))
    assert tracker.most_popular() == 1
    assert tracker.second_most_popular(1) == 2


def test_all_zero_counts_still_resolve():
    tracker = FitnessTracker(make_registry(0, 0, 0))
    assert tracker.most_popular() == 1
    assert tracker.second_most_popular(1) == 2


def test_strictly_greater_count_wins():
    tracker = FitnessTracker(make_registry(0, 0, 7, 2))
    assert tracker.most_popular() == 3
    assert tracker.second_most_popular(3) == 4


def test_later_tie_with_runner_up_keeps_earlier():
    tracker = FitnessTracker(make_registry(1, 9, 4, 4))
    assert tracker.most_popular() == 2
    assert tracker.second_most_popular(2) == 3


def test_empty_and_single_population():
    assert FitnessTracker(ArtifactRegistry()).most_popular() is None
    tracker = FitnessTracker(make_registry(3))
    assert tracker.most_popular() == 1
    assert tracker.second_most_popular(1) is None


def test_exclude_unknown_id_matches_most_popular():
    tracker = FitnessTracker(make_registry(2, 8))
    assert tracker.second_most_popular(99) == tracker.most_popular() == 2


def test_ranking_orders_by_count_then_id():
    tracker = FitnessTracker(make_registry(1, 5, 5, 0))
    assert tracker.ranking() == [2, 3, 1, 4]


class TestPopularityParentSelector:
    def test_selects_top_two(self):
        tracker = FitnessTracker(make_registry(2, 0, 6))
        assert PopularityParentSelector().select_parents(tracker) == (3, 1)

    def test_single_artifact_is_insufficient(self):
        with pytest.raises(InsufficientPopulationError):
            PopularityParentSelector().select_parents(FitnessTracker(make_registry(4)))

    def test_empty_registry_is_insufficient(self):
        with pytest.raises(InsufficientPopulationError):
            PopularityParentSelector().select_parents(FitnessTracker(ArtifactRegistry()))
