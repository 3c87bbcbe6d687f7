import pytest

from artevo.evolution.breeding import BreedingEngine


@pytest.fixture
def engine() -> BreedingEngine:
    return BreedingEngine()


class TestBreed:
    def test_reference_example(self, engine):
        # (100 + 200) // 2 = 150; 12050 % 1000 = 50; 150 * 1050 // 1000 = 157
        assert engine.breed(100, 200, 12050) == 157

    def test_zero_random_factor_keeps_average(self, engine):
        assert engine.breed(100, 200, 0) == 150
        assert engine.breed(100, 200, 7000) == 150

    def test_maximum_boost(self, engine):
        assert engine.breed(100, 200, 999) == 299

    def test_average_uses_floor_division(self, engine):
        assert engine.breed(1, 2, 0) == 1

    def test_bias_is_never_downward(self, engine):
        for entropy in range(0, 5000, 37):
            assert engine.breed(10**17, 3 * 10**17, entropy) >= 2 * 10**17

    def test_not_clamped(self, engine):
        big = 10**18 - 1
        assert engine.breed(big, big, 999) > big

    def test_deterministic(self, engine):
        assert engine.breed(123456789, 987654321, 2**200 + 5) == engine.breed(
            123456789, 987654321, 2**200 + 5
        )

    def test_negative_genome_rejected(self, engine):
        with pytest.raises(ValueError):
            engine.breed(-1, 5, 0)


class TestMutate:
    def test_no_mutation_above_threshold(self, engine):
        for roll in (10, 11, 50, 99):
            assert engine.mutate(1000, roll, 123) == 1000

    @pytest.mark.parametrize(
        "clock_value, expected",
        [(0, 900), (199, 1099), (250, 950), (100, 1000)],
    )
    def test_mutation_factor_from_clock(self, engine, clock_value, expected):
        assert engine.mutate(1000, 5, clock_value) == expected

    def test_roll_uses_modulo_hundred(self, engine):
        assert engine.would_mutate(1009)
        assert not engine.would_mutate(1010)

    def test_floor_division(self, engine):
        # 7 * 901 // 1000 = 6
        assert engine.mutate(7, 0, 1) == 6

    def test_custom_chance(self):
        never = BreedingEngine(mutation_chance_percent=0)
        always = BreedingEngine(mutation_chance_percent=100)
        assert never.mutate(1000, 0, 0) == 1000
        assert always.mutate(1000, 99, 0) == 900

    def test_invalid_configuration(self):
        with pytest.raises(ValueError):
            BreedingEngine(mutation_chance_percent=101)
        with pytest.raises(ValueError):
            BreedingEngine(mutation_factor_span=0)

    def test_negative_genome_rejected(self, engine):
        with pytest.raises(ValueError):
            engine.mutate(-10, 0, 0)
