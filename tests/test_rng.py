"""
Tests for the seeded LCG used for food placement.
"""

import pytest

from gridsnake.game.rng import LCGRandom, MODULUS


class TestLCGRandom:
    """Tests for LCGRandom."""

    def test_recurrence(self):
        """Test each draw applies seed * 1103515245 + 12345 mod 2^31."""
        rng = LCGRandom(1)

        assert rng.next_int() == (1 * 1103515245 + 12345) % 2 ** 31
        assert rng.next_int() == (1103527590 * 1103515245 + 12345) % 2 ** 31

    def test_known_sequence_from_zero(self):
        """Test the first draws from seed 0."""
        rng = LCGRandom(0)

        assert rng.next_int() == 12345
        assert rng.next_int() == (12345 * 1103515245 + 12345) % 2 ** 31

    def test_same_seed_same_sequence(self):
        """Test two generators with the same seed draw identical sequences."""
        a = LCGRandom(987654321)
        b = LCGRandom(987654321)

        assert [a.below(400) for _ in range(1000)] == [b.below(400) for _ in range(1000)]

    def test_different_seeds_diverge(self):
        """Test different seeds give different sequences."""
        a = LCGRandom(1)
        b = LCGRandom(2)

        assert [a.next_int() for _ in range(10)] != [b.next_int() for _ in range(10)]

    def test_seed_reduced_into_range(self):
        """Test seeds outside [0, 2^31) are reduced."""
        assert LCGRandom(MODULUS + 5).seed == 5
        assert LCGRandom(-1).seed == MODULUS - 1

    def test_seed_tracks_state(self):
        """Test the seed property follows every draw."""
        rng = LCGRandom(7)
        value = rng.next_int()

        assert rng.seed == value

    def test_below_range(self):
        """Test below() stays in [0, max)."""
        rng = LCGRandom(3)

        values = [rng.below(7) for _ in range(500)]

        assert all(0 <= v < 7 for v in values)
        assert set(values) == set(range(7))

    def test_below_is_state_mod_max(self):
        """Test below() returns the new state modulo max."""
        rng = LCGRandom(11)
        expected = LCGRandom(11).next_int() % 13

        assert rng.below(13) == expected

    def test_randint_inclusive(self):
        """Test randint() covers both ends of the range."""
        rng = LCGRandom(5)

        values = [rng.randint(3, 6) for _ in range(500)]

        assert min(values) == 3
        assert max(values) == 6

    def test_randint_single_value(self):
        """Test randint() with min == max."""
        rng = LCGRandom(5)

        assert rng.randint(4, 4) == 4

    def test_invalid_ranges(self):
        """Test empty ranges raise ValueError."""
        rng = LCGRandom(5)

        with pytest.raises(ValueError):
            rng.below(0)
        with pytest.raises(ValueError):
            rng.randint(5, 4)

    def test_from_time_in_range(self):
        """Test a clock-seeded generator starts within [0, 2^31)."""
        rng = LCGRandom.from_time()

        assert 0 <= rng.seed < MODULUS
