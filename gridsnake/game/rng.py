"""
Seeded pseudo-random generator for food placement.

A plain linear congruential generator so that a game can be replayed
exactly from its seed.
"""
import time


MULTIPLIER = 1103515245
INCREMENT = 12345
MODULUS = 2 ** 31


class LCGRandom:
    """
    Linear congruential generator.

    seed = (seed * 1103515245 + 12345) mod 2^31, advanced on every draw.
    """

    def __init__(self, seed: int = 0):
        """
        Initialize the generator.

        Args:
            seed: Initial state, reduced into [0, 2^31)
        """
        self._seed = int(seed) % MODULUS

    @classmethod
    def from_time(cls) -> "LCGRandom":
        """Create a generator seeded from the wall clock."""
        return cls(time.time_ns())

    @property
    def seed(self) -> int:
        """Current generator state."""
        return self._seed

    def next_int(self) -> int:
        """Advance the generator and return the raw state."""
        self._seed = (self._seed * MULTIPLIER + INCREMENT) % MODULUS
        return self._seed

    def below(self, maximum: int) -> int:
        """
        Draw an integer in [0, maximum).

        Args:
            maximum: Exclusive upper bound, must be positive

        Returns:
            The drawn integer
        """
        if maximum <= 0:
            raise ValueError(f"maximum must be positive, got {maximum}")
        return self.next_int() % maximum

    def randint(self, minimum: int, maximum: int) -> int:
        """
        Draw an integer in [minimum, maximum], both ends inclusive.

        Args:
            minimum: Lower bound
            maximum: Upper bound

        Returns:
            The drawn integer
        """
        if maximum < minimum:
            raise ValueError(f"empty range [{minimum}, {maximum}]")
        return minimum + self.next_int() % (maximum - minimum + 1)
