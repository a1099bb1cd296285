"""
Countdown puzzles: the six source numbers and the target.
"""

import random
from dataclasses import dataclass, field
from typing import List, Optional

# Game configuration
LARGE_NUMBERS = [25, 50, 75, 100]
SMALL_NUMBERS = list(range(1, 11))  # 1-10
NUM_NUMBERS = 6
TARGET_MIN = 100
TARGET_MAX = 999


@dataclass
class Puzzle:
    """A set of source numbers and the target to reach with them."""
    numbers: List[int]
    target: int
    name: Optional[str] = None
    description: str = field(default='', compare=False)

    def __str__(self) -> str:
        return f"{' '.join(str(n) for n in self.numbers)} -> {self.target}"


def generate_puzzle(num_large: int = 2, rng: Optional[random.Random] = None) -> Puzzle:
    """
    Generate a random puzzle following the TV show rules.

    Args:
        num_large: How many of the six numbers come from the large pool (0-4).
        rng: Random generator to draw from, for reproducible puzzles.

    Returns:
        A new Puzzle

    Raises:
        ValueError: If num_large is outside 0-4
    """
    if not 0 <= num_large <= len(LARGE_NUMBERS):
        raise ValueError(f"num_large must be between 0 and {len(LARGE_NUMBERS)}")

    rng = rng or random.Random()
    large = rng.sample(LARGE_NUMBERS, num_large)
    small = rng.choices(SMALL_NUMBERS, k=NUM_NUMBERS - num_large)  # Can repeat
    target = rng.randint(TARGET_MIN, TARGET_MAX)
    return Puzzle(numbers=large + small, target=target)
