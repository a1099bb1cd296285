"""Tests for puzzle generation."""

import random

import pytest

from countdown.puzzle import LARGE_NUMBERS, Puzzle, generate_puzzle


class TestGeneratePuzzle:
    """Tests for random puzzles."""

    @pytest.mark.parametrize("num_large", [0, 1, 2, 3, 4])
    def test_follows_the_rules(self, num_large: int) -> None:
        puzzle = generate_puzzle(num_large, random.Random(num_large))
        assert len(puzzle.numbers) == 6
        large = puzzle.numbers[:num_large]
        small = puzzle.numbers[num_large:]
        assert all(n in LARGE_NUMBERS for n in large)
        assert len(set(large)) == num_large
        assert all(1 <= n <= 10 for n in small)
        assert 100 <= puzzle.target <= 999

    def test_seeded_generator_is_reproducible(self) -> None:
        assert generate_puzzle(2, random.Random(7)) == generate_puzzle(2, random.Random(7))

    @pytest.mark.parametrize("num_large", [-1, 5])
    def test_rejects_bad_large_count(self, num_large: int) -> None:
        with pytest.raises(ValueError):
            generate_puzzle(num_large)

    def test_str(self) -> None:
        assert str(Puzzle(numbers=[1, 1, 4, 7, 15, 50], target=522)) == "1 1 4 7 15 50 -> 522"
