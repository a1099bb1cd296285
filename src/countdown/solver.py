import logging
import time
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Set, Tuple

from .expression import Application, Expr, Value
from .fingerprint import Fingerprint, fingerprint
from .operators import OPERATIONS, is_valid

logger = logging.getLogger(__name__)

NUM_SOURCES = 6


@dataclass
class SearchContext:
    """Mutable state of a single solve call."""
    goal: int
    visited: Set[Fingerprint] = field(default_factory=set)
    results: List[Expr] = field(default_factory=list)
    combinations: int = 0
    closest: Optional[Expr] = None
    closest_diff: Optional[int] = None

    def consider(self, expr: Expr) -> None:
        """Keep expr if it is nearer the goal than anything seen so far."""
        diff = abs(self.goal - expr.total)
        if self.closest_diff is None or diff < self.closest_diff:
            self.closest = expr
            self.closest_diff = diff


class CountdownSolver:
    """
    Solver for the Countdown Numbers Game.
    Finds every expression over the source numbers that reaches the goal.

    Each solve call runs with its own SearchContext; the counters of the
    last call stay readable on the solver until the next call.
    """

    def __init__(self):
        self.combinations = 0
        self.results: List[Expr] = []
        self.closest: Optional[Expr] = None

    def solve(self, numbers: Sequence[int], goal: int) -> List[Expr]:
        """
        Find all expressions that evaluate exactly to the goal.

        Args:
            numbers: The six source numbers.
            goal: The number to reach.

        Returns:
            Matching expression trees, fewest operations first. Matches
            that do not use every source number are included.

        Raises:
            ValueError: If numbers does not hold exactly six values
        """
        if len(numbers) != NUM_SOURCES:
            raise ValueError(f"Expected {NUM_SOURCES} numbers, got {len(numbers)}")

        logger.debug("Solving %s -> %d", list(numbers), goal)
        started = time.perf_counter()

        context = SearchContext(goal=goal)
        candidates = sorted((Value(n) for n in numbers), key=lambda c: c.total)
        for leaf in candidates:
            context.consider(leaf)

        self._search(tuple(candidates), context)

        # Stable, so equal counts keep the order the search found them in
        context.results.sort(key=lambda r: r.operations)

        self.combinations = context.combinations
        self.results = context.results
        self.closest = context.closest

        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(
            "Found %d results for %d in %.1f ms (%d combinations, %d states)",
            len(context.results), goal, elapsed_ms,
            context.combinations, len(context.visited)
        )
        return context.results

    def solve_rendered(self, numbers: Sequence[int], goal: int,
                       limit: Optional[int] = None) -> List[str]:
        """Solve and render the first `limit` results (all when None)."""
        results = self.solve(numbers, goal)
        if limit is not None:
            results = results[:limit]
        return [str(r) for r in results]

    def _search(self, candidates: Tuple[Expr, ...], context: SearchContext) -> None:
        count = len(candidates)
        if count <= 1:
            return

        key = fingerprint(candidates)
        if key in context.visited:
            return
        context.visited.add(key)

        for i in range(count):
            for j in range(count):
                if i == j:
                    continue

                x = candidates[i]
                y = candidates[j]
                for op in OPERATIONS:
                    if not is_valid(op, x.total, y.total):
                        continue

                    combined = Application.combine(op, x, y)
                    context.combinations += 1
                    context.consider(combined)

                    if combined.total == context.goal:
                        context.results.append(combined)
                    elif count > 2:
                        rest = [candidates[k] for k in range(count) if k != i and k != j]
                        self._search(_insert_sorted(rest, combined), context)


def _insert_sorted(rest: List[Expr], expr: Expr) -> Tuple[Expr, ...]:
    """Insert expr before the first candidate whose total is >= its own."""
    for pos, candidate in enumerate(rest):
        if candidate.total >= expr.total:
            return tuple(rest[:pos]) + (expr,) + tuple(rest[pos:])
    return tuple(rest) + (expr,)
