"""Shared fixtures for the solver tests."""

from typing import List, Tuple

import pytest

from countdown import CountdownSolver, Expr

STRESS = ([7, 3, 4, 5, 15, 75], 785)
CLASSIC = ([1, 1, 4, 7, 15, 50], 522)


@pytest.fixture
def solver() -> CountdownSolver:
    """A fresh solver."""
    return CountdownSolver()


@pytest.fixture(scope="session")
def stress_results() -> Tuple[CountdownSolver, List[Expr]]:
    """Solve the stress puzzle once for the whole session."""
    solver = CountdownSolver()
    return solver, solver.solve(*STRESS)


@pytest.fixture(scope="session")
def classic_results() -> Tuple[CountdownSolver, List[Expr]]:
    """Solve the classic puzzle once for the whole session."""
    solver = CountdownSolver()
    return solver, solver.solve(*CLASSIC)
