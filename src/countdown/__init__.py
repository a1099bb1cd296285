# Countdown numbers solver package
from .expression import Application, Expr, Value
from .expression_parser import ExpressionParser
from .operators import Op
from .puzzle import Puzzle, generate_puzzle
from .solver import CountdownSolver

__all__ = [
    'Application', 'CountdownSolver', 'Expr', 'ExpressionParser',
    'Op', 'Puzzle', 'Value', 'generate_puzzle',
]
