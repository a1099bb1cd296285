"""
Safe expression checker for Countdown answers.
Uses Python's ast module to evaluate expressions without eval(), in exact
integer arithmetic, the way the solver itself computes.
"""

import ast
import re
from collections import Counter
from typing import Dict, List, Optional, Tuple

from .operators import Op, apply


class ExpressionParser:
    """
    Safely parses and evaluates Countdown expressions.
    Only allows: +, -, *, / operators, integers, and parentheses.
    Division must be exact.
    """

    # Mapping of AST operators to Countdown operators
    SAFE_OPERATORS = {
        ast.Add: Op.ADD,
        ast.Sub: Op.SUB,
        ast.Mult: Op.MUL,
        ast.Div: Op.DIV,
    }

    # Characters allowed in expressions
    ALLOWED_CHARS = set('0123456789+-*/() ')

    def sanitize(self, expression: str) -> str:
        """Remove any characters not in the allowed set."""
        return ''.join(c for c in expression if c in self.ALLOWED_CHARS)

    def extract_numbers(self, expression: str) -> List[int]:
        """Return every integer literal in the expression, in order."""
        return [int(n) for n in re.findall(r'\d+', expression)]

    def validate_numbers(self, expression: str, available: List[int]) -> Tuple[bool, Optional[str]]:
        """
        Check if expression only uses available numbers (each once max).

        Args:
            expression: The mathematical expression
            available: List of available numbers to use

        Returns:
            Tuple of (is_valid, error_message or None)
        """
        available_counter = Counter(available)
        used_counter = Counter(self.extract_numbers(expression))

        for num, count in used_counter.items():
            if num not in available_counter:
                return False, f"Number {num} is not available"
            if count > available_counter[num]:
                return False, f"Number {num} used more times than available"

        return True, None

    def _safe_eval(self, node: ast.AST) -> int:
        """
        Recursively evaluate AST node with only allowed operations.

        Raises:
            ValueError: If an unsupported operation or an inexact
                division is encountered
        """
        if isinstance(node, ast.Expression):
            return self._safe_eval(node.body)

        if isinstance(node, ast.Constant):
            if isinstance(node.value, int) and not isinstance(node.value, bool):
                return node.value
            raise ValueError("Only integer values allowed")

        if isinstance(node, ast.BinOp):
            op_type = type(node.op)
            if op_type not in self.SAFE_OPERATORS:
                raise ValueError(f"Operator not allowed: {op_type.__name__}")

            left = self._safe_eval(node.left)
            right = self._safe_eval(node.right)
            op = self.SAFE_OPERATORS[op_type]

            if op is Op.DIV:
                if right == 0:
                    raise ValueError("Division by zero")
                if left % right != 0:
                    raise ValueError(f"{left} / {right} is not a whole number")

            return apply(op, left, right)

        if isinstance(node, ast.UnaryOp):
            raise ValueError("Unary operators are not allowed")

        raise ValueError("Invalid expression structure")

    def evaluate(self, expression: str) -> Tuple[bool, Optional[int], Optional[str]]:
        """
        Safely evaluate expression using AST parsing.

        Returns:
            Tuple of (success, result or None, error_message or None)
        """
        clean_expr = self.sanitize(expression)

        if not clean_expr.strip():
            return False, None, "Empty expression"

        try:
            tree = ast.parse(clean_expr, mode='eval')
            return True, self._safe_eval(tree), None
        except SyntaxError as e:
            return False, None, f"Invalid syntax: {e.msg}"
        except (ValueError, OverflowError) as e:
            return False, None, str(e)

    def parse_and_validate(self, expression: str, available_numbers: List[int]) -> Dict:
        """
        Complete validation and evaluation of an expression.

        Args:
            expression: The mathematical expression
            available_numbers: List of numbers the player can use

        Returns:
            Dictionary with:
            - valid: bool
            - result: int or None
            - error: str or None
            - numbers_used: list of numbers used
        """
        result = {
            'valid': False,
            'result': None,
            'error': None,
            'numbers_used': []
        }

        clean_expr = self.sanitize(expression)

        if not clean_expr.strip():
            result['error'] = "Empty expression"
            return result

        result['numbers_used'] = self.extract_numbers(clean_expr)

        is_valid, error = self.validate_numbers(clean_expr, available_numbers)
        if not is_valid:
            result['error'] = error
            return result

        success, value, error = self.evaluate(clean_expr)
        if not success:
            result['error'] = error
            return result

        result['valid'] = True
        result['result'] = value
        return result
