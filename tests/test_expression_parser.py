"""Tests for the answer checker."""

import pytest

from countdown.expression_parser import ExpressionParser


@pytest.fixture
def parser() -> ExpressionParser:
    return ExpressionParser()


class TestEvaluate:
    """Tests for safe integer evaluation."""

    def test_precedence(self, parser: ExpressionParser) -> None:
        assert parser.evaluate("50 + (1 + 7) * (4 * 15 - 1)") == (True, 522, None)

    def test_exact_division(self, parser: ExpressionParser) -> None:
        assert parser.evaluate("75 / (3 * 5)") == (True, 5, None)

    def test_inexact_division_is_rejected(self, parser: ExpressionParser) -> None:
        success, value, error = parser.evaluate("7 / 2")
        assert not success
        assert value is None
        assert "not a whole number" in error

    def test_division_by_zero(self, parser: ExpressionParser) -> None:
        assert parser.evaluate("7 / (3 - 3)") == (False, None, "Division by zero")

    def test_unary_minus_is_rejected(self, parser: ExpressionParser) -> None:
        success, _, error = parser.evaluate("-3 + 5")
        assert not success
        assert "Unary" in error

    def test_syntax_error(self, parser: ExpressionParser) -> None:
        success, _, error = parser.evaluate("3 + * 5")
        assert not success
        assert error.startswith("Invalid syntax")

    def test_empty(self, parser: ExpressionParser) -> None:
        assert parser.evaluate("abc") == (False, None, "Empty expression")

    def test_power_is_not_allowed(self, parser: ExpressionParser) -> None:
        # '**' survives sanitizing but is not one of the four operators
        success, _, error = parser.evaluate("2 ** 3")
        assert not success
        assert "Pow" in error


class TestParseAndValidate:
    """Tests for checking an answer against the available numbers."""

    NUMBERS = [1, 1, 4, 7, 15, 50]

    def test_valid_answer(self, parser: ExpressionParser) -> None:
        result = parser.parse_and_validate("50 + (1 + 7) * (4 * 15 - 1)", self.NUMBERS)
        assert result['valid']
        assert result['result'] == 522
        assert result['numbers_used'] == [50, 1, 7, 4, 15, 1]

    def test_unavailable_number(self, parser: ExpressionParser) -> None:
        result = parser.parse_and_validate("100 + 4", self.NUMBERS)
        assert not result['valid']
        assert result['error'] == "Number 100 is not available"

    def test_number_used_twice(self, parser: ExpressionParser) -> None:
        result = parser.parse_and_validate("7 * 7", self.NUMBERS)
        assert not result['valid']
        assert "more times than available" in result['error']

    def test_repeated_source_number(self, parser: ExpressionParser) -> None:
        result = parser.parse_and_validate("1 + 1", self.NUMBERS)
        assert result['valid']
        assert result['result'] == 2
