"""
Тесты для модуля Numerical Safeguards

Проверяет:
1. Валидацию quantity и b
2. Минимальную длину последовательностей
3. Совпадение длин initial/final
"""

import pytest

from src.core.errors import (
    ErrorCode,
    InvalidQuantity,
    LengthMismatch,
    LmsrError,
    TooFewInputs,
    ZeroLiquidityParameter,
)
from src.core.math.numerical_safeguards import (
    MIN_OUTCOMES_BATCH,
    MIN_OUTCOMES_TRIPLE,
    require_min_length,
    require_same_length,
    validate_liquidity,
    validate_quantities,
    validate_quantity,
)


class TestValidateQuantity:
    """Тесты validate_quantity"""

    def test_valid_values_pass_through(self) -> None:
        assert validate_quantity(0, "q") == 0
        assert validate_quantity(12345, "q") == 12345

    def test_negative_rejected(self) -> None:
        with pytest.raises(InvalidQuantity, match="q1 must be non-negative"):
            validate_quantity(-1, "q1")

    def test_float_rejected(self) -> None:
        with pytest.raises(InvalidQuantity, match="got float"):
            validate_quantity(1.5, "q1")  # type: ignore[arg-type]

    def test_bool_rejected(self) -> None:
        with pytest.raises(InvalidQuantity, match="got bool"):
            validate_quantity(True, "q1")

    def test_sequence_reports_index(self) -> None:
        with pytest.raises(InvalidQuantity, match=r"quantities\[2\]"):
            validate_quantities([1, 2, -3])


class TestValidateLiquidity:
    """Тесты validate_liquidity"""

    def test_positive(self) -> None:
        assert validate_liquidity(50) == 50

    def test_zero_rejected(self) -> None:
        with pytest.raises(ZeroLiquidityParameter, match="b must be positive"):
            validate_liquidity(0)

    def test_negative_rejected(self) -> None:
        with pytest.raises(InvalidQuantity):
            validate_liquidity(-5)


class TestShapeChecks:
    """Тесты require_min_length / require_same_length"""

    def test_minimums(self) -> None:
        assert MIN_OUTCOMES_BATCH == 2
        assert MIN_OUTCOMES_TRIPLE == 3

    def test_min_length_ok(self) -> None:
        require_min_length([1, 2], MIN_OUTCOMES_BATCH, "op")
        require_min_length([1, 2, 3], MIN_OUTCOMES_TRIPLE, "op")

    @pytest.mark.parametrize("quantities", [[], [1]])
    def test_too_few(self, quantities: list[int]) -> None:
        with pytest.raises(TooFewInputs, match="op requires at least 2"):
            require_min_length(quantities, MIN_OUTCOMES_BATCH, "op")

    def test_same_length(self) -> None:
        require_same_length([1, 2], [3, 4], "op")

    def test_length_mismatch(self) -> None:
        with pytest.raises(LengthMismatch, match="initial has 2 quantities, final has 3"):
            require_same_length([1, 2], [1, 2, 3], "op")


class TestErrorTaxonomy:
    """Коды ошибок и иерархия"""

    def test_codes(self) -> None:
        assert TooFewInputs.code == ErrorCode.TOO_FEW_INPUTS
        assert LengthMismatch.code == ErrorCode.LENGTH_MISMATCH
        assert ZeroLiquidityParameter.code == ErrorCode.ZERO_LIQUIDITY
        assert InvalidQuantity.code == ErrorCode.INVALID_QUANTITY

    def test_usage_errors_are_value_errors(self) -> None:
        for error_type in (TooFewInputs, LengthMismatch, ZeroLiquidityParameter, InvalidQuantity):
            assert issubclass(error_type, LmsrError)
            assert issubclass(error_type, ValueError)
