"""
Тесты для Liquidity — выбор параметра b

Проверяемые инварианты:
1. Fixed policy возвращает константу
2. Max/average policies над парой и batch согласованы
3. Batch формы требуют >= 2 quantities
4. Входы не мутируются
"""

import pytest

from src.core.domain.pricing import LiquidityPolicy
from src.core.errors import InvalidQuantity, TooFewInputs
from src.lmsr.liquidity import (
    FIXED_LIQUIDITY_PARAMETER,
    average_liquidity,
    average_liquidity_batch,
    fixed_liquidity,
    max_liquidity,
    max_liquidity_batch,
    select_liquidity,
)


class TestFixedLiquidity:
    def test_constant(self):
        assert fixed_liquidity() == FIXED_LIQUIDITY_PARAMETER == 100


class TestMaxLiquidity:
    """Тесты max policy"""

    def test_pair(self):
        assert max_liquidity(3, 7) == 7
        assert max_liquidity(7, 3) == 7
        assert max_liquidity(0, 0) == 0

    def test_batch(self):
        assert max_liquidity_batch([3, 9, 1]) == 9
        assert max_liquidity_batch((4, 4)) == 4

    @pytest.mark.parametrize("quantities", [[], [5]])
    def test_batch_too_few(self, quantities):
        with pytest.raises(TooFewInputs):
            max_liquidity_batch(quantities)

    def test_pair_rejects_negative(self):
        with pytest.raises(InvalidQuantity):
            max_liquidity(-1, 3)


class TestAverageLiquidity:
    """Тесты average policy"""

    def test_pair_integer_division(self):
        assert average_liquidity(100, 51) == 75
        assert average_liquidity(100, 100) == 100
        assert average_liquidity(1, 0) == 0

    def test_batch(self):
        assert average_liquidity_batch([1, 2, 3, 4]) == 2
        assert average_liquidity_batch([100, 0, 0]) == 33

    @pytest.mark.parametrize("quantities", [[], [5]])
    def test_batch_too_few(self, quantities):
        with pytest.raises(TooFewInputs, match="average_liquidity_batch"):
            average_liquidity_batch(quantities)

    @pytest.mark.parametrize(
        "a,b", [(0, 0), (1, 0), (3, 4), (100, 51), (10**12, 7), (2**63 - 1, 2**63 - 1)]
    )
    def test_batch_matches_pair(self, a, b):
        """averageOfBatch([a, b]) == averageOf(a, b)"""
        assert average_liquidity_batch([a, b]) == average_liquidity(a, b)

    def test_all_zero_yields_zero(self):
        # b == 0 отклоняется потребителем, не селектором
        assert average_liquidity_batch([0, 0, 0]) == 0


class TestSelectLiquidity:
    """Тесты select_liquidity"""

    def test_dispatch(self):
        quantities = [30, 10, 20]
        assert select_liquidity(quantities, LiquidityPolicy.AVERAGE) == 20
        assert select_liquidity(quantities, LiquidityPolicy.MAX) == 30
        assert select_liquidity(quantities, LiquidityPolicy.FIXED) == FIXED_LIQUIDITY_PARAMETER

    def test_default_is_average(self):
        assert select_liquidity([30, 10]) == 20

    def test_fixed_still_checks_shape(self):
        with pytest.raises(TooFewInputs):
            select_liquidity([5], LiquidityPolicy.FIXED)

    def test_fixed_still_checks_values(self):
        with pytest.raises(InvalidQuantity):
            select_liquidity([5, -1], LiquidityPolicy.FIXED)

    def test_inputs_not_mutated(self):
        quantities = [5, 1, 9]
        for policy in LiquidityPolicy:
            select_liquidity(quantities, policy)
        assert quantities == [5, 1, 9]
