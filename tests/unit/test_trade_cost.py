"""
Тесты для Trade Cost

Проверяемые инварианты:
1. Без изменения quantities стоимость ровно 0
2. Fixed-b вариант точно равен разности цен
3. Выведенный b считается независимо для initial и final
4. TooFewInputs / LengthMismatch для triple/batch
5. ArithmeticOverflow прерывает расчёт
"""

import pytest

from src.core.errors import ArithmeticOverflow, LengthMismatch, TooFewInputs, ZeroLiquidityParameter
from src.core.math.fixed_point import FloatBackend, Q64x64Backend
from src.lmsr.pricing import price, price_batch, price_triple, price_with_liquidity
from src.lmsr.trade_cost import (
    trade_cost,
    trade_cost_batch,
    trade_cost_triple,
    trade_cost_with_liquidity,
)

Q64 = Q64x64Backend()


class TestTradeCostWithLiquidity:
    """Тесты trade_cost_with_liquidity"""

    @pytest.mark.parametrize(
        "q1_i,q2_i,q1_f,q2_f,b",
        [(10, 20, 30, 20, 40), (100, 100, 50, 100, 50), (0, 0, 7, 0, 3)],
    )
    def test_exact_price_difference(self, q1_i, q2_i, q1_f, q2_f, b):
        expected = price_with_liquidity(q1_f, q2_f, b) - price_with_liquidity(q1_i, q2_i, b)
        assert trade_cost_with_liquidity(q1_i, q2_i, q1_f, q2_f, b) == expected

    def test_buying_costs(self):
        assert trade_cost_with_liquidity(10, 20, 30, 20, 40) > 0

    def test_selling_credits(self):
        assert trade_cost_with_liquidity(30, 20, 10, 20, 40) < 0

    def test_no_change_is_zero(self):
        assert trade_cost_with_liquidity(17, 4, 17, 4, 9) == 0

    def test_overflow_aborts(self):
        with pytest.raises(ArithmeticOverflow):
            trade_cost_with_liquidity(0, 0, 5000, 0, 100)

    def test_zero_liquidity(self):
        with pytest.raises(ZeroLiquidityParameter):
            trade_cost_with_liquidity(1, 2, 3, 4, 0)


class TestTradeCostDerived:
    """Тесты trade_cost с независимым b для каждого состояния"""

    @pytest.mark.parametrize("q1,q2", [(1, 1), (10, 30), (500, 2)])
    def test_no_change_is_zero(self, q1, q2):
        assert trade_cost(q1, q2, q1, q2) == 0

    def test_independent_liquidity_per_state(self):
        result = trade_cost(10, 10, 30, 10)
        # b_initial = 10, b_final = 20
        assert result == price(30, 10) - price(10, 10)
        assert result != trade_cost_with_liquidity(10, 10, 30, 10, 10)
        assert Q64.to_float(result) > 0

    def test_float_backend_agrees(self):
        fixed = Q64.to_float(trade_cost(12, 40, 35, 40))
        reference = trade_cost(12, 40, 35, 40, backend=FloatBackend())
        assert fixed == pytest.approx(reference, rel=1e-10)

    def test_zero_liquidity_in_final_state(self):
        with pytest.raises(ZeroLiquidityParameter):
            trade_cost(10, 10, 1, 0)


class TestTradeCostTriple:
    """Тесты trade_cost_triple"""

    def test_price_difference(self):
        initial, final = [100, 0, 0], [0, 100, 0]
        expected = price_triple(final) - price_triple(initial)
        result = trade_cost_triple(initial, final)
        assert result == expected
        assert result < 0

    def test_no_change_is_zero(self):
        assert trade_cost_triple([5, 6, 7], [5, 6, 7]) == 0

    def test_too_few(self):
        with pytest.raises(TooFewInputs):
            trade_cost_triple([1, 2], [1, 2])
        with pytest.raises(TooFewInputs):
            trade_cost_triple([1, 2, 3], [1, 2])

    def test_length_mismatch(self):
        with pytest.raises(LengthMismatch):
            trade_cost_triple([1, 2, 3], [1, 2, 3, 4])


class TestTradeCostBatch:
    """Тесты trade_cost_batch"""

    def test_length_mismatch(self):
        with pytest.raises(LengthMismatch, match="trade_cost_batch"):
            trade_cost_batch([1, 2], [1, 2, 3])

    @pytest.mark.parametrize("initial,final", [([1], [1, 2]), ([1, 2], []), ([], [])])
    def test_too_few(self, initial, final):
        with pytest.raises(TooFewInputs):
            trade_cost_batch(initial, final)

    def test_no_change_is_zero(self):
        assert trade_cost_batch([30, 10, 20], [30, 10, 20]) == 0

    def test_price_difference(self):
        initial, final = [30, 10, 20], [60, 10, 20]
        assert trade_cost_batch(initial, final) == price_batch(final) - price_batch(initial)
        assert trade_cost_batch(initial, final) > 0
