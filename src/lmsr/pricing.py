"""
Pricing — LMSR цена первого исхода

ФОРМУЛЫ:
    2 исхода:  p = exp(q1/b) / (exp(q1/b) + exp(q2/b))
    3 исхода:  p = exp(q1/b) / (exp(q1/b) + exp(q2/b) + exp(q3/b))
    N исходов: p = (q1/b) / Σ (q_i/b)          # линейное отношение

ВНИМАНИЕ: batch-форма (N исходов) — линейная аппроксимация, а не softmax.
Нормализация расходится с 2/3-исходными формами; поведение воспроизводится
как есть. Например, price_batch([0, 5]) == 0, тогда как price(0, 5) > 0.

Все промежуточные значения считаются в backend (default: 64.64).
Любая ошибка арифметики прерывает расчёт (ArithmeticOverflow).
"""

import logging
from typing import Sequence, TypeVar

from src.core.domain.pricing import LiquidityPolicy
from src.core.errors import ArithmeticOverflow, InvalidQuantity
from src.core.math.fixed_point import DEFAULT_BACKEND, FixedPointBackend
from src.core.math.numerical_safeguards import (
    MIN_OUTCOMES_BATCH,
    MIN_OUTCOMES_TRIPLE,
    require_min_length,
    validate_liquidity,
    validate_quantities,
    validate_quantity,
)
from src.lmsr.liquidity import select_liquidity

logger = logging.getLogger(__name__)

T = TypeVar("T")


# =============================================================================
# ВНУТРЕННИЕ ПОМОЩНИКИ
# =============================================================================


def _scaled(q: int, b: int, backend: FixedPointBackend[T]) -> T:
    """q / b в представлении backend"""
    return backend.div(backend.from_uint(q), backend.from_uint(b))


def _exponential_price(
    quantities: Sequence[int],
    b: int,
    backend: FixedPointBackend[T],
) -> T:
    """
    exp(q1/b) / Σ exp(q_i/b) по всем переданным quantities.

    Цена строго внутри (0, 1). Float backend насыщается до 1.0 при большом
    разрыве q/b, такой результат считается потерей точности.
    """
    exps = [backend.exp(_scaled(q, b, backend)) for q in quantities]

    denominator = exps[0]
    for term in exps[1:]:
        denominator = backend.add(denominator, term)

    result = backend.div(exps[0], denominator)
    if not backend.from_uint(0) < result < backend.from_uint(1):
        raise ArithmeticOverflow(
            f"price: result {backend.to_float(result)} saturated outside (0, 1)"
        )

    return result


# =============================================================================
# 2 ИСХОДА
# =============================================================================


def price_with_liquidity(
    q1: int,
    q2: int,
    b: int,
    *,
    backend: FixedPointBackend[T] = DEFAULT_BACKEND,
) -> T:
    """
    Цена исхода 1 для двух исходов с явным b.

    Args:
        q1: Quantity исхода 1
        q2: Quantity исхода 2
        b: Параметр ликвидности (> 0)
        backend: Fixed-point backend

    Returns:
        Цена в (0, 1) в представлении backend

    Raises:
        InvalidQuantity: Если q1/q2/b не неотрицательные целые
        ZeroLiquidityParameter: Если b == 0
        ArithmeticOverflow: Если q/b выходит за предел exp

    Examples:
        >>> from src.core.math.fixed_point import ONE_64x64
        >>> price_with_liquidity(100, 100, 50) == ONE_64x64 // 2
        True
    """
    validate_quantity(q1, "q1")
    validate_quantity(q2, "q2")
    validate_liquidity(b)

    return _exponential_price((q1, q2), b, backend)


def price(
    q1: int,
    q2: int,
    *,
    policy: LiquidityPolicy = LiquidityPolicy.AVERAGE,
    backend: FixedPointBackend[T] = DEFAULT_BACKEND,
) -> T:
    """
    Цена исхода 1 для двух исходов, b выводится по policy (default: average).

    Raises:
        ZeroLiquidityParameter: Если выведенный b == 0 (например, q1 + q2 < 2)
        ArithmeticOverflow: При переполнении fixed-point
    """
    b = select_liquidity((q1, q2), policy)
    return price_with_liquidity(q1, q2, b, backend=backend)


# =============================================================================
# 3 ИСХОДА
# =============================================================================


def price_triple(
    quantities: Sequence[int],
    *,
    policy: LiquidityPolicy = LiquidityPolicy.AVERAGE,
    backend: FixedPointBackend[T] = DEFAULT_BACKEND,
) -> T:
    """
    Цена исхода 1 для трёх исходов.

    Цена использует только первые три элемента, b выводится из всей
    последовательности.

    Raises:
        TooFewInputs: Если len(quantities) < 3
        ZeroLiquidityParameter: Если выведенный b == 0
        ArithmeticOverflow: При переполнении fixed-point
    """
    require_min_length(quantities, MIN_OUTCOMES_TRIPLE, "price_triple")
    validate_quantities(quantities)

    b = validate_liquidity(select_liquidity(quantities, policy))
    return _exponential_price(quantities[:MIN_OUTCOMES_TRIPLE], b, backend)


# =============================================================================
# N ИСХОДОВ (LINEAR RATIO)
# =============================================================================


def price_batch(
    quantities: Sequence[int],
    *,
    policy: LiquidityPolicy = LiquidityPolicy.AVERAGE,
    backend: FixedPointBackend[T] = DEFAULT_BACKEND,
) -> T:
    """
    Цена исхода 1 для N исходов: (q1/b) / Σ (q_i/b).

    Линейное отношение без экспоненты. Результат лежит в [0, 1] и равен 0,
    если q1 == 0.

    Raises:
        TooFewInputs: Если len(quantities) < 2
        ZeroLiquidityParameter: Если выведенный b == 0
        InvalidQuantity: Если все quantities равны 0 (fixed policy)
        ArithmeticOverflow: При переполнении fixed-point
    """
    require_min_length(quantities, MIN_OUTCOMES_BATCH, "price_batch")
    validate_quantities(quantities)

    b = validate_liquidity(select_liquidity(quantities, policy))

    # Fixed policy даёт b > 0 и для нулевых quantities, знаменатель тогда 0
    if not any(quantities):
        raise InvalidQuantity("price_batch: all quantities are zero")

    terms = [_scaled(q, b, backend) for q in quantities]

    denominator = terms[0]
    for term in terms[1:]:
        denominator = backend.add(denominator, term)

    logger.debug("price_batch over %d outcomes with b=%d", len(quantities), b)
    return backend.div(terms[0], denominator)
