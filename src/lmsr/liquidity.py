"""
Liquidity — Выбор параметра ликвидности b

Модуль выводит b из quantities по одной из политик:
- fixed: жёсткая константа (не рекомендуется для общего использования)
- max: максимум quantities
- average: целочисленное среднее quantities (default для pricing)

Большой b сглаживает кривую цены, малый b делает её острее вокруг
текущего дисбаланса quantities.

Функции чистые: входы не мутируются, b возвращается как int.
Проверка b != 0 выполняется потребителем (pricing) через validate_liquidity.
"""

import logging
from typing import Final, Sequence

from src.core.domain.pricing import LiquidityPolicy
from src.core.math.numerical_safeguards import (
    MIN_OUTCOMES_BATCH,
    require_min_length,
    validate_quantities,
    validate_quantity,
)

logger = logging.getLogger(__name__)

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Фиксированный b. При q > ~4366 аргумент exp(q / b) превышает
# предел 64.64 и расчёт падает с ArithmeticOverflow.
FIXED_LIQUIDITY_PARAMETER: Final[int] = 100


# =============================================================================
# ПОЛИТИКИ
# =============================================================================


def fixed_liquidity() -> int:
    """
    Фиксированный b.

    Не рекомендуется: не адаптируется к масштабу quantities и вызывает
    ArithmeticOverflow при больших значениях.
    """
    return FIXED_LIQUIDITY_PARAMETER


def max_liquidity(q1: int, q2: int) -> int:
    """b = max(q1, q2)"""
    validate_quantity(q1, "q1")
    validate_quantity(q2, "q2")
    return max(q1, q2)


def max_liquidity_batch(quantities: Sequence[int]) -> int:
    """
    b = max(quantities)

    Raises:
        TooFewInputs: Если len(quantities) < 2
    """
    require_min_length(quantities, MIN_OUTCOMES_BATCH, "max_liquidity_batch")
    validate_quantities(quantities)
    return max(quantities)


def average_liquidity(q1: int, q2: int) -> int:
    """
    b = (q1 + q2) // 2

    Examples:
        >>> average_liquidity(100, 51)
        75
    """
    validate_quantity(q1, "q1")
    validate_quantity(q2, "q2")
    return (q1 + q2) // 2


def average_liquidity_batch(quantities: Sequence[int]) -> int:
    """
    b = sum(quantities) // len(quantities)

    Для двух элементов совпадает с average_liquidity.

    Raises:
        TooFewInputs: Если len(quantities) < 2
    """
    require_min_length(quantities, MIN_OUTCOMES_BATCH, "average_liquidity_batch")
    validate_quantities(quantities)
    return sum(quantities) // len(quantities)


def select_liquidity(
    quantities: Sequence[int],
    policy: LiquidityPolicy = LiquidityPolicy.AVERAGE,
) -> int:
    """
    Выбор b по политике через batch-форму.

    Args:
        quantities: Последовательность quantities (len >= 2)
        policy: Политика выбора (default: AVERAGE)

    Returns:
        b (может быть 0, проверяется потребителем)

    Raises:
        TooFewInputs: Если len(quantities) < 2
    """
    # Форма входа проверяется для всех политик, включая fixed
    require_min_length(quantities, MIN_OUTCOMES_BATCH, "select_liquidity")

    if policy == LiquidityPolicy.FIXED:
        validate_quantities(quantities)
        b = fixed_liquidity()
    elif policy == LiquidityPolicy.MAX:
        b = max_liquidity_batch(quantities)
    elif policy == LiquidityPolicy.AVERAGE:
        b = average_liquidity_batch(quantities)
    else:
        raise ValueError(f"Unknown liquidity policy: {policy}")

    logger.debug("Selected b=%d by %s policy for %d outcomes", b, policy.value, len(quantities))
    return b
