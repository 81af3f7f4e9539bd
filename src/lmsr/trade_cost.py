"""
Trade Cost — Стоимость перехода между состояниями quantities

    cost = price(final) - price(initial)

Положительная стоимость — покупка (оплата), отрицательная — кредит.

Для вариантов без явного b параметр выводится НЕЗАВИСИМО для initial и
final состояний: после сделки масштаб quantities смещается, и b
пересчитывается под новое состояние.
"""

import logging
from typing import Sequence, TypeVar

from src.core.domain.pricing import LiquidityPolicy
from src.core.math.fixed_point import DEFAULT_BACKEND, FixedPointBackend
from src.core.math.numerical_safeguards import (
    MIN_OUTCOMES_BATCH,
    MIN_OUTCOMES_TRIPLE,
    require_min_length,
    require_same_length,
)
from src.lmsr.pricing import price, price_batch, price_triple, price_with_liquidity

logger = logging.getLogger(__name__)

T = TypeVar("T")


def trade_cost_with_liquidity(
    q1_initial: int,
    q2_initial: int,
    q1_final: int,
    q2_final: int,
    b: int,
    *,
    backend: FixedPointBackend[T] = DEFAULT_BACKEND,
) -> T:
    """
    Стоимость сделки для двух исходов с общим явным b.

    Результат в точности равен
    price_with_liquidity(final) - price_with_liquidity(initial).

    Raises:
        ZeroLiquidityParameter: Если b == 0
        ArithmeticOverflow: При переполнении fixed-point
    """
    initial = price_with_liquidity(q1_initial, q2_initial, b, backend=backend)
    final = price_with_liquidity(q1_final, q2_final, b, backend=backend)
    return backend.sub(final, initial)


def trade_cost(
    q1_initial: int,
    q2_initial: int,
    q1_final: int,
    q2_final: int,
    *,
    policy: LiquidityPolicy = LiquidityPolicy.AVERAGE,
    backend: FixedPointBackend[T] = DEFAULT_BACKEND,
) -> T:
    """
    Стоимость сделки для двух исходов, b выводится отдельно для каждого состояния.

    Raises:
        ZeroLiquidityParameter: Если выведенный b любого состояния == 0
        ArithmeticOverflow: При переполнении fixed-point
    """
    initial = price(q1_initial, q2_initial, policy=policy, backend=backend)
    final = price(q1_final, q2_final, policy=policy, backend=backend)
    return backend.sub(final, initial)


def _check_states(
    initial: Sequence[int],
    final: Sequence[int],
    minimum: int,
    operation: str,
) -> None:
    # Сначала минимальная длина каждого состояния, затем совпадение длин
    require_min_length(initial, minimum, operation)
    require_min_length(final, minimum, operation)
    require_same_length(initial, final, operation)


def trade_cost_triple(
    initial: Sequence[int],
    final: Sequence[int],
    *,
    policy: LiquidityPolicy = LiquidityPolicy.AVERAGE,
    backend: FixedPointBackend[T] = DEFAULT_BACKEND,
) -> T:
    """
    Стоимость сделки через price_triple.

    Raises:
        TooFewInputs: Если любое состояние короче 3
        LengthMismatch: Если длины состояний различаются
        ArithmeticOverflow: При переполнении fixed-point
    """
    _check_states(initial, final, MIN_OUTCOMES_TRIPLE, "trade_cost_triple")

    price_initial = price_triple(initial, policy=policy, backend=backend)
    price_final = price_triple(final, policy=policy, backend=backend)
    return backend.sub(price_final, price_initial)


def trade_cost_batch(
    initial: Sequence[int],
    final: Sequence[int],
    *,
    policy: LiquidityPolicy = LiquidityPolicy.AVERAGE,
    backend: FixedPointBackend[T] = DEFAULT_BACKEND,
) -> T:
    """
    Стоимость сделки через price_batch (линейное отношение).

    Raises:
        TooFewInputs: Если любое состояние короче 2
        LengthMismatch: Если длины состояний различаются
        ArithmeticOverflow: При переполнении fixed-point
    """
    _check_states(initial, final, MIN_OUTCOMES_BATCH, "trade_cost_batch")

    price_initial = price_batch(initial, policy=policy, backend=backend)
    price_final = price_batch(final, policy=policy, backend=backend)

    logger.debug("trade_cost_batch over %d outcomes", len(initial))
    return backend.sub(price_final, price_initial)
