"""
Numerical Safeguards — Валидация входов LMSR engine

Модуль проверяет входы до начала fixed-point арифметики:
- Quantity и b — неотрицательные целые (bool отклоняется)
- Минимальная длина последовательности quantities
- Совпадение длин initial/final состояний
- Ненулевой параметр ликвидности b

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Деление на b == 0 никогда не происходит (ZeroLiquidityParameter)
2. Usage errors отделены от численных ошибок (ArithmeticOverflow)
3. Входы не мутируются
"""

from typing import Final, Sequence

from src.core.errors import (
    InvalidQuantity,
    LengthMismatch,
    TooFewInputs,
    ZeroLiquidityParameter,
)

# =============================================================================
# МИНИМАЛЬНЫЕ ДЛИНЫ
# =============================================================================

# Pairwise и batch варианты
MIN_OUTCOMES_BATCH: Final[int] = 2

# Triple вариант
MIN_OUTCOMES_TRIPLE: Final[int] = 3


# =============================================================================
# ВАЛИДАЦИЯ ЗНАЧЕНИЙ
# =============================================================================


def validate_quantity(value: int, name: str) -> int:
    """
    Валидация, что значение — неотрицательное целое.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Returns:
        value без изменений

    Raises:
        InvalidQuantity: Если value не int, является bool или < 0
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidQuantity(
            f"{name} must be a non-negative integer, got {type(value).__name__}"
        )

    if value < 0:
        raise InvalidQuantity(f"{name} must be non-negative, got {value}")

    return value


def validate_quantities(quantities: Sequence[int], name: str = "quantities") -> None:
    """Валидация каждого элемента последовательности quantities."""
    for index, value in enumerate(quantities):
        validate_quantity(value, f"{name}[{index}]")


def validate_liquidity(b: int, name: str = "b") -> int:
    """
    Валидация параметра ликвидности.

    Raises:
        InvalidQuantity: Если b не неотрицательное целое
        ZeroLiquidityParameter: Если b == 0
    """
    validate_quantity(b, name)

    if b == 0:
        raise ZeroLiquidityParameter(f"{name} must be positive, got 0")

    return b


# =============================================================================
# ВАЛИДАЦИЯ ФОРМЫ
# =============================================================================


def require_min_length(
    quantities: Sequence[int],
    minimum: int,
    operation: str,
) -> None:
    """
    Проверка минимальной длины последовательности.

    Raises:
        TooFewInputs: Если len(quantities) < minimum
    """
    if len(quantities) < minimum:
        raise TooFewInputs(
            f"{operation} requires at least {minimum} quantities, got {len(quantities)}"
        )


def require_same_length(
    initial: Sequence[int],
    final: Sequence[int],
    operation: str,
) -> None:
    """
    Проверка совпадения длин initial/final состояний.

    Raises:
        LengthMismatch: Если длины различаются
    """
    if len(initial) != len(final):
        raise LengthMismatch(
            f"{operation}: initial has {len(initial)} quantities, final has {len(final)}"
        )
