"""
Errors — Таксономия ошибок LMSR engine

Все ошибки ядра наследуют LmsrError и несут стабильный ErrorCode,
который host-слой (LmsrEngine) переносит в PricingOutcome.

ПОЛИТИКА:
1. Ошибка прерывает вычисление немедленно (без partial result)
2. Ядро не перехватывает собственные ошибки
3. Только LmsrEngine.evaluate конвертирует ошибку в явный результат
"""

from enum import Enum
from typing import ClassVar


class ErrorCode(str, Enum):
    """Стабильные коды ошибок для контрактов"""

    TOO_FEW_INPUTS = "too_few_inputs"
    LENGTH_MISMATCH = "length_mismatch"
    ARITHMETIC_OVERFLOW = "arithmetic_overflow"
    ZERO_LIQUIDITY = "zero_liquidity"
    INVALID_QUANTITY = "invalid_quantity"


class LmsrError(Exception):
    """Базовая ошибка LMSR engine."""

    code: ClassVar[ErrorCode]


class TooFewInputs(LmsrError, ValueError):
    """
    Последовательность quantities короче минимума операции.

    Pairwise/batch варианты требуют >= 2 элементов, triple — >= 3.
    """

    code = ErrorCode.TOO_FEW_INPUTS


class LengthMismatch(LmsrError, ValueError):
    """Initial и final состояния trade cost имеют разную длину."""

    code = ErrorCode.LENGTH_MISMATCH


class ArithmeticOverflow(LmsrError, ArithmeticError):
    """
    Операция fixed-point вышла за представимый диапазон.

    Включает деление на ноль внутри fixed-point div: значение не wrap-ается
    и не подменяется fallback.
    """

    code = ErrorCode.ARITHMETIC_OVERFLOW


class ZeroLiquidityParameter(LmsrError, ValueError):
    """
    Параметр ликвидности b равен нулю.

    Возникает как для явного b, так и для выведенного
    (например, average policy над нулевыми quantities).
    """

    code = ErrorCode.ZERO_LIQUIDITY


class InvalidQuantity(LmsrError, ValueError):
    """Quantity или b не является неотрицательным целым."""

    code = ErrorCode.INVALID_QUANTITY
