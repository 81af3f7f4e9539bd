"""
Fixed Point — Арифметический примитив для LMSR

Модуль задаёт capability-интерфейс FixedPointBackend и две реализации:
- Q64x64Backend: знаковый 64.64 fixed point поверх int (default)
- FloatBackend: IEEE double, reference-реализация для сверки

Формат 64.64:
    raw int v представляет значение v / 2**64
    диапазон: [-2**127, 2**127 - 1]

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Переполнение никогда не wrap-ается: ArithmeticOverflow
2. Деление на ноль → ArithmeticOverflow (fallback не подставляется)
3. Все операции детерминированы и воспроизводимы
"""

import math
from decimal import ROUND_FLOOR, Decimal, localcontext
from typing import Final, Protocol, TypeVar

from src.core.errors import ArithmeticOverflow

# =============================================================================
# 64.64 ПАРАМЕТРЫ
# =============================================================================

FRACTION_BITS: Final[int] = 64

# 1.0 в raw представлении
ONE_64x64: Final[int] = 1 << FRACTION_BITS

MIN_64x64: Final[int] = -(1 << 127)
MAX_64x64: Final[int] = (1 << 127) - 1

# Максимальное целое, конвертируемое в 64.64
MAX_UINT_64x64: Final[int] = (1 << 63) - 1

# |x| >= 64.0: exp за пределами диапазона (x > 0) или flush в 0 (x < 0)
EXP_ARGUMENT_LIMIT: Final[int] = 64 << FRACTION_BITS

# Точность decimal для exp: 2**127 требует 39 значащих цифр
EXP_DECIMAL_PRECISION: Final[int] = 60

_ONE_DECIMAL: Final[Decimal] = Decimal(ONE_64x64)


T = TypeVar("T")


class FixedPointBackend(Protocol[T]):
    """
    Capability-интерфейс арифметики для pricing.

    Каждая операция либо возвращает значение, либо поднимает
    ArithmeticOverflow. Pricing-логика зависит только от этого интерфейса.
    """

    name: str

    def from_uint(self, value: int) -> T: ...

    def add(self, x: T, y: T) -> T: ...

    def sub(self, x: T, y: T) -> T: ...

    def div(self, x: T, y: T) -> T: ...

    def exp(self, x: T) -> T: ...

    def to_float(self, x: T) -> float: ...


# =============================================================================
# Q64.64 BACKEND
# =============================================================================


class Q64x64Backend:
    """
    Знаковый 64.64 fixed point.

    Значения — обычные int (raw), что делает результат точным и
    сравнимым через ==.

    Examples:
        >>> q = Q64x64Backend()
        >>> q.div(q.from_uint(1), q.from_uint(2)) == ONE_64x64 // 2
        True
    """

    name = "q64x64"

    def _checked(self, raw: int, operation: str) -> int:
        if raw < MIN_64x64 or raw > MAX_64x64:
            raise ArithmeticOverflow(f"{operation}: result {raw} out of 64.64 range")
        return raw

    def from_uint(self, value: int) -> int:
        """
        Конверсия неотрицательного целого в 64.64.

        Raises:
            ArithmeticOverflow: Если value < 0 или value > 2**63 - 1
        """
        if value < 0 or value > MAX_UINT_64x64:
            raise ArithmeticOverflow(f"from_uint: {value} not representable in 64.64")
        return value << FRACTION_BITS

    def add(self, x: int, y: int) -> int:
        return self._checked(x + y, "add")

    def sub(self, x: int, y: int) -> int:
        return self._checked(x - y, "sub")

    def div(self, x: int, y: int) -> int:
        """
        Деление x / y с усечением к нулю.

        Raises:
            ArithmeticOverflow: Если y == 0 или результат вне диапазона
        """
        if y == 0:
            raise ArithmeticOverflow("div: division by zero")

        # Усечение к нулю (floor division в Python округляет к -inf)
        quotient = abs(x << FRACTION_BITS) // abs(y)
        if (x < 0) != (y < 0):
            quotient = -quotient

        return self._checked(quotient, "div")

    def exp(self, x: int) -> int:
        """
        Натуральная экспонента e**x в 64.64.

        Результат = floor(e**x * 2**64), вычисленный в decimal с
        EXP_DECIMAL_PRECISION значащими цифрами.

        Raises:
            ArithmeticOverflow: Если x >= 64.0 или e**x > MAX_64x64
        """
        if x >= EXP_ARGUMENT_LIMIT:
            raise ArithmeticOverflow(f"exp: argument {x / ONE_64x64:.6f} too large")

        # Underflow: результат меньше наименьшего шага 2**-64
        if x < -EXP_ARGUMENT_LIMIT:
            return 0

        with localcontext() as ctx:
            ctx.prec = EXP_DECIMAL_PRECISION
            scaled = (Decimal(x) / _ONE_DECIMAL).exp() * _ONE_DECIMAL
            raw = int(scaled.to_integral_value(rounding=ROUND_FLOOR))

        return self._checked(raw, "exp")

    def to_float(self, x: int) -> float:
        return x / ONE_64x64


# =============================================================================
# FLOAT REFERENCE BACKEND
# =============================================================================


class FloatBackend:
    """
    IEEE double backend.

    Используется как reference для сверки Q64x64Backend в тестах и как
    альтернативный backend через EngineConfig. NaN/Inf не санитизируются,
    а поднимаются как ArithmeticOverflow.
    """

    name = "float"

    def _checked(self, value: float, operation: str) -> float:
        if not math.isfinite(value):
            raise ArithmeticOverflow(f"{operation}: non-finite result {value}")
        return value

    def from_uint(self, value: int) -> float:
        if value < 0:
            raise ArithmeticOverflow(f"from_uint: negative value {value}")
        try:
            return float(value)
        except OverflowError as e:
            raise ArithmeticOverflow(f"from_uint: {value} not representable") from e

    def add(self, x: float, y: float) -> float:
        return self._checked(x + y, "add")

    def sub(self, x: float, y: float) -> float:
        return self._checked(x - y, "sub")

    def div(self, x: float, y: float) -> float:
        if y == 0.0:
            raise ArithmeticOverflow("div: division by zero")
        return self._checked(x / y, "div")

    def exp(self, x: float) -> float:
        try:
            return self._checked(math.exp(x), "exp")
        except OverflowError as e:
            raise ArithmeticOverflow(f"exp: argument {x} too large") from e

    def to_float(self, x: float) -> float:
        return x


# Backend по умолчанию для всех pricing-функций
DEFAULT_BACKEND: Final[Q64x64Backend] = Q64x64Backend()
