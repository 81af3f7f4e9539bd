"""
EngineConfig — Конфигурация LMSR engine

Immutable Pydantic модель. Не читает окружение: host создаёт конфигурацию
явно и передаёт её в LmsrEngine.
"""

from enum import Enum

from pydantic import BaseModel, Field

from src.core.domain.pricing import LiquidityPolicy
from src.core.math.fixed_point import FixedPointBackend, FloatBackend, Q64x64Backend


class BackendKind(str, Enum):
    """Fixed-point backend"""

    Q64X64 = "q64x64"
    FLOAT = "float"


class EngineConfig(BaseModel):
    """Конфигурация LmsrEngine."""

    backend: BackendKind = Field(
        BackendKind.Q64X64, description="Арифметический backend"
    )
    liquidity_policy: LiquidityPolicy = Field(
        LiquidityPolicy.AVERAGE,
        description="Политика выбора b, если запрос не задаёт ни b, ни policy",
    )
    validate_contracts: bool = Field(
        True, description="Проверять payload против JSON Schema до разбора"
    )

    model_config = {"frozen": True}

    def build_backend(self) -> FixedPointBackend:
        if self.backend == BackendKind.FLOAT:
            return FloatBackend()
        return Q64x64Backend()
