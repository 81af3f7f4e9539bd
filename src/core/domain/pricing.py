"""
Pricing — Модели запросов и результатов LMSR engine

Immutable Pydantic модели host-интерфейса:
- PricingRequest: операция и quantities (contracts/schema/pricing_request.json)
- PricingOutcome: явный результат успех/ошибка (contracts/schema/pricing_outcome.json)

Модели проверяют только структуру. Минимальная длина, ненулевой b и
переполнение проверяются ядром и попадают в PricingOutcome как ErrorCode.
"""

from enum import Enum
from typing import Annotated, Optional

from pydantic import BaseModel, Field, StrictInt, model_validator

from src.core.errors import ErrorCode, LmsrError


# =============================================================================
# ENUMS
# =============================================================================


class LiquidityPolicy(str, Enum):
    """Политика выбора параметра ликвидности b"""

    FIXED = "fixed"
    MAX = "max"
    AVERAGE = "average"


class Operation(str, Enum):
    """Операции LMSR engine"""

    PRICE = "price"
    PRICE_TRIPLE = "price_triple"
    PRICE_BATCH = "price_batch"
    TRADE_COST = "trade_cost"
    TRADE_COST_TRIPLE = "trade_cost_triple"
    TRADE_COST_BATCH = "trade_cost_batch"
    LIQUIDITY = "liquidity"


TRADE_COST_OPERATIONS = frozenset(
    {Operation.TRADE_COST, Operation.TRADE_COST_TRIPLE, Operation.TRADE_COST_BATCH}
)

# Операции, принимающие явный b
EXPLICIT_LIQUIDITY_OPERATIONS = frozenset({Operation.PRICE, Operation.TRADE_COST})


Quantity = Annotated[StrictInt, Field(ge=0)]


# =============================================================================
# REQUEST
# =============================================================================


class PricingRequest(BaseModel):
    """
    Запрос на вычисление.

    Для trade cost операций quantities — initial состояние,
    final_quantities — final состояние.
    """

    operation: Operation = Field(..., description="Операция engine")
    quantities: list[Quantity] = Field(
        ..., description="Quantities (initial состояние для trade cost)"
    )
    final_quantities: Optional[list[Quantity]] = Field(
        None, description="Final состояние (только trade cost операции)"
    )
    liquidity: Optional[StrictInt] = Field(
        None, ge=0, description="Явный b (только price и trade_cost)"
    )
    policy: Optional[LiquidityPolicy] = Field(
        None, description="Политика выбора b (default: из EngineConfig)"
    )

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_operation_shape(self) -> "PricingRequest":
        """Проверка согласованности полей с операцией"""
        is_trade_cost = self.operation in TRADE_COST_OPERATIONS

        if is_trade_cost and self.final_quantities is None:
            raise ValueError(f"{self.operation.value} requires final_quantities")

        if not is_trade_cost and self.final_quantities is not None:
            raise ValueError(f"{self.operation.value} does not accept final_quantities")

        if self.liquidity is not None:
            if self.operation not in EXPLICIT_LIQUIDITY_OPERATIONS:
                raise ValueError(f"{self.operation.value} does not accept liquidity")
            if self.policy is not None:
                raise ValueError("liquidity and policy are mutually exclusive")

        return self


# =============================================================================
# OUTCOME
# =============================================================================


class PricingOutcome(BaseModel):
    """
    Явный результат вычисления.

    ok=True: value (float) и raw (64.64 raw int для целочисленного backend,
    точный b для операции liquidity).
    ok=False: error (ErrorCode) и message.
    """

    operation: Operation = Field(..., description="Выполненная операция")
    ok: bool = Field(..., description="Успешность вычисления")
    value: Optional[float] = Field(None, description="Результат (float)")
    raw: Optional[int] = Field(None, description="Raw 64.64 значение (nullable)")
    error: Optional[ErrorCode] = Field(None, description="Код ошибки (nullable)")
    message: Optional[str] = Field(None, description="Описание ошибки (nullable)")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_consistency(self) -> "PricingOutcome":
        if self.ok and (self.value is None or self.error is not None):
            raise ValueError("successful outcome requires value and no error")
        if not self.ok and (self.error is None or self.value is not None):
            raise ValueError("failed outcome requires error and no value")
        return self

    @classmethod
    def success(
        cls, operation: Operation, value: float, raw: Optional[int] = None
    ) -> "PricingOutcome":
        return cls(operation=operation, ok=True, value=value, raw=raw)

    @classmethod
    def failure(cls, operation: Operation, error: LmsrError) -> "PricingOutcome":
        return cls(operation=operation, ok=False, error=error.code, message=str(error))
