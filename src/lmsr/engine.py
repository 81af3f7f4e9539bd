"""
LmsrEngine — Host-интерфейс LMSR engine

Ядро (pricing, trade_cost, liquidity) поднимает ошибки немедленно.
LmsrEngine — единственное место, где ошибки таксономии LmsrError
конвертируются в явный результат PricingOutcome.

Поток:
    payload (dict) → JSON Schema → PricingRequest → ядро → PricingOutcome
"""

import logging
from typing import Any, Dict, Optional

from src.core.contracts import validate_pricing_request
from src.core.domain.pricing import LiquidityPolicy, Operation, PricingOutcome, PricingRequest
from src.core.errors import LengthMismatch, LmsrError
from src.core.math.numerical_safeguards import (
    MIN_OUTCOMES_BATCH,
    require_min_length,
    require_same_length,
)
from src.lmsr.config import EngineConfig
from src.lmsr.liquidity import select_liquidity
from src.lmsr.pricing import price, price_batch, price_triple, price_with_liquidity
from src.lmsr.trade_cost import (
    trade_cost,
    trade_cost_batch,
    trade_cost_triple,
    trade_cost_with_liquidity,
)

logger = logging.getLogger(__name__)


class LmsrEngine:
    """
    Диспетчер операций LMSR поверх выбранного backend.

    Stateless: один экземпляр можно разделять между вызовами и потоками.
    """

    def __init__(self, config: Optional[EngineConfig] = None):
        self.config = config or EngineConfig()
        self.backend = self.config.build_backend()

    def evaluate_payload(self, payload: Dict[str, Any]) -> PricingOutcome:
        """
        Разбор и вычисление JSON payload.

        Raises:
            jsonschema.ValidationError: Если payload нарушает pricing_request контракт
            pydantic.ValidationError: Если payload структурно некорректен
        """
        if self.config.validate_contracts:
            validate_pricing_request(payload)

        return self.evaluate(PricingRequest.model_validate(payload))

    def evaluate(self, request: PricingRequest) -> PricingOutcome:
        """
        Вычисление запроса.

        Ошибки LmsrError не поднимаются, а возвращаются как ok=False.
        """
        try:
            result = self._dispatch(request)
        except LmsrError as e:
            logger.warning(
                "LMSR %s failed: %s (%s)", request.operation.value, e.code.value, e
            )
            return PricingOutcome.failure(request.operation, e)

        if request.operation == Operation.LIQUIDITY:
            # b — целое, raw хранит его без потери точности float
            return PricingOutcome.success(request.operation, float(result), raw=result)

        # raw доступен только для целочисленного backend
        raw = result if isinstance(result, int) else None
        value = self.backend.to_float(result)

        logger.debug("LMSR %s -> %.12f", request.operation.value, value)
        return PricingOutcome.success(request.operation, value, raw=raw)

    def _policy(self, request: PricingRequest) -> LiquidityPolicy:
        return request.policy or self.config.liquidity_policy

    def _dispatch(self, request: PricingRequest) -> Any:
        operation = request.operation
        quantities = request.quantities
        final = request.final_quantities or []
        policy = self._policy(request)
        backend = self.backend

        if operation == Operation.LIQUIDITY:
            return select_liquidity(quantities, policy)

        if operation == Operation.PRICE:
            q1, q2 = _pair(quantities, operation)
            if request.liquidity is not None:
                return price_with_liquidity(q1, q2, request.liquidity, backend=backend)
            return price(q1, q2, policy=policy, backend=backend)

        if operation == Operation.PRICE_TRIPLE:
            return price_triple(quantities, policy=policy, backend=backend)

        if operation == Operation.PRICE_BATCH:
            return price_batch(quantities, policy=policy, backend=backend)

        if operation == Operation.TRADE_COST:
            require_min_length(quantities, MIN_OUTCOMES_BATCH, operation.value)
            require_min_length(final, MIN_OUTCOMES_BATCH, operation.value)
            require_same_length(quantities, final, operation.value)
            q1_i, q2_i = _pair(quantities, operation)
            q1_f, q2_f = _pair(final, operation)
            if request.liquidity is not None:
                return trade_cost_with_liquidity(
                    q1_i, q2_i, q1_f, q2_f, request.liquidity, backend=backend
                )
            return trade_cost(q1_i, q2_i, q1_f, q2_f, policy=policy, backend=backend)

        if operation == Operation.TRADE_COST_TRIPLE:
            return trade_cost_triple(quantities, final, policy=policy, backend=backend)

        if operation == Operation.TRADE_COST_BATCH:
            return trade_cost_batch(quantities, final, policy=policy, backend=backend)

        raise ValueError(f"Unknown operation: {operation}")


def _pair(quantities: list[int], operation: Operation) -> tuple[int, int]:
    """
    Ровно два элемента для pairwise операций.

    Raises:
        TooFewInputs: Если элементов меньше двух
        LengthMismatch: Если элементов больше двух
    """
    require_min_length(quantities, MIN_OUTCOMES_BATCH, operation.value)
    if len(quantities) > MIN_OUTCOMES_BATCH:
        raise LengthMismatch(
            f"{operation.value} expects exactly {MIN_OUTCOMES_BATCH} quantities, got {len(quantities)}"
        )
    return quantities[0], quantities[1]
