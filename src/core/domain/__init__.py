"""
Domain models and value objects.

Contains the request/outcome models of the LMSR engine.
"""

from src.core.domain.pricing import (
    EXPLICIT_LIQUIDITY_OPERATIONS,
    TRADE_COST_OPERATIONS,
    LiquidityPolicy,
    Operation,
    PricingOutcome,
    PricingRequest,
)

__all__ = [
    "EXPLICIT_LIQUIDITY_OPERATIONS",
    "TRADE_COST_OPERATIONS",
    "LiquidityPolicy",
    "Operation",
    "PricingOutcome",
    "PricingRequest",
]
