"""
LMSR (Logarithmic Market Scoring Rule) pricing engine.

Stateless pure functions over a fixed-point backend:
- liquidity: policies for the liquidity parameter b
- pricing: price of outcome 1 for 2, 3 and N outcomes
- trade_cost: price delta between two quantity states
- engine: host-facing dispatcher with an explicit result type
"""

from src.lmsr.config import BackendKind, EngineConfig
from src.lmsr.engine import LmsrEngine
from src.lmsr.liquidity import (
    FIXED_LIQUIDITY_PARAMETER,
    average_liquidity,
    average_liquidity_batch,
    fixed_liquidity,
    max_liquidity,
    max_liquidity_batch,
    select_liquidity,
)
from src.lmsr.pricing import price, price_batch, price_triple, price_with_liquidity
from src.lmsr.trade_cost import (
    trade_cost,
    trade_cost_batch,
    trade_cost_triple,
    trade_cost_with_liquidity,
)

__all__ = [
    # Config
    "BackendKind",
    "EngineConfig",
    # Engine
    "LmsrEngine",
    # Liquidity
    "FIXED_LIQUIDITY_PARAMETER",
    "average_liquidity",
    "average_liquidity_batch",
    "fixed_liquidity",
    "max_liquidity",
    "max_liquidity_batch",
    "select_liquidity",
    # Pricing
    "price",
    "price_batch",
    "price_triple",
    "price_with_liquidity",
    # Trade cost
    "trade_cost",
    "trade_cost_batch",
    "trade_cost_triple",
    "trade_cost_with_liquidity",
]
