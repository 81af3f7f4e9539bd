"""
Core math modules для LMSR engine

Fixed-point арифметика с детекцией переполнения и валидация входов.
"""

# Fixed Point
from src.core.math.fixed_point import (
    DEFAULT_BACKEND,
    EXP_ARGUMENT_LIMIT,
    MAX_64x64,
    MAX_UINT_64x64,
    MIN_64x64,
    ONE_64x64,
    FixedPointBackend,
    FloatBackend,
    Q64x64Backend,
)

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    MIN_OUTCOMES_BATCH,
    MIN_OUTCOMES_TRIPLE,
    require_min_length,
    require_same_length,
    validate_liquidity,
    validate_quantities,
    validate_quantity,
)

__all__ = [
    # Fixed Point — Constants
    "DEFAULT_BACKEND",
    "EXP_ARGUMENT_LIMIT",
    "MAX_64x64",
    "MAX_UINT_64x64",
    "MIN_64x64",
    "ONE_64x64",
    # Fixed Point — Backends
    "FixedPointBackend",
    "FloatBackend",
    "Q64x64Backend",
    # Numerical Safeguards — Constants
    "MIN_OUTCOMES_BATCH",
    "MIN_OUTCOMES_TRIPLE",
    # Numerical Safeguards — Validation
    "require_min_length",
    "require_same_length",
    "validate_liquidity",
    "validate_quantities",
    "validate_quantity",
]
