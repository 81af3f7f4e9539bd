"""
Contract Validation Module

Модуль для валидации JSON контрактов host-интерфейса LMSR engine.
"""

from .validators import (
    ContractValidator,
    PricingOutcomeValidator,
    PricingRequestValidator,
    SchemaLoader,
    validate_pricing_outcome,
    validate_pricing_request,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "PricingRequestValidator",
    "PricingOutcomeValidator",
    # Functions
    "validate_pricing_request",
    "validate_pricing_outcome",
]
