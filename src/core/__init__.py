"""
Core error taxonomy, domain models, mathematical primitives, and contracts.

This module contains the foundational building blocks of the LMSR engine
that are independent of any hosting environment.
"""
