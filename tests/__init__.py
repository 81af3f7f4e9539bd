"""
Test suite for the LMSR engine

Contains:
- tests/unit/          : Unit tests for individual modules
"""
