"""
Test suite for BigNumber

Contains:
- tests/unit/          : Unit tests for individual modules
"""
