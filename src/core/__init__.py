"""
Core domain models, mathematical primitives, and invariants.

This module contains the arbitrary-precision integer engine: group
arithmetic, the decimal codec, the BigNumber value type and its contracts.
"""
