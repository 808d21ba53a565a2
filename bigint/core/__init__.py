"""
Core domain models, mathematical primitives, and contracts.

This module contains the foundational building blocks of arbitrary-precision
integer arithmetic: bit-level magnitude primitives, decimal/binary conversion,
the signed integer value type, and its serialized contract.
"""
