"""
Test suite for bigint

Contains:
- tests/unit/          : Unit tests for digit codec, magnitude primitives,
                         conversion, SignedInteger and contracts
"""
