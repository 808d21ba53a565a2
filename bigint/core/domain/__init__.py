"""
Domain models and value objects.

Contains the signed arbitrary-precision integer value type.
"""

from bigint.core.domain.signed_integer import NEGATIVE_PREFIX, SignedInteger

__all__ = [
    "NEGATIVE_PREFIX",
    "SignedInteger",
]
