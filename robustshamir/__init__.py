"""Robust reconstruction of Shamir shared secrets from possibly corrupted shares.
"""

from robustshamir.errors import (
    DivisionByZero,
    InsufficientShares,
    InvalidDigit,
    MalformedShareFile,
    NoConsistentReconstruction,
    ReconstructionError,
)
from robustshamir.rational import Rational
from robustshamir.reconstruct import Point, ReconstructionResult, robust_reconstruct

__all__ = [
    "DivisionByZero",
    "InsufficientShares",
    "InvalidDigit",
    "MalformedShareFile",
    "NoConsistentReconstruction",
    "Point",
    "Rational",
    "ReconstructionError",
    "ReconstructionResult",
    "robust_reconstruct",
]
