"""Access policy evaluation."""

from geo_gate.policy.evaluator import (
    LOOPBACK_ADDRESSES,
    LOOPBACK_ERROR,
    NOT_FOUND_ERROR,
    evaluate,
    is_loopback,
)

__all__ = [
    "LOOPBACK_ADDRESSES",
    "LOOPBACK_ERROR",
    "NOT_FOUND_ERROR",
    "evaluate",
    "is_loopback",
]
