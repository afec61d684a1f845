"""Domain services - Stateless operations on domain objects."""

from .credential_selector import select_latest
from .evaluator import ExpiryEvaluator, evaluate
from .expiry_classifier import classify, days_to_expiry

__all__ = [
    "ExpiryEvaluator",
    "classify",
    "days_to_expiry",
    "evaluate",
    "select_latest",
]
