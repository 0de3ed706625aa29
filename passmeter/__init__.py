"""PassMeter: structural password strength evaluation with live feedback."""

from .policy import Policy, DEFAULT_POLICY, COMMON_PATTERNS, MINIMUM_EVALUABLE_LENGTH
from .evaluator import evaluate, StrengthResult, CRITERIA, MAX_SCORE, WEAK, MEDIUM, STRONG
from .meter import StrengthMeter
from .exceptions import PassMeterError, PolicyError

__version__ = "1.0.0"

__all__ = [
    "Policy",
    "DEFAULT_POLICY",
    "COMMON_PATTERNS",
    "MINIMUM_EVALUABLE_LENGTH",
    "evaluate",
    "StrengthResult",
    "CRITERIA",
    "MAX_SCORE",
    "WEAK",
    "MEDIUM",
    "STRONG",
    "StrengthMeter",
    "PassMeterError",
    "PolicyError",
]
