"""
passmeter.evaluator

Password strength evaluator:
- check_criteria(password, policy): the seven independent structural checks
- level_for_score(score): Weak / Medium / Strong tiering
- evaluate(password, policy): returns a StrengthResult with level, score,
  max_score, criteria (ordered name -> bool) and feedback

evaluate() is pure: no I/O, no shared state, and it never raises for str input.
"""

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping, Tuple

from .policy import CRITERIA, DEFAULT_POLICY, MINIMUM_EVALUABLE_LENGTH, Policy
from .detectors import (
    has_uppercase,
    has_lowercase,
    has_digit,
    has_special,
    find_repeated_runs,
    find_common_patterns,
)
from .suggestions import feedback_for

logger = logging.getLogger(__name__)

WEAK = "Weak"
MEDIUM = "Medium"
STRONG = "Strong"
LEVELS = (WEAK, MEDIUM, STRONG)

MAX_SCORE = len(CRITERIA)

STRONG_THRESHOLD = 6
MEDIUM_THRESHOLD = 4


@dataclass(frozen=True)
class StrengthResult:
    level: str
    score: int
    criteria: Mapping[str, bool]
    feedback: Tuple[str, ...] = ()
    max_score: int = field(default=MAX_SCORE)

    def __post_init__(self):
        # read-only view over a private copy
        object.__setattr__(self, "criteria", MappingProxyType(dict(self.criteria)))
        object.__setattr__(self, "feedback", tuple(self.feedback))

    def __hash__(self):
        return hash((self.level, self.score, tuple(self.criteria.items()), self.feedback, self.max_score))

    @property
    def passed(self) -> Tuple[str, ...]:
        return tuple(name for name, ok in self.criteria.items() if ok)

    @property
    def failed(self) -> Tuple[str, ...]:
        return tuple(name for name, ok in self.criteria.items() if not ok)

    @property
    def fraction(self) -> float:
        """Bar fill proportion, score / max_score."""
        return self.score / self.max_score

    def to_dict(self) -> Dict[str, Any]:
        return {
            "level": self.level,
            "score": self.score,
            "maxScore": self.max_score,
            "criteria": dict(self.criteria),
            "feedback": list(self.feedback),
        }


def empty_result() -> StrengthResult:
    """The result for passwords too short to assess."""
    return StrengthResult(
        level=WEAK,
        score=0,
        criteria={name: False for name in CRITERIA},
    )


def check_criteria(password: str, policy: Policy = DEFAULT_POLICY) -> Dict[str, bool]:
    """
    Evaluate every criterion independently against the full password.
    A disabled requirement is satisfied regardless of content.
    """
    return {
        "length": len(password) >= policy.min_length,
        "uppercase": not policy.require_uppercase or has_uppercase(password),
        "lowercase": not policy.require_lowercase or has_lowercase(password),
        "numbers": not policy.require_numbers or has_digit(password),
        "specialChars": not policy.require_special_chars or has_special(password),
        "noRepeatedChars": not policy.prevent_repeated_chars or not find_repeated_runs(password),
        "noCommonPatterns": (
            not policy.prevent_common_patterns
            or not find_common_patterns(password, policy.common_patterns)
        ),
    }


def level_for_score(score: int) -> str:
    if score >= STRONG_THRESHOLD:
        return STRONG
    if score >= MEDIUM_THRESHOLD:
        return MEDIUM
    return WEAK


def evaluate(password: str, policy: Policy = DEFAULT_POLICY) -> StrengthResult:
    """
    Score a password against the policy.

    Passwords shorter than MINIMUM_EVALUABLE_LENGTH get the zero result
    (all criteria False, score 0, Weak) without running any check.
    """
    if len(password) < MINIMUM_EVALUABLE_LENGTH:
        logger.debug("password below evaluable length (%d chars)", len(password))
        return empty_result()

    criteria = check_criteria(password, policy)
    score = sum(1 for ok in criteria.values() if ok)
    level = level_for_score(score)
    logger.debug("evaluated %d chars: score=%d level=%s", len(password), score, level)

    return StrengthResult(
        level=level,
        score=score,
        criteria=criteria,
        feedback=tuple(feedback_for(criteria, policy)),
    )
