"""
passmeter.meter

Live strength meter: holds the current password, re-evaluates it on every
change and publishes the result to an optional callback. Also the small
rendering helpers shared by the CLI (bar width, level colors).
"""

import logging
from typing import Callable, Optional

from .evaluator import evaluate, StrengthResult, WEAK, MEDIUM, STRONG
from .policy import DEFAULT_POLICY, Policy

logger = logging.getLogger(__name__)

LEVEL_COLORS = {
    WEAK: "#e74c3c",
    MEDIUM: "#f39c12",
    STRONG: "#2ecc71",
}
FALLBACK_COLOR = "#aaa"


def level_color(level: str) -> str:
    return LEVEL_COLORS.get(level, FALLBACK_COLOR)


def bar_width(result: StrengthResult) -> str:
    """Bar fill as a CSS-style percentage, e.g. '71.43%'."""
    pct = round(result.fraction * 100, 2)
    if pct == int(pct):
        return f"{int(pct)}%"
    return f"{pct}%"


class StrengthMeter:
    """
    Re-evaluates on every password change.

    The callback runs once on construction with the initial password, then
    once per set_password() call, in call order. The stored result is updated
    before the callback runs; callback errors propagate to the caller.
    """

    def __init__(
        self,
        policy: Policy = DEFAULT_POLICY,
        on_change: Optional[Callable[[StrengthResult], None]] = None,
        password: str = "",
    ):
        self._policy = policy
        self._on_change = on_change
        self._password = ""
        self._result: Optional[StrengthResult] = None
        self.set_password(password)

    @property
    def policy(self) -> Policy:
        return self._policy

    @property
    def password(self) -> str:
        return self._password

    @property
    def result(self) -> StrengthResult:
        return self._result

    def set_password(self, password: str) -> StrengthResult:
        self._password = password
        self._result = evaluate(password, self._policy)
        logger.debug("strength changed: %s (%d/%d)", self._result.level, self._result.score, self._result.max_score)
        if self._on_change is not None:
            self._on_change(self._result)
        return self._result

    def clear(self) -> StrengthResult:
        return self.set_password("")
