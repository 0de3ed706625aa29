"""
passmeter.suggestions

Turn criteria into human-readable output:
- feedback_for(criteria, policy): remediation messages for failed criteria
- readable_criterion(name, policy): checklist label for a criterion
- checklist(result, policy): (label, met) pairs in criterion order
- explain(password, policy): concrete detections (repeats, common patterns)

Feedback is always derived from the criteria mapping; nothing here keeps state.
"""

from typing import Dict, List, Mapping, Tuple

from .policy import CRITERIA, DEFAULT_POLICY, MINIMUM_EVALUABLE_LENGTH, Policy
from .detectors import find_repeated_runs, find_common_patterns

_FEEDBACK = {
    "uppercase": "Include uppercase letters",
    "lowercase": "Include lowercase letters",
    "numbers": "Include numbers",
    "specialChars": "Include special characters",
    "noRepeatedChars": "Avoid repeated characters",
    "noCommonPatterns": "Avoid common patterns",
}

_LABELS = {
    "uppercase": "Contains uppercase",
    "lowercase": "Contains lowercase",
    "numbers": "Contains numbers",
    "specialChars": "Contains special characters",
    "noRepeatedChars": "No repeated characters",
    "noCommonPatterns": "No common patterns",
}


def feedback_for(criteria: Mapping[str, bool], policy: Policy = DEFAULT_POLICY) -> List[str]:
    """One remediation message per failed criterion, in fixed criterion order."""
    feedback: List[str] = []
    for name in CRITERIA:
        if criteria.get(name, False):
            continue
        if name == "length":
            feedback.append(f"Should be at least {policy.min_length} characters")
        else:
            feedback.append(_FEEDBACK[name])
    return feedback


def readable_criterion(name: str, policy: Policy = DEFAULT_POLICY) -> str:
    if name == "length":
        return f"Minimum length ({policy.min_length})"
    return _LABELS.get(name, name)


def checklist(result, policy: Policy = DEFAULT_POLICY) -> List[Tuple[str, bool]]:
    return [(readable_criterion(name, policy), met) for name, met in result.criteria.items()]


def explain(password: str, policy: Policy = DEFAULT_POLICY) -> Dict[str, List[str]]:
    """
    Concrete detections behind the repeat / common-pattern criteria:
    {
        "repeated": [str],  # runs of 3+ identical characters
        "common": [str],    # denylisted patterns found
    }
    Only checks enabled in the policy are reported; short passwords report nothing.
    """
    out: Dict[str, List[str]] = {"repeated": [], "common": []}
    if len(password) < MINIMUM_EVALUABLE_LENGTH:
        return out
    if policy.prevent_repeated_chars:
        out["repeated"] = find_repeated_runs(password)
    if policy.prevent_common_patterns:
        out["common"] = find_common_patterns(password, policy.common_patterns)
    return out
