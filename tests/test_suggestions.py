from passmeter.evaluator import evaluate, CRITERIA
from passmeter.policy import Policy
from passmeter.suggestions import feedback_for, readable_criterion, checklist, explain


def test_feedback_follows_criterion_order():
    criteria = {name: False for name in CRITERIA}
    assert feedback_for(criteria, Policy(min_length=12)) == [
        "Should be at least 12 characters",
        "Include uppercase letters",
        "Include lowercase letters",
        "Include numbers",
        "Include special characters",
        "Avoid repeated characters",
        "Avoid common patterns",
    ]


def test_feedback_empty_when_everything_passes():
    assert feedback_for({name: True for name in CRITERIA}) == []


def test_feedback_matches_evaluator():
    for pw in ("abc", "password", "Abc123😊😊😊😊", "Test123!"):
        result = evaluate(pw)
        assert list(result.feedback) == feedback_for(result.criteria)


def test_readable_labels():
    policy = Policy(min_length=10)
    assert readable_criterion("length", policy) == "Minimum length (10)"
    assert readable_criterion("noCommonPatterns") == "No common patterns"
    assert readable_criterion("bogus") == "bogus"


def test_checklist_pairs():
    result = evaluate("abc")
    items = checklist(result)
    assert len(items) == len(CRITERIA)
    assert items[0] == ("Minimum length (8)", False)
    assert items[2] == ("Contains lowercase", True)


def test_explain_reports_detections():
    d = explain("PASSWORD1111x")
    assert d["repeated"] == ["1111"]
    assert d["common"] == ["password"]

    quiet = explain("PASSWORD1111x", Policy(prevent_repeated_chars=False, prevent_common_patterns=False))
    assert quiet == {"repeated": [], "common": []}

    assert explain("aa") == {"repeated": [], "common": []}
