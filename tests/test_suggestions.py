from clovo.evaluator import analyze_password
from clovo.suggestions import suggest_improvements


def test_suggest_for_common_password():
    s = suggest_improvements(analyze_password("password123"))
    assert isinstance(s, dict)
    joined = " ".join(s["suggestions"]).lower()
    assert "common words" in joined
    assert "add uppercase" in joined


def test_examples_produced():
    s = suggest_improvements(analyze_password("weak"))
    assert s.get("examples")
    assert isinstance(s["examples"][0], str)
    assert s["examples"][0] != "weak"
    assert len(s["examples"][0]) == 16
    assert s["chars_needed"] is not None and s["chars_needed"] > 0


def test_strong_password_needs_little():
    s = suggest_improvements(analyze_password("Zq7!vR2#mK9$wL4&xP"))
    assert s["examples"] == []
    assert s["chars_needed"] is None
    assert s["label"] == "Very Strong"


def test_personal_info_suggestion():
    s = suggest_improvements(analyze_password("alice1984!", "Alice"))
    assert any("personal" in x for x in s["suggestions"])
