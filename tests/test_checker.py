"""Tests for the passcheck package."""

import pytest

from passcheck import (
    RULES,
    SPECIAL_CHARACTERS,
    TIERS,
    Rule,
    evaluate,
    tier_for_score,
)
from passcheck.meter import StrengthMeter


def _met(password: str) -> list[bool]:
    return [c.met for c in evaluate(password).criteria]


# ── evaluate ───────────────────────────────────────────────────────────────


class TestEvaluate:
    def test_empty_password(self):
        a = evaluate("")
        assert a.score == 0
        assert a.label == "No password"
        assert a.criteria == ()

    def test_lowercase_only(self):
        a = evaluate("abc")
        assert len(a.criteria) == 6
        assert _met("abc") == [False, False, True, False, False, False]
        assert a.score == pytest.approx(100 / 6)
        assert a.label == "Weak"

    def test_eight_chars_no_special(self):
        a = evaluate("Abcdefg1")
        assert _met("Abcdefg1") == [True, True, True, True, False, False]
        assert a.score == pytest.approx(400 / 6)
        assert a.label == "Strong"

    def test_all_rules_met(self):
        a = evaluate("Abcdefgh1234!")
        assert all(c.met for c in a.criteria)
        assert a.score == 100
        assert a.label == "Very Strong"

    def test_criteria_labels_in_order(self):
        labels = [c.label for c in evaluate("x").criteria]
        assert labels == [
            "At least 8 characters",
            "Contains uppercase letter",
            "Contains lowercase letter",
            "Contains number",
            "Contains special character",
            "At least 12 characters",
        ]

    def test_single_character_runs_rules(self):
        a = evaluate("~")
        assert len(a.criteria) == 6
        assert not any(c.met for c in a.criteria)
        assert a.score == 0
        # all-unmet is not the same as no password
        assert a.label == "Weak"

    def test_two_rules_is_moderate(self):
        assert evaluate("abcdefgh").label == "Moderate"

    def test_five_rules_is_strong(self):
        a = evaluate("Abcdefgh1234")
        assert a.met_count == 5
        assert a.label == "Strong"

    def test_idempotent(self):
        assert evaluate("Tr0ub4dor&3") == evaluate("Tr0ub4dor&3")

    @pytest.mark.parametrize("weaker,stronger", [
        ("abc", "aBc"),
        ("abcdefgh", "abcdefgH"),
        ("abcdefgh", "abcdefg1"),
        ("Abcdefg1", "Abcdefg!1"),
        ("Abcdefg1", "Abcdefghijk1"),
    ])
    def test_monotonic(self, weaker, stronger):
        weaker, stronger = evaluate(weaker), evaluate(stronger)
        assert set(i for i, c in enumerate(weaker.criteria) if c.met) <= set(
            i for i, c in enumerate(stronger.criteria) if c.met
        )
        assert stronger.score >= weaker.score

    def test_non_string_raises(self):
        with pytest.raises(TypeError, match="must be a str"):
            evaluate(None)

    def test_as_dict(self):
        d = evaluate("abc").as_dict()
        assert d["score"] == 16.67
        assert d["label"] == "Weak"
        assert d["criteria"][2] == {"label": "Contains lowercase letter", "met": True}

    def test_custom_rules_rescale_score(self):
        rules = RULES + (Rule("No spaces", lambda pwd: " " not in pwd),)
        a = evaluate("abc", rules)
        assert len(a.criteria) == 7
        assert a.score == pytest.approx(200 / 7)


# ── Rule edge cases ────────────────────────────────────────────────────────


class TestRules:
    def test_length_boundaries(self):
        assert _met("Abcdef1")[0] is False
        eight = _met("Abcdefg1")
        assert eight[0] is True and eight[5] is False
        twelve = _met("Abcdefghijk1")
        assert twelve[0] is True and twelve[5] is True

    @pytest.mark.parametrize("ch", list(SPECIAL_CHARACTERS))
    def test_special_characters_accepted(self, ch):
        assert _met(ch)[4] is True

    @pytest.mark.parametrize("ch", list("~`_-+=[];'/\\"))
    def test_other_punctuation_rejected(self, ch):
        assert _met(ch)[4] is False

    def test_non_ascii_letters_ignored(self):
        assert _met("ÄÖÜ")[1] is False
        assert _met("äöü")[2] is False

    def test_non_ascii_digits_ignored(self):
        assert _met("١٢٣")[3] is False


# ── Tiers ──────────────────────────────────────────────────────────────────


class TestTiers:
    @pytest.mark.parametrize("score,label", [
        (0, "Weak"),
        (32.9, "Weak"),
        (33, "Moderate"),
        (65.9, "Moderate"),
        (66, "Strong"),
        (89.9, "Strong"),
        (90, "Very Strong"),
        (100, "Very Strong"),
    ])
    def test_boundaries(self, score, label):
        assert tier_for_score(score).label == label

    def test_last_tier_is_open_ended(self):
        assert TIERS[-1][0] is None
        assert tier_for_score(1000).label == "Very Strong"


# ── StrengthMeter ──────────────────────────────────────────────────────────


class TestStrengthMeter:
    def test_initial_state(self):
        m = StrengthMeter()
        assert m.password == ""
        assert m.assessment.label == "No password"
        assert m.render() == "Strength: No password"

    def test_on_input_replaces_assessment(self):
        m = StrengthMeter()
        first = m.on_input("abc")
        assert m.assessment is first
        m.on_input("Abcdefgh1234!")
        assert m.assessment.label == "Very Strong"
        m.on_input("")
        assert m.assessment.criteria == ()

    def test_bar(self):
        m = StrengthMeter()
        m.on_input("abc")
        assert m.bar() == "[###-----------------] 17%"
        m.on_input("Abcdefgh1234!")
        assert m.bar(width=10) == "[##########] 100%"

    def test_checklist_glyphs(self):
        m = StrengthMeter()
        m.on_input("abc")
        lines = m.checklist()
        assert len(lines) == 6
        assert lines[0] == "  ✗ At least 8 characters"
        assert lines[2] == "  ✓ Contains lowercase letter"

    def test_render_non_empty(self):
        m = StrengthMeter()
        m.on_input("abc")
        out = m.render()
        assert out.startswith("Strength: Weak\n[")
        assert "Password requirements:" in out

    def test_visibility_toggle(self):
        m = StrengthMeter()
        m.on_input("abc")
        assert m.display_value == "•••"
        assert m.toggle_visibility() is True
        assert m.display_value == "abc"
        assert m.toggle_visibility() is False
