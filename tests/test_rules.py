"""Tests for validation rule derivation."""

from form_studio.interpreter.rules import RuleKind, derive_rules
from form_studio.models.schema import FieldSchema


def field(**kwargs) -> FieldSchema:
    return FieldSchema.model_validate(kwargs)


class TestDeriveRules:
    """Tests for derive_rules."""

    def test_rule_order_for_strings(self):
        """Test rules come out in required, length, email, pattern order."""
        rules = derive_rules(
            "code",
            field(type="string", minLength=2, maxLength=5, format="email", pattern="^[a-z]+$"),
            {"code"},
        )
        assert [r.kind for r in rules] == [
            RuleKind.REQUIRED,
            RuleKind.MIN_LENGTH,
            RuleKind.MAX_LENGTH,
            RuleKind.EMAIL,
            RuleKind.PATTERN,
        ]
        assert [r.message for r in rules] == [
            "Required",
            "Min 2 characters",
            "Max 5 characters",
            "Please enter a valid email",
            "Invalid format",
        ]

    def test_pattern_message(self):
        """Test a custom pattern message is used."""
        rules = derive_rules("zip", field(type="string", pattern=r"^\d{5}$", patternMessage="5 digits"), [])
        assert rules[0].message == "5 digits"
        assert rules[0].check("12345")
        assert not rules[0].check("1234")

    def test_invalid_pattern_dropped(self):
        """Test an uncompilable pattern adds no rule and raises nothing."""
        rules = derive_rules("x", field(type="string", pattern="([a-z"), [])
        assert rules == []

    def test_numeric_bounds(self):
        """Test minimum/maximum rules for numbers."""
        rules = derive_rules("age", field(type="integer", minimum=0, maximum=120), [])
        assert [r.message for r in rules] == ["Minimum 0", "Maximum 120"]
        assert rules[0].check(0)
        assert not rules[0].check(-1)
        assert not rules[1].check(121)

    def test_non_numeric_bounds_ignored(self):
        """Test bounds that are not real numbers are ignored."""
        rules = derive_rules("n", field(type="number", minimum="5", maximum=True), [])
        assert rules == []

    def test_string_constraints_ignored_for_numbers(self):
        """Test string-only constraints do not apply to other types."""
        rules = derive_rules("n", field(type="number", minLength=3, format="email"), [])
        assert rules == []

    def test_missing_field_schema(self):
        """Test a required name with no schema only gets the required rule."""
        rules = derive_rules("ghost", None, ["ghost"])
        assert [r.kind for r in rules] == [RuleKind.REQUIRED]

    def test_required_rule_checks_absence(self):
        """Test required fails on None only."""
        rule = derive_rules("a", field(type="boolean"), ["a"])[0]
        assert not rule.check(None)
        assert rule.check(False)

    def test_optional_rules_skip_absent_values(self):
        """Test non-required rules pass when the value is absent."""
        for rule in derive_rules("e", field(type="string", format="email", minLength=3), []):
            assert rule.check(None)

    def test_email_shape(self):
        """Test the email rule."""
        rule = derive_rules("e", field(type="string", format="email"), [])[0]
        assert rule.check("ada@example.com")
        assert not rule.check("ada@example")
        assert not rule.check("not an email")

    def test_non_string_pattern_dropped(self):
        """Test a pattern that is not a string drops only the pattern rule."""
        for bad in (123, ["^a"], ""):
            rules = derive_rules("code", field(type="string", pattern=bad, minLength=1), {"code"})
            assert [r.kind for r in rules] == [RuleKind.REQUIRED, RuleKind.MIN_LENGTH]
