"""
Unit tests for the rule specification parser.
"""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from structval.core.models import RuleInvocation
from structval.core.rules import parse_int_option, parse_key_values, parse_rule_spec
from structval.core.rules.tag_parser import parse_bool, parse_int
from structval.core.validators import RuleConfigError


class TestParseRuleSpec:
    """Tests for parse_rule_spec"""

    def test_plain_rules(self):
        """Test names without options"""
        assert parse_rule_spec("required,email") == [
            RuleInvocation(name="required"),
            RuleInvocation(name="email"),
        ]

    def test_rules_with_options_keep_order(self):
        """Test options are split off and declaration order is kept"""
        invocations = parse_rule_spec("required,min_length=3,max_length=10")

        assert [(i.name, i.options) for i in invocations] == [
            ("required", ""),
            ("min_length", "3"),
            ("max_length", "10"),
        ]

    def test_split_on_first_equals_only(self):
        """Test options may contain further '=' characters"""
        assert parse_rule_spec("password=min_length=6") == [
            RuleInvocation(name="password", options="min_length=6"),
        ]

    def test_password_sub_options_are_folded(self):
        """Test comma-joined password sub-options stay with the password rule"""
        invocations = parse_rule_spec(
            "required,password=min_length=6,require_digits=false,require_special_chars=0"
        )

        assert invocations == [
            RuleInvocation(name="required"),
            RuleInvocation(name="password", options="min_length=6,require_digits=false,require_special_chars=0"),
        ]

    def test_folding_stops_at_a_non_password_entry(self):
        """Test entries after an unrelated rule are parsed as top-level rules"""
        invocations = parse_rule_spec("password=require_digits=false,email,min_length=3")

        assert [i.name for i in invocations] == ["password", "email", "min_length"]
        assert invocations[0].options == "require_digits=false"

    def test_bare_password_does_not_fold(self):
        """Test a password rule without options leaves later rules alone"""
        invocations = parse_rule_spec("password,min_length=3")

        assert invocations == [
            RuleInvocation(name="password"),
            RuleInvocation(name="min_length", options="3"),
        ]

    @pytest.mark.parametrize("spec", ["", ",", " , ,"])
    def test_empty_entries_are_dropped(self, spec):
        """Test empty specs produce no invocations"""
        assert parse_rule_spec(spec) == []

    def test_unknown_names_are_kept_for_dispatch(self):
        """Test the parser does not filter names; dispatch decides"""
        assert parse_rule_spec("uuid") == [RuleInvocation(name="uuid")]

    @given(st.lists(st.sampled_from(["required", "email", "min_length=1", "max_length=9"]), max_size=6))
    def test_property_round_trip_of_simple_specs(self, entries):
        """Property test: parsing a joined list yields the same entries"""
        invocations = parse_rule_spec(",".join(entries))
        assert [str(i) for i in invocations] == entries


class TestOptionParsing:
    """Tests for option helpers"""

    def test_parse_key_values(self):
        """Test key=value pairs are split in order"""
        assert parse_key_values("min_length=6,require_digits=false") == [
            ("min_length", "6"),
            ("require_digits", "false"),
        ]

    def test_parse_key_values_rejects_missing_equals(self):
        """Test a pair without '=' fails the whole parse"""
        with pytest.raises(ValueError):
            parse_key_values("min_length=6,oops")

    def test_parse_int_option(self):
        """Test integer options"""
        assert parse_int_option("min_length", "3") == 3
        assert parse_int_option("min_length", "-1") == -1

    @pytest.mark.parametrize("options", ["abc", "", "3.5", " 3", "1_000"])
    def test_parse_int_option_rejects_non_integers(self, options):
        """Test non-integer options raise RuleConfigError with the raw text"""
        with pytest.raises(RuleConfigError) as exc_info:
            parse_int_option("min_length", options)

        assert str(exc_info.value) == f"invalid min_length options: {options}"

    @pytest.mark.parametrize("raw, expected", [
        ("true", True), ("1", True), ("T", True), ("TRUE", True),
        ("false", False), ("0", False), ("f", False), ("False", False),
        ("yes", None), ("", None),
    ])
    def test_parse_bool(self, raw, expected):
        """Test boolean spellings"""
        assert parse_bool(raw) is expected

    def test_parse_int_returns_none_for_text(self):
        """Test parse_int never raises"""
        assert parse_int("ten") is None
