"""Tests for non-raising fragment sequence validation."""

import pytest

from cssbuilder import DuplicateSingleton, Kind, OrderViolation
from cssbuilder.validation import (
    Diagnostic,
    SelectorValidationError,
    Severity,
    build,
    check_empty_values,
    check_order,
    check_singletons,
    validate,
    validate_or_raise,
)


# ---------------------------------------------------------------------------
# Rules
# ---------------------------------------------------------------------------


class TestCheckOrder:
    def test_valid_sequence(self):
        parts = [(Kind.ELEMENT, "a"), (Kind.CLASS, "x"), (Kind.CLASS, "y"), (Kind.PSEUDO_CLASS, "hover")]
        assert check_order(parts) == []

    def test_reports_each_backward_step(self):
        parts = [(Kind.CLASS, "x"), (Kind.ELEMENT, "a"), (Kind.PSEUDO_ELEMENT, "after"), (Kind.ID, "i")]
        diags = check_order(parts)
        assert [d.index for d in diags] == [1, 3]
        assert all(d.severity is Severity.ERROR for d in diags)
        assert "element 'a' follows class" in diags[0].message

    def test_empty_sequence(self):
        assert check_order([]) == []


class TestCheckSingletons:
    def test_reports_every_repeat(self):
        parts = [(Kind.ELEMENT, "a"), (Kind.ELEMENT, "b"), (Kind.ELEMENT, "c")]
        diags = check_singletons(parts)
        assert [d.index for d in diags] == [1, 2]
        assert diags[0].fix == "Remove the extra element."

    def test_repeatable_kinds_ok(self):
        parts = [(Kind.ATTRIBUTE, "href"), (Kind.ATTRIBUTE, "title")]
        assert check_singletons(parts) == []


class TestCheckEmptyValues:
    def test_warns_on_blank_values(self):
        diags = check_empty_values([(Kind.ELEMENT, "a"), (Kind.CLASS, "  ")])
        assert len(diags) == 1
        assert diags[0].severity is Severity.WARNING
        assert diags[0].index == 1


# ---------------------------------------------------------------------------
# validate / validate_or_raise / build
# ---------------------------------------------------------------------------


class TestValidate:
    def test_collects_all_rules(self):
        parts = [(Kind.ID, "a"), (Kind.ID, "b"), (Kind.ELEMENT, "")]
        diags = validate(parts)
        rules = sorted(d.rule for d in diags)
        assert rules == ["check_empty_values", "check_order", "check_singletons"]

    def test_extra_rules(self):
        def no_ids(parts, rules):
            return [
                Diagnostic(rule="no_ids", severity=Severity.WARNING, message="id used", index=i)
                for i, (kind, _) in enumerate(parts)
                if kind is Kind.ID
            ]

        diags = validate([(Kind.ID, "a")], extra_rules=[no_ids])
        assert [d.rule for d in diags] == ["no_ids"]

    def test_validate_or_raise_returns_warnings(self):
        diags = validate_or_raise([(Kind.CLASS, "")])
        assert len(diags) == 1
        assert not diags[0].is_error

    def test_validate_or_raise_raises(self):
        with pytest.raises(SelectorValidationError) as exc_info:
            validate_or_raise([(Kind.CLASS, "a"), (Kind.ID, "b")])
        assert len(exc_info.value.diagnostics) == 1
        assert "1 error(s)" in str(exc_info.value)

    def test_diagnostic_str(self):
        diag = Diagnostic(rule="r", severity=Severity.ERROR, message="bad", index=2)
        assert str(diag) == "ERROR [part=2]: bad"
        assert str(Diagnostic(rule="r", severity=Severity.WARNING, message="meh")) == "WARNING: meh"


class TestBuild:
    def test_builds_in_order(self):
        sel = build([(Kind.ELEMENT, "a"), (Kind.ATTRIBUTE, "href"), (Kind.PSEUDO_CLASS, "focus")])
        assert sel.render() == "a[href]:focus"

    def test_raises_builder_errors(self):
        with pytest.raises(OrderViolation):
            build([(Kind.CLASS, "a"), (Kind.ID, "b")])
        with pytest.raises(DuplicateSingleton):
            build([(Kind.ID, "a"), (Kind.ID, "b")])
