"""Non-raising validation of fragment sequences.

Each rule is a function taking a sequence of ``(Kind, value)`` pairs and
returning a list of Diagnostic objects.  Unlike the builder, which stops
at the first bad append, the validator reports every problem at once.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Sequence

from cssbuilder.builder import Selector
from cssbuilder.config import DEFAULT_RULES, SelectorRules
from cssbuilder.errors import DUPLICATE_MESSAGE, ORDER_MESSAGE
from cssbuilder.model import Kind

Part = tuple[Kind, str]


class Severity(Enum):
    ERROR = "ERROR"
    WARNING = "WARNING"


@dataclass(frozen=True)
class Diagnostic:
    """A single validation finding about a fragment sequence.

    Attributes:
        rule: Name of the rule that produced this diagnostic.
        severity: How serious the issue is.
        message: Human-readable description of the problem.
        index: Position of the offending part, if applicable.
        fix: Suggested remediation, if available.
    """

    rule: str
    severity: Severity
    message: str
    index: int | None = None
    fix: str | None = None

    @property
    def is_error(self) -> bool:
        return self.severity is Severity.ERROR

    def __str__(self) -> str:
        location = f" [part={self.index}]" if self.index is not None else ""
        return f"{self.severity.value}{location}: {self.message}"


class SelectorValidationError(Exception):
    """Raised when validation produces ERROR-severity diagnostics."""

    def __init__(self, diagnostics: list[Diagnostic]) -> None:
        self.diagnostics = diagnostics
        messages = [str(d) for d in diagnostics if d.is_error]
        super().__init__(
            f"Validation failed with {len(messages)} error(s): " + "; ".join(messages)
        )


RuleFunc = Callable[[Sequence[Part], SelectorRules], list[Diagnostic]]


# ---------------------------------------------------------------------------
# Rules
# ---------------------------------------------------------------------------


def check_order(parts: Sequence[Part], rules: SelectorRules = DEFAULT_RULES) -> list[Diagnostic]:
    """Every part must be at or after the previous part in the rule order."""
    diagnostics: list[Diagnostic] = []
    for index in range(1, len(parts)):
        previous, _ = parts[index - 1]
        kind, value = parts[index]
        if rules.order_of(kind) < rules.order_of(previous):
            diagnostics.append(
                Diagnostic(
                    rule="check_order",
                    severity=Severity.ERROR,
                    message=f"{kind.value} {value!r} follows {previous.value}. {ORDER_MESSAGE}.",
                    index=index,
                    fix=f"Move {kind.value} {value!r} before the {previous.value} part.",
                )
            )
    return diagnostics


def check_singletons(parts: Sequence[Part], rules: SelectorRules = DEFAULT_RULES) -> list[Diagnostic]:
    """Singleton kinds may appear at most once."""
    diagnostics: list[Diagnostic] = []
    seen: set[Kind] = set()
    for index, (kind, value) in enumerate(parts):
        if rules.is_singleton(kind) and kind in seen:
            diagnostics.append(
                Diagnostic(
                    rule="check_singletons",
                    severity=Severity.ERROR,
                    message=f"Repeated {kind.value} {value!r}. {DUPLICATE_MESSAGE}.",
                    index=index,
                    fix=f"Remove the extra {kind.value}.",
                )
            )
        seen.add(kind)
    return diagnostics


def check_empty_values(parts: Sequence[Part], rules: SelectorRules = DEFAULT_RULES) -> list[Diagnostic]:
    """Empty values render as bare prefixes. WARNING severity."""
    return [
        Diagnostic(
            rule="check_empty_values",
            severity=Severity.WARNING,
            message=f"{kind.value} at part {index} has an empty value.",
            index=index,
        )
        for index, (kind, value) in enumerate(parts)
        if not value.strip()
    ]


ALL_RULES: list[RuleFunc] = [check_order, check_singletons, check_empty_values]


# ---------------------------------------------------------------------------
# Entry points
# ---------------------------------------------------------------------------


def validate(
    parts: Sequence[Part],
    rules: SelectorRules = DEFAULT_RULES,
    extra_rules: list[RuleFunc] | None = None,
) -> list[Diagnostic]:
    """Run all validation rules against *parts*.

    Returns the full list of diagnostics (errors and warnings).
    """
    rule_funcs: list[RuleFunc] = list(ALL_RULES)
    if extra_rules:
        rule_funcs.extend(extra_rules)
    diagnostics: list[Diagnostic] = []
    for rule in rule_funcs:
        diagnostics.extend(rule(parts, rules))
    return diagnostics


def validate_or_raise(
    parts: Sequence[Part],
    rules: SelectorRules = DEFAULT_RULES,
    extra_rules: list[RuleFunc] | None = None,
) -> list[Diagnostic]:
    """Run validation; raises :class:`SelectorValidationError` on any ERROR.

    Returns the warnings when no errors are found.
    """
    diagnostics = validate(parts, rules, extra_rules=extra_rules)
    errors = [d for d in diagnostics if d.is_error]
    if errors:
        raise SelectorValidationError(errors)
    return diagnostics


def build(parts: Sequence[Part], rules: SelectorRules = DEFAULT_RULES) -> Selector:
    """Append *parts* to a fresh builder in order.

    Raises the builder's own errors at the first bad part.
    """
    selector = Selector(rules)
    for kind, value in parts:
        selector.add(kind, value)
    return selector
