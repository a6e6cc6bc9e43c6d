# Content style checker: forbidden-phrase rules mapped to canonical suggestions.
#
# Scans ordered text segments against a rule catalog and reports each violation
# with the offending text, the suggested replacement, and the originating line.

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from functools import reduce
from typing import Iterable, Literal, Mapping

logger = logging.getLogger(__name__)

OverlapScope = Literal["segment", "document"]

# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


class ContentStyleError(ValueError):
    """Base class for rule-set construction failures."""


class ConfigError(ContentStyleError):
    """A rule definition is malformed (missing or empty violation list)."""


class RuleCompilationError(ContentStyleError):
    """A violation pattern is not a valid regular expression."""

    def __init__(self, pattern: str, error: re.error) -> None:
        super().__init__(f"Invalid violation pattern {pattern!r}: {error}")
        self.pattern = pattern
        self.error = error


# ---------------------------------------------------------------------------
# Rule model
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class _CompiledPattern:
    source: str
    matcher: re.Pattern[str]
    containment: re.Pattern[str]


def _compile(pattern: str, case_insensitive: bool, capitalization_boundary: bool) -> _CompiledPattern:
    flags = re.IGNORECASE if case_insensitive else 0
    prefix = r"(?<=\w )" if capitalization_boundary else ""
    try:
        return _CompiledPattern(
            source=pattern,
            matcher=re.compile(prefix + "(?:" + pattern + r")\b", flags),
            containment=re.compile(pattern, flags),
        )
    except re.error as exc:
        raise RuleCompilationError(pattern, exc) from exc


@dataclass(frozen=True)
class Rule:
    """One or more violation patterns mapped to a single canonical suggestion.

    Patterns are compiled once at construction. Alternatives are tried in order
    and the first one that matches wins.
    """

    patterns: tuple[str, ...]
    suggestion: str = ""
    case_insensitive: bool = False
    _compiled: tuple[_CompiledPattern, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if isinstance(self.patterns, str):
            object.__setattr__(self, "patterns", (self.patterns,))
        else:
            object.__setattr__(self, "patterns", tuple(self.patterns))
        if not self.patterns:
            raise ConfigError(f"Rule for suggestion {self.suggestion!r} has no violation patterns")
        boundary = self.capitalization_boundary
        object.__setattr__(
            self,
            "_compiled",
            tuple(_compile(p, self.case_insensitive, boundary) for p in self.patterns),
        )

    @property
    def capitalization_boundary(self) -> bool:
        """True when the rule targets mid-text capitalization of a lowercase term.

        An uppercase-initial pattern whose suggestion is lowercase-initial only
        fires when a word character and a space precede it, so sentence-initial
        occurrences are left alone.
        """
        return (
            not self.case_insensitive
            and self.suggestion[:1].islower()
            and self.patterns[0][:1].isupper()
        )


def _as_flag(value: object) -> bool:
    if isinstance(value, str):
        return value.strip().lower() == "true"
    return bool(value)


def build_rule_set(definitions: Iterable[Mapping[str, object]]) -> tuple[Rule, ...]:
    """Decode rule definitions into a flat, ordered tuple of matchable rules.

    Each definition takes a ``violation`` (one pattern or a list of them), a
    ``suggestion`` and an optional ``case_insensitive`` flag. Every surface form
    becomes its own rule so that distinct forms are reported separately.

    Raises:
        ConfigError: A definition has no violation patterns, or a pattern is not a string.
        RuleCompilationError: A pattern is not a valid regular expression.
    """
    rules: list[Rule] = []
    for index, definition in enumerate(definitions):
        violation = definition.get("violation")
        if violation is None:
            raise ConfigError(f"Rule #{index} has no violation")
        if isinstance(violation, str):
            patterns = [violation]
        elif isinstance(violation, (list, tuple)):
            patterns = list(violation)
        else:
            raise ConfigError(f"Rule #{index} violation must be a string or a list of strings: {violation!r}")
        if not patterns:
            raise ConfigError(f"Rule #{index} has an empty violation list")
        if not all(isinstance(p, str) for p in patterns):
            raise ConfigError(f"Rule #{index} has a non-string violation pattern: {patterns!r}")
        suggestion = str(definition.get("suggestion") or "")
        case_insensitive = _as_flag(definition.get("case_insensitive", False))
        rules.extend(Rule((p,), suggestion, case_insensitive) for p in patterns)
    logger.debug(f"Compiled {len(rules)} content style rules")
    return tuple(rules)


# ---------------------------------------------------------------------------
# Segments, violations, reports
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Segment:
    text: str
    line: int | None = None


@dataclass(frozen=True)
class Violation:
    rule: Rule
    matched_text: str
    line: int | None = None


@dataclass(frozen=True)
class Report:
    line: int | None
    message: str

    def to_payload(self) -> dict[str, object]:
        return {"line": self.line, "message": self.message}


@dataclass(frozen=True)
class ResolutionState:
    """Substrings already attributed to a violation in the current scope."""

    matched: tuple[str, ...] = ()

    def record(self, matched_text: str) -> ResolutionState:
        return ResolutionState(matched=self.matched + (matched_text,))

    def attributes(self, pattern: _CompiledPattern) -> bool:
        if not self.matched:
            return False
        return pattern.containment.search("\n".join(self.matched)) is not None


def split_segments(text: str) -> list[Segment]:
    """Split plain text into one segment per line, numbered from 1."""
    return [Segment(line_text, number) for number, line_text in enumerate(text.split("\n"), start=1)]


# ---------------------------------------------------------------------------
# Matching
# ---------------------------------------------------------------------------


def _match_pattern(pattern: _CompiledPattern, buffer: str) -> str | None:
    m = pattern.matcher.search(buffer)
    if m is None or not m.group(0):
        return None
    return m.group(0)


def match_rule(rule: Rule, buffer: str, state: ResolutionState | None = None) -> str | None:
    """Return the text the rule flags in ``buffer``, or None.

    ``buffer`` is the raw segment text; occurrences of the rule's own suggestion
    are masked out first. A rule whose pattern is already contained in a prior
    match under ``state`` does not fire.
    """
    working = buffer.replace(rule.suggestion, "") if rule.suggestion else buffer
    if not working:
        return None
    state = state or ResolutionState()
    if any(state.attributes(pattern) for pattern in rule._compiled):
        return None
    for pattern in rule._compiled:
        matched = _match_pattern(pattern, working)
        if matched is not None:
            return matched
    return None


# ---------------------------------------------------------------------------
# Resolution
# ---------------------------------------------------------------------------


def resolve_segment(
    rules: Iterable[Rule], segment: Segment, state: ResolutionState | None = None
) -> tuple[list[Violation], ResolutionState]:
    """Apply every rule, in definition order, to one segment.

    Returns the violations in the order rules fired along with the updated
    resolution state. Pass the returned state back in to widen overlap
    suppression beyond a single segment.
    """
    initial: tuple[tuple[Violation, ...], ResolutionState] = ((), state or ResolutionState())
    if not segment.text:
        return [], initial[1]

    def _apply(acc: tuple[tuple[Violation, ...], ResolutionState], rule: Rule):
        violations, current = acc
        matched = match_rule(rule, segment.text, current)
        if matched is None:
            return acc
        return violations + (Violation(rule, matched, segment.line),), current.record(matched)

    violations, final = reduce(_apply, rules, initial)
    return list(violations), final


def format_violation(violation: Violation, addendum: str = "") -> Report:
    message = f"Don't use `{violation.matched_text}`. Do use `{violation.rule.suggestion}`. {addendum}"
    return Report(line=violation.line, message=message.strip())


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def check_segments(
    rules: Iterable[Rule],
    segments: Iterable[Segment],
    addendum: str = "",
    overlap_scope: OverlapScope = "segment",
) -> list[Report]:
    """Check ordered segments against a rule set.

    Args:
        rules: Rules from :func:`build_rule_set`, in definition order.
        segments: Text segments in document order.
        addendum: Text appended to every message, such as a contact line.
        overlap_scope: ``"segment"`` resets overlap suppression for every
            segment; ``"document"`` carries it across the whole sequence.

    Returns:
        One report per violation, grouped by segment then rule order.
    """
    if overlap_scope not in ("segment", "document"):
        raise ConfigError(f"Unknown overlap scope {overlap_scope!r}")
    rules = tuple(rules)
    reports: list[Report] = []
    state = ResolutionState()
    for segment in segments:
        violations, carried = resolve_segment(rules, segment, state)
        if overlap_scope == "document":
            state = carried
        reports.extend(format_violation(v, addendum) for v in violations)
    return reports


def lint_text(
    text: str,
    rules: Iterable[Rule],
    addendum: str = "",
    overlap_scope: OverlapScope = "segment",
) -> list[dict[str, object]]:
    """Check a plain text blob line by line and return report payloads."""
    reports = check_segments(rules, split_segments(text), addendum=addendum, overlap_scope=overlap_scope)
    return [r.to_payload() for r in reports]
