from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, PrivateAttr, model_validator

from data_designer.config.column_configs import SingleColumnConfig

from data_designer_content_style.core import Rule, build_rule_set


class ContentStyleRuleConfig(BaseModel):
    """A forbidden phrase (or list of surface forms) and its canonical replacement."""

    violation: str | list[str]
    suggestion: str = ""
    case_insensitive: bool = False


class ContentStyleColumnConfig(SingleColumnConfig):
    """Check text columns against a content style guide of forbidden phrases.

    Each row's text is split into lines and every line is scanned against the
    rule set. The output column holds the violations found, each with the
    offending line and a "Don't use X. Do use Y." message.

    Attributes:
        target_columns: Columns whose text content will be joined and checked.
        rule_set: Ordered style rules. Earlier rules take precedence when matches overlap.
        addendum: Text appended to every message, e.g. where to ask questions.
        overlap_scope: Whether overlap suppression resets per line ("segment") or
            spans the whole row ("document").
        include_violations: Include the per-violation line and message list in output.
    """

    target_columns: list[str]
    rule_set: list[ContentStyleRuleConfig] = Field(default_factory=list, description="Ordered style rules")
    addendum: str = Field(default="", description="Text appended to every violation message")
    overlap_scope: Literal["segment", "document"] = Field(default="segment", description="Overlap suppression scope")
    include_violations: bool = Field(default=True, description="Include violation messages in output")
    column_type: Literal["content-style"] = "content-style"

    _rules: tuple[Rule, ...] = PrivateAttr(default=())

    @model_validator(mode="after")
    def _compile_rule_set(self) -> ContentStyleColumnConfig:
        self._rules = build_rule_set(rule.model_dump() for rule in self.rule_set)
        return self

    @property
    def rules(self) -> tuple[Rule, ...]:
        return self._rules

    @staticmethod
    def get_column_emoji() -> str:
        return "\U0001f4dd"

    @property
    def required_columns(self) -> list[str]:
        return self.target_columns

    @property
    def side_effect_columns(self) -> list[str]:
        return []
