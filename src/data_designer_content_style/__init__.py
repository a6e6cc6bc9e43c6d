# SPDX-License-Identifier: Apache-2.0
"""Content style plugin for NeMo Data Designer.

Adds a ``content-style`` column type that checks text against a style guide of
forbidden phrases, each mapped to the canonical wording to use instead. Rules
are plain regular expressions compiled once; no LLM calls.

Usage::

    from data_designer_content_style import ContentStyleColumnConfig

    builder.add_column(ContentStyleColumnConfig(
        name="style_check",
        target_columns=["article"],
        rule_set=[
            {"violation": ["dropdown", "drop down"], "suggestion": "drop-down", "case_insensitive": True},
            {"violation": "App", "suggestion": "app"},
        ],
        addendum="Questions? Ask the content team.",
    ))
"""

from data_designer_content_style.config import ContentStyleColumnConfig, ContentStyleRuleConfig
from data_designer_content_style.core import (
    ConfigError,
    Report,
    Rule,
    RuleCompilationError,
    Segment,
    build_rule_set,
    check_segments,
    lint_text,
)

__all__ = [
    "ContentStyleColumnConfig",
    "ContentStyleRuleConfig",
    "ConfigError",
    "Report",
    "Rule",
    "RuleCompilationError",
    "Segment",
    "build_rule_set",
    "check_segments",
    "lint_text",
]
