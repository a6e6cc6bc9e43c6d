from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from data_designer.engine.column_generators.generators.base import ColumnGeneratorFullColumn

from data_designer_content_style.config import ContentStyleColumnConfig
from data_designer_content_style.core import check_segments, split_segments

if TYPE_CHECKING:
    import pandas as pd

logger = logging.getLogger(__name__)


class ContentStyleColumnGenerator(ColumnGeneratorFullColumn[ContentStyleColumnConfig]):
    """Column generator that checks text against content style guide rules."""

    def generate(self, data: pd.DataFrame) -> pd.DataFrame:
        rules = self.config.rules
        logger.info(f"\U0001f4dd Checking column {self.config.name!r} against {len(rules)} content style rules")
        logger.info(f"   target columns: {self.config.target_columns}")
        logger.info(f"   overlap scope: {self.config.overlap_scope}")

        results = []
        for _, row in data[self.config.target_columns].iterrows():
            text = "\n".join(str(v) for v in row.values if v is not None)
            reports = check_segments(
                rules,
                split_segments(text),
                addendum=self.config.addendum,
                overlap_scope=self.config.overlap_scope,
            )
            output: dict = {
                "is_valid": not reports,
                "violation_count": len(reports),
            }
            if self.config.include_violations:
                output["violations"] = [r.to_payload() for r in reports]
            results.append(output)

        data = data.copy()
        data[self.config.name] = results
        return data
