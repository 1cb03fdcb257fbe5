"""Input shared by the report renderers."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from ..config import VibeCheckConfig
from ..models import FileAnalysis, OverallScore


class ReportData(BaseModel):
    """Everything a renderer needs to describe one run."""

    results: list[FileAnalysis] = Field(default_factory=list)
    scores: OverallScore = Field(default_factory=OverallScore)
    config: VibeCheckConfig = Field(default_factory=VibeCheckConfig)
    analysis_time_ms: int = 0
    total_files: int = 0
    show_fix: bool = False

    def to_json_dict(self) -> dict[str, Any]:
        return {
            "results": [r.model_dump(mode="json") for r in self.results],
            "scores": self.scores.model_dump(mode="json"),
            "config": self.config.to_json_dict(),
            "analysis_time_ms": self.analysis_time_ms,
            "total_files": self.total_files,
        }
