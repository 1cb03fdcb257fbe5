"""vibecheck: code quality analysis for React component source files."""

__version__ = "1.0.0"

from .analyzer import VibeCheckAnalyzer, analyze, discover_files
from .config import VibeCheckConfig, load_config
from .exceptions import (
    AnalysisError,
    AnalysisPathNotFoundError,
    ConfigParseError,
    SourceParseError,
    VibeCheckError,
)
from .models import (
    Category,
    FileAnalysis,
    FileMetrics,
    Issue,
    OverallScore,
    RuleResult,
    Severity,
    Suggestion,
)
from .scoring import calculate_score

__all__ = [
    "AnalysisError",
    "AnalysisPathNotFoundError",
    "Category",
    "ConfigParseError",
    "FileAnalysis",
    "FileMetrics",
    "Issue",
    "OverallScore",
    "RuleResult",
    "Severity",
    "SourceParseError",
    "Suggestion",
    "VibeCheckAnalyzer",
    "VibeCheckConfig",
    "VibeCheckError",
    "analyze",
    "calculate_score",
    "discover_files",
    "load_config",
]
