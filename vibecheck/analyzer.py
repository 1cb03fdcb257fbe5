"""File discovery and per-file analysis.

Files are analyzed one at a time. A file that cannot be read or parsed, or
whose analysis raises, is logged and left out of the results; the run
continues with the next file.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from pathlib import Path

from .config import VibeCheckConfig, load_config, should_ignore_file
from .exceptions import AnalysisPathNotFoundError
from .models import Category, FileAnalysis, FileMetrics, OverallScore
from .parsing import ASTEngine
from .rules import RuleContext, run_rules
from .scoring import calculate_score

logger = logging.getLogger(__name__)

SOURCE_EXTENSIONS = frozenset({".tsx", ".ts", ".jsx", ".js"})

# Directory and file names containing any of these are skipped.
EXCLUDED_NAME_PATTERNS = (
    "node_modules",
    ".git",
    "dist",
    "build",
    ".next",
    "coverage",
    "__tests__",
    ".test.",
    ".spec.",
    "test.",
    "spec.",
    ".config.",
    "config.",
)


def _is_excluded_name(name: str) -> bool:
    return any(pattern in name for pattern in EXCLUDED_NAME_PATTERNS)


def discover_files(root: str | Path, ignore_patterns: list[str] | None = None) -> list[str]:
    """Find component source files under *root*.

    Args:
        root: A directory to search recursively, or a single file.
        ignore_patterns: Config ignore patterns (see ``should_ignore_file``).

    Returns:
        Sorted file paths.

    Raises:
        AnalysisPathNotFoundError: If *root* does not exist.
    """
    root_path = Path(root)
    if not root_path.exists():
        raise AnalysisPathNotFoundError(str(root))
    ignore_patterns = ignore_patterns or []

    if root_path.is_file():
        candidates = [root_path]
    else:
        candidates = []
        for dirpath, dirnames, filenames in os.walk(root_path):
            dirnames[:] = sorted(d for d in dirnames if not _is_excluded_name(d))
            for filename in sorted(filenames):
                if not _is_excluded_name(filename):
                    candidates.append(Path(dirpath) / filename)

    files = []
    for path in candidates:
        if path.suffix not in SOURCE_EXTENSIONS:
            continue
        if should_ignore_file(str(path), ignore_patterns):
            logger.debug(f"Ignoring {path}")
            continue
        files.append(str(path))
    return sorted(files)


def display_path(file_path: str) -> str:
    """Path relative to the working directory when it lies beneath it."""
    try:
        return Path(file_path).resolve().relative_to(Path.cwd().resolve()).as_posix()
    except ValueError:
        return file_path


class VibeCheckAnalyzer:
    """Analyzes component source files with the configured rules.

    Example::

        analyzer = VibeCheckAnalyzer(load_config())
        results = analyzer.analyze_directory("src")
    """

    def __init__(
        self,
        config: VibeCheckConfig | None = None,
        engine: ASTEngine | None = None,
        categories: Iterable[Category] | None = None,
    ) -> None:
        self.config = config or VibeCheckConfig()
        self.engine = engine or ASTEngine()
        self.categories = set(categories) if categories is not None else None

    def analyze_directory(self, path: str | Path) -> list[FileAnalysis]:
        """Analyze every discovered file under *path*.

        Raises:
            AnalysisPathNotFoundError: If *path* does not exist.
        """
        files = discover_files(path, self.config.ignore)
        logger.info(f"Found {len(files)} files to analyze under {path}")

        results: list[FileAnalysis] = []
        for file_path in files:
            try:
                results.append(self.analyze_file(file_path))
            except Exception as e:
                logger.warning(
                    f"Could not analyze {file_path}: {e}", extra={"file": file_path}
                )
        return results

    def analyze_file(self, file_path: str) -> FileAnalysis:
        """Read and analyze one file.

        Raises:
            SourceParseError: If the file cannot be parsed.
            OSError: If the file cannot be read.
        """
        source = Path(file_path).read_text(encoding="utf-8")
        return self.analyze_source(file_path, source)

    def analyze_source(self, file_path: str, source: str) -> FileAnalysis:
        """Analyze source text as if it were read from *file_path*."""
        ast = self.engine.parse_file(source, file_path)
        context = RuleContext(config=self.config, filename=file_path, ast=ast)
        result = run_rules(context, self.categories)

        shown = display_path(file_path)
        metrics = result.metrics
        return FileAnalysis(
            file=file_path,
            issues=[i.model_copy(update={"file": shown}) for i in result.issues],
            suggestions=[
                s.model_copy(update={"file": shown}) for s in result.suggestions
            ],
            metrics=FileMetrics(
                component_count=metrics.get("component_count", 0),
                average_component_size=metrics.get("average_component_size", 0.0),
                total_lines=len(source.split("\n")),
                complexity_score=metrics.get("complexity_score", 0),
                state_usage_count=metrics.get("state_usage_count", 0),
                prop_drilling_count=metrics.get("prop_drilling_count", 0),
            ),
        )


def analyze(
    path: str | Path, config_path: str | Path | None = None
) -> tuple[list[FileAnalysis], OverallScore, VibeCheckConfig]:
    """One-shot analysis of *path*.

    Returns:
        ``(results, scores, config)``.
    """
    config = load_config(config_path)
    results = VibeCheckAnalyzer(config).analyze_directory(path)
    return results, calculate_score(results, len(results)), config
