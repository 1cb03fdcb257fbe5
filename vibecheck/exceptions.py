"""Exception hierarchy for vibecheck.

Only ``AnalysisPathNotFoundError`` is fatal to a run. Parse and configuration
errors are recovered where they occur and reported as warnings.
"""


class VibeCheckError(Exception):
    """Base exception for all vibecheck errors.

    All custom exceptions inherit from this class so callers can catch every
    vibecheck-specific error with a single except clause.
    """
    pass


# =============================================================================
# Analysis Errors
# =============================================================================

class AnalysisError(VibeCheckError):
    """Base exception for analysis-related errors."""
    pass


class SourceParseError(AnalysisError):
    """Source file could not be parsed under any grammar mode."""
    pass


class AnalysisPathNotFoundError(AnalysisError):
    """The path given for analysis does not exist."""

    def __init__(self, path: str):
        super().__init__(f"Path does not exist: {path}")
        self.path = path


# =============================================================================
# Configuration Errors
# =============================================================================

class ConfigParseError(VibeCheckError):
    """Configuration file is not valid JSON or violates the schema."""

    def __init__(self, message: str, config_path: str | None = None):
        super().__init__(message)
        self.config_path = config_path
