class ScoringError(ValueError):
    """Base for all scoring engine errors."""


class HoleScoreParseError(ScoringError):
    """Stored hole scores could not be decoded into hole records."""
