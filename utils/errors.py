from typing import Optional


class QuizPlatformError(Exception):
    """Base class for quiz service errors"""


class ConfigurationError(QuizPlatformError):
    """A required credential or setting is missing"""


class QuizValidationError(QuizPlatformError):
    """The quiz request is missing required fields"""


class EnrichmentError(QuizPlatformError):
    """The search provider could not supply context"""


class GenerationFailure(QuizPlatformError):
    """Generated content is unavailable; recoverable through the fallback bank"""


class GenerationError(GenerationFailure):
    """The completion provider failed or timed out"""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class QuizParseError(GenerationFailure):
    """The completion text did not contain a usable question list"""


class ExhaustedFallbackError(QuizPlatformError):
    """Generation failed and the fallback bank has nothing for the request"""
