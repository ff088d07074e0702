from typing import Optional


class CoachError(Exception):
    """Base error surfaced to the learner as inline feedback"""
    status_code = 500
    default_message = "Something went wrong"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ConfigurationError(CoachError):
    status_code = 500
    default_message = "OpenAI API key not configured"


class InvalidInputError(CoachError):
    status_code = 400
    default_message = "No image provided"


class QuotaExceededError(CoachError):
    status_code = 429
    default_message = "OpenAI API quota exceeded. Please check your billing."


class AnalysisError(CoachError):
    status_code = 500
    default_message = "Failed to analyze image. Please try again."
