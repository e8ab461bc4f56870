"""
Exceptions raised by the learning content services
"""


class LearningServiceError(Exception):
    """Base class for content generation failures"""


class CompletionError(LearningServiceError):
    """The completion service could not be reached or rejected the request"""


class StructuredOutputError(LearningServiceError):
    """Model output could not be parsed into the expected JSON structure"""
