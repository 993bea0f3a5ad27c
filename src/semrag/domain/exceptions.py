"""Domain exceptions."""


class SemRAGError(Exception):
    """Base exception for semrag."""

    pass


class ValidationError(SemRAGError):
    """Validation failed for input data."""

    pass


class ProviderError(SemRAGError):
    """External embedding or LLM provider call failed."""

    pass


class ConfigurationError(SemRAGError):
    """Required settings are missing or invalid."""

    pass
