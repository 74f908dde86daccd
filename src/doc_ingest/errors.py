"""Exception hierarchy for the ingestion service."""

from __future__ import annotations


class IngestionError(Exception):
    """Base class for every failure raised by the ingestion pipeline."""


class MissingFileError(IngestionError):
    """The upload request carried no ``file`` field."""

    def __init__(self, message: str = "No file provided") -> None:
        super().__init__(message)


class ParseError(IngestionError):
    """A payload (uploaded document or model response) could not be read."""


class RemoteServiceError(IngestionError):
    """A hosted model call failed."""


class RetryExhaustedError(IngestionError):
    """Every attempt of a retried operation failed.

    The message is the last failure's message; the failure itself is
    chained as ``__cause__``.
    """

    def __init__(self, message: str, attempts: int) -> None:
        super().__init__(message)
        self.attempts = attempts


class ConfigurationError(IngestionError):
    """Required settings are missing at startup."""
