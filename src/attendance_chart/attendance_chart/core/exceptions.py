class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class FetchFailure(DomainError):
    """Raised when a data source is unreachable or answers with a non-2xx status."""

    def __init__(self, message: str, *, source: str | None = None):
        super().__init__(message)
        self.source = source
