"""Domain-level exceptions."""


class DomainValidationError(Exception):
    """Raised when an appointment invariant would be violated."""
