"""Request-level failures surfaced by the use cases."""


class BadRequestError(Exception):
    """The request could not be applied; the message is safe to show callers."""


class NotFoundError(Exception):
    """No appointment exists for the requested id."""
