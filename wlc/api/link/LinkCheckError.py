"""Base class for fatal link check failures."""


class LinkCheckError(RuntimeError):
    """A failure that ends a link check. Never retried."""
