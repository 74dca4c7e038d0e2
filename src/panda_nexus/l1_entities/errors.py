"""Domain error types."""


class CompletionFailedError(Exception):
    """Raised when the upstream answered but produced no usable content."""


class MissingCredentialError(Exception):
    """Raised when no API key is configured for the completion provider."""
