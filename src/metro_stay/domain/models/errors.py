"""Domain errors."""


class NetworkNotBuiltError(RuntimeError):
    """Raised when the transit network is queried before it has been built."""
