class OcrError(Exception):
    """Raised when the recognition service cannot produce a result."""


class OcrNetworkError(OcrError):
    """Raised when a remote recognition call fails due to network/infrastructure issues."""
