from typing import Optional


class MetadataFetchError(Exception):
    """Raised when the instance metadata service cannot provide a requested value."""

    def __init__(self, message: str, url: Optional[str] = None, status_code: Optional[int] = None):
        super().__init__(message)
        self.url = url
        self.status_code = status_code
