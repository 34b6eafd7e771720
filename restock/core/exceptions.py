from typing import Optional


class RestockError(Exception):
    """Base exception for all restock bot errors."""
    pass

class ConfigError(RestockError):
    """Raised when required settings are missing or invalid at startup."""
    pass

class EbayServiceError(RestockError):
    """Base exception for eBay-specific errors."""
    pass

class AuthError(EbayServiceError):
    """Raised when the OAuth access token cannot be refreshed."""
    pass

class HttpError(EbayServiceError):
    """Raised when a Trading API call returns non-2xx or the transport fails."""

    def __init__(self, message: str, status: Optional[int] = None, body: Optional[str] = None):
        super().__init__(message)
        self.status = status
        self.body = body

class ParseError(EbayServiceError):
    """Raised when a Trading API response is not well-formed XML."""
    pass
