"""Typed exception hierarchy for quote provider errors.

Every failure to obtain a usable quote from an external provider is a
``ProviderError``. The quote resolver treats the whole hierarchy as a
signal to fall back to the persisted price; the subclasses exist so the
fallback can be logged with a meaningful reason.
"""


class ProviderError(Exception):
    """Base exception for all provider-related errors.

    Carries the provider name so callers can identify which provider failed.
    """

    def __init__(self, message: str, provider_name: str = ""):
        self.provider_name = provider_name
        super().__init__(message)


class ProviderAuthError(ProviderError):
    """API key missing or rejected."""

    pass


class ProviderConnectionError(ProviderError):
    """Network failures: timeouts, DNS resolution, connection refused."""

    pass


class ProviderAPIError(ProviderError):
    """Non-2xx responses, or a 2xx body that reports a quota/rate limit."""

    def __init__(
        self,
        message: str,
        provider_name: str = "",
        status_code: int | None = None,
    ):
        self.status_code = status_code
        super().__init__(message, provider_name)

    @property
    def rate_limited(self) -> bool:
        """True when the provider refused the call for quota reasons."""
        return self.status_code == 429


class ProviderDataError(ProviderError):
    """Malformed or unparseable response, or no quote for the symbol."""

    pass
