"""Errors raised by the OAuth client."""

import httpx

# Network failures and non-2xx statuses from the token endpoint surface as
# the HTTP client's own exceptions.
TransportError = httpx.HTTPError


class OAuthError(Exception):
    """Base class for errors raised by this library."""


class EncodingError(OAuthError, ValueError):
    """An authorization or token endpoint URL could not be used."""

    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(f"Invalid endpoint URL {url!r}: {reason}")


class TokenResponseError(OAuthError):
    """The token endpoint answered 2xx but the body is not a usable token response.

    Raised for RFC 6749 error bodies (``{"error": ...}``) and for bodies that
    fail validation against the token response schema.
    """

    def __init__(self, error: str, error_description: str | None = None):
        self.error = error
        self.error_description = error_description
        message = error if not error_description else f"{error}: {error_description}"
        super().__init__(message)


class UnknownProviderError(OAuthError, KeyError):
    """No provider is registered under the requested id."""

    def __init__(self, provider_id: str):
        self.provider_id = provider_id
        super().__init__(provider_id)

    def __str__(self) -> str:
        return f"Unknown OAuth provider: {self.provider_id}"
