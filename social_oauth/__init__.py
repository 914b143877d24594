"""OAuth 2.0 authorization code flow with PKCE for social login providers."""

from .auth import (
    AuthorizationRequest,
    OAuth2Tokens,
    OAuthProvider,
    ProviderOptions,
    create_authorization_url,
    generate_code_challenge,
    get_oauth2_tokens,
    get_provider,
    validate_authorization_code,
)
from .exceptions import (
    EncodingError,
    OAuthError,
    TokenResponseError,
    TransportError,
    UnknownProviderError,
)

__version__ = "0.1.0"

__all__ = [
    "AuthorizationRequest",
    "OAuth2Tokens",
    "OAuthProvider",
    "ProviderOptions",
    "create_authorization_url",
    "generate_code_challenge",
    "get_oauth2_tokens",
    "get_provider",
    "validate_authorization_code",
    "EncodingError",
    "OAuthError",
    "TokenResponseError",
    "TransportError",
    "UnknownProviderError",
]
