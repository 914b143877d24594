from .oauth import create_authorization_url, get_redirect_uri, validate_authorization_code
from .pkce import generate_code_challenge
from .provider_config import ProviderConfigLoader
from .providers import PROVIDERS, OAuthProvider, get_provider
from .schemas import AuthorizationRequest, OAuth2Tokens, ProviderOptions, TokenResponse
from .tokens import get_oauth2_tokens

__all__ = [
    "create_authorization_url",
    "get_redirect_uri",
    "validate_authorization_code",
    "generate_code_challenge",
    "get_oauth2_tokens",
    "get_provider",
    "OAuthProvider",
    "PROVIDERS",
    "ProviderConfigLoader",
    "AuthorizationRequest",
    "OAuth2Tokens",
    "ProviderOptions",
    "TokenResponse",
]
