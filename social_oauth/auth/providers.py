"""OAuth provider definitions."""

from dataclasses import dataclass, field

import httpx

from social_oauth.exceptions import UnknownProviderError

from .oauth import create_authorization_url, get_redirect_uri, validate_authorization_code
from .schemas import AuthorizationRequest, OAuth2Tokens, ProviderOptions


@dataclass(frozen=True)
class OAuthProvider:
    """Endpoints and defaults of one OAuth provider."""

    id: str
    authorization_endpoint: str
    token_endpoint: str
    default_scopes: tuple[str, ...] = ()
    pkce: bool = True
    extra_params: dict[str, str] = field(default_factory=dict)

    def create_authorization_url(
        self,
        options: ProviderOptions,
        request: AuthorizationRequest,
    ) -> httpx.URL:
        """Get the authorization URL, with PKCE when the provider supports it."""
        return create_authorization_url(
            id=self.id,
            options=options,
            authorization_endpoint=self.authorization_endpoint,
            state=request.state,
            scopes=request.scopes or list(self.default_scopes),
            code_verifier=request.code_verifier,
            disable_pkce=request.disable_pkce or not self.pkce,
            extra_params=self.extra_params,
        )

    async def validate_authorization_code(
        self,
        options: ProviderOptions,
        code: str,
        code_verifier: str | None = None,
        redirect_uri: str | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> OAuth2Tokens:
        """Exchange authorization code for tokens."""
        return await validate_authorization_code(
            code=code,
            code_verifier=code_verifier if self.pkce else None,
            redirect_uri=get_redirect_uri(self.id, redirect_uri or options.redirect_uri),
            options=options,
            token_endpoint=self.token_endpoint,
            client=client,
        )


GOOGLE = OAuthProvider(
    id="google",
    authorization_endpoint="https://accounts.google.com/o/oauth2/v2/auth",
    token_endpoint="https://oauth2.googleapis.com/token",
    default_scopes=("openid", "email", "profile"),
    extra_params={"access_type": "offline", "prompt": "consent"},
)

GITHUB = OAuthProvider(
    id="github",
    authorization_endpoint="https://github.com/login/oauth/authorize",
    token_endpoint="https://github.com/login/oauth/access_token",
    default_scopes=("read:user", "user:email"),
)

DISCORD = OAuthProvider(
    id="discord",
    authorization_endpoint="https://discord.com/api/oauth2/authorize",
    token_endpoint="https://discord.com/api/oauth2/token",
    default_scopes=("identify", "email"),
    pkce=False,
)

X = OAuthProvider(
    id="x",
    authorization_endpoint="https://twitter.com/i/oauth2/authorize",
    token_endpoint="https://api.twitter.com/2/oauth2/token",
    default_scopes=("tweet.read", "users.read", "offline.access"),
)

PROVIDERS: dict[str, OAuthProvider] = {
    provider.id: provider for provider in (GOOGLE, GITHUB, DISCORD, X)
}


def get_provider(provider_id: str) -> OAuthProvider:
    """Get a registered provider by id."""
    try:
        return PROVIDERS[provider_id]
    except KeyError:
        raise UnknownProviderError(provider_id) from None
