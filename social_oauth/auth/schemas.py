"""OAuth schemas."""

from datetime import datetime

from pydantic import BaseModel, Field


class ProviderOptions(BaseModel):
    """Client credentials registered with an OAuth provider."""

    client_id: str = Field(..., description="OAuth client identifier")
    client_secret: str = Field(..., description="OAuth client secret")
    redirect_uri: str | None = Field(
        None, description="Explicit redirect URI (defaults to <base_url>/callback/<provider>)"
    )

    model_config = {"frozen": True}


class AuthorizationRequest(BaseModel):
    """Per-attempt parameters of an authorization request.

    ``state`` and ``code_verifier`` must be generated by the caller with a
    cryptographically secure source and kept until the callback arrives.
    """

    state: str = Field(..., description="Opaque CSRF state value")
    code_verifier: str | None = Field(None, description="PKCE code verifier")
    scopes: list[str] = Field(default_factory=list, description="Requested scopes, in order")
    disable_pkce: bool = Field(default=False, description="Never send PKCE parameters")


class TokenResponse(BaseModel):
    """Token endpoint response body (RFC 6749 section 5.1).

    Providers add their own fields; those are accepted and ignored.
    """

    access_token: str
    token_type: str
    refresh_token: str | None = None
    expires_in: int | None = Field(None, ge=0)
    expires_at: int | None = Field(None, ge=0)
    scope: str | None = None
    id_token: str | None = None

    model_config = {"extra": "ignore"}


class OAuth2Tokens(BaseModel):
    """Canonical token record returned for every provider."""

    token_type: str = Field(..., description="Token type as reported by the provider")
    access_token: str = Field(..., description="Provider access token")
    refresh_token: str | None = Field(None, description="Provider refresh token, if issued")
    access_token_expires_at: datetime | None = Field(
        None, description="When the access token expires (UTC), if the provider said so"
    )
    scopes: list[str] = Field(default_factory=list, description="Granted scopes, in order")
    id_token: str | None = Field(None, description="OpenID Connect ID Token, verbatim")

    model_config = {"frozen": True}
