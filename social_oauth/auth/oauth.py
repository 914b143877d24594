"""OAuth 2.0 authorization code flow shared by all providers."""

import logging
from collections.abc import Mapping, Sequence

import httpx

from social_oauth.config import get_base_url, get_settings
from social_oauth.exceptions import EncodingError, TokenResponseError

from .pkce import generate_code_challenge
from .schemas import OAuth2Tokens, ProviderOptions
from .tokens import get_oauth2_tokens

logger = logging.getLogger(__name__)

settings = get_settings()


def _parse_endpoint(endpoint: str) -> httpx.URL:
    """Parse an absolute http(s) endpoint URL."""
    try:
        url = httpx.URL(endpoint)
    except (httpx.InvalidURL, TypeError) as e:
        raise EncodingError(str(endpoint), str(e)) from e

    if url.scheme not in ("http", "https"):
        raise EncodingError(endpoint, "scheme must be http or https")
    if not url.host:
        raise EncodingError(endpoint, "missing host")
    return url


def get_redirect_uri(provider_id: str, redirect_uri: str | None = None) -> str:
    """Return the explicit redirect URI, or the default callback for the provider."""
    return redirect_uri or f"{get_base_url()}/callback/{provider_id}"


def create_authorization_url(
    *,
    id: str,
    options: ProviderOptions,
    authorization_endpoint: str,
    state: str,
    scopes: Sequence[str],
    code_verifier: str | None = None,
    disable_pkce: bool = False,
    extra_params: Mapping[str, str] | None = None,
) -> httpx.URL:
    """Build the provider authorization URL.

    PKCE parameters are added only when a code verifier is given and PKCE
    is not disabled. Provider-specific ``extra_params`` are applied first,
    so they cannot replace the standard parameters.

    Raises:
        EncodingError: If the authorization endpoint is not a valid URL
    """
    url = _parse_endpoint(authorization_endpoint)
    if extra_params:
        url = url.copy_merge_params(dict(extra_params))

    params = {
        "response_type": "code",
        "client_id": options.client_id,
        "state": state,
        "scope": " ".join(scopes),
        "redirect_uri": get_redirect_uri(id, options.redirect_uri),
    }
    if not disable_pkce and code_verifier:
        params["code_challenge_method"] = "S256"
        params["code_challenge"] = generate_code_challenge(code_verifier)

    return url.copy_merge_params(params)


async def _request_tokens(
    client: httpx.AsyncClient,
    token_endpoint: httpx.URL,
    data: dict[str, str],
    headers: dict[str, str],
) -> dict:
    response = await client.post(token_endpoint, data=data, headers=headers)
    logger.debug("Token endpoint %s responded %s", token_endpoint, response.status_code)
    try:
        response.raise_for_status()
    except httpx.HTTPStatusError:
        logger.warning(
            "Token exchange failed at %s with status %s",
            token_endpoint,
            response.status_code,
        )
        raise

    try:
        return response.json()
    except ValueError as e:
        raise TokenResponseError(
            "invalid_token_response", "token endpoint returned a non-JSON body"
        ) from e


async def validate_authorization_code(
    *,
    code: str,
    redirect_uri: str,
    options: ProviderOptions,
    token_endpoint: str,
    code_verifier: str | None = None,
    client: httpx.AsyncClient | None = None,
    user_agent: str | None = None,
) -> OAuth2Tokens:
    """Exchange an authorization code for tokens.

    Sends exactly one POST to the token endpoint. Transport failures and
    non-2xx statuses propagate as raised by httpx; nothing is retried.

    Args:
        code: Authorization code from the provider callback
        redirect_uri: Redirect URI used in the authorization request
        options: Client credentials
        token_endpoint: Provider token endpoint
        code_verifier: PKCE code verifier, if PKCE was used
        client: HTTP client to send the request with (a short-lived one is
            created from settings when omitted)
        user_agent: User-Agent header (defaults to ``Settings.USER_AGENT``)

    Returns:
        OAuth2Tokens

    Raises:
        EncodingError: If the token endpoint is not a valid URL
        httpx.HTTPError: On network failure or non-2xx status
        TokenResponseError: If a 2xx body is an error response or not a token response
    """
    url = _parse_endpoint(token_endpoint)

    data = {
        "grant_type": "authorization_code",
        "code": code,
    }
    if code_verifier:
        data["code_verifier"] = code_verifier
    data["redirect_uri"] = redirect_uri
    data["client_id"] = options.client_id
    data["client_secret"] = options.client_secret

    headers = {
        "Content-Type": "application/x-www-form-urlencoded",
        "Accept": "application/json",
        "User-Agent": user_agent or settings.USER_AGENT,
    }

    if client is None:
        async with httpx.AsyncClient(timeout=settings.HTTP_TIMEOUT_SECONDS) as own_client:
            payload = await _request_tokens(own_client, url, data, headers)
    else:
        payload = await _request_tokens(client, url, data, headers)

    # Some providers (GitHub) report errors with a 200 status
    if isinstance(payload, dict) and payload.get("error"):
        logger.warning("Token endpoint %s returned error %s", url, payload.get("error"))
        raise TokenResponseError(str(payload["error"]), payload.get("error_description"))

    return get_oauth2_tokens(payload)
