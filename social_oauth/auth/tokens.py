"""Normalization of provider token responses."""

from collections.abc import Mapping
from datetime import UTC, datetime, timedelta
from typing import Any

from pydantic import ValidationError

from social_oauth.exceptions import TokenResponseError

from .schemas import OAuth2Tokens, TokenResponse


def parse_scopes(scope: str | None) -> list[str]:
    """Split a space-delimited scope string, keeping order."""
    if not scope:
        return []
    return scope.split(" ")


def compute_expires_at(
    expires_in: int | None,
    expires_at: int | None,
    now: datetime | None = None,
) -> datetime | None:
    """Compute the absolute access token expiry.

    ``expires_in`` (seconds from now) takes precedence. ``expires_at`` is
    read as absolute Unix seconds. Without either there is no expiry.

    Raises:
        TokenResponseError: If the expiry is outside the representable date range
    """
    try:
        if expires_in is not None:
            if now is None:
                now = datetime.now(UTC)
            return now + timedelta(seconds=expires_in)
        if expires_at is not None:
            return datetime.fromtimestamp(expires_at, UTC)
    except (OverflowError, ValueError, OSError) as e:
        raise TokenResponseError(
            "invalid_token_response", f"access token expiry out of range: {e}"
        ) from e
    return None


def get_oauth2_tokens(data: Mapping[str, Any], *, now: datetime | None = None) -> OAuth2Tokens:
    """Map a provider token response to the canonical token record.

    Args:
        data: Decoded JSON body from the token endpoint
        now: Reference time for ``expires_in`` (defaults to current UTC time)

    Returns:
        OAuth2Tokens

    Raises:
        TokenResponseError: If the body does not match the token response schema
    """
    if not isinstance(data, Mapping):
        raise TokenResponseError(
            "invalid_token_response", f"expected a JSON object, got {type(data).__name__}"
        )
    try:
        response = TokenResponse.model_validate(dict(data))
    except ValidationError as e:
        raise TokenResponseError("invalid_token_response", str(e)) from e

    return OAuth2Tokens(
        token_type=response.token_type,
        access_token=response.access_token,
        refresh_token=response.refresh_token,
        access_token_expires_at=compute_expires_at(
            response.expires_in, response.expires_at, now
        ),
        scopes=parse_scopes(response.scope),
        id_token=response.id_token,
    )
