"""Pytest configuration and fixtures."""

import os

import pytest

# Set test environment before importing the library
os.environ.setdefault("BASE_URL", "https://app.example.com")

from social_oauth.auth.schemas import ProviderOptions
from tests.mock_tokens import MOCK_TOKENS, MockTokenResponse


@pytest.fixture
def provider_options() -> ProviderOptions:
    """Client credentials without an explicit redirect URI."""
    return ProviderOptions(client_id="test-client-id", client_secret="test-client-secret")


@pytest.fixture
def provider_options_with_redirect() -> ProviderOptions:
    """Client credentials with an explicit redirect URI."""
    return ProviderOptions(
        client_id="test-client-id",
        client_secret="test-client-secret",
        redirect_uri="https://app.example.com/auth/github/callback",
    )


@pytest.fixture
def mock_tokens() -> MockTokenResponse:
    """Mock token response data."""
    return MOCK_TOKENS["full"]
