"""Library configuration."""

import os
from functools import lru_cache


def read_secret(name: str, default: str = "") -> str:
    """Read secret from Docker secrets or environment variable."""
    secret_path = f"/run/secrets/{name}"
    if os.path.exists(secret_path):
        with open(secret_path) as f:
            return f.read().strip()
    return os.getenv(name.upper(), default)


class Settings:
    """Library settings."""

    # Base URL used for default redirect URIs (<BASE_URL>/callback/<provider>)
    BASE_URL: str = os.getenv("BASE_URL", "http://localhost:8000")

    # HTTP
    USER_AGENT: str = os.getenv("USER_AGENT", "social-oauth")
    HTTP_TIMEOUT_SECONDS: float = float(os.getenv("HTTP_TIMEOUT_SECONDS", "10"))

    # Provider config file (optional)
    PROVIDERS_CONFIG_PATH: str = os.getenv("PROVIDERS_CONFIG_PATH", "config/providers.yaml")

    # OAuth - Google
    GOOGLE_CLIENT_ID: str = read_secret("google_client_id", "")
    GOOGLE_CLIENT_SECRET: str = read_secret("google_client_secret", "")

    # OAuth - GitHub
    GITHUB_CLIENT_ID: str = read_secret("github_client_id", "")
    GITHUB_CLIENT_SECRET: str = read_secret("github_client_secret", "")

    # OAuth - Discord
    DISCORD_CLIENT_ID: str = read_secret("discord_client_id", "")
    DISCORD_CLIENT_SECRET: str = read_secret("discord_client_secret", "")

    # OAuth - X
    X_CLIENT_ID: str = read_secret("x_client_id", "")
    X_CLIENT_SECRET: str = read_secret("x_client_secret", "")


@lru_cache
def get_settings() -> Settings:
    return Settings()


def get_base_url() -> str:
    """Resolve the base URL of the application hosting the callbacks."""
    return get_settings().BASE_URL.rstrip("/")
