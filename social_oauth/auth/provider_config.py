"""Provider credentials configuration loader."""

from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from social_oauth.config import get_settings

from .schemas import ProviderOptions

logger = logging.getLogger(__name__)

settings = get_settings()

CONFIG_PATH = Path(settings.PROVIDERS_CONFIG_PATH)
DOCKER_SECRETS_PATH = Path("/run/secrets")


@dataclass
class ProviderCredentials:
    """Configured credentials for one provider."""

    id: str
    client_id: str
    client_secret: str
    redirect_uri: str | None = None
    enabled: bool = True

    def to_options(self) -> ProviderOptions:
        return ProviderOptions(
            client_id=self.client_id,
            client_secret=self.client_secret,
            redirect_uri=self.redirect_uri,
        )


@dataclass
class ProviderConfig:
    """All configured providers, keyed by id."""

    providers: dict[str, ProviderCredentials] = field(default_factory=dict)


class ProviderConfigLoader:
    """Loads provider credentials from config/providers.yaml."""

    _config: ProviderConfig | None = None

    @classmethod
    def load(cls) -> ProviderConfig:
        """Load providers from the configuration file."""
        if not CONFIG_PATH.exists():
            logger.info(
                "Provider configuration not found at %s. Using environment settings.",
                CONFIG_PATH,
            )
            cls._config = ProviderConfig()
            return cls._config

        try:
            with open(CONFIG_PATH) as f:
                raw_config = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            logger.error("Failed to parse provider configuration: %s", e)
            cls._config = ProviderConfig()
            return cls._config

        if not isinstance(raw_config, dict):
            logger.error(
                "Provider configuration at %s must be a mapping, got %s",
                CONFIG_PATH,
                type(raw_config).__name__,
            )
            cls._config = ProviderConfig()
            return cls._config

        entries = raw_config.get("providers") or []
        if not isinstance(entries, list):
            logger.error(
                "'providers' in %s must be a list, got %s",
                CONFIG_PATH,
                type(entries).__name__,
            )
            cls._config = ProviderConfig()
            return cls._config

        providers: dict[str, ProviderCredentials] = {}
        for entry in entries:
            try:
                credentials = cls._parse_provider(entry)
            except ValueError as e:
                logger.warning("Skipping invalid provider: %s", e)
                continue
            if credentials.id in providers:
                logger.warning("Duplicate provider '%s', keeping the last entry", credentials.id)
            providers[credentials.id] = credentials

        cls._config = ProviderConfig(providers=providers)
        logger.info("Loaded %d provider(s) from %s", len(providers), CONFIG_PATH)
        return cls._config

    @classmethod
    def get_config(cls) -> ProviderConfig:
        """Get current configuration, loading if necessary."""
        if cls._config is None:
            cls.load()
        return cls._config  # type: ignore

    @classmethod
    def get_options(cls, provider_id: str) -> ProviderOptions | None:
        """Get client options for a provider.

        Entries from the configuration file win over ``<ID>_CLIENT_ID`` /
        ``<ID>_CLIENT_SECRET`` settings. Returns None when the provider is
        not configured or is disabled.
        """
        credentials = cls.get_config().providers.get(provider_id)
        if credentials is not None:
            return credentials.to_options() if credentials.enabled else None

        prefix = provider_id.upper()
        client_id = getattr(settings, f"{prefix}_CLIENT_ID", "")
        client_secret = getattr(settings, f"{prefix}_CLIENT_SECRET", "")
        if not client_id:
            return None
        return ProviderOptions(client_id=client_id, client_secret=client_secret)

    @classmethod
    def _parse_provider(cls, data: dict[str, Any]) -> ProviderCredentials:
        """Parse and validate a provider entry."""
        if not isinstance(data, dict):
            raise ValueError(f"Provider entry must be a mapping, got {data!r}")

        provider_id = data.get("id")
        client_id_ref = data.get("client_id")
        client_secret_ref = data.get("client_secret")
        redirect_uri = data.get("redirect_uri")
        enabled = data.get("enabled", True)

        if not provider_id:
            raise ValueError("Provider missing 'id' field")
        if not client_id_ref:
            raise ValueError(f"Provider '{provider_id}' missing 'client_id' field")
        if not client_secret_ref:
            raise ValueError(f"Provider '{provider_id}' missing 'client_secret' field")
        if redirect_uri is not None and not isinstance(redirect_uri, str):
            raise ValueError(f"Provider '{provider_id}' redirect_uri must be a string")
        if redirect_uri and not redirect_uri.startswith(("https://", "http://")):
            raise ValueError(
                f"Provider '{provider_id}' redirect_uri must be an http(s) URL: {redirect_uri}"
            )

        client_id = cls._resolve_secret(client_id_ref)
        if not client_id:
            raise ValueError(
                f"Provider '{provider_id}' client_id could not be resolved: {client_id_ref}"
            )
        client_secret = cls._resolve_secret(client_secret_ref)
        if not client_secret:
            raise ValueError(
                f"Provider '{provider_id}' client_secret could not be resolved: "
                f"{client_secret_ref}"
            )

        return ProviderCredentials(
            id=provider_id,
            client_id=client_id,
            client_secret=client_secret,
            redirect_uri=redirect_uri or None,
            enabled=bool(enabled),
        )

    @classmethod
    def _resolve_secret(cls, ref: str) -> str | None:
        """Resolve a ``${VAR_NAME}`` reference from Docker Secrets or the environment.

        Values not in ``${...}`` form are used literally.
        """
        match = re.match(r"^\$\{(\w+)\}$", str(ref))
        if not match:
            return str(ref)

        var_name = match.group(1)

        secret_file = DOCKER_SECRETS_PATH / var_name.lower()
        if secret_file.exists():
            try:
                return secret_file.read_text().strip()
            except OSError as e:
                logger.warning("Failed to read Docker Secret %s: %s", secret_file, e)

        return os.environ.get(var_name) or None
