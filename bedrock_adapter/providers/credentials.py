"""Credential strategies for AWS Bedrock."""

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from botocore.credentials import CredentialProvider as BotoCredentialProvider
from botocore.credentials import Credentials, RefreshableCredentials

from bedrock_adapter.providers.base import CredentialProvider


@dataclass(frozen=True)
class ProviderCredentials:
    """Credentials resolved at call time by a caller-supplied function."""
    provider: CredentialProvider


@dataclass(frozen=True)
class StaticCredentials:
    """An explicit access key / secret pair, optionally with a session token."""
    access_key_id: str
    secret_access_key: str
    session_token: str | None = None


@dataclass(frozen=True)
class AmbientCredentials:
    """Credentials found by boto3's default chain (env, config files, metadata)."""


CredentialSet = ProviderCredentials | StaticCredentials | AmbientCredentials


def select_credentials(
    access_key_id: str | None = None,
    secret_access_key: str | None = None,
    session_token: str | None = None,
    credential_provider: CredentialProvider | None = None,
) -> CredentialSet:
    """Pick a strategy: provider first, then explicit keys, then ambient."""
    if credential_provider is not None:
        return ProviderCredentials(provider=credential_provider)

    if access_key_id and secret_access_key:
        return StaticCredentials(
            access_key_id=access_key_id,
            secret_access_key=secret_access_key,
            session_token=session_token or None,
        )

    return AmbientCredentials()


def _to_metadata(resolved: Mapping[str, Any]) -> dict[str, Any]:
    """Translate a provider's result into botocore's credential metadata."""
    expiration = resolved.get("expiration")
    if isinstance(expiration, datetime):
        expiration = expiration.isoformat()
    return {
        "access_key": resolved["access_key_id"],
        "secret_key": resolved["secret_access_key"],
        "token": resolved.get("session_token"),
        "expiry_time": expiration,
    }


class CallableCredentialProvider(BotoCredentialProvider):
    """Adapts a credential provider function to botocore's resolver chain."""

    METHOD = "custom-callable"
    CANONICAL_NAME = "custom-callable"

    def __init__(self, fetch: CredentialProvider):
        super().__init__()
        self._fetch = fetch

    def _refresh(self) -> dict[str, Any]:
        return _to_metadata(self._fetch())

    def load(self) -> Credentials:
        metadata = self._refresh()
        if metadata["expiry_time"] is None:
            return Credentials(
                metadata["access_key"],
                metadata["secret_key"],
                metadata["token"],
                method=self.METHOD,
            )
        return RefreshableCredentials.create_from_metadata(
            metadata=metadata,
            refresh_using=self._refresh,
            method=self.METHOD,
        )
