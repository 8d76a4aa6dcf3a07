"""Bedrock client construction."""

from typing import Any

import boto3
import botocore.session
from botocore.exceptions import BotoCoreError
from pydantic_ai.models.bedrock import BedrockConverseModel, BedrockModelSettings
from pydantic_ai.providers.bedrock import BedrockProvider

from bedrock_adapter.config import BEDROCK_RUNTIME_SERVICE, DEFAULT_REGION
from bedrock_adapter.providers.credentials import (
    AmbientCredentials,
    CallableCredentialProvider,
    CredentialSet,
    ProviderCredentials,
    StaticCredentials,
)

MISSING_CREDENTIALS = (
    "AWS Bedrock requires access_key_id, secret_access_key, and region when not "
    "using credential_provider, or valid AWS credentials in the environment."
)


class ConfigurationError(ValueError):
    """No usable credential path or region could be established."""


class BedrockClient:
    """Produces model handles bound to one Bedrock runtime client."""

    def __init__(self, provider: BedrockProvider):
        self.provider = provider

    def __call__(
        self,
        model_id: str,
        additional_model_request_fields: dict[str, Any] | None = None,
    ) -> BedrockConverseModel:
        if additional_model_request_fields is None:
            return BedrockConverseModel(model_id, provider=self.provider)

        settings = BedrockModelSettings(
            bedrock_additional_model_requests_fields=additional_model_request_fields,
        )
        return BedrockConverseModel(model_id, provider=self.provider, settings=settings)


def _provider_session(credentials: ProviderCredentials, region: str) -> boto3.Session:
    """Session whose credential chain starts with the caller's provider."""
    core = botocore.session.get_session()
    resolver = core.get_component("credential_provider")
    resolver.providers.insert(0, CallableCredentialProvider(credentials.provider))
    return boto3.Session(botocore_session=core, region_name=region)


def _ambient_session(region: str) -> boto3.Session:
    try:
        session = boto3.Session(region_name=region)
        found = session.get_credentials()
    except BotoCoreError as e:
        raise ConfigurationError(f"{MISSING_CREDENTIALS} Error: {e}") from e

    if found is None:
        raise ConfigurationError(f"{MISSING_CREDENTIALS} Error: no credentials found")
    return session


def create_session(credentials: CredentialSet, region: str = DEFAULT_REGION) -> boto3.Session:
    """Create a boto3 session for the selected credential strategy."""
    match credentials:
        case ProviderCredentials():
            return _provider_session(credentials, region)
        case StaticCredentials(access_key_id, secret_access_key, session_token):
            kwargs = {
                "aws_access_key_id": access_key_id,
                "aws_secret_access_key": secret_access_key,
            }
            if session_token:
                kwargs["aws_session_token"] = session_token
            return boto3.Session(**kwargs, region_name=region)
        case AmbientCredentials():
            return _ambient_session(region)
        case _:
            raise TypeError(f"Unsupported credential set: {credentials!r}")


def create_bedrock_client(
    credentials: CredentialSet,
    region: str | None = DEFAULT_REGION,
    base_url: str | None = None,
) -> BedrockClient:
    """Create a Bedrock client. No request is sent to Bedrock here.

    Args:
        credentials: Strategy from select_credentials()
        region: AWS region, None for the default
        base_url: Custom endpoint URL for the runtime API

    Returns:
        Callable producing model handles: client(model_id[, extra_fields])

    Raises:
        ConfigurationError: If the region is blank or no credentials resolve
    """
    if region is None:
        region = DEFAULT_REGION
    else:
        region = region.strip()
        if not region:
            raise ConfigurationError("AWS Bedrock region must be a non-empty string.")

    session = create_session(credentials, region)

    client_kwargs = {}
    if base_url:
        client_kwargs["endpoint_url"] = base_url
    runtime = session.client(BEDROCK_RUNTIME_SERVICE, **client_kwargs)

    return BedrockClient(BedrockProvider(bedrock_client=runtime))
