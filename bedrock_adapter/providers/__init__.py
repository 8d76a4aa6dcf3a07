"""AWS Bedrock provider functions."""

from .base import BedrockObjectRequest, BedrockRequest, ObjectResult, TextResult, TextStream, Usage
from .bedrock import generate_bedrock_object, generate_bedrock_text, stream_bedrock_text
from .client import BedrockClient, ConfigurationError, create_bedrock_client
from .credentials import (
    AmbientCredentials,
    CredentialSet,
    ProviderCredentials,
    StaticCredentials,
    select_credentials,
)

__all__ = [
    "AmbientCredentials",
    "BedrockClient",
    "BedrockObjectRequest",
    "BedrockRequest",
    "ConfigurationError",
    "CredentialSet",
    "ObjectResult",
    "ProviderCredentials",
    "StaticCredentials",
    "TextResult",
    "TextStream",
    "Usage",
    "create_bedrock_client",
    "generate_bedrock_object",
    "generate_bedrock_text",
    "select_credentials",
    "stream_bedrock_text",
]
