"""Generate and stream text or structured objects with AWS Bedrock models."""

from bedrock_adapter.messages import Message
from bedrock_adapter.providers import (
    AmbientCredentials,
    BedrockClient,
    BedrockObjectRequest,
    BedrockRequest,
    ConfigurationError,
    ObjectResult,
    ProviderCredentials,
    StaticCredentials,
    TextResult,
    TextStream,
    Usage,
    create_bedrock_client,
    generate_bedrock_object,
    generate_bedrock_text,
    select_credentials,
    stream_bedrock_text,
)

__all__ = [
    "AmbientCredentials",
    "BedrockClient",
    "BedrockObjectRequest",
    "BedrockRequest",
    "ConfigurationError",
    "Message",
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
