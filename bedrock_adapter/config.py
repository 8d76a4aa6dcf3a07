"""Configuration defaults for the Bedrock adapter."""

# AWS defaults
DEFAULT_REGION = "us-east-1"
BEDROCK_RUNTIME_SERVICE = "bedrock-runtime"

# Structured output defaults
DEFAULT_OBJECT_NAME = "generated_object"
DEFAULT_MAX_RETRIES = 3
