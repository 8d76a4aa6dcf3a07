"""AWS Bedrock text and object generation via pydantic-ai."""

import json
import traceback

from pydantic_ai import Agent, ToolOutput
from pydantic_ai.settings import ModelSettings

from bedrock_adapter.log import LogFn, log as default_log
from bedrock_adapter.messages import coerce_messages, to_model_messages
from bedrock_adapter.providers.base import (
    BedrockObjectRequest,
    BedrockRequest,
    ObjectResult,
    TextResult,
    TextStream,
    Usage,
)
from bedrock_adapter.providers.client import create_bedrock_client
from bedrock_adapter.providers.credentials import select_credentials


def _model(request: BedrockRequest):
    """Build a client for the request's credentials and select the model."""
    credentials = select_credentials(
        access_key_id=request.access_key_id,
        secret_access_key=request.secret_access_key,
        session_token=request.session_token,
        credential_provider=request.credential_provider,
    )
    client = create_bedrock_client(credentials, region=request.region, base_url=request.base_url)

    if request.additional_model_request_fields is not None:
        return client(request.model_id, request.additional_model_request_fields)
    return client(request.model_id)


def _settings(request: BedrockRequest) -> ModelSettings:
    settings = ModelSettings()
    if request.max_tokens is not None:
        settings["max_tokens"] = request.max_tokens
    if request.temperature is not None:
        settings["temperature"] = request.temperature
    return settings


async def generate_bedrock_text(
    request: BedrockRequest,
    *,
    log: LogFn = default_log,
) -> TextResult:
    """Generate text with a Bedrock model.

    Args:
        request: Credentials, model id, messages and generation parameters
        log: Logging capability, called as log(level, message, *details)

    Returns:
        TextResult with the generated text and token usage

    Raises:
        ConfigurationError: If no credentials can be resolved
        Exception: Whatever the SDK raised, unchanged
    """
    log("debug", f"Generating Bedrock text with model: {request.model_id}")
    try:
        agent = Agent(_model(request))
        result = await agent.run(
            message_history=to_model_messages(request.messages),
            model_settings=_settings(request),
        )
        usage = Usage.from_sdk(result.usage())

        log(
            "debug",
            "Bedrock generate_text result received. "
            f"Tokens: {usage.output_tokens}/{usage.input_tokens}",
        )
        return TextResult(text=result.output, usage=usage)
    except Exception as e:
        log("error", f"Bedrock generate_text failed: {e}")
        raise


async def stream_bedrock_text(
    request: BedrockRequest,
    *,
    log: LogFn = default_log,
) -> TextStream:
    """Stream text from a Bedrock model.

    The SDK's stream handle is returned as-is:

        async with await stream_bedrock_text(request) as stream:
            async for chunk in stream.stream_text(delta=True):
                ...

    Errors raised while reading the stream come straight from the SDK.
    """
    log("debug", f"Streaming Bedrock text with model: {request.model_id}")
    try:
        agent = Agent(_model(request))
        log(
            "debug",
            "[stream_bedrock_text] Parameters received by run_stream:",
            json.dumps(
                {
                    "model_id": request.model_id,
                    "messages": [m.to_dict() for m in coerce_messages(request.messages)],
                    "max_tokens": request.max_tokens,
                    "temperature": request.temperature,
                },
                indent=2,
            ),
        )
        return agent.run_stream(
            message_history=to_model_messages(request.messages),
            model_settings=_settings(request),
        )
    except Exception as e:
        log("error", f"Bedrock stream_text failed: {e}", traceback.format_exc())
        raise


async def generate_bedrock_object(
    request: BedrockObjectRequest,
    *,
    log: LogFn = default_log,
) -> ObjectResult:
    """Generate a structured object with a Bedrock model.

    The model is forced to answer through a tool call named after
    ``request.object_name``; the SDK validates the arguments against
    ``request.schema`` and retries up to ``request.max_retries`` times.
    Tool use support varies by model; Claude models handle it best.
    """
    name = request.object_name
    log("debug", f"Generating Bedrock object ('{name}') with model: {request.model_id}")
    try:
        output_type = ToolOutput(
            request.schema,
            name=name,
            description=f"Generate a {name} based on the prompt.",
        )
        agent = Agent(
            _model(request),
            output_type=output_type,
            output_retries=request.max_retries,
        )

        log(
            "debug",
            f"Using max_tokens: {request.max_tokens}, temperature: {request.temperature}, "
            f"model: {request.model_id}",
        )
        result = await agent.run(
            message_history=to_model_messages(request.messages),
            model_settings=_settings(request),
        )
        usage = Usage.from_sdk(result.usage())

        log(
            "debug",
            "Bedrock generate_object result received. "
            f"Tokens: {usage.output_tokens}/{usage.input_tokens}",
        )
        return ObjectResult(object=result.output, usage=usage)
    except Exception as e:
        log("error", f"Bedrock generate_object ('{name}') failed: {e}")
        raise
