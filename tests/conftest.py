# tests/conftest.py
from __future__ import annotations

from types import SimpleNamespace
from typing import Any

import pytest

from bedrock_adapter.providers import bedrock as bedrock_module


class LogRecorder:
    """Stands in for the injected log(level, message, *details) capability."""

    def __init__(self) -> None:
        self.entries: list[tuple[str, str, tuple[Any, ...]]] = []

    def __call__(self, level: str, message: str, *details: Any) -> None:
        self.entries.append((level, message, details))

    def at(self, level: str) -> list[str]:
        return [message for lvl, message, _ in self.entries if lvl == level]


class FakeClient:
    """Records model selection calls and hands back a sentinel model."""

    def __init__(self) -> None:
        self.model = object()
        self.calls: list[tuple[Any, ...]] = []

    def __call__(self, *args: Any) -> object:
        self.calls.append(args)
        return self.model


class FakeSDK:
    def __init__(self) -> None:
        self.client = FakeClient()
        self.factory_calls: list[dict[str, Any]] = []
        self.agents: list[FakeAgent] = []
        self.result: Any = None
        self.error: Exception | None = None
        self.stream_handle = object()

    def create_bedrock_client(self, credentials, region=None, base_url=None):
        self.factory_calls.append(
            {"credentials": credentials, "region": region, "base_url": base_url}
        )
        return self.client

    def respond(self, output: Any, **usage: int) -> None:
        self.result = SimpleNamespace(output=output, usage=lambda: SimpleNamespace(**usage))

    @property
    def agent(self) -> FakeAgent:
        assert len(self.agents) == 1
        return self.agents[0]


class FakeAgent:
    sdk: FakeSDK

    def __init__(self, model: Any, **kwargs: Any) -> None:
        self.model = model
        self.kwargs = kwargs
        self.run_kwargs: dict[str, Any] | None = None
        self.stream_kwargs: dict[str, Any] | None = None
        self.sdk.agents.append(self)

    async def run(self, **kwargs: Any) -> Any:
        self.run_kwargs = kwargs
        if self.sdk.error is not None:
            raise self.sdk.error
        return self.sdk.result

    def run_stream(self, **kwargs: Any) -> Any:
        self.stream_kwargs = kwargs
        if self.sdk.error is not None:
            raise self.sdk.error
        return self.sdk.stream_handle


@pytest.fixture
def recorder() -> LogRecorder:
    return LogRecorder()


@pytest.fixture
def sdk(monkeypatch) -> FakeSDK:
    # Replace the client factory and the pydantic-ai Agent used by the provider functions
    fake = FakeSDK()
    agent_cls = type("BoundFakeAgent", (FakeAgent,), {"sdk": fake})
    monkeypatch.setattr(bedrock_module, "create_bedrock_client", fake.create_bedrock_client)
    monkeypatch.setattr(bedrock_module, "Agent", agent_cls)
    return fake
