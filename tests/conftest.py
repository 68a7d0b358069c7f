import asyncio
from types import SimpleNamespace
from typing import Any, Callable

import pytest

from kitchen.config import Config
from kitchen.domain.llm_service import LLMService
from kitchen.domain.services import RecipeService


class FakeCompletions:
    def __init__(
        self,
        reply: str | None = "<h3>Title</h3>",
        error: Exception | None = None,
        gate: asyncio.Event | None = None,
        choices: list[Any] | None = None,
    ) -> None:
        self.reply = reply
        self.error = error
        self.gate = gate
        self.choices = choices
        self.calls: list[dict[str, Any]] = []

    async def create(self, **kwargs: Any) -> SimpleNamespace:
        self.calls.append(kwargs)
        if self.gate is not None:
            await self.gate.wait()
        if self.error is not None:
            raise self.error
        if self.choices is not None:
            return SimpleNamespace(choices=self.choices)
        message = SimpleNamespace(role="assistant", content=self.reply)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


class FakeOpenAI:
    """Just enough of `openai.AsyncClient` for chat completions."""

    def __init__(self, **kwargs: Any) -> None:
        self.completions = FakeCompletions(**kwargs)
        self.chat = SimpleNamespace(completions=self.completions)
        self.closed = False

    @property
    def calls(self) -> list[dict[str, Any]]:
        return self.completions.calls

    async def close(self) -> None:
        self.closed = True


def make_config(**overrides: Any) -> Config:
    values: dict[str, Any] = {"openai_api_key": "sk-test"}
    values.update(overrides)
    return Config(_env_file=None, **values)


@pytest.fixture
def config() -> Config:
    return make_config()


@pytest.fixture
def make_service() -> Callable[..., tuple[RecipeService, FakeOpenAI]]:
    def factory(
        config: Config | None = None, **fake: Any
    ) -> tuple[RecipeService, FakeOpenAI]:
        config = make_config() if config is None else config
        client = FakeOpenAI(**fake)
        llm = LLMService(config, openai_client=client)  # type: ignore[arg-type]
        return RecipeService(config, llm=llm), client

    return factory
