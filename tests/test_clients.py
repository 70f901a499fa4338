import asyncio

import pytest

from app.agents.trainer import trainer_agent
from app.config import Settings
from app.llm import client as client_module
from app.llm.client import AgentsModelClient, get_model_client
from app.llm.openai_client import OpenAIModelClient


@pytest.fixture
def backend(monkeypatch):
    def use(**kwargs):
        monkeypatch.setattr(client_module, "get_settings", lambda: Settings(**kwargs))
        get_model_client.cache_clear()
        return get_model_client()

    yield use
    get_model_client.cache_clear()


def test_agents_backend_is_default(backend):
    client = backend(chat_model="gpt-4o-mini")
    assert isinstance(client, AgentsModelClient)
    assert client.agent.model == "gpt-4o-mini"
    assert client.agent.instructions == trainer_agent.instructions


def test_openai_backend_selected(backend):
    client = backend(llm_backend="openai", openai_api_key="sk-test", chat_model="gpt-4o")
    assert isinstance(client, OpenAIModelClient)
    assert client.available()
    assert client.chat_model == "gpt-4o"


def test_unknown_backend_falls_back_to_agents(backend):
    assert isinstance(backend(llm_backend="gemini"), AgentsModelClient)


def test_clients_without_key_fail_on_generate():
    openai_client = OpenAIModelClient(api_key=None, system="coach")
    assert not openai_client.available()
    with pytest.raises(RuntimeError, match="OPENAI_API_KEY"):
        asyncio.run(openai_client.generate("plan"))

    agents_client = AgentsModelClient(trainer_agent, api_key=None)
    assert not agents_client.available()
    with pytest.raises(RuntimeError, match="OPENAI_API_KEY"):
        asyncio.run(agents_client.generate("plan"))
