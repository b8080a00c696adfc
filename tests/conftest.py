"""Shared fixtures: a scripted chat model and an app wired to it."""

import pytest
from fastapi.testclient import TestClient
from langchain_core.messages import AIMessage

from app.main import app, get_gateway
from services.model_gateway import ModelGateway


class StubChatModel:
    """Stands in for a LangChain chat model; records every prompt."""

    def __init__(self, reply="", error=None):
        self.reply = reply
        self.error = error
        self.prompts = []

    async def ainvoke(self, prompt):
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return AIMessage(content=self.reply)


@pytest.fixture
def chat_model_cls():
    return StubChatModel


@pytest.fixture
def stub_model():
    return StubChatModel(reply="model says hi")


@pytest.fixture
def api(stub_model):
    gateway = ModelGateway(stub_model)
    app.dependency_overrides[get_gateway] = lambda: gateway
    yield TestClient(app)
    app.dependency_overrides.clear()
