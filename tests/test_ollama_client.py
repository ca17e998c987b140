from types import SimpleNamespace

import ollama
import pytest

from coverforge import config
from coverforge.llm import ollama_client
from coverforge.llm.ollama_client import CompletionError, complete, complete_json


class FakeOllama:
    def __init__(self, content="Dear Hiring Manager", error=None):
        self.content = content
        self.error = error
        self.calls = []

    def chat(self, **kwargs):
        self.calls.append(kwargs)
        if self.error:
            raise self.error
        return SimpleNamespace(message=SimpleNamespace(content=self.content))


@pytest.fixture
def fake(monkeypatch):
    client = FakeOllama()
    monkeypatch.setattr(ollama_client, "get_client", lambda: client)
    return client


def test_complete_uses_fixed_parameters(fake):
    assert complete("write it") == "Dear Hiring Manager"
    call = fake.calls[0]
    assert call["model"] == config.OLLAMA_MODEL
    assert call["messages"] == [{"role": "user", "content": "write it"}]
    assert call["options"] == {"temperature": 0.7, "num_predict": 1000}
    assert call["format"] is None
    assert call["stream"] is False


def test_empty_completion_falls_back(fake):
    fake.content = "   "
    assert complete("write it") == "Failed to generate cover letter"


@pytest.mark.parametrize("error", [
    ollama.ResponseError("model not found", 404),
    ConnectionError("connection refused"),
])
def test_errors_become_completion_error(fake, error):
    fake.error = error
    with pytest.raises(CompletionError):
        complete("write it")
    assert len(fake.calls) == 1


def test_complete_json_text(fake):
    fake.content = '{"userName": "Sam"}'
    assert complete_json("parse it") == '{"userName": "Sam"}'
    call = fake.calls[0]
    assert call["format"] == "json"
    assert call["model"] == config.OLLAMA_MODEL
    assert call["options"] == {"temperature": 0.3, "num_predict": 800}
    assert "images" not in call["messages"][0]


def test_complete_json_with_images_uses_vision_model(fake):
    complete_json("parse it", images=[b"\x89PNG"])
    call = fake.calls[0]
    assert call["model"] == config.OLLAMA_VISION_MODEL
    assert call["messages"][0]["images"] == [b"\x89PNG"]
