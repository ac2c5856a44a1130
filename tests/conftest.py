import json

import pytest


@pytest.fixture(autouse=True)
def clean_provider_env(monkeypatch):
    # keep developer credentials and endpoint overrides out of the tests
    for var in ('OPENAI_API_KEY', 'ANTHROPIC_API_KEY', 'OPENAI_URL', 'CLAUDE_URL', 'LLAMA_URL'):
        monkeypatch.delenv(var, raising=False)


class DummyResp:
    def __init__(self, status_code=200, data=None, text=None):
        self.status_code = status_code
        self._data = data
        if text is None:
            text = json.dumps(data) if data is not None else ''
        self.text = text

    @property
    def ok(self):
        return self.status_code < 400

    def json(self):
        if self._data is None:
            raise ValueError("No JSON object could be decoded")
        return self._data


@pytest.fixture
def dummy_resp():
    return DummyResp
