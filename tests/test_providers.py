import pytest
import requests

from config.schema import SpellCorrectionConfig
from errors import ProviderError
from providers.claude_client import ClaudeProvider
from providers.ollama import LlamaProvider
from providers.openai_client import OpenAIProvider


def make_config(provider, **kwargs):
    defaults = {
        'openai': ('https://api.openai.com/v1/chat/completions', 'gpt-3.5-turbo', 'sk-test'),
        'claude': ('https://api.anthropic.com/v1/messages', 'claude-3-sonnet-20240229', 'anthropic-key'),
        'llama': ('http://localhost:11434/api/generate', 'llama2', None),
    }
    endpoint, model, key = defaults[provider]
    params = dict(provider=provider, endpoint=endpoint, model=model, api_key=key,
                  system_prompt='Fix spelling.')
    params.update(kwargs)
    return SpellCorrectionConfig(**params)


def capture_post(monkeypatch, resp):
    calls = []

    def fake_post(url, json=None, headers=None, timeout=None):
        calls.append({'url': url, 'json': json, 'headers': headers, 'timeout': timeout})
        return resp

    monkeypatch.setattr(requests, 'post', fake_post)
    return calls


def test_openai_request_shape_and_success(monkeypatch, dummy_resp):
    calls = capture_post(monkeypatch, dummy_resp(200, {"choices": [{"message": {"content": "  Fixed text \n"}}]}))

    res = OpenAIProvider().correct('Fxied text', make_config('openai', temperature=0.3, max_tokens=256))

    assert res == 'Fixed text'
    call = calls[0]
    assert call['url'] == 'https://api.openai.com/v1/chat/completions'
    assert call['headers']['Authorization'] == 'Bearer sk-test'
    assert call['headers']['Content-Type'] == 'application/json'
    assert call['json'] == {
        'model': 'gpt-3.5-turbo',
        'messages': [
            {'role': 'system', 'content': 'Fix spelling.'},
            {'role': 'user', 'content': 'Fxied text'},
        ],
        'temperature': 0.3,
        'max_tokens': 256,
    }


def test_openai_error_status_uses_error_message(monkeypatch, dummy_resp):
    capture_post(monkeypatch, dummy_resp(401, {"error": {"message": "Incorrect API key provided"}}))

    with pytest.raises(ProviderError) as exc:
        OpenAIProvider().correct('text', make_config('openai'))

    assert exc.value.provider == 'openai'
    assert exc.value.message == 'Incorrect API key provided'
    assert str(exc.value) == 'OpenAI API error: Incorrect API key provided'


def test_openai_error_object_with_success_status(monkeypatch, dummy_resp):
    capture_post(monkeypatch, dummy_resp(200, {"error": {"message": "model overloaded"}}))

    with pytest.raises(ProviderError) as exc:
        OpenAIProvider().correct('text', make_config('openai'))

    assert exc.value.message == 'model overloaded'


def test_openai_non_json_error_body_reports_raw_text(monkeypatch, dummy_resp):
    capture_post(monkeypatch, dummy_resp(502, None, text='<html>Bad gateway</html>'))

    with pytest.raises(ProviderError) as exc:
        OpenAIProvider().correct('text', make_config('openai'))

    assert exc.value.message == '<html>Bad gateway</html>'


def test_openai_unexpected_shape(monkeypatch, dummy_resp):
    capture_post(monkeypatch, dummy_resp(200, {"choices": []}))

    with pytest.raises(ProviderError, match='Unexpected response shape'):
        OpenAIProvider().correct('text', make_config('openai'))


def test_claude_request_shape_and_success(monkeypatch, dummy_resp):
    calls = capture_post(monkeypatch, dummy_resp(200, {"content": [{"type": "text", "text": "Corrected\n"}]}))

    res = ClaudeProvider().correct('Corected', make_config('claude'))

    assert res == 'Corrected'
    call = calls[0]
    assert call['url'] == 'https://api.anthropic.com/v1/messages'
    assert call['headers']['x-api-key'] == 'anthropic-key'
    assert call['headers']['anthropic-version'] == '2023-06-01'
    assert 'Authorization' not in call['headers']
    assert call['json'] == {
        'model': 'claude-3-sonnet-20240229',
        'system': 'Fix spelling.',
        'messages': [{'role': 'user', 'content': 'Corected'}],
        'temperature': 0.0,
        'max_tokens': 1024,
    }


def test_claude_error_status_uses_error_message(monkeypatch, dummy_resp):
    body = {"type": "error", "error": {"type": "authentication_error", "message": "invalid x-api-key"}}
    capture_post(monkeypatch, dummy_resp(401, body))

    with pytest.raises(ProviderError) as exc:
        ClaudeProvider().correct('text', make_config('claude'))

    assert exc.value.provider == 'claude'
    assert exc.value.message == 'invalid x-api-key'


def test_llama_request_shape_and_success(monkeypatch, dummy_resp):
    calls = capture_post(monkeypatch, dummy_resp(200, {"model": "llama2", "response": " Hello world ", "done": True}))

    res = LlamaProvider().correct('Helo wrld', make_config('llama', max_tokens=64))

    assert res == 'Hello world'
    call = calls[0]
    assert call['url'] == 'http://localhost:11434/api/generate'
    assert 'Authorization' not in call['headers']
    assert 'x-api-key' not in call['headers']
    assert call['json'] == {
        'model': 'llama2',
        'prompt': 'Fix spelling.\n\nHelo wrld',
        'stream': False,
        'options': {'temperature': 0.0, 'num_predict': 64},
    }


def test_llama_error_status_reports_raw_body(monkeypatch, dummy_resp):
    raw = '{"error": "model \'llama2\' not found, try pulling it first"}'
    capture_post(monkeypatch, dummy_resp(404, {"error": "model 'llama2' not found, try pulling it first"}, text=raw))

    with pytest.raises(ProviderError) as exc:
        LlamaProvider().correct('text', make_config('llama'))

    assert exc.value.provider == 'llama'
    assert exc.value.message == raw


def test_transport_failure_becomes_provider_error(monkeypatch):
    def fake_post(url, json=None, headers=None, timeout=None):
        raise requests.ConnectionError("Connection refused")

    monkeypatch.setattr(requests, 'post', fake_post)

    with pytest.raises(ProviderError) as exc:
        LlamaProvider().correct('text', make_config('llama'))

    assert 'Connection refused' in exc.value.message


def test_configured_timeout_is_passed_through(monkeypatch, dummy_resp):
    calls = capture_post(monkeypatch, dummy_resp(200, {"response": "ok"}))

    LlamaProvider().correct('text', make_config('llama', timeout=12.5))

    assert calls[0]['timeout'] == 12.5


def test_input_text_is_sent_unmodified(monkeypatch, dummy_resp):
    calls = capture_post(monkeypatch, dummy_resp(200, {"choices": [{"message": {"content": "x"}}]}))
    text = "  `code()` [keep]\n\n  spaced  "

    OpenAIProvider().correct(text, make_config('openai'))

    assert calls[0]['json']['messages'][1]['content'] == text
