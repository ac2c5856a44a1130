"""Resolve provider endpoints, models and credentials from preferences,
environment, or sensible defaults.
"""
import os
from typing import Any, Mapping, Optional


DEFAULTS = {
    'openai': 'https://api.openai.com/v1/chat/completions',
    'claude': 'https://api.anthropic.com/v1/messages',
    'llama': 'http://localhost:11434/api/generate',
}

DEFAULT_MODELS = {
    'openai': 'gpt-3.5-turbo',
    'claude': 'claude-3-sonnet-20240229',
    'llama': 'llama2',
}

API_KEY_ENV_VARS = {
    'openai': 'OPENAI_API_KEY',
    'claude': 'ANTHROPIC_API_KEY',
}

CUSTOM_MODEL_SENTINEL = 'custom'


def _text(value: Any) -> str:
    if value is None:
        return ''
    return str(value).strip()


def resolve_provider_url(provider: str, preferences: Optional[Mapping[str, Any]] = None) -> Optional[str]:
    """Return the resolved endpoint URL for provider.

    Precedence: preferences.endpoint > ENV <PROVIDER>_URL > DEFAULT
    """
    if preferences is not None:
        url = _text(preferences.get('endpoint'))
        if url:
            return url

    env_val = os.getenv(f"{provider.upper()}_URL")
    if env_val:
        return env_val

    return DEFAULTS.get(provider)


def resolve_model(provider: str, preferences: Mapping[str, Any]) -> str:
    """Return the model for provider.

    The provider-specific preference (e.g. `claude_model`) wins unless it is the
    `custom` sentinel, in which case `custom_model` is used. Empty values fall
    back to the provider default.
    """
    model = _text(preferences.get(f'{provider}_model'))
    if model.lower() == CUSTOM_MODEL_SENTINEL:
        model = _text(preferences.get('custom_model'))
    return model or DEFAULT_MODELS[provider]


def resolve_api_key(provider: str, preferences: Mapping[str, Any]) -> Optional[str]:
    """Return the API key from preferences or the provider's env var, if any."""
    key = _text(preferences.get('api_key'))
    if key:
        return key
    env_var = API_KEY_ENV_VARS.get(provider)
    if env_var:
        return _text(os.getenv(env_var)) or None
    return None
