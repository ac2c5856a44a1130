"""Provider dispatcher that routes a correction request to the adapter for the
configured provider.
"""
from typing import Dict, Type

from loguru import logger

from config.schema import CorrectionRequest
from errors import UnsupportedProviderError
from providers.base import SpellCorrectionProvider
from providers.claude_client import ClaudeProvider
from providers.ollama import LlamaProvider
from providers.openai_client import OpenAIProvider


PROVIDERS: Dict[str, Type[SpellCorrectionProvider]] = {
    'openai': OpenAIProvider,
    'claude': ClaudeProvider,
    'llama': LlamaProvider,
}


def get_provider(provider: str) -> SpellCorrectionProvider:
    """Return the adapter for provider.

    Raises:
        UnsupportedProviderError: for any name outside PROVIDERS.
    """
    try:
        adapter_cls = PROVIDERS[provider]
    except (KeyError, TypeError):
        raise UnsupportedProviderError(provider) from None
    return adapter_cls()


def call_provider(request: CorrectionRequest) -> str:
    """Correct request.text with the adapter selected by request.config.provider."""
    adapter = get_provider(request.config.provider)
    logger.debug("Dispatching to {}", adapter.name)
    return adapter.correct(request.text, request.config)
