"""Anthropic messages API adapter.

The system prompt travels as a top-level `system` field rather than a message.
"""
from typing import Any, Dict

from config.schema import SpellCorrectionConfig
from providers.base import SpellCorrectionProvider
from providers.schema import ClaudeResponse

ANTHROPIC_VERSION = "2023-06-01"


class ClaudeProvider(SpellCorrectionProvider):
    name = "claude"

    def build_headers(self, config: SpellCorrectionConfig) -> Dict[str, str]:
        return {
            "x-api-key": config.api_key,
            "anthropic-version": ANTHROPIC_VERSION,
        }

    def build_payload(self, text: str, config: SpellCorrectionConfig) -> Dict[str, Any]:
        return {
            "model": config.model,
            "system": config.system_prompt,
            "messages": [{"role": "user", "content": text}],
            "temperature": config.temperature,
            "max_tokens": config.max_tokens,
        }

    def extract_text(self, data: Any) -> str:
        return ClaudeResponse.model_validate(data).content[0].text
