"""OpenAI chat completions adapter.

Sends the system prompt and the selection as a two-message exchange and reads
back the first choice's message content.
"""
from typing import Any, Dict

from config.schema import SpellCorrectionConfig
from providers.base import SpellCorrectionProvider
from providers.schema import OpenAIResponse


class OpenAIProvider(SpellCorrectionProvider):
    name = "openai"

    def build_headers(self, config: SpellCorrectionConfig) -> Dict[str, str]:
        return {"Authorization": f"Bearer {config.api_key}"}

    def build_payload(self, text: str, config: SpellCorrectionConfig) -> Dict[str, Any]:
        return {
            "model": config.model,
            "messages": [
                {"role": "system", "content": config.system_prompt},
                {"role": "user", "content": text},
            ],
            "temperature": config.temperature,
            "max_tokens": config.max_tokens,
        }

    def extract_text(self, data: Any) -> str:
        return OpenAIResponse.model_validate(data).choices[0].message.content
