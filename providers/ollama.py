"""Local LLaMA adapter for an Ollama-style /api/generate endpoint.

No authentication. The system prompt and the selection are joined into one
prompt string, streaming is disabled, and a failed request reports the whole
raw body since no structured error shape is assumed.
"""
import requests
from typing import Any, Dict

from config.schema import SpellCorrectionConfig
from providers.base import SpellCorrectionProvider
from providers.schema import LlamaResponse


class LlamaProvider(SpellCorrectionProvider):
    name = "llama"

    def build_payload(self, text: str, config: SpellCorrectionConfig) -> Dict[str, Any]:
        return {
            "model": config.model,
            "prompt": f"{config.system_prompt}\n\n{text}",
            "stream": False,
            "options": {
                "temperature": config.temperature,
                "num_predict": config.max_tokens,
            },
        }

    def extract_error(self, resp: requests.Response, data: Any) -> str:
        return resp.text

    def extract_text(self, data: Any) -> str:
        return LlamaResponse.model_validate(data).response
