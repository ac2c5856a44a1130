"""Common adapter contract for spell correction providers.

Each backend subclasses SpellCorrectionProvider and only describes its wire
format: headers, body, and how to pull the corrected text (or the error
message) out of the response.
"""
from typing import Any, Dict, Optional

import requests
from loguru import logger
from pydantic import ValidationError

from config.schema import SpellCorrectionConfig
from errors import ProviderError
from provider_client import post_json, read_json


class SpellCorrectionProvider:
    """Base class for provider adapters.

    Subclasses set `name` and implement build_headers, build_payload and
    extract_text. correct() drives one request/response cycle.
    """

    name: str = ""

    def build_headers(self, config: SpellCorrectionConfig) -> Dict[str, str]:
        return {}

    def build_payload(self, text: str, config: SpellCorrectionConfig) -> Dict[str, Any]:
        raise NotImplementedError

    def extract_text(self, data: Any) -> str:
        """Return the corrected text from a success body."""
        raise NotImplementedError

    def extract_error(self, resp: requests.Response, data: Any) -> str:
        """Return the message for a failed response.

        Default: the structured `error.message` field when present, else the raw body.
        """
        message = self.structured_error(data)
        return message if message is not None else resp.text

    @staticmethod
    def structured_error(data: Any) -> Optional[str]:
        if isinstance(data, dict) and isinstance(data.get("error"), dict):
            message = data["error"].get("message")
            if message is not None:
                return str(message)
        return None

    def correct(self, text: str, config: SpellCorrectionConfig) -> str:
        """Send text to the provider and return the trimmed correction.

        Raises:
            ProviderError: on transport failure, non-success status, an error
                body, or a response that does not match the expected shape.
        """
        payload = self.build_payload(text, config)
        logger.debug("Requesting correction", provider=self.name, model=config.model, chars=len(text))

        resp = post_json(
            self.name,
            config.endpoint,
            payload,
            headers=self.build_headers(config),
            timeout=config.timeout,
        )
        data = read_json(resp)

        if not resp.ok:
            raise ProviderError(self.name, self.extract_error(resp, data))

        if data is None:
            raise ProviderError(self.name, f"Response was not valid JSON: {resp.text}")

        error_message = self.structured_error(data)
        if error_message is not None:
            raise ProviderError(self.name, error_message)

        try:
            corrected = self.extract_text(data)
        except (ValidationError, IndexError) as e:
            raise ProviderError(self.name, f"Unexpected response shape: {e}") from e

        return corrected.strip()
