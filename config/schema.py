"""
Configuration schema for the LLM spell correction command.

This module defines dataclasses that provide type safety and validation
for resolved settings. The logging section is also used with OmegaConf as a
structured schema when Hydra config files are loaded.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from errors import ConfigurationError


SUPPORTED_PROVIDERS = ("openai", "claude", "llama")

# Providers that authenticate with an API key
KEYED_PROVIDERS = ("openai", "claude")

DEFAULT_TEMPERATURE = 0.0
DEFAULT_MAX_TOKENS = 1024

DEFAULT_SYSTEM_PROMPT = (
    "You are an AI assistant responsible for correcting spelling errors in a text selection "
    "while preserving structured elements such as code snippets, constants, bracketed text ([]), "
    "inline code ( ), special characters, and numerical values.\n\n"
    "Follow these steps:\n"
    "Carefully analyze the provided text.\n"
    "Identify and correct only misspelled words in natural language text.\n"
    "Preserve code, constants, bracketed text, inline code, symbols, and numerical values exactly as they appear.\n"
    "Review the corrected text to ensure that all spelling errors are fixed without modifying protected elements.\n"
    "Output Instructions:\n"
    "- Only output the corrected text in plain text format.\n"
    "- Do not modify or remove any bracketed text ([]), code snippets, inline code, constants, symbols, or numbers.\n"
    "- Do not reformat the text or add any additional content.\n"
    "- Ensure compliance with ALL these instructions."
)


@dataclass(frozen=True)
class SpellCorrectionConfig:
    """Fully resolved settings for one correction run."""
    provider: str
    model: str
    endpoint: str
    system_prompt: str = DEFAULT_SYSTEM_PROMPT
    api_key: Optional[str] = None
    temperature: float = DEFAULT_TEMPERATURE
    max_tokens: int = DEFAULT_MAX_TOKENS
    timeout: Optional[float] = None

    def __post_init__(self):
        """Validate resolved values."""
        if self.provider not in SUPPORTED_PROVIDERS:
            raise ConfigurationError(
                f"Invalid provider. Must be one of: {list(SUPPORTED_PROVIDERS)}",
                provider=self.provider,
            )
        if self.provider in KEYED_PROVIDERS and not self.api_key:
            raise ConfigurationError(
                f"An API key is required for the '{self.provider}' provider",
                provider=self.provider,
            )
        if not self.model:
            raise ConfigurationError("Model name must not be empty", provider=self.provider)
        if not (0.0 <= self.temperature <= 2.0):
            raise ConfigurationError("Temperature must be between 0.0 and 2.0", provider=self.provider)
        if self.max_tokens < 1:
            raise ConfigurationError("Max tokens must be at least 1", provider=self.provider)
        if not self.endpoint.startswith(("http://", "https://")):
            raise ConfigurationError(f"Invalid endpoint URL: {self.endpoint}", provider=self.provider)
        if self.timeout is not None and self.timeout <= 0:
            raise ConfigurationError("Timeout must be a positive number of seconds", provider=self.provider)

    def describe(self) -> dict:
        """Loggable summary that never includes the API key."""
        return {
            "provider": self.provider,
            "model": self.model,
            "endpoint": self.endpoint,
            "temperature": self.temperature,
            "max_tokens": self.max_tokens,
            "has_api_key": bool(self.api_key),
            "custom_prompt": self.system_prompt != DEFAULT_SYSTEM_PROMPT,
        }


@dataclass(frozen=True)
class CorrectionRequest:
    """Input text paired with the configuration it is corrected under."""
    text: str
    config: SpellCorrectionConfig


@dataclass
class LoggingConfig:
    """Logging configuration settings."""
    level: str = "INFO"
    format: str = "simple"  # simple, detailed, json
    file: Optional[str] = None
    rotation: str = "10 MB"
    retention: str = "7 days"
    colorize: bool = True

    def __post_init__(self):
        """Validate logging configuration values."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if self.level.upper() not in valid_levels:
            raise ValueError(f"Invalid log level. Must be one of: {valid_levels}")
        self.level = self.level.upper()

        valid_formats = ["simple", "detailed", "json"]
        if self.format not in valid_formats:
            raise ValueError(f"Invalid log format. Must be one of: {valid_formats}")


@dataclass
class SpellCorrectorAppConfig:
    """Complete configuration for the spell correction command.

    `preferences` stays a loose mapping: it mirrors the host's flat key-value
    store and is checked by validation.validate_preferences and resolve_config.
    """
    preferences: Dict[str, Any] = field(default_factory=dict)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    text: Optional[str] = None
