"""Exception taxonomy for the spell correction command.

Every failure raised while resolving configuration or talking to a provider
derives from SpellCorrectionError so the command boundary can catch it once
and turn it into a single notice.
"""
from typing import Optional


PROVIDER_LABELS = {
    'openai': 'OpenAI',
    'claude': 'Claude',
    'llama': 'LLaMA',
}


class SpellCorrectionError(Exception):
    """Base class for all spell correction failures."""
    pass


class ConfigurationError(SpellCorrectionError):
    """Exception raised for missing or invalid configuration values."""

    def __init__(self, message: str, provider: Optional[str] = None):
        super().__init__(message)
        self.provider = provider


class SelectionUnavailableError(SpellCorrectionError):
    """Raised when the host has no active text selection."""

    def __init__(self, message: str = "No text selected"):
        super().__init__(message)


class UnsupportedProviderError(SpellCorrectionError):
    """Raised for provider keys outside the supported set."""

    def __init__(self, provider):
        super().__init__(f"Unsupported API provider: {provider}")
        self.provider = provider


class ProviderError(SpellCorrectionError):
    """Upstream failure reported by (or while reaching) a provider.

    `message` keeps the upstream text verbatim; str() prefixes the provider label.
    """

    def __init__(self, provider: str, message: str):
        self.provider = provider
        self.message = message
        label = PROVIDER_LABELS.get(provider, str(provider))
        super().__init__(f"{label} API error: {message}")
