#!/usr/bin/env python3
"""
Configuration Manager for LLM Spell Correction

Provides centralized configuration management using Hydra and OmegaConf frameworks.
Loads the preference store and logging settings, and resolves raw preferences
into a validated SpellCorrectionConfig for a single correction run.

Features:
- YAML-based configuration files with command-line dot-notation overrides
- Type-safe logging configuration validated against dataclass schemas
- Preference resolution with per-provider defaults and env fallbacks
- Fail-fast parsing of generation parameters

Dependencies:
- hydra-core: Configuration management framework by Facebook
- omegaconf: Configuration objects with validation
- jsonschema: Shape validation of the raw preference store
"""

from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

from hydra import compose, initialize_config_dir
from hydra.core.global_hydra import GlobalHydra
from loguru import logger
from omegaconf import DictConfig, OmegaConf

from config.schema import (
    DEFAULT_MAX_TOKENS,
    DEFAULT_SYSTEM_PROMPT,
    DEFAULT_TEMPERATURE,
    SUPPORTED_PROVIDERS,
    LoggingConfig,
    SpellCorrectionConfig,
    SpellCorrectorAppConfig,
)
from errors import ConfigurationError, UnsupportedProviderError
from utils.provider_resolver import resolve_api_key, resolve_model, resolve_provider_url
from validation import normalize_preferences, validate_preferences


DEFAULT_PROVIDER = "openai"


class ConfigManager:
    """Centralized configuration management using Hydra and OmegaConf frameworks.

    Attributes:
        config_dir (Path): Directory containing configuration files
        config (DictConfig): Currently loaded configuration
        schema_class: Configuration schema class for validation

    Example:
        config_manager = ConfigManager()
        config = config_manager.load_config("default", ["preferences.api_provider=llama"])
        settings = resolve_config(config.preferences)
    """

    def __init__(self, config_dir: Optional[Path] = None):
        """Initialize the configuration manager.

        Args:
            config_dir (Path, optional): Directory containing config files.
                                       Defaults to ./config/
        """
        if config_dir is None:
            config_dir = Path(__file__).parent / "config"

        self.config_dir = config_dir
        self.config: Optional[DictConfig] = None
        self.schema_class = SpellCorrectorAppConfig

    def load_config(self,
                    config_name: str = "default",
                    overrides: Optional[List[str]] = None) -> DictConfig:
        """Load configuration from YAML files with optional overrides.

        Args:
            config_name (str): Name of the configuration file to load
            overrides (List[str], optional): Parameter overrides in dot notation
                                           (e.g., "preferences.api_provider=claude")

        Returns:
            DictConfig: Loaded and validated configuration object

        Raises:
            ConfigurationError: If configuration files are not found or invalid
        """
        if overrides is None:
            overrides = []

        # Clear any existing Hydra global state
        if GlobalHydra().is_initialized():
            GlobalHydra.instance().clear()

        config_dir_absolute = self.config_dir.resolve()

        try:
            with initialize_config_dir(
                config_dir=str(config_dir_absolute),
                version_base=None
            ):
                self.config = compose(
                    config_name=config_name,
                    overrides=overrides
                )
        except Exception as e:
            raise ConfigurationError(f"Failed to load configuration: {e}") from e

        self.validate_config(self.config)
        return self.config

    def validate_config(self, config: DictConfig) -> None:
        """Validate configuration against the schema.

        Checks the overall layout with OmegaConf structured configs, runs the
        LoggingConfig dataclass checks, and validates the preference store shape.

        Raises:
            ConfigurationError: If configuration validation fails
        """
        try:
            structured_config = OmegaConf.structured(self.schema_class)
            validated_config = OmegaConf.merge(structured_config, config)
            LoggingConfig(**OmegaConf.to_container(validated_config.logging, resolve=True))
        except ConfigurationError:
            raise
        except Exception as e:
            raise ConfigurationError(f"Configuration validation failed: {e}") from e

        validate_preferences(normalize_preferences(
            OmegaConf.to_container(validated_config.preferences, resolve=True)))

    def get_config_summary(self, config: DictConfig) -> Dict[str, Any]:
        """Get a summary of current configuration for logging/debugging.

        The API key is reported only as present/absent.
        """
        preferences = config.preferences
        return {
            "api_provider": preferences.get("api_provider"),
            "has_api_key": bool(preferences.get("api_key")),
            "custom_model": preferences.get("custom_model"),
            "endpoint": preferences.get("endpoint"),
            "logging_level": config.logging.level,
            "logging_format": config.logging.format,
        }


def _as_dict(preferences: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    if preferences is None:
        return {}
    if isinstance(preferences, DictConfig):
        return OmegaConf.to_container(preferences, resolve=True)
    return dict(preferences)


def _blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _parse_float(name: str, value: Any, default: float, provider: str) -> float:
    if _blank(value):
        return default
    if isinstance(value, bool):
        raise ConfigurationError(f"Preference '{name}' must be a number, got {value!r}", provider=provider)
    try:
        return float(value)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"Preference '{name}' must be a number, got {value!r}", provider=provider) from e


def _parse_int(name: str, value: Any, default: int, provider: str) -> int:
    if _blank(value):
        return default
    if isinstance(value, bool):
        raise ConfigurationError(f"Preference '{name}' must be an integer, got {value!r}", provider=provider)
    if isinstance(value, float):
        if not value.is_integer():
            raise ConfigurationError(f"Preference '{name}' must be an integer, got {value!r}", provider=provider)
        return int(value)
    try:
        return int(str(value).strip())
    except ValueError as e:
        raise ConfigurationError(f"Preference '{name}' must be an integer, got {value!r}", provider=provider) from e


def resolve_provider(preferences: Mapping[str, Any]) -> str:
    """Return the normalized provider name, defaulting to openai."""
    raw = preferences.get("api_provider")
    if _blank(raw):
        return DEFAULT_PROVIDER
    provider = str(raw).strip().lower()
    if provider not in SUPPORTED_PROVIDERS:
        raise UnsupportedProviderError(raw)
    return provider


def resolve_config(preferences: Optional[Mapping[str, Any]]) -> SpellCorrectionConfig:
    """Resolve a raw preference mapping into a validated SpellCorrectionConfig.

    Args:
        preferences: flat key-value preference store (dict or DictConfig)

    Returns:
        SpellCorrectionConfig: fully resolved settings

    Raises:
        ConfigurationError: missing credentials, unparsable or out-of-range values
        UnsupportedProviderError: unknown api_provider
    """
    prefs = normalize_preferences(_as_dict(preferences))
    validate_preferences(prefs)

    provider = resolve_provider(prefs)

    api_key = resolve_api_key(provider, prefs)
    if provider == "llama":
        api_key = None

    system_prompt = prefs.get("system_prompt")
    if _blank(system_prompt):
        system_prompt = DEFAULT_SYSTEM_PROMPT

    timeout = prefs.get("timeout")
    config = SpellCorrectionConfig(
        provider=provider,
        api_key=api_key,
        model=resolve_model(provider, prefs),
        system_prompt=system_prompt,
        temperature=_parse_float("temperature", prefs.get("temperature"), DEFAULT_TEMPERATURE, provider),
        max_tokens=_parse_int("max_tokens", prefs.get("max_tokens"), DEFAULT_MAX_TOKENS, provider),
        endpoint=resolve_provider_url(provider, prefs),
        timeout=None if _blank(timeout) else _parse_float("timeout", timeout, 0.0, provider),
    )

    logger.debug("Resolved configuration: {}", config.describe())
    return config
