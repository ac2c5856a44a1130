"""Schema validation helpers for raw preference mappings.

Provides a JSON Schema for the host's flat preference store and a helper to
validate payloads before they are resolved into a SpellCorrectionConfig.
"""
from typing import Any, Dict, Mapping

from jsonschema import validate, ValidationError

from errors import ConfigurationError


_TEXT = {"type": ["string", "null"]}
_SCALAR = {"type": ["string", "number", "null"]}

PREFERENCES_SCHEMA = {
    "type": "object",
    "properties": {
        "api_provider": _TEXT,
        "api_key": _TEXT,
        "openai_model": _TEXT,
        "claude_model": _TEXT,
        "llama_model": _TEXT,
        "custom_model": _TEXT,
        "system_prompt": _TEXT,
        "endpoint": _TEXT,
        "temperature": _SCALAR,
        "max_tokens": _SCALAR,
        "timeout": _SCALAR,
    },
}

TEXT_PREFERENCES = tuple(
    name for name, rule in PREFERENCES_SCHEMA["properties"].items() if rule is _TEXT
)


def normalize_preferences(payload: Mapping[str, Any]) -> Dict[str, Any]:
    """Return a copy of payload with numeric values of text keys turned into strings.

    Command-line overrides such as ``preferences.llama_model=7`` or
    ``preferences.api_key=123456`` arrive as numbers.
    """
    normalized = dict(payload)
    for name in TEXT_PREFERENCES:
        value = normalized.get(name)
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            normalized[name] = str(value)
    return normalized


def validate_preferences(payload: dict) -> bool:
    """Validate a preference mapping against PREFERENCES_SCHEMA.

    Keys outside the schema are allowed; the host may store unrelated settings.
    The rejected value is left out of the error so credentials never reach a notice.

    Raises:
        ConfigurationError: on invalid payloads with a helpful message.

    Returns:
        True when valid.
    """
    try:
        validate(instance=payload, schema=PREFERENCES_SCHEMA)
    except ValidationError as exc:
        field_name = ".".join(str(p) for p in exc.absolute_path) or "preferences"
        if exc.validator == "type":
            expected = exc.validator_value
            if isinstance(expected, str):
                expected = [expected]
            reason = "expected " + " or ".join(expected)
        else:
            reason = f"failed '{exc.validator}' check"
        raise ConfigurationError(f"Invalid preference '{field_name}': {reason}") from None

    return True
