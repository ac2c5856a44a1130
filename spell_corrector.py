#!/usr/bin/env python3
"""
LLM Spell Correction

Corrects spelling in a text selection by sending it, together with a fixed
instruction prompt, to OpenAI, Claude or a local LLaMA (Ollama) endpoint, and
replaces the selection with the model's answer. Code snippets, bracketed text,
inline code, symbols and numbers are left untouched by the prompt.

Each run is a single stateless transaction:
    resolve config -> read selection -> notice -> provider call -> paste -> notice

Example Usage:
    # Correct piped text with Claude
    echo "Ths is a tset with a [doNotChange] token" | spell-correct preferences.api_provider=claude

    # Text on the command line is a Hydra value; quote it for Hydra inside the
    # shell argument so brackets and commas stay literal
    spell-correct "text='Ths is a tset, with a [doNotChange] token'"

    # Local model, debug logging
    echo "Ths is a tset" | spell-correct preferences.api_provider=llama logging.level=DEBUG
"""

import sys
from enum import Enum
from typing import List

import hydra
from loguru import logger
from omegaconf import DictConfig

from config.schema import CorrectionRequest
from config_manager import ConfigManager, resolve_config
from errors import ConfigurationError, SpellCorrectionError
from host import ConsoleHost, HostEnvironment
from logging_manager import setup_logging
import providers


IN_PROGRESS_NOTICE = "🔄 Correcting text..."
SUCCESS_NOTICE = "✅ Text corrected!"


class CommandState(Enum):
    IDLE = "idle"
    RESOLVING_CONFIG = "resolving_config"
    AWAITING_SELECTION = "awaiting_selection"
    REQUESTING = "requesting"
    COMPLETING = "completing"
    FAILED = "failed"


class SpellCorrectionCommand:
    """Runs one spell correction against an injected host environment.

    Attributes:
        host (HostEnvironment): selection, clipboard, notice and preference access
        state (CommandState): current step; IDLE between runs
        transitions (List[CommandState]): states visited by the last run

    Example:
        command = SpellCorrectionCommand(ConsoleHost(preferences, text="Ths is a tset"))
        ok = command.run()
    """

    def __init__(self, host: HostEnvironment):
        self.host = host
        self.state = CommandState.IDLE
        self.transitions: List[CommandState] = []

    def _enter(self, state: CommandState) -> None:
        logger.debug("State {} -> {}", self.state.value, state.value)
        self.state = state
        self.transitions.append(state)

    def run(self) -> bool:
        """Execute the command.

        Returns:
            bool: True when the corrected text was pasted, False otherwise.
                  No exception escapes; failures become a notice.
        """
        self.transitions = []
        try:
            self._enter(CommandState.RESOLVING_CONFIG)
            config = resolve_config(self.host.get_preferences())

            self._enter(CommandState.AWAITING_SELECTION)
            selected_text = self.host.get_selected_text()

            self._enter(CommandState.REQUESTING)
            self.host.show_notice(IN_PROGRESS_NOTICE)
            logger.info("Correcting selection", provider=config.provider, model=config.model,
                        chars=len(selected_text))
            corrected_text = providers.call_provider(CorrectionRequest(selected_text, config))

            self._enter(CommandState.COMPLETING)
            self.host.set_clipboard_and_paste(corrected_text)
            self.host.show_notice(SUCCESS_NOTICE)
            logger.info("Correction pasted", chars=len(corrected_text))
            return True

        except SpellCorrectionError as e:
            return self._fail(e)
        except Exception as e:
            # unexpected failures still end the command with a notice
            logger.opt(exception=True).debug("Unexpected error during correction")
            return self._fail(e)
        finally:
            self._enter(CommandState.IDLE)

    def _fail(self, error: Exception) -> bool:
        self._enter(CommandState.FAILED)
        logger.warning("Spell correction failed: {}", type(error).__name__)
        self.host.show_notice(f"Error: {error}")
        return False


@hydra.main(version_base=None, config_path="config", config_name="default")
def main(cfg: DictConfig) -> None:
    """Main entry point with Hydra configuration management.

    Example usage:
        # Use default config
        echo "Ths is a tset" | python3 spell_corrector.py

        # Override specific values
        python3 spell_corrector.py preferences.api_provider=llama preferences.temperature=0.2 "text='Helo, wrld'"
    """
    text = cfg.get("text")
    host = ConsoleHost(preferences=cfg.preferences, text=None if text is None else str(text))

    config_manager = ConfigManager()
    try:
        config_manager.validate_config(cfg)
    except ConfigurationError as e:
        host.show_notice(f"Error: {e}")
        sys.exit(1)

    setup_logging(cfg)
    logger.debug("Configuration: {}", config_manager.get_config_summary(cfg))
    command = SpellCorrectionCommand(host)

    if not command.run():
        sys.exit(1)


if __name__ == "__main__":
    main()
