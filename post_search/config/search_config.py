"""
Search configuration module for the relevance engine.
Provides the tunable scoring constants and field weights.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from .config import Config

# Set up logging
logger = logging.getLogger(__name__)

DEFAULT_CONFIG = {
    'scoring': {
        'specific_phrase_bonus': 10.0,  # Exact match of a long pattern
        'phrase_bonus': 5.0,            # Exact match of a short pattern
        'whole_word_bonus': 3.0,
        'partial_word_bonus': 1.0,
        'specific_pattern_length': 5,   # Patterns longer than this are "specific"
        'min_word_length': 2,           # Pattern words must be longer than this
    },
    'field_weights': {
        'content': 1.0,
        'author_name': 0.5,
        'author_username': 0.5,
        'topics': 2.0,
    },
}

NUMERIC_SECTIONS = ('scoring', 'field_weights')


@dataclass(frozen=True)
class ScoringWeights:
    """Snapshot of the scoring constants used by one scorer"""
    specific_phrase_bonus: float = 10.0
    phrase_bonus: float = 5.0
    whole_word_bonus: float = 3.0
    partial_word_bonus: float = 1.0
    specific_pattern_length: int = 5
    min_word_length: int = 2
    content_weight: float = 1.0
    author_name_weight: float = 0.5
    author_username_weight: float = 0.5
    topics_weight: float = 2.0


class SearchConfig:
    """Configuration for scoring constants and field weights"""

    def __init__(self, config_dict: Optional[Dict[str, Dict[str, Any]]] = None):
        self._config = {section: dict(options) for section, options in (config_dict or {}).items()}
        self._load_defaults()
        for section in NUMERIC_SECTIONS:
            for key, value in self._config[section].items():
                self._check_value(section, key, value)
        logger.info("Initialized SearchConfig with defaults")

    def _load_defaults(self) -> None:
        """Apply defaults for any missing keys"""
        for section, options in DEFAULT_CONFIG.items():
            if section not in self._config:
                self._config[section] = {}

            for key, value in options.items():
                if key not in self._config[section]:
                    self._config[section][key] = value

    @staticmethod
    def _check_value(section: str, key: str, value: Any) -> None:
        if section in NUMERIC_SECTIONS:
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ValueError(f"{section}.{key} must be a number, got {value!r}")
            if value < 0:
                raise ValueError(f"{section}.{key} must not be negative, got {value}")

    def get(self, section: str, key: str, default: Any = None) -> Any:
        """Get a configuration value"""
        return self._config.get(section, {}).get(key, default)

    def set(self, section: str, key: str, value: Any) -> None:
        """Set a configuration value"""
        if section not in DEFAULT_CONFIG:
            raise ValueError(f"Unknown config section: {section}")

        self._check_value(section, key, value)
        self._config[section][key] = value
        logger.debug(f"Updated config: {section}.{key} = {value}")

    def apply_overrides(self, overrides: Dict[str, float]) -> None:
        """
        Apply flat weight overrides such as ``{'whole_word_bonus': 4}`` or
        ``{'topics': 3}``. Names are resolved against the scoring section
        first, then the field weights.
        """
        for name, value in overrides.items():
            if name in self._config['scoring']:
                self.set('scoring', name, value)
            elif name in self._config['field_weights']:
                self.set('field_weights', name, value)
            else:
                raise ValueError(f"Unknown search weight: {name}")

    def get_all(self) -> Dict[str, Any]:
        """Get the entire configuration dictionary"""
        return {section: dict(options) for section, options in self._config.items()}

    def scoring_weights(self) -> ScoringWeights:
        """Build an immutable ScoringWeights snapshot from the current values"""
        scoring = self._config['scoring']
        fields = self._config['field_weights']
        return ScoringWeights(
            specific_phrase_bonus=scoring['specific_phrase_bonus'],
            phrase_bonus=scoring['phrase_bonus'],
            whole_word_bonus=scoring['whole_word_bonus'],
            partial_word_bonus=scoring['partial_word_bonus'],
            specific_pattern_length=int(scoring['specific_pattern_length']),
            min_word_length=int(scoring['min_word_length']),
            content_weight=fields['content'],
            author_name_weight=fields['author_name'],
            author_username_weight=fields['author_username'],
            topics_weight=fields['topics'],
        )


# Global instance
_config_instance = None


def get_search_config() -> SearchConfig:
    """Get the global search configuration instance"""
    global _config_instance
    if _config_instance is None:
        # Defaults plus any SEARCH_WEIGHT_* environment overrides
        _config_instance = SearchConfig()
        overrides = Config.weight_overrides()
        if overrides:
            _config_instance.apply_overrides(overrides)
            logger.info(f"Applied search weight overrides: {overrides}")
    return _config_instance


def reset_search_config() -> None:
    """Reset the search configuration to defaults"""
    global _config_instance
    _config_instance = None
    logger.info("Reset search configuration to defaults")
