from pathlib import Path
import logging
import os
from typing import Dict, Any
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# Base directory of the project
BASE_DIR = Path(__file__).parent.parent

# Prefix for per-weight overrides, e.g. SEARCH_WEIGHT_WHOLE_WORD_BONUS=4
WEIGHT_ENV_PREFIX = 'SEARCH_WEIGHT_'


class Config:
    """Base configuration class"""
    # Server settings
    DEBUG = os.getenv('DEBUG', 'False').lower() == 'true'
    HOST = os.getenv('HOST', '127.0.0.1')
    PORT = int(os.getenv('PORT', '5000'))
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()

    # Search settings
    SEARCH_DEFAULT_LIMIT = int(os.getenv('SEARCH_DEFAULT_LIMIT', '0'))  # 0 = no limit
    SEARCH_CONTEXT_LIMIT = int(os.getenv('SEARCH_CONTEXT_LIMIT', '20'))

    # Request size limit for posted candidate lists
    MAX_CONTENT_LENGTH_MB = 16

    @classmethod
    def weight_overrides(cls) -> Dict[str, float]:
        """Collect SEARCH_WEIGHT_* environment overrides, keyed by lower-cased weight name"""
        overrides = {}
        for key, value in os.environ.items():
            if not key.startswith(WEIGHT_ENV_PREFIX):
                continue
            name = key[len(WEIGHT_ENV_PREFIX):].lower()
            try:
                overrides[name] = float(value)
            except ValueError:
                raise ValueError(f"Invalid value for {key}: {value!r}")
        return overrides

    @classmethod
    def validate(cls) -> Dict[str, Any]:
        """Validate configuration settings"""
        invalid = []

        if not isinstance(logging.getLevelName(cls.LOG_LEVEL), int):
            invalid.append('LOG_LEVEL')

        if not 0 < cls.PORT < 65536:
            invalid.append('PORT')

        if cls.SEARCH_DEFAULT_LIMIT < 0:
            invalid.append('SEARCH_DEFAULT_LIMIT')

        if cls.SEARCH_CONTEXT_LIMIT <= 0:
            invalid.append('SEARCH_CONTEXT_LIMIT')

        if invalid:
            raise ValueError(f"Invalid configuration settings: {', '.join(invalid)}")

        return {
            'debug': cls.DEBUG,
            'host': cls.HOST,
            'port': cls.PORT,
            'log_level': cls.LOG_LEVEL,
            'search': {
                'default_limit': cls.SEARCH_DEFAULT_LIMIT,
                'context_limit': cls.SEARCH_CONTEXT_LIMIT,
            }
        }


# Load and validate configuration
config = Config()
config.validate()
