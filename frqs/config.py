"""
FRQS configuration
Reads settings from the environment (and a .env file when loaded by the caller)
"""

import logging
import os
from .constants import DEFAULT_TOLERANCE_PERCENT

DEFAULT_KEY_LENGTH = 32
DEFAULT_ENCODE_DEPTH = 3


def _read_number(name, default, cast):
    raw = os.getenv(name)
    if raw is None or raw == '':
        return default
    try:
        return cast(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be a number, got {raw!r}") from e


def load_config():
    """
    Build the configuration dictionary from environment variables.

    Returns:
        dict: FRQS_KEY_LENGTH, FRQS_ENCODE_DEPTH, FRQS_TOLERANCE_PERCENT, FRQS_LOG_LEVEL

    Raises:
        ValueError: If a numeric variable cannot be parsed
    """
    return {
        'FRQS_KEY_LENGTH': _read_number('FRQS_KEY_LENGTH', DEFAULT_KEY_LENGTH, int),
        'FRQS_ENCODE_DEPTH': _read_number('FRQS_ENCODE_DEPTH', DEFAULT_ENCODE_DEPTH, int),
        'FRQS_TOLERANCE_PERCENT': _read_number(
            'FRQS_TOLERANCE_PERCENT', DEFAULT_TOLERANCE_PERCENT, float
        ),
        'FRQS_LOG_LEVEL': os.getenv('FRQS_LOG_LEVEL', 'WARNING').upper()
    }


def configure_logging(level='WARNING'):
    """Configure root logging for command line use."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format='%(asctime)s %(levelname)s %(name)s: %(message)s'
    )
