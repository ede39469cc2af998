# jittered_backoff/__init__.py

from ._utils import RandomSource
from .backoff import Backoff
from .builder import BackoffBuilder, check_config
from .config import (
    DEFAULT_INITIAL_NS,
    DEFAULT_MAX_NS,
    DEFAULT_MULTIPLIER,
    DEFAULTS,
    NANOS_PER_SECOND,
    BackoffDefaults,
)

__all__ = [
    # generator
    "Backoff",
    "RandomSource",
    # builder
    "BackoffBuilder",
    "check_config",
    # defaults
    "BackoffDefaults",
    "DEFAULTS",
    "DEFAULT_INITIAL_NS",
    "DEFAULT_MAX_NS",
    "DEFAULT_MULTIPLIER",
    "NANOS_PER_SECOND",
]
