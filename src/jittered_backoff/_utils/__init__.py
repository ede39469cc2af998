# _utils/__init__.py

from .random_source import RandomSource, default_random_source, jitter_bound

__all__ = [
    "RandomSource",
    "default_random_source",
    "jitter_bound",
]
