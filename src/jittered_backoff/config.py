# jittered_backoff/config.py

from dataclasses import dataclass
from typing import Annotated

from pydantic import Field, TypeAdapter

NANOS_PER_SECOND = 1_000_000_000

DEFAULT_INITIAL_NS = NANOS_PER_SECOND
DEFAULT_MAX_NS = 30 * NANOS_PER_SECOND
DEFAULT_MULTIPLIER = 2.0

# whole, non-negative nanoseconds; floats, bools and strings are rejected
DurationNs = Annotated[int, Field(strict=True, ge=0)]

Multiplier = Annotated[float, Field(strict=True)]

duration_adapter: TypeAdapter[int] = TypeAdapter(DurationNs)
multiplier_adapter: TypeAdapter[float] = TypeAdapter(Multiplier)


@dataclass(frozen=True, slots=True)
class BackoffDefaults:
    """
    Immutable defaults for the jittered backoff generator.

    Centralises the values substituted for zero (unset) configuration fields,
    and the baseline every freshly built generator grows its jitter range
    from. Ensures a single source of truth for the generator and the builder.

    Returns:
        BackoffDefaults: Immutable defaults object.
    """

    # first delay when initial_ns is unset
    initial_ns: int = DEFAULT_INITIAL_NS

    # ceiling for jittered delays when max_ns is unset
    max_ns: int = DEFAULT_MAX_NS

    # growth factor when multiplier is unset
    multiplier: float = DEFAULT_MULTIPLIER

    # baseline for the second delay, independent of the configured initial_ns
    seed_last_ns: int = NANOS_PER_SECOND


DEFAULTS = BackoffDefaults()
