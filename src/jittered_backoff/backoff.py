# jittered_backoff/backoff.py

import logging
from typing import TYPE_CHECKING

from ._utils import RandomSource, default_random_source, jitter_bound
from .config import DEFAULTS, duration_adapter, multiplier_adapter

if TYPE_CHECKING:
    from .builder import BackoffBuilder

logger = logging.getLogger(__name__)


class Backoff:
    """
    Jittered exponential backoff generator producing delays in nanoseconds.

    Each call to `pause` returns the next delay a caller should wait before
    retrying. The first delay is `initial_ns` as configured. Every later delay
    is drawn uniformly from [1, last * multiplier + 1] and clamped to
    `max_ns`, so the jitter ceiling grows exponentially while concurrent
    retriers stay desynchronised.

    Zero values for `initial_ns`, `max_ns` and `multiplier` mean "unset" and
    are replaced by their defaults on each call to `pause`. The generator
    never sleeps and never stops producing delays; counting attempts and
    waiting are left to the caller.

    Durations must be whole, non-negative nanoseconds and the multiplier a
    real number; anything else raises `pydantic.ValidationError` on
    construction or assignment. Consistency between the fields is not
    checked.

    Args:
        initial_ns (int): First delay in nanoseconds, 0 for 1s.
        max_ns (int): Ceiling for jittered delays in nanoseconds, 0 for 30s.
        multiplier (float): Growth factor of the jitter ceiling, 0 for 2.0.
        random_source (RandomSource | None): Uniform integer source over an
            inclusive range. Defaults to the process-wide `random.randint`.

    Returns:
        Backoff: A generator owned by a single retry loop.
    """

    def __init__(
        self,
        initial_ns: int = 0,
        max_ns: int = 0,
        multiplier: float = 0.0,
        *,
        random_source: RandomSource | None = None,
    ) -> None:
        self.initial_ns = initial_ns
        self.max_ns = max_ns
        self.multiplier = multiplier
        self._random_source = random_source or default_random_source()
        self._last = DEFAULTS.seed_last_ns
        self._iteration_count = 0

    @staticmethod
    def builder() -> "BackoffBuilder":
        """Return a builder with every field unset."""
        # builder.py imports Backoff at module level
        from .builder import BackoffBuilder

        return BackoffBuilder()

    @property
    def initial_ns(self) -> int:
        """First delay in nanoseconds, 0 until resolved."""
        return self._initial_ns

    @initial_ns.setter
    def initial_ns(self, ns: int) -> None:
        self._initial_ns = duration_adapter.validate_python(ns)

    @property
    def max_ns(self) -> int:
        """Ceiling for jittered delays in nanoseconds, 0 until resolved."""
        return self._max_ns

    @max_ns.setter
    def max_ns(self, ns: int) -> None:
        self._max_ns = duration_adapter.validate_python(ns)

    @property
    def multiplier(self) -> float:
        """Growth factor of the jitter ceiling, 0 until resolved."""
        return self._multiplier

    @multiplier.setter
    def multiplier(self, value: float) -> None:
        self._multiplier = multiplier_adapter.validate_python(value)

    @property
    def iteration_count(self) -> int:
        """Number of delays requested so far."""
        return self._iteration_count

    @property
    def last_ns(self) -> int:
        """Most recent jittered delay, or the 1s seed before the second call."""
        return self._last

    def pause(self) -> int:
        """
        Return the next delay, in nanoseconds, to wait before retrying.

        The first call returns `initial_ns` unjittered and unclamped. Later
        calls draw `1 + r` with `r` uniform in [0, int(last * multiplier)],
        clamp the result to `max_ns` and remember it as the new `last`.

        Returns:
            int: Delay in nanoseconds.
        """
        self._iteration_count += 1
        self._apply_defaults()

        if self._iteration_count == 1:
            logger.debug("Backoff iteration 1: initial delay %d ns", self.initial_ns)
            return self.initial_ns

        upper = self._last * self.multiplier
        candidate = 1 + self._random_source(0, jitter_bound(upper))
        self._last = min(self.max_ns, candidate)

        logger.debug(
            "Backoff iteration %d: delay %d ns (ceiling %.0f ns, max %d ns)",
            self._iteration_count,
            self._last,
            upper,
            self.max_ns,
        )
        return self._last

    def _apply_defaults(self) -> None:
        """
        Replace zero (unset) configuration fields with their defaults.

        Idempotent: fields that are already non-zero are left untouched.

        Returns:
            None
        """
        if self.initial_ns == 0:
            self.initial_ns = DEFAULTS.initial_ns
            logger.debug("Backoff initial_ns unset, using %d ns", self.initial_ns)

        if self.max_ns == 0:
            self.max_ns = DEFAULTS.max_ns
            logger.debug("Backoff max_ns unset, using %d ns", self.max_ns)

        if self.multiplier == 0:
            self.multiplier = DEFAULTS.multiplier
            logger.debug("Backoff multiplier unset, using %s", self.multiplier)

    def __iter__(self) -> "Backoff":
        return self

    def __next__(self) -> int:
        return self.pause()
