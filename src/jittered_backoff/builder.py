# jittered_backoff/builder.py

import logging
import math

from pydantic import BaseModel, ConfigDict

from ._utils import RandomSource
from .backoff import Backoff
from .config import DEFAULTS, DurationNs, Multiplier

logger = logging.getLogger(__name__)


class BackoffBuilder(BaseModel):
    """
    Immutable, chainable configuration for a `Backoff` generator.

    Each setter returns a new builder with one field replaced, leaving the
    receiver unchanged. Setters check types only: durations must be whole,
    non-negative nanoseconds, otherwise `pydantic.ValidationError` is raised.
    Consistency between fields is checked only by `build(validate=True)`.
    Unset fields stay at zero and are resolved to their defaults by the
    generator on first use, not here.

    Returns:
        BackoffBuilder: A builder with every field unset.
    """

    model_config = ConfigDict(frozen=True)

    initial_delay_ns: DurationNs = 0
    max_delay_ns: DurationNs = 0
    growth_factor: Multiplier = 0.0
    rng: RandomSource | None = None

    def initial_ns(self, ns: int) -> "BackoffBuilder":
        """Set the first delay in nanoseconds."""
        return self._replace(initial_delay_ns=ns)

    def max_ns(self, ns: int) -> "BackoffBuilder":
        """Set the ceiling for jittered delays in nanoseconds."""
        return self._replace(max_delay_ns=ns)

    def multiplier(self, value: float) -> "BackoffBuilder":
        """Set the growth factor of the jitter ceiling."""
        return self._replace(growth_factor=value)

    def random_source(self, source: RandomSource) -> "BackoffBuilder":
        """Set the uniform integer source used for jitter draws."""
        return self._replace(rng=source)

    def _replace(self, **changes: object) -> "BackoffBuilder":
        """Return a validated copy with the given fields replaced."""
        return self.model_validate({**dict(self), **changes})

    def build(self, *, validate: bool = False) -> Backoff:
        """
        Build a `Backoff` from the accumulated configuration.

        The internal `last` delay of the generator is always seeded to 1s,
        whatever `initial_ns` was set to, so the second delay is drawn from
        [1, 1s * multiplier + 1].

        Args:
            validate (bool): Reject inconsistent configuration instead of
                producing a degenerate sequence. Off by default.

        Raises:
            ValueError: If `validate` is True and the configuration, with
                defaults applied, is inconsistent.

        Returns:
            Backoff: A fresh generator with no delays requested yet.
        """
        if validate:
            check_config(self.initial_delay_ns, self.max_delay_ns, self.growth_factor)

        return Backoff(
            self.initial_delay_ns,
            self.max_delay_ns,
            self.growth_factor,
            random_source=self.rng,
        )


def check_config(initial_ns: int, max_ns: int, multiplier: float) -> None:
    """
    Validate a backoff configuration with zero fields resolved to defaults.

    Rejects negative delays, a multiplier that is not finite or does not grow
    the jitter ceiling, and a first delay above the ceiling.

    Raises:
        ValueError: Describing the first inconsistency found.

    Returns:
        None
    """
    initial_ns = initial_ns or DEFAULTS.initial_ns
    max_ns = max_ns or DEFAULTS.max_ns
    multiplier = multiplier or DEFAULTS.multiplier

    problem = None
    if initial_ns < 0:
        problem = f"initial_ns must not be negative, got {initial_ns}"
    elif max_ns < 0:
        problem = f"max_ns must not be negative, got {max_ns}"
    elif not math.isfinite(multiplier) or multiplier <= 1:
        problem = f"multiplier must be a finite value above 1, got {multiplier}"
    elif initial_ns > max_ns:
        problem = f"initial_ns ({initial_ns}) exceeds max_ns ({max_ns})"

    if problem is not None:
        logger.warning("Rejected backoff configuration: %s", problem)
        raise ValueError(problem)
