#!/usr/bin/env python3
"""
Retry Loop Demo for jittered-backoff package.

This script runs a simulated flaky operation inside a caller-owned retry loop,
printing the delay suggested by the Backoff generator before each retry. The
sleep is scaled down so the demo finishes quickly.
"""

import random
import sys
import time

from jittered_backoff import NANOS_PER_SECOND, Backoff

MAX_ATTEMPTS = 6
TIME_SCALE = 0.001


def print_separator(title: str) -> None:
    """Print a formatted section separator."""
    print(f"\n{'=' * 60}")
    print(f" {title}")
    print(f"{'=' * 60}")


def flaky_operation(failure_rate: float) -> bool:
    """Succeed with probability 1 - failure_rate."""
    return random.random() >= failure_rate


def demo_retry_loop(backoff: Backoff, failure_rate: float) -> bool:
    """Retry a flaky operation, waiting the suggested delay between attempts."""
    for attempt in range(1, MAX_ATTEMPTS + 1):
        if flaky_operation(failure_rate):
            print(f"✅ attempt {attempt} succeeded")
            return True

        delay_ns = backoff.pause()
        seconds = delay_ns / NANOS_PER_SECOND
        print(f"❌ attempt {attempt} failed, backing off {seconds:.3f}s")
        time.sleep(seconds * TIME_SCALE)

    print(f"⛔ giving up after {MAX_ATTEMPTS} attempts")
    return False


def demo_delay_sequence() -> None:
    """Print the first delays of a default and a tuned generator."""
    print_separator("📈 DELAY SEQUENCES")

    default = Backoff()
    tuned = (
        Backoff.builder()
        .initial_ns(NANOS_PER_SECOND // 4)
        .max_ns(5 * NANOS_PER_SECOND)
        .multiplier(3.0)
        .build()
    )

    for name, backoff in (("default", default), ("tuned", tuned)):
        delays = [next(backoff) / NANOS_PER_SECOND for _ in range(8)]
        print(f"{name:>8}: " + ", ".join(f"{d:.3f}s" for d in delays))


def main() -> int:
    demo_delay_sequence()

    print_separator("🔁 RETRY LOOP")
    succeeded = demo_retry_loop(Backoff(), failure_rate=0.7)

    return 0 if succeeded else 1


if __name__ == "__main__":
    sys.exit(main())
