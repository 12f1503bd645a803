"""Document identifier generation."""

from __future__ import annotations

import random
import time

_RANDOM = random.SystemRandom()


def generate_id() -> str:
    """Return ``"<microseconds since epoch>_<random 64-bit integer>"``.

    Collisions are not checked; with a 64-bit random part they are negligible
    within one run.
    """
    timestamp = time.time_ns() // 1000
    return f"{timestamp}_{_RANDOM.getrandbits(64)}"
