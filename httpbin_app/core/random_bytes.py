"""Random Bytes: seeded, chunked byte generation for /bytes/{n}.

Invariants:
    - Exactly n bytes are produced in total; n = 0 produces nothing
    - Same seed ⇒ byte-identical output
    - Memory use is bounded by chunk_size, not n
    - Each call owns its generator (no shared random state across requests)
"""

import random
import time
from typing import Iterator


def resolve_seed(seed: int | None) -> int:
    """Explicit seed, or the current time in nanoseconds."""
    return seed if seed is not None else time.time_ns()


def generate_bytes(n: int, seed: int, chunk_size: int) -> Iterator[bytes]:
    rnd = random.Random(seed)
    remaining = n
    while remaining > 0:
        size = min(chunk_size, remaining)
        yield rnd.randbytes(size)
        remaining -= size
