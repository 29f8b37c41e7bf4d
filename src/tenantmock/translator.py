"""The translator: fabricated replacements for tenant-scoped identifiers.

Nothing is remembered between calls: the same identifier may come back
with a different number every time, and two identifiers may collide.
"""

from __future__ import annotations

import random
import threading
from collections.abc import Iterable


class Translator:
    """Maps identifiers to random unsigned 64-bit numbers, as decimal text.

    Owns its generator so tests can pass a seeded ``random.Random``.
    """

    def __init__(self, rng: random.Random | None = None):
        self._rng = rng if rng is not None else random.Random()
        self._lock = threading.Lock()

    @classmethod
    def from_seed(cls, seed: int | None) -> Translator:
        return cls(random.Random(seed))

    def next_number(self) -> str:
        with self._lock:
            return str(self._rng.getrandbits(64))

    def translate(self, identifiers: Iterable[str]) -> dict[str, str]:
        """Return {identifier: number}. Duplicates collapse, last one wins."""
        return {identifier: self.next_number() for identifier in identifiers}
