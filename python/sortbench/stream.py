"""Deterministic random input stream shared by every phase of a run."""

from __future__ import annotations

import numpy as np

DEFAULT_SEED = 42
DEFAULT_CHUNK = 1 << 16

_WORD_SPAN = 1 << 32


class RandomStream:
    """Seeded, strictly sequential stream of signed 32-bit integers.

    Backed by numpy's legacy ``RandomState``, whose integer seeding is the
    classic MT19937 ``init_genrand``; each raw 32-bit word is reinterpreted
    as a two's-complement ``int32``. Words are pulled from the generator in
    chunks, which does not change the logical order: drawing ``a`` then
    ``b`` values yields the same values as drawing ``a + b`` at once.

    The stream is never rewound. Thread it explicitly through every caller
    that needs input data.
    """

    __slots__ = ("seed", "_state", "_chunk", "_buf", "_pos", "_drawn")

    def __init__(self, seed: int = DEFAULT_SEED, chunk: int = DEFAULT_CHUNK):
        if chunk <= 0:
            raise ValueError(f"chunk must be positive, got {chunk}")
        self.seed = seed
        self._state = np.random.RandomState(seed)
        self._chunk = chunk
        self._buf: list[int] = []
        self._pos = 0
        self._drawn = 0

    @property
    def drawn(self) -> int:
        """Number of values consumed so far."""
        return self._drawn

    def _words(self, count: int) -> list[int]:
        raw = self._state.randint(0, _WORD_SPAN, size=count, dtype=np.uint32)
        return raw.view(np.int32).tolist()

    def next(self) -> int:
        return self.draw(1)[0]

    def draw(self, count: int) -> list[int]:
        """Return the next ``count`` values as a fresh list."""
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")
        available = len(self._buf) - self._pos
        if count > available:
            # Carry the unread tail forward so ordering is preserved.
            tail = self._buf[self._pos:]
            self._buf = tail + self._words(max(count - available, self._chunk))
            self._pos = 0
        out = self._buf[self._pos:self._pos + count]
        self._pos += count
        self._drawn += count
        return out
