"""Display identifier policy: stable per group key, random otherwise."""

from __future__ import annotations

import random
import zlib
from collections.abc import Callable

from notify_composer.models.metadata import ExtenderMetadata

_MAX_ID = 0x7FFFFFFF


def stable_id(key: str) -> int:
    """Return a positive 31-bit id derived from key (identical across processes)."""
    return zlib.crc32(key.encode("utf-8")) & _MAX_ID


def random_id() -> int:
    """Return a random positive 31-bit id."""
    return random.randint(1, _MAX_ID)


class IdentifierPolicy:
    """Assign the id a composition is submitted under."""

    def __init__(self, random_source: Callable[[], int] = random_id) -> None:
        self._random_source = random_source

    def assign(self, metadata: ExtenderMetadata) -> int:
        """Keyed notifications update in place; others get a fresh id per call."""
        if metadata.key is not None:
            return stable_id(metadata.key)
        return self._random_source()
