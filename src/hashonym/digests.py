"""Lazily populated cache of full content digests."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Iterable, Mapping
from pathlib import Path

from .errors import HashonymError

__all__ = ["DigestCache", "HashError", "Hasher"]

logger = logging.getLogger(__name__)

Hasher = Callable[[Path], str]


class HashError(HashonymError):
    """Raised when a registered file cannot be hashed."""

    def __init__(self, path: Path, message: str) -> None:
        super().__init__(f"hash: failed to hash {path}: {message}")
        self.path = path


class DigestCache:
    """Map of path to full digest, filled on demand and never invalidated."""

    def __init__(self, hasher: Hasher) -> None:
        self._hasher = hasher
        self._digests: dict[Path, str] = {}

    def snapshot(self, paths: Iterable[Path]) -> dict[Path, str]:
        """Return the cached digests for ``paths`` in the given order."""

        return {path: self._digests[path] for path in paths}

    async def ensure_digests(self, paths: Iterable[Path]) -> Mapping[Path, str]:
        """Hash every path that has no cached digest, one file at a time.

        Digests computed before a failure stay cached, so a retry only hashes
        what is still missing.
        """

        ordered = list(paths)
        logger.debug("generating full hashes for %d file(s)", len(ordered))
        for path in ordered:
            if path in self._digests:
                continue
            try:
                digest = await asyncio.to_thread(self._hasher, path)
            except (OSError, ValueError) as exc:
                raise HashError(path, str(exc)) from exc
            self._digests[path] = digest
        return self.snapshot(ordered)
