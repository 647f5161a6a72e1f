"""Write source files out to their hashed destinations."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from .errors import HashonymError
from .storage import LocalStorage

__all__ = [
    "CopyError",
    "DirectoryError",
    "MaterializeResult",
    "Materializer",
    "Storage",
]

logger = logging.getLogger(__name__)


class DirectoryError(HashonymError):
    """Raised when the output directory cannot be created."""


class CopyError(HashonymError):
    """Raised when a source file cannot be copied to its destination."""

    def __init__(self, source: Path, destination: Path, message: str) -> None:
        super().__init__(f"copy: failed to copy {source} to {destination}: {message}")
        self.source = source
        self.destination = destination


class Storage(Protocol):
    def ensure_dir(self, path: Path) -> None: ...

    def exists(self, path: Path) -> bool: ...

    def copy(self, source: Path, destination: Path) -> None: ...


@dataclass(frozen=True, slots=True)
class MaterializeResult:
    """Counts from one materialization pass."""

    written: int = 0
    skipped: int = 0

    @property
    def total(self) -> int:
        return self.written + self.skipped

    def to_dict(self) -> dict[str, int]:
        return {"written": self.written, "skipped": self.skipped}


class Materializer:
    """Copy each source to its destination unless the destination already exists.

    Existence alone counts as success; the contents of an existing destination
    are not compared against the source.
    """

    def __init__(self, storage: Storage | None = None) -> None:
        self._storage = storage or LocalStorage()

    async def materialize(
        self, destination_map: Mapping[Path, Path], output_dir: Path
    ) -> MaterializeResult:
        try:
            await asyncio.to_thread(self._storage.ensure_dir, output_dir)
        except OSError as exc:
            raise DirectoryError(
                f"directory: failed to create {output_dir}: {exc}"
            ) from exc

        logger.debug("writing %d hash file(s) to %s", len(destination_map), output_dir)
        written = 0
        skipped = 0
        for source, destination in destination_map.items():
            if await asyncio.to_thread(self._storage.exists, destination):
                logger.debug("%s found, moving on without copying", destination)
                skipped += 1
                continue

            logger.debug("copying the contents of %s out to %s", source, destination)
            try:
                await asyncio.to_thread(self._storage.copy, source, destination)
            except OSError as exc:
                raise CopyError(source, destination, str(exc)) from exc
            written += 1

        logger.debug("started with %d source file(s)", len(destination_map))
        logger.debug("found %d existing hash file(s)", skipped)
        logger.debug("ended with %d generated hash file(s)", written)
        return MaterializeResult(written=written, skipped=skipped)
