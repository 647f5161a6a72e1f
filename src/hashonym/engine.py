"""Engine that assigns minimal content-addressed names to registered files."""

from __future__ import annotations

import asyncio
import functools
import logging
import os
from collections.abc import Iterable
from enum import Enum
from pathlib import Path

from .digests import DigestCache, Hasher
from .hashing import DEFAULT_ALGORITHM, hash_file
from .mapping import DestinationMap, build_destination_map
from .materialize import Materializer, MaterializeResult, Storage
from .resolver import minimal_safe_length
from .settings import EngineConfig

__all__ = ["EngineState", "Hashonym"]

logger = logging.getLogger(__name__)

PathInput = str | os.PathLike[str]


class EngineState(str, Enum):
    DIRTY = "dirty"
    CLEAN = "clean"


class Hashonym:
    """Map input files to ``<output_dir>/<shortest safe digest prefix>[ext]``.

    Registering files marks the engine dirty. :meth:`resolve` recomputes the
    destination map only while dirty and otherwise returns the cached map.
    At most one :meth:`resolve` may run at a time per instance.
    """

    def __init__(
        self,
        output_dir: PathInput,
        *,
        min_hash_len: int = 0,
        preserve_ext: bool = False,
        algorithm: str = DEFAULT_ALGORITHM,
        hasher: Hasher | None = None,
        storage: Storage | None = None,
    ) -> None:
        self.config = EngineConfig(
            output_dir=Path(output_dir),
            min_hash_len=min_hash_len,
            preserve_ext=preserve_ext,
            algorithm=algorithm,
        )
        self._digests = DigestCache(
            hasher or functools.partial(hash_file, algorithm=self.config.algorithm)
        )
        self._materializer = Materializer(storage)
        self._files: dict[Path, None] = {}
        self._state = EngineState.DIRTY
        self._generation = 0
        self._destination_map: DestinationMap = {}
        self._hash_length: int | None = None
        self._written = False
        self._last_result: MaterializeResult | None = None
        self._resolving = False

    @classmethod
    def from_config(
        cls,
        config: EngineConfig,
        *,
        hasher: Hasher | None = None,
        storage: Storage | None = None,
    ) -> "Hashonym":
        return cls(
            config.output_dir,
            min_hash_len=config.min_hash_len,
            preserve_ext=config.preserve_ext,
            algorithm=config.algorithm,
            hasher=hasher,
            storage=storage,
        )

    @property
    def state(self) -> EngineState:
        return self._state

    @property
    def files(self) -> list[Path]:
        return list(self._files)

    @property
    def hash_length(self) -> int | None:
        return self._hash_length

    @property
    def destination_map(self) -> DestinationMap:
        return dict(self._destination_map)

    @property
    def last_result(self) -> MaterializeResult | None:
        return self._last_result

    def register(self, files: PathInput | Iterable[PathInput]) -> None:
        """Add one or more files. Always marks the engine dirty."""

        if isinstance(files, (str, os.PathLike)):
            files = [files]
        for file in files:
            self._files.setdefault(Path(file), None)
        # any new file may collide at the previously chosen length
        self._state = EngineState.DIRTY
        self._generation += 1

    async def resolve(self, dry_run: bool = False) -> DestinationMap:
        """Return the destination map, recomputing and writing it if needed.

        With ``dry_run`` the map is computed but nothing is written. A later
        non-dry call writes the cached map without recomputing it.
        """

        if self._resolving:
            raise RuntimeError("resolve() is already in progress for this instance")
        self._resolving = True
        try:
            if self._state is EngineState.CLEAN:
                await asyncio.sleep(0)
                if not dry_run and not self._written:
                    await self._write(self._destination_map)
                return dict(self._destination_map)
            return await self._recompute(dry_run)
        finally:
            self._resolving = False

    async def _recompute(self, dry_run: bool) -> DestinationMap:
        generation = self._generation
        files = list(self._files)

        digests = await self._digests.ensure_digests(files)
        length = minimal_safe_length(digests, self.config.min_hash_len)
        destination_map = build_destination_map(
            digests, length, self.config.output_prefix, self.config.preserve_ext
        )
        logger.debug("generated hash-based file names for %d file(s)", len(destination_map))

        if dry_run:
            logger.debug("dry run: returning the hash directory mapping without writing")
        else:
            await self._write(destination_map)

        self._destination_map = destination_map
        self._hash_length = length
        self._written = not dry_run
        if generation == self._generation:
            self._state = EngineState.CLEAN
        return dict(destination_map)

    async def _write(self, destination_map: DestinationMap) -> None:
        self._last_result = await self._materializer.materialize(
            destination_map, self.config.output_dir
        )
        self._written = True
