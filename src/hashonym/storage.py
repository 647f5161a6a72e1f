"""Filesystem primitives used when writing hashed files."""

from __future__ import annotations

import os
import shutil
import tempfile
from pathlib import Path

__all__ = ["LocalStorage"]

COPY_BUFFER_SIZE = 1024 * 1024


class LocalStorage:
    """Blocking filesystem operations against the local disk."""

    def ensure_dir(self, path: Path) -> None:
        """Create ``path`` and any missing parents."""

        path.mkdir(parents=True, exist_ok=True)

    def exists(self, path: Path) -> bool:
        return path.exists()

    def copy(self, source: Path, destination: Path) -> None:
        """Stream the bytes of ``source`` into ``destination``.

        Bytes go to a temporary file beside ``destination`` that is renamed
        into place once complete, so a failed copy never leaves a partial
        file at ``destination``.
        """

        fd, tmp_name = tempfile.mkstemp(
            dir=destination.parent, prefix=f".{destination.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "wb") as writer, source.open("rb") as reader:
                shutil.copyfileobj(reader, writer, COPY_BUFFER_SIZE)
            shutil.copymode(source, tmp_name)
            os.replace(tmp_name, destination)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
