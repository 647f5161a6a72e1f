"""Content hashing for files on disk."""

from __future__ import annotations

import hashlib
from pathlib import Path

DEFAULT_ALGORITHM = "md5"
CHUNK_SIZE = 1024 * 1024


def validate_algorithm(algorithm: str) -> str:
    """Return the lowercased algorithm name or raise ``ValueError`` if unknown."""

    normalized = algorithm.strip().lower()
    if normalized not in hashlib.algorithms_available:
        raise ValueError(f"Unsupported hash algorithm: {algorithm}")
    return normalized


def hash_file(path: str | Path, algorithm: str = DEFAULT_ALGORITHM) -> str:
    """Return the full hex digest of the file at ``path``, read in chunks."""

    hasher = hashlib.new(validate_algorithm(algorithm))
    with Path(path).open("rb") as handle:
        for chunk in iter(lambda: handle.read(CHUNK_SIZE), b""):
            hasher.update(chunk)
    return hasher.hexdigest()
