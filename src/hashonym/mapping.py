"""Build destination paths from truncated digests."""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path

__all__ = ["DestinationMap", "build_destination_map", "normalize_output_dir"]

DestinationMap = dict[Path, Path]


def normalize_output_dir(output_dir: str | os.PathLike[str]) -> str:
    """Return ``output_dir`` as a string that ends with exactly one separator."""

    value = os.fspath(output_dir)
    if not value.endswith(os.sep):
        value += os.sep
    return value


def build_destination_map(
    digests: Mapping[Path, str],
    length: int,
    output_dir: str | os.PathLike[str],
    preserve_ext: bool = False,
) -> DestinationMap:
    prefix = normalize_output_dir(output_dir)
    mapping: DestinationMap = {}
    for path, digest in digests.items():
        name = digest[:length]
        if preserve_ext:
            name += path.suffix
        mapping[path] = Path(prefix + name)
    return mapping
