"""Search for the shortest digest prefix that keeps distinct content apart."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path

__all__ = ["find_min_length", "is_valid_length", "minimal_safe_length"]

logger = logging.getLogger(__name__)


def is_valid_length(digests: Mapping[Path, str], length: int) -> bool:
    """Return whether truncating to ``length`` never merges different digests.

    Files whose full digests are equal may share a prefix.
    """

    if length <= 0:
        return False

    representatives: dict[str, str] = {}
    for path, digest in digests.items():
        prefix = digest[:length]
        existing = representatives.setdefault(prefix, digest)
        if existing != digest:
            logger.debug("[hash length %d] collision detected at %s", length, path)
            return False

    logger.debug("[hash length %d] is a valid hash length", length)
    return True


def find_min_length(digests: Mapping[Path, str]) -> int:
    """Return the smallest positive prefix length that is collision free.

    Always terminates: at the longest digest length every prefix is the full
    digest.
    """

    length = 1
    while not is_valid_length(digests, length):
        length += 1
    logger.debug("minimum possible hash length is %d", length)
    return length


def minimal_safe_length(digests: Mapping[Path, str], floor: int) -> int:
    """Return the minimal collision-free length, clamped up to ``floor``.

    The clamp does not re-check ``floor``: a longer prefix of fixed-length
    digests can only split groups further.
    """

    length = find_min_length(digests)
    if length < floor:
        logger.debug("using the minimum configured hash length of %d instead", floor)
        length = floor
    logger.debug("using %d as the hash length", length)
    return length
