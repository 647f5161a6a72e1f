from __future__ import annotations

from pathlib import Path

import pytest

from hashonym.resolver import find_min_length, is_valid_length, minimal_safe_length


def _digests(*values: str) -> dict[Path, str]:
    return {Path(f"file{index}.txt"): value for index, value in enumerate(values)}


def test_non_positive_lengths_are_invalid() -> None:
    digests = _digests("abcd", "efgh")

    assert not is_valid_length(digests, 0)
    assert not is_valid_length(digests, -1)
    assert is_valid_length(digests, 1)


def test_identical_digests_may_share_a_prefix() -> None:
    digests = _digests("abcd", "abcd")

    assert is_valid_length(digests, 1)
    assert find_min_length(digests) == 1


def test_empty_and_single_file_sets() -> None:
    assert find_min_length({}) == 1
    assert minimal_safe_length({}, 5) == 5
    assert find_min_length(_digests("abcdef")) == 1
    assert minimal_safe_length(_digests("abcdef"), 3) == 3


def test_shared_prefix_requires_one_more_character() -> None:
    digests = _digests("abc123", "abc456", "f00000")

    assert not is_valid_length(digests, 3)
    assert find_min_length(digests) == 4


def test_collision_against_group_with_duplicates() -> None:
    # two identical files plus a third that only diverges late
    digests = _digests("aaaa11", "aaaa11", "aaaa22")

    assert find_min_length(digests) == 5


def test_floor_clamps_up_but_never_down() -> None:
    digests = _digests("1bcdef", "2bcdef")

    assert minimal_safe_length(digests, 0) == 1
    assert minimal_safe_length(digests, 1) == 1
    assert minimal_safe_length(digests, 8) == 8

    colliding = _digests("abc1", "abc2")
    assert minimal_safe_length(colliding, 2) == 4


def test_resolved_length_is_valid_and_minimal() -> None:
    digests = _digests("0a1b2c", "0a1b3c", "0a9999", "7fffff", "0a1b2c")

    length = find_min_length(digests)

    assert is_valid_length(digests, length)
    assert all(not is_valid_length(digests, shorter) for shorter in range(1, length))


def test_prefix_of_longer_digest_is_told_apart() -> None:
    assert find_min_length(_digests("ab", "abc")) == 3

