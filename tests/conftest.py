from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest


class RecordingHasher:
    """Hasher that returns fixed digests by file name and records each call."""

    def __init__(self, digests: dict[str, str]) -> None:
        self.digests = digests
        self.calls: list[Path] = []

    def __call__(self, path: Path) -> str:
        self.calls.append(path)
        try:
            return self.digests[path.name]
        except KeyError:
            raise FileNotFoundError(f"No such file: {path}") from None


@pytest.fixture
def make_hasher() -> Callable[[dict[str, str]], RecordingHasher]:
    return RecordingHasher


@pytest.fixture
def source_dir(tmp_path: Path) -> Path:
    directory = tmp_path / "src"
    directory.mkdir()
    return directory


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    return tmp_path / "out" / "hashed"


@pytest.fixture(autouse=True)
def _clear_hashonym_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "HASHONYM_OUTPUT_DIR",
        "HASHONYM_MIN_HASH_LEN",
        "HASHONYM_PRESERVE_EXT",
        "HASHONYM_ALGORITHM",
    ):
        monkeypatch.delenv(name, raising=False)
