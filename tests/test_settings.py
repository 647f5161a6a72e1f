from pathlib import Path

import pytest
from pydantic import ValidationError

from hashonym.settings import EngineConfig, HashonymSettings


def test_defaults(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.chdir(tmp_path)
    settings = HashonymSettings()

    assert settings.output_dir == Path("build/hashed")
    assert settings.min_hash_len == 0
    assert settings.preserve_ext is False
    assert settings.algorithm == "md5"


def test_environment_override(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HASHONYM_OUTPUT_DIR", str(tmp_path / "out"))
    monkeypatch.setenv("HASHONYM_MIN_HASH_LEN", "6")
    monkeypatch.setenv("HASHONYM_PRESERVE_EXT", "true")
    monkeypatch.setenv("HASHONYM_ALGORITHM", "SHA256")

    config = HashonymSettings().engine_config()

    assert config.output_dir == tmp_path / "out"
    assert config.min_hash_len == 6
    assert config.preserve_ext is True
    assert config.algorithm == "sha256"


def test_keyword_arguments_take_precedence(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HASHONYM_MIN_HASH_LEN", "6")

    settings = HashonymSettings(min_hash_len=2)

    assert settings.min_hash_len == 2


def test_invalid_values_are_rejected(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HASHONYM_MIN_HASH_LEN", "-1")

    with pytest.raises(ValidationError):
        HashonymSettings()

    with pytest.raises(ValidationError):
        EngineConfig(output_dir=tmp_path, algorithm="nope")


def test_output_prefix_ends_with_separator(tmp_path: Path) -> None:
    config = EngineConfig(output_dir=tmp_path / "out")

    assert config.output_prefix.endswith("out/") or config.output_prefix.endswith("out\\")
