"""Configuration for hashed file naming."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .hashing import DEFAULT_ALGORITHM, validate_algorithm
from .mapping import normalize_output_dir


class EngineConfig(BaseModel):
    """Options a :class:`hashonym.Hashonym` engine is constructed with."""

    model_config = ConfigDict(frozen=True)

    output_dir: Path
    min_hash_len: int = Field(default=0, ge=0)
    preserve_ext: bool = False
    algorithm: str = DEFAULT_ALGORITHM

    @field_validator("algorithm")
    @classmethod
    def _check_algorithm(cls, value: str) -> str:
        return validate_algorithm(value)

    @property
    def output_prefix(self) -> str:
        return normalize_output_dir(self.output_dir)


class HashonymSettings(BaseSettings):
    """Settings read from the environment and ``.env``."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore", populate_by_name=True)

    output_dir: Path = Field(default=Path("build/hashed"), validation_alias="HASHONYM_OUTPUT_DIR")
    min_hash_len: int = Field(default=0, ge=0, validation_alias="HASHONYM_MIN_HASH_LEN")
    preserve_ext: bool = Field(default=False, validation_alias="HASHONYM_PRESERVE_EXT")
    algorithm: str = Field(default=DEFAULT_ALGORITHM, validation_alias="HASHONYM_ALGORITHM")

    @field_validator("algorithm")
    @classmethod
    def _check_algorithm(cls, value: str) -> str:
        return validate_algorithm(value)

    def engine_config(self) -> EngineConfig:
        """Return the engine options described by these settings."""

        return EngineConfig(
            output_dir=self.output_dir,
            min_hash_len=self.min_hash_len,
            preserve_ext=self.preserve_ext,
            algorithm=self.algorithm,
        )
