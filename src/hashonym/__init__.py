"""Content-addressed, minimal-length file naming."""

from importlib import metadata

from .digests import DigestCache, HashError
from .engine import EngineState, Hashonym
from .errors import HashonymError
from .materialize import CopyError, DirectoryError, MaterializeResult, Materializer

__all__ = [
    "CopyError",
    "DigestCache",
    "DirectoryError",
    "EngineState",
    "HashError",
    "Hashonym",
    "HashonymError",
    "MaterializeResult",
    "Materializer",
    "__version__",
]

try:  # pragma: no cover - fallback for local editable installs without hatch build
    __version__ = metadata.version("hashonym")
except metadata.PackageNotFoundError:  # pragma: no cover - generated during build
    from ._version import __version__  # type: ignore
