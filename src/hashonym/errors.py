"""Exception hierarchy shared across the package."""


class HashonymError(RuntimeError):
    """Base class for failures surfaced by :class:`hashonym.Hashonym`."""
