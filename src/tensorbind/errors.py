"""Exception hierarchy shared across tensorbind subsystems."""
from __future__ import annotations


class TensorbindError(ValueError):
    """Base class for fatal generator errors; aborts the whole run."""


class SchemaError(TensorbindError):
    """A declaration record has the wrong shape or is missing a key."""


class DeclarationError(TensorbindError):
    """A function declaration violates a construction invariant."""


class ConfigError(TensorbindError):
    """The generator configuration is invalid."""
