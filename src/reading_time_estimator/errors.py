from __future__ import annotations


class EstimationError(RuntimeError):
    """Base class for failures raised while estimating reading time."""


class InvalidInputError(EstimationError, ValueError):
    """Raised when the text or the call parameters cannot be estimated."""


class SourceReadError(EstimationError, OSError):
    """Raised when a line source cannot be opened or read."""
