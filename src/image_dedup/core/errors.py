"""Exceptions raised by the duplicate detection pipeline."""


class DedupError(Exception):
    """Base class for image-dedup errors."""


class UsageError(DedupError, ValueError):
    """Raised when a run is requested without any directories."""


class DirectoryScanError(DedupError):
    """Raised when a directory cannot be listed."""


class QuarantineError(DedupError):
    """Raised when the quarantine directory cannot be prepared."""


class HashComputationError(DedupError):
    """Raised when an image cannot be decoded or hashed."""
