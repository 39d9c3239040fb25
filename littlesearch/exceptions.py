"""Errors raised by the index builder and query engine."""

from pathlib import Path


class SourceUnavailable(Exception):
    """
    A manifest, noise-word list or document could not be read.
    Aborts the whole build; no partial index is kept.
    """

    def __init__(self, source: str | Path, reason: str = "") -> None:
        self.source = str(source)
        self.reason = reason
        message = f"Could not read {self.source}"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class IndexPhaseError(RuntimeError):
    """Index mutated after the build finished, or searched before it did."""
