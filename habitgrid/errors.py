# habitgrid/errors.py
from __future__ import annotations

from dataclasses import dataclass


class InvalidArgument(ValueError):
    """Raised when a mandatory argument (e.g. the snapshot mapping) is missing."""


class InvalidDate(ValueError):
    """Raised by the strict date parsers for strings without the expected separator."""


class SnapshotValidationError(ValueError):
    """Raised when a snapshot fails validation."""


class SurfaceMarkupError(ValueError):
    """Raised when form markup lacks the structure a surface needs."""


@dataclass
class HtmlSnapshotExtractError(RuntimeError):
    message: str
    def __str__(self) -> str:
        return self.message


__all__ = [
    "HtmlSnapshotExtractError",
    "InvalidArgument",
    "InvalidDate",
    "SnapshotValidationError",
    "SurfaceMarkupError",
]
