from __future__ import annotations

"""Shared data structures for license classification.

The dataclasses live in ``types_licenses`` and are re-exported here so the
public import path stays stable as the model grows.
"""

from .types_licenses import (
    APPROVED_FLAG,
    UNKNOWN_LICENSE,
    CatalogEntry,
    ClassificationResult,
    LicenseRecord,
)

__all__ = [
    "APPROVED_FLAG",
    "UNKNOWN_LICENSE",
    "CatalogEntry",
    "ClassificationResult",
    "LicenseRecord",
]
