from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

UNKNOWN_LICENSE = "UNKNOWN"
APPROVED_FLAG = "yes"


@dataclass(frozen=True)
class LicenseRecord:
    """One manifest dependency with its (canonical) license string.

    Records are hashable so identical package/version/license triples
    collapse when classified.
    """

    package_name: str
    version: str
    license: str

    def as_dict(self) -> dict:
        return {"name": self.package_name, "version": self.version, "license": self.license}


@dataclass(frozen=True)
class CatalogEntry:
    name: str
    approved: str = ""
    url: str = ""

    @property
    def is_approved(self) -> bool:
        return self.approved == APPROVED_FLAG


@dataclass
class ClassificationResult:
    approved: List[LicenseRecord] = field(default_factory=list)
    not_approved: List[LicenseRecord] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return not self.not_approved

    @property
    def counts(self) -> dict[str, int]:
        return {"approved": len(self.approved), "not_approved": len(self.not_approved)}

    def records(self) -> List[LicenseRecord]:
        return [*self.approved, *self.not_approved]
