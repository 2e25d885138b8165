"""Split license records into approved and not-approved groups.

Matching is exact string equality against catalog keys. Aliases must already
be applied by the extractor, so a multi-license record (``"MIT, ISC"``) only
matches a catalog key spelled exactly that way.

Results behave like insertion-ordered sets: records with identical
package, version and license collapse into one.
"""

from __future__ import annotations

from typing import AbstractSet, Callable, Iterable, List, Optional

from .catalog import ReferenceCatalog
from .log import get_logger
from .types import ClassificationResult, LicenseRecord

log = get_logger(__name__)

Predicate = Callable[[str, AbstractSet[str]], bool]


def _member(license_name: str, names: AbstractSet[str]) -> bool:
    return license_name in names


def partition(
    records: Iterable[LicenseRecord], names: AbstractSet[str], predicate: Predicate = _member
) -> List[LicenseRecord]:
    selected = dict.fromkeys(record for record in records if predicate(record.license, names))
    return list(selected)


def find_approved(records: Iterable[LicenseRecord], approved_names: AbstractSet[str]) -> List[LicenseRecord]:
    return partition(records, approved_names)


def find_not_approved(
    records: Iterable[LicenseRecord],
    not_approved_names: AbstractSet[str],
    known_names: Optional[AbstractSet[str]] = None,
) -> List[LicenseRecord]:
    """Return records whose license is listed as not approved.

    When ``known_names`` holds every catalog key, licenses the catalog has
    never heard of (``UNKNOWN`` included) count as not approved too.
    """

    def _not_approved(license_name: str, names: AbstractSet[str]) -> bool:
        if license_name in names:
            return True
        return known_names is not None and license_name not in known_names

    return partition(records, not_approved_names, _not_approved)


def classify(records: Iterable[LicenseRecord], catalog: ReferenceCatalog) -> ClassificationResult:
    records = list(records)
    approved = find_approved(records, catalog.approved_names())
    not_approved = find_not_approved(records, catalog.not_approved_names(), known_names=catalog.names())
    log.debug("Classified %d records: %d approved, %d not approved", len(records), len(approved), len(not_approved))
    return ClassificationResult(approved=approved, not_approved=not_approved)
