"""Reference catalog of canonical license names.

The catalog (the "unified list") maps each canonical name to an approval flag
and a reference URL. A copy ships with the package; teams can point the CLI
at their own JSON or YAML file with the same shape.
"""

from __future__ import annotations

import json
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Iterator, Mapping, Optional

import yaml

from .log import get_logger
from .types_licenses import APPROVED_FLAG, UNKNOWN_LICENSE, CatalogEntry

log = get_logger(__name__)

DEFAULT_CATALOG_RESOURCE = "default-unifiedlist.json"


class CatalogError(ValueError):
    """Raised when a catalog dataset cannot be parsed."""


class UnregisteredLicenseError(LookupError):
    """A canonical name has no catalog entry, so it has no URL either."""

    def __init__(self, name: str) -> None:
        super().__init__(f"No URL was found for [{name}]")
        self.name = name


class ReferenceCatalog:
    def __init__(self, entries: Mapping[str, CatalogEntry]) -> None:
        self._entries = dict(entries)

    @classmethod
    def from_mapping(cls, raw: Mapping[str, object]) -> "ReferenceCatalog":
        entries: dict[str, CatalogEntry] = {}
        for key, value in raw.items():
            if not isinstance(value, Mapping):
                raise CatalogError(f"Catalog entry for {key!r} must be a mapping, got {type(value).__name__}")
            approved = value.get("approved")
            if approved is True:  # unquoted YAML `yes`
                approved = APPROVED_FLAG
            entries[str(key)] = CatalogEntry(
                name=str(value.get("name") or key),
                approved=str(approved or ""),
                url=str(value.get("url") or ""),
            )
        return cls(entries)

    def get(self, name: str) -> Optional[CatalogEntry]:
        return self._entries.get(name)

    def url_for(self, canonical_name: str) -> str:
        """Return the reference URL registered for ``canonical_name``.

        The ``UNKNOWN`` sentinel passes straight through since it marks a
        failed alias resolution upstream. Any other name missing from the
        catalog raises ``UnregisteredLicenseError``.
        """

        if canonical_name == UNKNOWN_LICENSE:
            return UNKNOWN_LICENSE
        entry = self._entries.get(canonical_name)
        if entry is None:
            raise UnregisteredLicenseError(canonical_name)
        return entry.url

    def is_approved(self, name: str) -> bool:
        entry = self._entries.get(name)
        return bool(entry and entry.is_approved)

    def names(self) -> frozenset[str]:
        return frozenset(self._entries)

    def approved_names(self) -> frozenset[str]:
        return frozenset(key for key, entry in self._entries.items() if entry.is_approved)

    def not_approved_names(self) -> frozenset[str]:
        return frozenset(key for key, entry in self._entries.items() if not entry.is_approved)

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __iter__(self) -> Iterator[CatalogEntry]:
        return iter(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)


def _parse_catalog_text(text: str, suffix: str) -> Mapping[str, object]:
    try:
        if suffix in {".yml", ".yaml"}:
            raw = yaml.safe_load(text) or {}
        else:
            raw = json.loads(text)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise CatalogError(f"Unable to parse catalog: {exc}") from exc
    if not isinstance(raw, Mapping):
        raise CatalogError("Catalog must be a mapping of license name to entry")
    return raw


def load_catalog(path: Path) -> ReferenceCatalog:
    catalog = ReferenceCatalog.from_mapping(_parse_catalog_text(path.read_text(), path.suffix.lower()))
    log.debug("Loaded %d catalog entries from %s", len(catalog), path)
    return catalog


@lru_cache(maxsize=1)
def default_catalog() -> ReferenceCatalog:
    bundled = resources.files("license_reporter").joinpath("resources").joinpath(DEFAULT_CATALOG_RESOURCE)
    text = bundled.read_text(encoding="utf-8")
    catalog = ReferenceCatalog.from_mapping(_parse_catalog_text(text, ".json"))
    log.debug("Loaded %d bundled catalog entries", len(catalog))
    return catalog
