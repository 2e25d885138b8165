from __future__ import annotations

import json
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Any, List, Mapping, Optional

from .canonical_name import AliasResolver, create_resolver
from .log import get_logger
from .types import UNKNOWN_LICENSE, LicenseRecord

log = get_logger(__name__)

LICENSE_SEPARATOR = ", "


class ManifestError(ValueError):
    """Raised when a manifest does not have the expected dependency shape."""


def _as_list(value: Any) -> list:
    if value is None:
        return []
    if isinstance(value, list):
        return value
    return [value]


def _text(element: ET.Element, tag: str) -> Optional[str]:
    child = element.find(tag)
    if child is None or child.text is None:
        return None
    return child.text.strip()


def parse_manifest_xml(text: str) -> dict:
    """Convert a license manifest XML document into the nested mapping shape.

    ``<dependencies>`` may be the document root or a direct child of it. The
    result mirrors the XML: ``{"dependencies": {"dependency": [...]}}`` with
    each entry carrying ``packageName``, ``version`` and
    ``licenses.license[].{name,url}``.
    """

    try:
        root = ET.fromstring(text)
    except ET.ParseError as exc:
        raise ManifestError(f"Unable to parse manifest XML: {exc}") from exc

    container = root if root.tag == "dependencies" else root.find("dependencies")
    if container is None:
        return {"dependencies": {"dependency": []}}

    dependencies = []
    for node in container.findall("dependency"):
        licenses = []
        for license_node in node.findall("licenses/license"):
            licenses.append({"name": _text(license_node, "name"), "url": _text(license_node, "url") or ""})
        dependencies.append(
            {
                "packageName": _text(node, "packageName"),
                "version": _text(node, "version"),
                "licenses": {"license": licenses},
            }
        )
    return {"dependencies": {"dependency": dependencies}}


def load_manifest(path: Path) -> dict:
    text = path.read_text()
    if path.suffix.lower() == ".json":
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise ManifestError(f"Unable to parse manifest JSON: {exc}") from exc
        if not isinstance(data, dict):
            raise ManifestError("Manifest JSON must be an object")
        return data
    return parse_manifest_xml(text)


def _license_names(entry: Mapping[str, Any]) -> List[str]:
    licenses = entry.get("licenses") or {}
    if not isinstance(licenses, Mapping):
        raise ManifestError(f"licenses for {entry.get('packageName')!r} must be an object")
    names = []
    for descriptor in _as_list(licenses.get("license")):
        name = descriptor.get("name") if isinstance(descriptor, Mapping) else descriptor
        if name:
            names.append(str(name))
    return names


def extract_records(
    manifest: Mapping[str, Any], resolver: Optional[AliasResolver] = None
) -> List[LicenseRecord]:
    """Flatten ``manifest`` into one LicenseRecord per dependency entry.

    Each declared license name is resolved on its own and the canonical names
    are joined with ``", "``, so a multi-license package carries one combined
    string. Without a resolver names are kept as declared.
    """

    if resolver is None:
        resolver = create_resolver()
    dependencies = manifest.get("dependencies") or {}
    if not isinstance(dependencies, Mapping):
        raise ManifestError("'dependencies' must be an object holding a 'dependency' list")

    records: List[LicenseRecord] = []
    for entry in _as_list(dependencies.get("dependency")):
        if not isinstance(entry, Mapping) or not entry.get("packageName"):
            raise ManifestError(f"Dependency entry is missing packageName: {entry!r}")
        names = [resolver.resolve(name) for name in _license_names(entry)]
        license_value = LICENSE_SEPARATOR.join(names) if names else UNKNOWN_LICENSE
        records.append(
            LicenseRecord(
                package_name=str(entry["packageName"]),
                version=str(entry.get("version") or ""),
                license=license_value,
            )
        )

    log.debug("Extracted %d license records", len(records))
    return records
