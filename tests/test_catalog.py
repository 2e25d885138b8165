from pathlib import Path

import pytest

from license_reporter.catalog import (
    CatalogError,
    ReferenceCatalog,
    UnregisteredLicenseError,
    default_catalog,
    load_catalog,
)


def test_url_for_known_names():
    catalog = default_catalog()
    assert catalog.url_for("3dfx Glide License") == "http://www.users.on.net/~triforce/glidexp/COPYING.txt"
    assert catalog.url_for("4Suite Copyright License") == ""


def test_url_for_unknown_sentinel_passes_through():
    assert default_catalog().url_for("UNKNOWN") == "UNKNOWN"


def test_url_for_unregistered_name_raises():
    with pytest.raises(UnregisteredLicenseError, match=r"No URL was found for \[bogus\]"):
        default_catalog().url_for("bogus")

    with pytest.raises(LookupError):
        default_catalog().url_for("mit")


def test_default_catalog_approval_flags():
    catalog = default_catalog()
    assert catalog.is_approved("MIT")
    assert not catalog.is_approved("9wm License (Original)")
    assert not catalog.is_approved("not in the list")
    assert "MIT" in catalog.approved_names()
    assert "9wm License (Original)" in catalog.not_approved_names()
    assert catalog.approved_names().isdisjoint(catalog.not_approved_names())
    assert catalog.approved_names() | catalog.not_approved_names() == catalog.names()


def test_default_catalog_is_loaded_once():
    assert default_catalog() is default_catalog()


def test_only_literal_yes_counts_as_approved():
    catalog = ReferenceCatalog.from_mapping(
        {
            "A": {"approved": "yes", "url": "https://a.example"},
            "B": {"approved": "Yes"},
            "C": {"approved": "true"},
            "D": {},
        }
    )
    assert catalog.approved_names() == {"A"}
    assert catalog.url_for("D") == ""


def test_load_catalog_from_yaml(tmp_path: Path):
    path = tmp_path / "unified.yml"
    path.write_text(
        """
In-House License:
  approved: "yes"
  url: https://licenses.example/in-house
Vendor EULA:
  approved: "no"
  url: ""
Team Approved License:
  approved: yes
"""
    )

    catalog = load_catalog(path)
    assert len(catalog) == 3
    assert catalog.url_for("In-House License") == "https://licenses.example/in-house"
    assert catalog.not_approved_names() == {"Vendor EULA"}
    assert catalog.approved_names() == {"In-House License", "Team Approved License"}
    assert catalog.get("Team Approved License").approved == "yes"


def test_load_catalog_rejects_malformed_entries(tmp_path: Path):
    path = tmp_path / "broken.json"
    path.write_text('{"MIT": "yes"}')
    with pytest.raises(CatalogError):
        load_catalog(path)

    path.write_text("[1, 2, 3]")
    with pytest.raises(CatalogError):
        load_catalog(path)

    path.write_text("{not json")
    with pytest.raises(CatalogError):
        load_catalog(path)
