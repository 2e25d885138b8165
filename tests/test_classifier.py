from license_reporter.catalog import ReferenceCatalog, default_catalog
from license_reporter.classifier import classify, find_approved, find_not_approved, partition
from license_reporter.manifest import extract_records
from license_reporter.types import LicenseRecord


CATALOG = ReferenceCatalog.from_mapping(
    {
        "MIT": {"approved": "yes", "url": "https://opensource.org/licenses/MIT"},
        "ISC License": {"approved": "yes", "url": ""},
        "9wm License (Original)": {"approved": "no", "url": ""},
        "JSON License": {"approved": "no", "url": ""},
    }
)


def test_find_approved_uses_bundled_catalog(manifest_object):
    records = extract_records(manifest_object)
    approved = find_approved(records, default_catalog().approved_names())
    assert [record.license for record in approved] == ["MIT"]


def test_find_not_approved_uses_bundled_catalog(manifest_object):
    records = extract_records(manifest_object)
    not_approved = find_not_approved(records, default_catalog().not_approved_names())
    assert [record.package_name for record in not_approved] == ["notApproved"]
    assert not_approved[0].license == "9wm License (Original)"


def test_classify_places_fixture_records(manifest_object):
    result = classify(extract_records(manifest_object), CATALOG)
    assert [record.package_name for record in result.approved] == ["testProject"]
    assert [record.package_name for record in result.not_approved] == ["notApproved"]
    assert not result.passed
    assert result.counts == {"approved": 1, "not_approved": 1}


def test_unknown_and_unlisted_licenses_are_not_approved():
    records = [
        LicenseRecord("a", "1.0.0", "UNKNOWN"),
        LicenseRecord("b", "1.0.0", "MIT, ISC License"),
        LicenseRecord("c", "1.0.0", "ISC License"),
    ]
    result = classify(records, CATALOG)
    assert [record.package_name for record in result.approved] == ["c"]
    assert [record.package_name for record in result.not_approved] == ["a", "b"]


def test_unknown_can_be_approved_when_catalog_lists_it():
    catalog = ReferenceCatalog.from_mapping({"UNKNOWN": {"approved": "yes"}})
    result = classify([LicenseRecord("a", "1.0.0", "UNKNOWN")], catalog)
    assert result.passed
    assert len(result.approved) == 1


def test_partitions_cover_distinct_records_without_overlap():
    records = [
        LicenseRecord("a", "1.0.0", "MIT"),
        LicenseRecord("b", "2.0.0", "JSON License"),
        LicenseRecord("c", "3.0.0", "UNKNOWN"),
        LicenseRecord("a", "1.0.0", "MIT"),
        LicenseRecord("d", "4.0.0", "ISC License"),
    ]
    result = classify(records, CATALOG)

    approved, not_approved = set(result.approved), set(result.not_approved)
    assert approved | not_approved == set(records)
    assert not approved & not_approved
    assert len(result.records()) == 4


def test_duplicate_records_collapse_and_keep_input_order():
    records = [
        LicenseRecord("z", "1.0.0", "MIT"),
        LicenseRecord("a", "1.0.0", "MIT"),
        LicenseRecord("z", "1.0.0", "MIT"),
    ]
    assert find_approved(records, {"MIT"}) == [records[0], records[1]]


def test_partition_accepts_custom_predicate():
    records = [LicenseRecord("a", "1", "MIT"), LicenseRecord("b", "1", "GPL")]
    outside = partition(records, {"MIT"}, lambda license_name, names: license_name not in names)
    assert outside == [records[1]]
