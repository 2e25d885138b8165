from __future__ import annotations

import json
from pathlib import Path
from typing import Iterable, Optional

from jinja2 import Environment, select_autoescape

from .catalog import ReferenceCatalog
from .types import UNKNOWN_LICENSE, ClassificationResult, LicenseRecord


env = Environment(autoescape=select_autoescape(["html", "xml"]))

APPROVED_BANNER = "========= APPROVED LICENSES        =========="
NOT_APPROVED_BANNER = "========= NOT APPROVED LICENSES    =========="


def format_record(record: LicenseRecord) -> str:
    return f"name: {record.package_name} , version: {record.version} , licenses: {record.license}"


def _url(catalog: Optional[ReferenceCatalog], license_name: str) -> Optional[str]:
    if catalog is None:
        return None
    if license_name == UNKNOWN_LICENSE or license_name in catalog:
        return catalog.url_for(license_name)
    return None


def _rows(records: Iterable[LicenseRecord], catalog: Optional[ReferenceCatalog]) -> Iterable[dict]:
    for record in records:
        row = record.as_dict()
        row["url"] = _url(catalog, record.license)
        yield row


def _markdown_url(url: Optional[str]) -> str:
    if url is None:
        return "None"
    return url or "-"


def _section(banner: str, records: Iterable[LicenseRecord]) -> list[str]:
    return [banner, *(format_record(record) for record in records), banner]


def render_text(result: ClassificationResult) -> str:
    lines = _section(APPROVED_BANNER, result.approved)
    lines.extend(_section(NOT_APPROVED_BANNER, result.not_approved))
    return "\n".join(lines)


def render_json(result: ClassificationResult, catalog: Optional[ReferenceCatalog] = None) -> str:
    payload = {
        "passed": result.passed,
        "counts": result.counts,
        "approved": list(_rows(result.approved, catalog)),
        "not_approved": list(_rows(result.not_approved, catalog)),
    }
    return json.dumps(payload, indent=2)


def render_markdown(result: ClassificationResult, catalog: Optional[ReferenceCatalog] = None) -> str:
    lines = [
        "# License Report",
        "",
        f"Approved: {len(result.approved)}",
        f"Not approved: {len(result.not_approved)}",
    ]
    for title, records in (("Approved licenses", result.approved), ("Not approved licenses", result.not_approved)):
        lines.append(f"\n## {title}\n")
        lines.append("| Name | Version | License | URL |")
        lines.append("| --- | --- | --- | --- |")
        for row in _rows(records, catalog):
            lines.append(f"| {row['name']} | {row['version']} | {row['license']} | {_markdown_url(row['url'])} |")
    return "\n".join(lines)


def render_html(result: ClassificationResult, catalog: Optional[ReferenceCatalog] = None) -> str:
    template = env.from_string(
        """
<!doctype html>
<html lang=\"en\">
<head>
  <meta charset=\"utf-8\" />
  <title>License Report</title>
  <style>
    body { font-family: Arial, sans-serif; margin: 2rem; }
    h1, h2 { color: #1f2937; }
    table { border-collapse: collapse; width: 100%; margin-bottom: 1.5rem; }
    th, td { border: 1px solid #d1d5db; padding: 0.5rem; }
    th { background: #f3f4f6; text-align: left; }
    .badge { display: inline-block; padding: 0.35rem 0.6rem; border-radius: 0.4rem; font-weight: 600; }
    .badge.good { background: #d1fae5; color: #065f46; }
    .badge.bad { background: #fee2e2; color: #991b1b; }
  </style>
</head>
<body>
  <h1>License Report</h1>
  <p>
    <span class=\"badge good\">{{ counts.approved }} approved</span>
    <span class=\"badge {{ 'bad' if counts.not_approved else 'good' }}\">{{ counts.not_approved }} not approved</span>
  </p>
  {% for title, rows in sections %}
  <section>
    <h2>{{ title }}</h2>
    <table>
      <thead><tr><th>Name</th><th>Version</th><th>License</th><th>URL</th></tr></thead>
      <tbody>
        {% for row in rows %}
        <tr>
          <td>{{ row.name }}</td>
          <td>{{ row.version }}</td>
          <td>{{ row.license }}</td>
          <td>{% if row.url and row.url != 'UNKNOWN' %}<a href=\"{{ row.url }}\">{{ row.url }}</a>{% else %}None{% endif %}</td>
        </tr>
        {% endfor %}
      </tbody>
    </table>
  </section>
  {% endfor %}
</body>
</html>
"""
    )

    return template.render(
        counts=result.counts,
        sections=[
            ("Approved licenses", list(_rows(result.approved, catalog))),
            ("Not approved licenses", list(_rows(result.not_approved, catalog))),
        ],
    )


def render_report(result: ClassificationResult, fmt: str, catalog: Optional[ReferenceCatalog] = None) -> str:
    fmt = fmt.lower()
    if fmt == "text":
        return render_text(result)
    if fmt == "json":
        return render_json(result, catalog)
    if fmt in {"md", "markdown"}:
        return render_markdown(result, catalog)
    if fmt == "html":
        return render_html(result, catalog)
    raise ValueError(f"Unknown report format: {fmt}")


def write_report(
    result: ClassificationResult,
    fmt: str,
    destination: Path | None,
    catalog: Optional[ReferenceCatalog] = None,
) -> str:
    output = render_report(result, fmt, catalog)
    if destination:
        destination.parent.mkdir(parents=True, exist_ok=True)
        destination.write_text(output)
    return output
