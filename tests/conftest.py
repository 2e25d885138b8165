import sys
from pathlib import Path

import pytest

# Ensure src package is importable without installation
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if SRC.exists():
    sys.path.insert(0, str(SRC))


MANIFEST_XML = """<?xml version="1.0" encoding="UTF-8"?>
<dependencies>
  <dependency>
    <packageName>testProject</packageName>
    <version>1.0.0</version>
    <licenses>
      <license>
        <name>MIT</name>
        <url>...</url>
      </license>
    </licenses>
  </dependency>
  <dependency>
    <packageName>notApproved</packageName>
    <version>2.0.0</version>
    <licenses>
      <license>
        <name>9wm License (Original)</name>
        <url>...</url>
      </license>
    </licenses>
  </dependency>
</dependencies>
"""


@pytest.fixture
def manifest_object() -> dict:
    return {
        "dependencies": {
            "dependency": [
                {
                    "packageName": "testProject",
                    "version": "1.0.0",
                    "licenses": {"license": [{"name": "MIT", "url": "..."}]},
                },
                {
                    "packageName": "notApproved",
                    "version": "2.0.0",
                    "licenses": {"license": [{"name": "9wm License (Original)", "url": "..."}]},
                },
            ]
        }
    }


@pytest.fixture
def manifest_xml() -> str:
    return MANIFEST_XML
