from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, Optional

try:  # Python < 3.11 compatibility
    import tomllib  # type: ignore
except ModuleNotFoundError:  # pragma: no cover - exercised in older runtimes
    import tomli as tomllib  # type: ignore

import yaml

from .log import get_logger

log = get_logger(__name__)

CONFIG_FILENAMES = (".license-reporter.yml", ".license-reporter.yaml")
PYPROJECT_TABLE = "license-reporter"


class ConfigError(ValueError):
    """Raised when a configuration file has an unexpected shape."""


@dataclass
class Settings:
    canonical_names: Optional[dict[str, list[str]]] = None
    catalog_path: Optional[Path] = None
    fail_on_not_approved: bool = False


def _canonical_names(raw: Any) -> Optional[dict[str, list[str]]]:
    if raw is None:
        return None
    if not isinstance(raw, Mapping):
        raise ConfigError("canonical_names must map canonical names to lists of aliases")
    names: dict[str, list[str]] = {}
    for canonical, aliases in raw.items():
        if isinstance(aliases, str):
            aliases = [aliases]
        if not isinstance(aliases, list):
            raise ConfigError(f"Aliases for {canonical!r} must be a list of strings")
        names[str(canonical)] = [str(alias) for alias in aliases]
    return names


def settings_from_mapping(raw: Mapping[str, Any], base_dir: Path | None = None) -> Settings:
    catalog = raw.get("catalog")
    catalog_path = None
    if catalog:
        catalog_path = Path(str(catalog))
        if base_dir is not None and not catalog_path.is_absolute():
            catalog_path = base_dir / catalog_path

    return Settings(
        canonical_names=_canonical_names(raw.get("canonical_names", raw.get("canonical-names"))),
        catalog_path=catalog_path,
        fail_on_not_approved=bool(raw.get("fail_on_not_approved", raw.get("fail-on-not-approved", False))),
    )


def load_config(path: Path) -> Settings:
    if path.name == "pyproject.toml":
        try:
            data = tomllib.loads(path.read_text())
        except tomllib.TOMLDecodeError as exc:
            raise ConfigError(f"Unable to parse {path}: {exc}") from exc
        raw = data.get("tool", {}).get(PYPROJECT_TABLE, {})
    else:
        try:
            raw = yaml.safe_load(path.read_text()) or {}
        except yaml.YAMLError as exc:
            raise ConfigError(f"Unable to parse {path}: {exc}") from exc

    if not isinstance(raw, Mapping):
        raise ConfigError(f"{path} must contain a mapping of settings")
    log.debug("Loaded settings from %s", path)
    return settings_from_mapping(raw, base_dir=path.parent)


def find_config(directory: Path) -> Optional[Path]:
    for name in CONFIG_FILENAMES:
        candidate = directory / name
        if candidate.exists():
            return candidate

    pyproject = directory / "pyproject.toml"
    if pyproject.exists():
        try:
            data = tomllib.loads(pyproject.read_text())
        except tomllib.TOMLDecodeError:
            log.debug("Ignoring unparsable %s during config discovery", pyproject)
            return None
        if PYPROJECT_TABLE in data.get("tool", {}):
            return pyproject
    return None
