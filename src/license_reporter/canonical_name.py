"""Alias resolution for raw license names.

An alias config maps each canonical license name to the spellings that
manifests use for it::

    {"MIT": ["MIT License", "The MIT License", "Expat"]}

The resolver inverts that mapping once and answers exact, case-sensitive
lookups. Without a config it resolves every name to itself.
"""

from __future__ import annotations

from typing import Iterable, Mapping, Optional, Union

from .log import get_logger
from .types_licenses import UNKNOWN_LICENSE

log = get_logger(__name__)

AliasConfig = Mapping[str, Union[str, Iterable[str]]]


class AliasResolver:
    def __init__(self) -> None:
        self._table: Optional[dict[str, str]] = None

    def initialize(self, alias_config: Optional[AliasConfig]) -> "AliasResolver":
        """Rebuild the alias table from ``alias_config``.

        The previous table is discarded, never merged. ``None`` switches the
        resolver to identity mode.
        """

        if alias_config is None:
            self._table = None
            log.debug("Alias resolver initialized in identity mode")
            return self

        table: dict[str, str] = {}
        for canonical, aliases in alias_config.items():
            if isinstance(aliases, str):
                aliases = [aliases]
            for alias in aliases:
                previous = table.get(alias)
                if previous is not None and previous != canonical:
                    log.warning(
                        "Alias %r listed under both %r and %r; using %r", alias, previous, canonical, canonical
                    )
                table[alias] = canonical
        self._table = table
        log.debug("Alias resolver initialized with %d aliases", len(table))
        return self

    @property
    def is_identity(self) -> bool:
        return self._table is None

    def lookup(self, raw_name: str) -> Optional[str]:
        if self._table is None:
            return raw_name
        return self._table.get(raw_name)

    def resolve(self, raw_name: str) -> str:
        canonical = self.lookup(raw_name)
        if canonical is None:
            log.debug("No canonical name registered for %r", raw_name)
            return UNKNOWN_LICENSE
        return canonical

    def aliases_for(self, canonical: str) -> list[str]:
        if self._table is None:
            return [canonical]
        return [alias for alias, target in self._table.items() if target == canonical]

    def __contains__(self, raw_name: object) -> bool:
        if self._table is None:
            return isinstance(raw_name, str)
        return raw_name in self._table

    def __len__(self) -> int:
        return len(self._table or {})


def create_resolver(alias_config: Optional[AliasConfig] = None) -> AliasResolver:
    return AliasResolver().initialize(alias_config)
