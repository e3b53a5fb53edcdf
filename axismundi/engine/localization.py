"""Label resolution seam for presentation code."""

from typing import Mapping, Protocol


class Localizer(Protocol):
    """Resolves a label key to display text."""

    def localize(self, key: str) -> str: ...


class KeyLocalizer:
    """Returns label keys unchanged, or their entry in an optional catalog."""

    def __init__(self, catalog: Mapping[str, str] | None = None) -> None:
        self._catalog = dict(catalog or {})

    def localize(self, key: str) -> str:
        return self._catalog.get(key, key)
