"""Read-only catalog of named colors."""

from __future__ import annotations

from typing import Iterable, Iterator

from x11_colors.core.color import ColorEntry, RGB

_ASCII_LOWER = str.maketrans("ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz")


def ascii_fold(name: str) -> str:
    """Lowercase ASCII letters only, leaving every other character alone."""
    return name.translate(_ASCII_LOWER)


class CatalogError(ValueError):
    """Raised when a color table cannot be parsed."""


class ColorCatalog:
    """
    Immutable name to RGB mapping.

    Names keep the order they were added in. Lookups ignore ASCII case;
    when two names fold to the same key the first one answers lookups.
    """

    def __init__(self, entries: Iterable[tuple[str, RGB]] = ()):
        self._names: list[str] = []
        self._index: dict[str, RGB] = {}
        for name, rgb in entries:
            self._names.append(name)
            self._index.setdefault(ascii_fold(name), rgb)

    @classmethod
    def from_mapping(cls, mapping: dict[str, tuple[int, int, int]]) -> ColorCatalog:
        """Build a catalog from ``{name: (r, g, b)}``."""
        return cls((name, RGB(*rgb)) for name, rgb in mapping.items())

    def keys(self) -> list[str]:
        return list(self._names)

    def get(self, name: str) -> RGB:
        """Look up a color by name, ignoring ASCII case. Raises KeyError on a miss."""
        try:
            return self._index[ascii_fold(name)]
        except KeyError:
            raise KeyError(name) from None

    def entry(self, name: str) -> ColorEntry:
        return ColorEntry(name, self.get(name))

    def entries(self, names: Iterable[str]) -> Iterator[ColorEntry]:
        """Yield a ColorEntry for each name, in the order given."""
        for name in names:
            yield self.entry(name)

    def __getitem__(self, name: str) -> RGB:
        return self.get(name)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and ascii_fold(name) in self._index

    def __iter__(self) -> Iterator[str]:
        return iter(self._names)

    def __len__(self) -> int:
        return len(self._names)

    def __repr__(self) -> str:
        return f"ColorCatalog({len(self._names)} colors)"
