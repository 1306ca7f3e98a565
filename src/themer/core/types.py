"""Core value types for override resolution.

- ``ResourceType``: the resource classes a theme can provide.
- ``Source``: provenance tag of a resolved resource.
- ``ResolvedResource``: one winning file and where it came from.
- ``ResourceCatalog``: name -> ResolvedResource built from a theme listing
  and a user listing, user entries replacing theme entries of the same name.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Tuple


class ResourceType(str, Enum):
    """Managed resource classes.

    The value is the key used in override-path mappings and theme ``paths``.
    """

    TEMPLATE = "layouts"
    PARTIAL = "partials"
    DATA = "data"
    FEATURE = "features"
    STATIC_ASSET = "public"
    STYLE = "styles"
    SCRIPT = "scripts"

    @classmethod
    def from_key(cls, key: str) -> "ResourceType":
        """Look up a type by config key or member name (``"public"``, ``"static_asset"``)."""
        for member in cls:
            if key == member.value or key.upper() == member.name:
                return member
        raise ValueError(f"Unknown resource type: {key!r}")


class Source(str, Enum):
    """Where a resolved resource came from."""

    THEME = "theme"
    USER = "user"
    # Both locations had the name and the user's copy won.
    OVERRIDE = "override"


@dataclass(frozen=True)
class ResolvedResource:
    name: str
    path: Path
    source: Source

    @property
    def is_user_provided(self) -> bool:
        return self.source is not Source.THEME

    def to_dict(self) -> Dict[str, str]:
        return {"name": self.name, "path": str(self.path), "source": self.source.value}


class ResourceCatalog(Mapping[str, ResolvedResource]):
    """Read-only, insertion-ordered catalog of resolved resources."""

    __slots__ = ("_items",)

    def __init__(self, items: Iterable[ResolvedResource] = ()) -> None:
        self._items: Dict[str, ResolvedResource] = {}
        for item in items:
            self._items[item.name] = item

    @classmethod
    def merge(
        cls,
        theme_listing: Iterable[Tuple[str, Path]],
        user_listing: Iterable[Tuple[str, Path]],
    ) -> "ResourceCatalog":
        """Build a catalog from (name, path) pairs.

        Theme entries go in first; a user entry replaces a theme entry of the
        same name and is tagged ``override``, otherwise ``user``.
        """
        items: Dict[str, ResolvedResource] = {}
        for name, path in theme_listing:
            items[name] = ResolvedResource(name=name, path=Path(path), source=Source.THEME)
        for name, path in user_listing:
            source = Source.OVERRIDE if name in items else Source.USER
            items[name] = ResolvedResource(name=name, path=Path(path), source=source)
        return cls(items.values())

    def __getitem__(self, name: str) -> ResolvedResource:
        return self._items[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        inner = ", ".join(f"{n}={r.source.value}" for n, r in self._items.items())
        return f"ResourceCatalog({inner})"

    def names(self) -> List[str]:
        return list(self._items)

    def by_source(self, *sources: Source) -> "ResourceCatalog":
        """Return the sub-catalog whose entries carry one of ``sources``."""
        wanted = set(sources)
        return ResourceCatalog(r for r in self._items.values() if r.source in wanted)

    def to_dict(self) -> Dict[str, Dict[str, Any]]:
        return {name: item.to_dict() for name, item in self._items.items()}


__all__ = ["ResourceType", "Source", "ResolvedResource", "ResourceCatalog"]
