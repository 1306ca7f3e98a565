"""Single-resource resolution with user-over-theme priority.

Resolution is whole-file: the first existing candidate wins and its content
is never merged with the other. The filesystem is consulted on every call so
results follow the live tree during watch/rebuild loops.
"""
from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Tuple

from themer.core.exceptions import ResourceNotFoundError
from themer.core.types import ResolvedResource, ResourceType, Source

from .paths import CandidatePaths, PathResolver

# (name, absolute path, source the path belongs to), in priority order
Candidate = Tuple[str, Path, Source]


def _not_found_message(resource_type: ResourceType, name: str, checked: Sequence[Path]) -> str:
    lines = "\n".join(f"  - {p}" for p in checked)
    return f'Resource "{name}" not found in {resource_type.value}\nChecked:\n{lines}'


class ResourceResolver:
    """Resolve named resources against a ``PathResolver``."""

    def __init__(self, path_resolver: PathResolver) -> None:
        self.path_resolver = path_resolver

    def paths(self, resource_type: ResourceType, name: str) -> CandidatePaths:
        return self.path_resolver.paths(resource_type, name)

    def candidates(self, resource_type: ResourceType, names: Iterable[str]) -> List[Candidate]:
        """Every user candidate for ``names``, then every theme candidate."""
        pairs = [(n, self.paths(resource_type, n)) for n in names]
        return [(n, p.user, Source.USER) for n, p in pairs] + [(n, p.theme, Source.THEME) for n, p in pairs]

    def first_existing(self, candidates: Iterable[Candidate]) -> Optional[ResolvedResource]:
        for name, path, source in candidates:
            if path.exists():
                return ResolvedResource(name=name, path=path, source=source)
        return None

    def require_first(
        self,
        resource_type: ResourceType,
        candidates: Sequence[Candidate],
        *,
        label: str,
        error_message: Optional[str] = None,
    ) -> ResolvedResource:
        """Like ``first_existing`` but raise when nothing exists.

        Raises:
            ResourceNotFoundError: Lists every checked path in the message and
                in ``context["checked"]``.
        """
        found = self.first_existing(candidates)
        if found is not None:
            return found

        checked = [path for _, path, _ in candidates]
        message = _not_found_message(resource_type, label, checked)
        if error_message:
            message = f"{error_message}\n\n{message}"
        raise ResourceNotFoundError(
            message,
            context={
                "resource_type": resource_type.value,
                "name": label,
                "checked": [str(p) for p in checked],
            },
        )

    def resolve(
        self,
        resource_type: ResourceType,
        name: str,
        *,
        strict: bool = False,
        error_message: Optional[str] = None,
    ) -> Optional[ResolvedResource]:
        """Return the winning file for ``name`` or None.

        Raises:
            ResourceNotFoundError: When ``strict`` and neither location has it.
                The message lists both checked paths.
        """
        return self.resolve_any(resource_type, [name], strict=strict, error_message=error_message)

    def resolve_any(
        self,
        resource_type: ResourceType,
        names: Iterable[str],
        *,
        strict: bool = False,
        error_message: Optional[str] = None,
    ) -> Optional[ResolvedResource]:
        """Resolve the first of several alternative names.

        Every user candidate is checked before any theme candidate, so a user
        file under any accepted name beats the theme.
        """
        names = list(names)
        candidates = self.candidates(resource_type, names)
        if strict:
            label = names[0] if names else ""
            return self.require_first(resource_type, candidates, label=label, error_message=error_message)
        return self.first_existing(candidates)

    def exists(self, resource_type: ResourceType, name: str) -> bool:
        return self.resolve(resource_type, name) is not None


__all__ = ["Candidate", "ResourceResolver"]
