"""
Name registry mapping record labels to the identifiers they were stored under.
"""

from collections.abc import Iterator, Mapping
from typing import Any, Optional

from fixseed.utils.logging import get_logger

logger = get_logger(__name__)


class NameRegistry(Mapping[str, str]):
    """
    Label -> identifier mapping shared by every fixture of a seeding session.

    Identifiers are kept as text so they can be spliced into fixture files by
    ``REF`` tags. Registering a label twice overwrites the earlier identifier:
    labels must be unique across the whole session or later references will
    see the most recent record only.
    """

    def __init__(self, initial: Optional[Mapping[str, Any]] = None) -> None:
        self._names: dict[str, str] = {}
        if initial:
            for label, identifier in initial.items():
                self.insert(label, identifier)

    def insert(self, label: str, identifier: Any) -> None:
        """Register ``identifier`` (as text) under ``label``, replacing any previous entry."""
        previous = self._names.get(label)
        self._names[label] = str(identifier)
        if previous is not None:
            logger.debug(f"Label '{label}' re-registered: {previous} -> {self._names[label]}")

    def lookup(self, label: str) -> Optional[str]:
        return self._names.get(label)

    def snapshot(self) -> dict[str, str]:
        """Return a copy that later insertions do not affect."""
        return dict(self._names)

    def clear(self) -> None:
        self._names.clear()

    def __getitem__(self, label: str) -> str:
        return self._names[label]

    def __iter__(self) -> Iterator[str]:
        return iter(self._names)

    def __len__(self) -> int:
        return len(self._names)

    def __repr__(self) -> str:
        return f"NameRegistry({self._names!r})"
