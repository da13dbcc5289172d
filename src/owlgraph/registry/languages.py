"""Language tags observed on literal values."""

from typing import FrozenSet, Set


class LanguageTagSet:
    """Accumulate the distinct language tags seen during ingestion."""

    def __init__(self) -> None:
        self._tags: Set[str] = set()

    def add(self, tag: str) -> None:
        self._tags.add(tag)

    def all(self) -> FrozenSet[str]:
        """Return a snapshot of the collected tags."""
        return frozenset(self._tags)

    def __contains__(self, tag: object) -> bool:
        return tag in self._tags

    def __len__(self) -> int:
        return len(self._tags)
