"""
Typed entity tables.

Each entity kind has its own table mapping IRI to entity. A table knows
nothing about the unified view; the registry performs the write-through.
"""

import logging
from enum import Enum
from types import MappingProxyType
from typing import Dict, Generic, Iterator, Mapping, Optional, TypeVar, ValuesView

from rdflib import URIRef

from ..shared.models import AbstractEntity
from .errors import DuplicateEntityError

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=AbstractEntity)


class DuplicatePolicy(str, Enum):
    """What a table does when an IRI it already holds is inserted again."""
    OVERWRITE = "overwrite"
    WARN = "warn"
    REJECT = "reject"

    def __str__(self) -> str:
        return self.value


class TypedEntityTable(Generic[E]):
    """
    IRI-keyed table for one entity kind.

    Attributes:
        kind: Human-readable kind name used in diagnostics.
        policy: Duplicate insertion policy.
    """

    def __init__(self, kind: str, policy: DuplicatePolicy = DuplicatePolicy.OVERWRITE) -> None:
        self.kind = kind
        self.policy = policy
        self._entries: Dict[URIRef, E] = {}

    def put(self, iri: URIRef, entity: E) -> E:
        """
        Insert ``entity`` under ``iri``.

        Raises:
            DuplicateEntityError: If the IRI is present and the policy is REJECT.
        """
        if iri in self._entries:
            self.check_duplicate(iri)
        self._entries[iri] = entity
        return entity

    def check_duplicate(self, iri: URIRef) -> None:
        """Apply the duplicate policy to an IRI that is about to be replaced."""
        if self.policy is DuplicatePolicy.REJECT:
            raise DuplicateEntityError(self.kind, str(iri))
        if self.policy is DuplicatePolicy.WARN:
            logger.warning(f"Redefinition of {self.kind} {iri}; keeping the latest definition")

    def get(self, iri: URIRef) -> Optional[E]:
        return self._entries.get(iri)

    def values(self) -> ValuesView[E]:
        return self._entries.values()

    def view(self) -> Mapping[URIRef, E]:
        """Return a read-only view that reflects later insertions."""
        return MappingProxyType(self._entries)

    def __contains__(self, iri: object) -> bool:
        return iri in self._entries

    def __iter__(self) -> Iterator[URIRef]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)
