"""
Output identifier allocation.

The serializer refers to every node and edge by a short numeric label
instead of its IRI. Labels are handed out lazily: an entity receives the
next number the first time anyone asks for it, and keeps it for the rest
of the run.
"""

import logging
from typing import Dict

from ..constants import IRIConfig
from ..shared.models import AbstractEntity

logger = logging.getLogger(__name__)


class IdentifierAllocator:
    """
    Assign stable, sequential output identifiers to entities.

    Entities are keyed by identity. Numbers follow first-request order,
    are shared across all entity kinds, and are never reused.

    Example:
        >>> allocator = IdentifierAllocator()
        >>> allocator.id_for(datatype)
        '0'
        >>> allocator.id_for(klass)
        '1'
        >>> allocator.id_for(datatype)
        '0'
    """

    def __init__(self, start: int = IRIConfig.FIRST_OUTPUT_ID) -> None:
        self._start = start
        self._ids: Dict[AbstractEntity, str] = {}

    def id_for(self, entity: AbstractEntity) -> str:
        """Return the output identifier of ``entity``, assigning one if needed."""
        existing = self._ids.get(entity)
        if existing is not None:
            return existing

        assigned = str(self._start + len(self._ids))
        self._ids[entity] = assigned
        logger.debug(f"Assigned output id {assigned} to {entity.iri}")
        return assigned

    def __contains__(self, entity: object) -> bool:
        return entity in self._ids

    def __len__(self) -> int:
        return len(self._ids)
