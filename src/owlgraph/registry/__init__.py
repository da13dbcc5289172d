"""
Entity registry package.

Usage:
    from owlgraph.registry import EntityRegistry, EntityNotFoundError

    registry = EntityRegistry()
    registry.add_class(vowl_class)
    node = registry.get_node_for_iri(vowl_class.iri)
"""

from .allocator import IdentifierAllocator
from .config import RegistryConfig
from .entity_registry import EntityRegistry
from .errors import (
    DuplicateEntityError,
    EntityKindMismatchError,
    EntityNotFoundError,
    RegistryError,
)
from .iri_generator import SyntheticIriGenerator
from .languages import LanguageTagSet
from .tables import DuplicatePolicy, TypedEntityTable

__all__ = [
    'EntityRegistry',
    'RegistryConfig',
    'TypedEntityTable',
    'DuplicatePolicy',
    'IdentifierAllocator',
    'SyntheticIriGenerator',
    'LanguageTagSet',
    'RegistryError',
    'EntityNotFoundError',
    'EntityKindMismatchError',
    'DuplicateEntityError',
]
