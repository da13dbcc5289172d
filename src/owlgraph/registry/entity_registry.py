"""
Entity Registry Module

The registry is the shared state of one conversion run. The ontology loader
fills its typed tables; Thing synthesis and serialization then resolve
entities by IRI, enumerate them, and ask for their output identifiers.

Components:
- Typed tables for classes, datatypes, object properties, datatype
  properties, type-of properties and individuals
- A unified entity table kept in sync by write-through (individuals excluded)
- IdentifierAllocator: lazy, stable output identifiers
- SyntheticIriGenerator: IRIs for entities the converter invents
- LanguageTagSet: language tags seen on literals

View policy:
- ``get_*_map()`` return live read-only views; later insertions show up.
- ``get_properties()`` and ``get_languages()`` return frozen snapshots.
"""

import logging
from types import MappingProxyType
from typing import Dict, FrozenSet, Mapping, Optional

from rdflib import URIRef

from ..shared.models import (
    AbstractEntity,
    AbstractNode,
    AbstractProperty,
    TypeOfProperty,
    VowlClass,
    VowlDatatype,
    VowlDatatypeProperty,
    VowlIndividual,
    VowlObjectProperty,
)
from .allocator import IdentifierAllocator
from .config import RegistryConfig
from .errors import EntityKindMismatchError, EntityNotFoundError
from .iri_generator import SyntheticIriGenerator
from .languages import LanguageTagSet
from .tables import TypedEntityTable

logger = logging.getLogger(__name__)


class EntityRegistry:
    """
    In-memory index of every entity of one conversion run.

    Lookups are fail-fast: asking for an IRI the registry never received
    raises :class:`EntityNotFoundError` instead of returning a default.
    The registry is not thread-safe and is meant to be populated first and
    queried afterwards.

    Example:
        >>> registry = EntityRegistry()
        >>> registry.add_class(VowlClass(URIRef("http://ex#A")))
        >>> registry.get_id_for_iri(URIRef("http://ex#A"))
        '0'
    """

    def __init__(self, config: Optional[RegistryConfig] = None) -> None:
        self.config = config or RegistryConfig()
        policy = self.config.duplicate_policy

        self._entity_map: Dict[URIRef, AbstractEntity] = {}
        self._classes: TypedEntityTable[VowlClass] = TypedEntityTable("class", policy)
        self._datatypes: TypedEntityTable[VowlDatatype] = TypedEntityTable("datatype", policy)
        self._object_properties: TypedEntityTable[VowlObjectProperty] = TypedEntityTable(
            "object property", policy
        )
        self._datatype_properties: TypedEntityTable[VowlDatatypeProperty] = TypedEntityTable(
            "datatype property", policy
        )
        self._type_of_properties: TypedEntityTable[TypeOfProperty] = TypedEntityTable(
            "type-of property", policy
        )
        # Individuals are not graph elements and stay out of the unified table.
        self._individuals: TypedEntityTable[VowlIndividual] = TypedEntityTable("individual", policy)

        self._allocator = IdentifierAllocator()
        self._iri_generator = SyntheticIriGenerator(self.config.iri_prefix)
        self._languages = LanguageTagSet()

    # ------------------------------------------------------------------
    # Insertion
    # ------------------------------------------------------------------

    def _add_merged(self, table: TypedEntityTable, entity: AbstractEntity) -> None:
        """Insert into ``table`` and mirror the entry into the unified table."""
        iri = entity.iri
        if iri in self._entity_map and iri not in table:
            # Same IRI already registered under another kind.
            table.check_duplicate(iri)
        table.put(iri, entity)
        self._entity_map[iri] = entity
        logger.debug(f"Registered {table.kind} {iri}")

    def add_class(self, vowl_class: VowlClass) -> None:
        self._add_merged(self._classes, vowl_class)

    def add_datatype(self, datatype: VowlDatatype) -> None:
        self._add_merged(self._datatypes, datatype)

    def add_object_property(self, prop: VowlObjectProperty) -> None:
        self._add_merged(self._object_properties, prop)

    def add_datatype_property(self, prop: VowlDatatypeProperty) -> None:
        self._add_merged(self._datatype_properties, prop)

    def add_type_of_property(self, prop: TypeOfProperty) -> None:
        self._add_merged(self._type_of_properties, prop)

    def add_individual(self, individual: VowlIndividual) -> None:
        self._individuals.put(individual.iri, individual)
        logger.debug(f"Registered individual {individual.iri}")

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------

    def get_entity_map(self) -> Mapping[URIRef, AbstractEntity]:
        return MappingProxyType(self._entity_map)

    def get_class_map(self) -> Mapping[URIRef, VowlClass]:
        return self._classes.view()

    def get_datatype_map(self) -> Mapping[URIRef, VowlDatatype]:
        return self._datatypes.view()

    def get_object_property_map(self) -> Mapping[URIRef, VowlObjectProperty]:
        return self._object_properties.view()

    def get_datatype_property_map(self) -> Mapping[URIRef, VowlDatatypeProperty]:
        return self._datatype_properties.view()

    def get_type_of_property_map(self) -> Mapping[URIRef, TypeOfProperty]:
        return self._type_of_properties.view()

    def get_individual_map(self) -> Mapping[URIRef, VowlIndividual]:
        return self._individuals.view()

    def get_properties(self) -> FrozenSet[AbstractProperty]:
        """Return a snapshot of all object and datatype properties."""
        properties = set(self._datatype_properties.values())
        properties.update(self._object_properties.values())
        return frozenset(properties)

    # ------------------------------------------------------------------
    # Fail-fast lookups
    # ------------------------------------------------------------------

    @staticmethod
    def _lookup(table: TypedEntityTable, iri: URIRef):
        entity = table.get(iri)
        if entity is None:
            raise EntityNotFoundError(table.kind, str(iri))
        return entity

    def get_class_for_iri(self, iri: URIRef) -> VowlClass:
        return self._lookup(self._classes, iri)

    def get_datatype_for_iri(self, iri: URIRef) -> VowlDatatype:
        return self._lookup(self._datatypes, iri)

    def get_object_property_for_iri(self, iri: URIRef) -> VowlObjectProperty:
        return self._lookup(self._object_properties, iri)

    def get_datatype_property_for_iri(self, iri: URIRef) -> VowlDatatypeProperty:
        return self._lookup(self._datatype_properties, iri)

    def get_type_of_property_for_iri(self, iri: URIRef) -> TypeOfProperty:
        return self._lookup(self._type_of_properties, iri)

    def get_individual_for_iri(self, iri: URIRef) -> VowlIndividual:
        return self._lookup(self._individuals, iri)

    def get_entity_for_iri(self, iri: URIRef) -> AbstractEntity:
        entity = self._entity_map.get(iri)
        if entity is None:
            raise EntityNotFoundError("entity", str(iri))
        return entity

    def get_property_for_iri(self, iri: URIRef) -> AbstractProperty:
        """
        Resolve ``iri`` through the unified table and require a property.

        Raises:
            EntityNotFoundError: If the IRI is unknown.
            EntityKindMismatchError: If the IRI belongs to a node.
        """
        entity = self.get_entity_for_iri(iri)
        if isinstance(entity, AbstractProperty):
            return entity
        raise EntityKindMismatchError("property", type(entity).__name__, str(iri))

    def get_node_for_iri(self, iri: URIRef) -> AbstractNode:
        """
        Resolve ``iri`` through the unified table and require a node.

        Raises:
            EntityNotFoundError: If the IRI is unknown.
            EntityKindMismatchError: If the IRI belongs to a property.
        """
        entity = self.get_entity_for_iri(iri)
        if isinstance(entity, AbstractNode):
            return entity
        raise EntityKindMismatchError("node", type(entity).__name__, str(iri))

    # ------------------------------------------------------------------
    # Output identifiers, synthetic IRIs, languages
    # ------------------------------------------------------------------

    def get_id_for_entity(self, entity: AbstractEntity) -> str:
        return self._allocator.id_for(entity)

    def get_id_for_iri(self, iri: URIRef) -> str:
        return self.get_id_for_entity(self.get_entity_for_iri(iri))

    def get_new_iri(self) -> URIRef:
        return self._iri_generator.generate()

    def add_language(self, language: str) -> None:
        self._languages.add(language)

    def get_languages(self) -> FrozenSet[str]:
        return self._languages.all()

    def statistics(self) -> Dict[str, int]:
        """Count entries per table; used for summaries and logging."""
        return {
            "classes": len(self._classes),
            "datatypes": len(self._datatypes),
            "object_properties": len(self._object_properties),
            "datatype_properties": len(self._datatype_properties),
            "type_of_properties": len(self._type_of_properties),
            "individuals": len(self._individuals),
            "entities": len(self._entity_map),
            "languages": len(self._languages),
            "assigned_ids": len(self._allocator),
            "synthetic_iris": self._iri_generator.generated_count,
        }
