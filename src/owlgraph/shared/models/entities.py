"""
Entity data types.

This module defines the typed entities the converter extracts from an
ontology and indexes in the entity registry. Every entity is addressed by
its IRI; nodes (classes and datatypes) become graph vertices and properties
(object, datatype and type-of properties) become graph edges.

Entities hash and compare by identity. The output identifier allocator keys
on the entity object itself, so two distinct objects sharing an IRI are
numbered separately.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from rdflib import OWL, RDFS, URIRef

from ...constants import IRIConfig


@dataclass(eq=False)
class AbstractEntity:
    """
    Base entity with an IRI and optional annotations.

    Attributes:
        iri: Global identifier of the entity.
        labels: Label text keyed by language tag ("undefined" when untagged).
        comments: Comment text keyed by language tag.
    """
    iri: URIRef
    labels: Dict[str, str] = field(default_factory=dict)
    comments: Dict[str, str] = field(default_factory=dict)

    def local_name(self) -> str:
        """Return the fragment or last path segment of the IRI."""
        text = str(self.iri)
        for separator in ('#', '/'):
            if separator in text:
                candidate = text.rsplit(separator, 1)[1]
                if candidate:
                    return candidate
        return text

    def label(self, language: Optional[str] = None) -> str:
        """Return the label for ``language``, falling back to the local name."""
        if language and language in self.labels:
            return self.labels[language]
        if IRIConfig.UNDEFINED_LANGUAGE in self.labels:
            return self.labels[IRIConfig.UNDEFINED_LANGUAGE]
        if self.labels:
            return next(iter(self.labels.values()))
        return self.local_name()

    def annotations_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {"iri": str(self.iri)}
        if self.labels:
            result["label"] = dict(self.labels)
        if self.comments:
            result["comment"] = dict(self.comments)
        return result


@dataclass(eq=False)
class AbstractNode(AbstractEntity, ABC):
    """An entity that is drawn as a graph vertex."""

    @property
    @abstractmethod
    def node_type(self) -> str:
        """VOWL type name of the vertex."""


@dataclass(eq=False)
class AbstractProperty(AbstractEntity, ABC):
    """
    An entity that is drawn as a graph edge.

    Attributes:
        domains: IRIs of the nodes the property starts from.
        ranges: IRIs of the nodes the property points to.
    """
    domains: List[URIRef] = field(default_factory=list)
    ranges: List[URIRef] = field(default_factory=list)

    @property
    @abstractmethod
    def property_type(self) -> str:
        """VOWL type name of the edge."""


@dataclass(eq=False)
class VowlClass(AbstractNode):
    """
    An OWL or RDFS class.

    Attributes:
        super_classes: IRIs of direct named super classes.
        class_type: Vocabulary term the class was declared with.
        external: Whether the class is declared outside the loaded ontology.
    """
    super_classes: List[URIRef] = field(default_factory=list)
    class_type: URIRef = OWL.Class
    external: bool = False

    @property
    def node_type(self) -> str:
        if self.class_type == OWL.Thing:
            return "owl:Thing"
        if self.class_type == RDFS.Class:
            return "rdfs:Class"
        return "owl:Class"


@dataclass(eq=False)
class VowlDatatype(AbstractNode):
    """A datatype such as ``xsd:string`` or a user-declared ``rdfs:Datatype``."""

    @property
    def node_type(self) -> str:
        return "rdfs:Datatype"


@dataclass(eq=False)
class VowlObjectProperty(AbstractProperty):
    """An ``owl:ObjectProperty`` linking two classes."""
    inverse: Optional[URIRef] = None

    @property
    def property_type(self) -> str:
        return "owl:ObjectProperty"


@dataclass(eq=False)
class VowlDatatypeProperty(AbstractProperty):
    """An ``owl:DatatypeProperty`` linking a class to a datatype."""

    @property
    def property_type(self) -> str:
        return "owl:DatatypeProperty"


@dataclass(eq=False)
class TypeOfProperty(AbstractProperty):
    """A synthesized ``rdf:type`` edge between a class and the class it instantiates."""

    @property
    def property_type(self) -> str:
        return "rdf:type"


@dataclass(eq=False)
class VowlIndividual(AbstractEntity):
    """
    A named individual.

    Individuals are listed per class in the output but never become nodes
    or edges, so the registry keeps them out of the unified entity table.

    Attributes:
        types: IRIs of the classes the individual is asserted to belong to.
    """
    types: List[URIRef] = field(default_factory=list)
