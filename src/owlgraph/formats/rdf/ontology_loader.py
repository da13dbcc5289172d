"""
Ontology Loader Module

This module walks a parsed RDF graph and registers every class, datatype,
property and individual it finds in an :class:`EntityRegistry`.

Components:
- OntologyLoader: ingestion pass that populates the registry
- collect_annotations: label/comment extraction keyed by language tag
"""

import logging
from typing import Dict, Iterable, List, Optional, Set

from rdflib import Graph, Literal, OWL, RDF, RDFS, URIRef, XSD
from rdflib.namespace import DC, DCTERMS
from tqdm import tqdm

from ...constants import IRIConfig, ProcessingLimits
from ...registry import EntityRegistry
from ...shared.models import (
    TypeOfProperty,
    VowlClass,
    VowlDatatype,
    VowlDatatypeProperty,
    VowlIndividual,
    VowlObjectProperty,
)

logger = logging.getLogger(__name__)

# Vocabulary terms that are never registered as user classes.
RESERVED_CLASSES = frozenset({
    OWL.Thing,
    OWL.Class,
    OWL.Nothing,
    RDFS.Class,
    RDFS.Resource,
    RDFS.Datatype,
    OWL.NamedIndividual,
    OWL.Ontology,
})


def collect_annotations(graph: Graph, subject: URIRef, predicate: URIRef) -> Dict[str, str]:
    """Return literal values of ``predicate`` keyed by language tag."""
    values: Dict[str, str] = {}
    for obj in graph.objects(subject, predicate):
        if isinstance(obj, Literal):
            values[obj.language or IRIConfig.UNDEFINED_LANGUAGE] = str(obj)
    return values


def _uri_objects(graph: Graph, subject: URIRef, predicate: URIRef) -> List[URIRef]:
    return sorted(o for o in graph.objects(subject, predicate) if isinstance(o, URIRef))


def _uri_subjects(graph: Graph, rdf_type: URIRef) -> Set[URIRef]:
    return {s for s in graph.subjects(RDF.type, rdf_type) if isinstance(s, URIRef)}


def _is_datatype_iri(graph: Graph, iri: URIRef) -> bool:
    """True for XSD datatypes, rdfs:Literal and declared rdfs:Datatype IRIs."""
    return (
        iri == RDFS.Literal
        or str(iri).startswith(str(XSD))
        or (iri, RDF.type, RDFS.Datatype) in graph
    )


class OntologyLoader:
    """
    Populate an entity registry from an RDF graph.

    Handles:
    - owl:Class and rdfs:Class declarations, with named super classes
    - rdfs:Datatype declarations and XSD ranges of datatype properties
    - owl:ObjectProperty and owl:DatatypeProperty with domains and ranges
    - owl:NamedIndividual declarations
    - rdf:type links between classes (punning) as type-of properties
    - language tags of every literal in the graph

    Domains and ranges that reference undeclared classes are registered as
    external classes, so later lookups by IRI always succeed.

    Example:
        >>> registry = EntityRegistry()
        >>> OntologyLoader(registry).load(graph)
        >>> registry.get_class_for_iri(URIRef("http://example.org/Person"))
    """

    def __init__(self, registry: EntityRegistry) -> None:
        self.registry = registry
        self.ontology_iri: Optional[URIRef] = None
        self.title: Dict[str, str] = {}

    def load(self, graph: Graph) -> EntityRegistry:
        """
        Register every entity found in ``graph``.

        Returns:
            The populated registry
        """
        self._load_ontology_header(graph)
        self._load_languages(graph)
        self._load_classes(graph)
        self._load_datatypes(graph)
        self._load_object_properties(graph)
        self._load_datatype_properties(graph)
        self._load_type_of_properties(graph)
        self._load_individuals(graph)

        stats = self.registry.statistics()
        logger.info(
            f"Loaded {stats['classes']} classes, {stats['datatypes']} datatypes, "
            f"{stats['object_properties']} object properties, "
            f"{stats['datatype_properties']} datatype properties, "
            f"{stats['individuals']} individuals"
        )
        return self.registry

    # ------------------------------------------------------------------
    # Ontology header and languages
    # ------------------------------------------------------------------

    def _load_ontology_header(self, graph: Graph) -> None:
        ontologies = sorted(_uri_subjects(graph, OWL.Ontology))
        if not ontologies:
            logger.warning("No owl:Ontology declaration found")
            return
        if len(ontologies) > 1:
            logger.warning(f"Found {len(ontologies)} ontology declarations, using {ontologies[0]}")

        self.ontology_iri = ontologies[0]
        for predicate in (DCTERMS.title, DC.title, RDFS.label):
            self.title = collect_annotations(graph, self.ontology_iri, predicate)
            if self.title:
                break

    def _load_languages(self, graph: Graph) -> None:
        for obj in graph.objects():
            if isinstance(obj, Literal) and obj.language:
                self.registry.add_language(obj.language)

    # ------------------------------------------------------------------
    # Nodes
    # ------------------------------------------------------------------

    def _load_classes(self, graph: Graph) -> None:
        declared: Dict[URIRef, URIRef] = {}
        for class_type in (RDFS.Class, OWL.Class):
            for s in _uri_subjects(graph, class_type):
                declared[s] = class_type

        # Classes that only appear in rdfs:subClassOf
        referenced: Set[URIRef] = set()
        for s, o in graph.subject_objects(RDFS.subClassOf):
            for candidate in (s, o):
                if isinstance(candidate, URIRef) and candidate not in declared:
                    referenced.add(candidate)

        logger.info(f"Found {len(declared)} declared classes")
        if not declared:
            logger.warning("No OWL/RDFS classes found in ontology")

        for class_uri in tqdm(
            sorted(declared),
            desc="Registering classes",
            unit="class",
            disable=len(declared) < ProcessingLimits.PROGRESS_BAR_MIN_ITEMS,
        ):
            if class_uri in RESERVED_CLASSES:
                continue
            self.registry.add_class(self._build_class(graph, class_uri, declared[class_uri]))

        for class_uri in sorted(referenced - RESERVED_CLASSES):
            self.registry.add_class(self._build_class(graph, class_uri, OWL.Class, external=True))

    def _build_class(
        self,
        graph: Graph,
        class_uri: URIRef,
        class_type: URIRef,
        external: bool = False,
    ) -> VowlClass:
        super_classes = [
            parent for parent in _uri_objects(graph, class_uri, RDFS.subClassOf)
            if parent != class_uri and parent not in RESERVED_CLASSES
        ]
        return VowlClass(
            iri=class_uri,
            labels=collect_annotations(graph, class_uri, RDFS.label),
            comments=collect_annotations(graph, class_uri, RDFS.comment),
            super_classes=super_classes,
            class_type=class_type,
            external=external,
        )

    def _load_datatypes(self, graph: Graph) -> None:
        for datatype_uri in sorted(_uri_subjects(graph, RDFS.Datatype)):
            self._ensure_datatype(graph, datatype_uri)

    def _ensure_datatype(self, graph: Graph, datatype_uri: URIRef) -> None:
        if datatype_uri in self.registry.get_entity_map():
            return
        self.registry.add_datatype(VowlDatatype(
            iri=datatype_uri,
            labels=collect_annotations(graph, datatype_uri, RDFS.label),
            comments=collect_annotations(graph, datatype_uri, RDFS.comment),
        ))

    def _ensure_class(self, graph: Graph, class_uri: URIRef) -> None:
        if class_uri in self.registry.get_entity_map():
            return
        logger.debug(f"Registering undeclared class {class_uri}")
        self.registry.add_class(self._build_class(graph, class_uri, OWL.Class, external=True))

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    def _load_object_properties(self, graph: Graph) -> None:
        properties = sorted(_uri_subjects(graph, OWL.ObjectProperty))
        logger.info(f"Found {len(properties)} object properties")

        for prop_uri in self._progress(properties, "Registering object properties"):
            domains = self._node_refs(graph, prop_uri, RDFS.domain)
            ranges = self._node_refs(graph, prop_uri, RDFS.range)
            for class_uri in domains:
                self._ensure_class(graph, class_uri)
            for range_uri in ranges:
                if _is_datatype_iri(graph, range_uri):
                    self._ensure_datatype(graph, range_uri)
                else:
                    self._ensure_class(graph, range_uri)

            inverses = _uri_objects(graph, prop_uri, OWL.inverseOf)
            self.registry.add_object_property(VowlObjectProperty(
                iri=prop_uri,
                labels=collect_annotations(graph, prop_uri, RDFS.label),
                comments=collect_annotations(graph, prop_uri, RDFS.comment),
                domains=domains,
                ranges=ranges,
                inverse=inverses[0] if inverses else None,
            ))

    def _load_datatype_properties(self, graph: Graph) -> None:
        properties = sorted(_uri_subjects(graph, OWL.DatatypeProperty))
        logger.info(f"Found {len(properties)} datatype properties")

        for prop_uri in self._progress(properties, "Registering datatype properties"):
            domains = self._node_refs(graph, prop_uri, RDFS.domain)
            ranges = self._node_refs(graph, prop_uri, RDFS.range)
            for class_uri in domains:
                self._ensure_class(graph, class_uri)
            for datatype_uri in ranges:
                self._ensure_datatype(graph, datatype_uri)

            self.registry.add_datatype_property(VowlDatatypeProperty(
                iri=prop_uri,
                labels=collect_annotations(graph, prop_uri, RDFS.label),
                comments=collect_annotations(graph, prop_uri, RDFS.comment),
                domains=domains,
                ranges=ranges,
            ))

    def _load_type_of_properties(self, graph: Graph) -> None:
        """Register ``C rdf:type T`` between two known classes as a type-of edge."""
        classes = self.registry.get_class_map()
        for class_uri in sorted(classes):
            for type_uri in _uri_objects(graph, class_uri, RDF.type):
                if type_uri in RESERVED_CLASSES or type_uri not in classes:
                    continue
                self.registry.add_type_of_property(TypeOfProperty(
                    iri=self.registry.get_new_iri(),
                    domains=[class_uri],
                    ranges=[type_uri],
                ))

    @staticmethod
    def _node_refs(graph: Graph, prop_uri: URIRef, predicate: URIRef) -> List[URIRef]:
        # Blank-node domains (unions, restrictions) fall back to owl:Thing later.
        return [o for o in _uri_objects(graph, prop_uri, predicate) if o != OWL.Thing]

    # ------------------------------------------------------------------
    # Individuals
    # ------------------------------------------------------------------

    def _load_individuals(self, graph: Graph) -> None:
        classes = self.registry.get_class_map()
        individuals = sorted(_uri_subjects(graph, OWL.NamedIndividual))
        for individual_uri in individuals:
            types = [
                t for t in _uri_objects(graph, individual_uri, RDF.type)
                if t in classes
            ]
            self.registry.add_individual(VowlIndividual(
                iri=individual_uri,
                labels=collect_annotations(graph, individual_uri, RDFS.label),
                comments=collect_annotations(graph, individual_uri, RDFS.comment),
                types=types,
            ))
        logger.info(f"Found {len(individuals)} named individuals")

    @staticmethod
    def _progress(items: List[URIRef], desc: str) -> Iterable[URIRef]:
        return tqdm(
            items,
            desc=desc,
            unit="prop",
            disable=len(items) < ProcessingLimits.PROGRESS_BAR_MIN_ITEMS,
        )
