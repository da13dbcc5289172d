"""
VOWL JSON serializer.

Turns a populated :class:`EntityRegistry` into a WebVOWL-style graph
document. Every node and edge is referenced by the output identifier the
registry hands out, never by its IRI or source position.

Output layout:
    {
      "header": {"languages": [...], "iri": ..., "title": {...}},
      "namespace": [],
      "class": [{"id": "0", "type": "owl:Class"}, ...],
      "classAttribute": [{"id": "0", "iri": ..., "superClasses": [...]}, ...],
      "datatype": [...], "datatypeAttribute": [...],
      "property": [...], "propertyAttribute": [...]
    }
"""

import json
import logging
from collections import defaultdict
from pathlib import Path
from typing import Any, Dict, List, Optional

from rdflib import URIRef

from ...constants import IRIConfig
from ...registry import EntityRegistry
from ...shared.models import AbstractEntity, AbstractNode, AbstractProperty, VowlObjectProperty

logger = logging.getLogger(__name__)


class VowlSerializer:
    """
    Serialize registry contents as a VOWL graph document.

    Attributes:
        registry: Populated registry of the current run.
        ontology_iri: IRI of the source ontology, if declared.
        title: Ontology title keyed by language tag.
    """

    def __init__(
        self,
        registry: EntityRegistry,
        ontology_iri: Optional[URIRef] = None,
        title: Optional[Dict[str, str]] = None,
    ) -> None:
        self.registry = registry
        self.ontology_iri = ontology_iri
        self.title = dict(title or {})

    def serialize(self) -> Dict[str, Any]:
        """
        Build the output document.

        Raises:
            EntityNotFoundError: If a property or class references an
                IRI that was never registered.
            EntityKindMismatchError: If a domain or range is not a node.
        """
        document: Dict[str, Any] = {
            "header": self._header(),
            "namespace": [],
        }
        document["class"], document["classAttribute"] = self._classes()
        document["datatype"], document["datatypeAttribute"] = self._datatypes()
        document["property"], document["propertyAttribute"] = self._properties()

        logger.info(
            f"Serialized {len(document['class'])} classes, "
            f"{len(document['datatype'])} datatypes, "
            f"{len(document['property'])} properties"
        )
        return document

    # ------------------------------------------------------------------
    # Sections
    # ------------------------------------------------------------------

    def _header(self) -> Dict[str, Any]:
        header: Dict[str, Any] = {"languages": sorted(self.registry.get_languages())}
        if self.ontology_iri is not None:
            header["iri"] = str(self.ontology_iri)
        if self.title:
            header["title"] = self.title
        return header

    def _classes(self):
        individuals_by_class: Dict[URIRef, List[Dict[str, Any]]] = defaultdict(list)
        for individual in self.registry.get_individual_map().values():
            for class_iri in individual.types:
                individuals_by_class[class_iri].append(individual.annotations_dict())

        elements: List[Dict[str, Any]] = []
        attributes: List[Dict[str, Any]] = []
        for vowl_class in self._sorted(self.registry.get_class_map().values()):
            node_id = self.registry.get_id_for_entity(vowl_class)
            elements.append({"id": node_id, "type": vowl_class.node_type})

            attribute = self._node_attribute(node_id, vowl_class)
            if vowl_class.super_classes:
                attribute["superClasses"] = [
                    self.registry.get_id_for_entity(self.registry.get_class_for_iri(parent))
                    for parent in vowl_class.super_classes
                ]
            if vowl_class.external:
                attribute["attributes"] = ["external"]
            if vowl_class.iri in individuals_by_class:
                attribute["individuals"] = individuals_by_class[vowl_class.iri]
            attributes.append(attribute)
        return elements, attributes

    def _datatypes(self):
        elements: List[Dict[str, Any]] = []
        attributes: List[Dict[str, Any]] = []
        for datatype in self._sorted(self.registry.get_datatype_map().values()):
            node_id = self.registry.get_id_for_entity(datatype)
            elements.append({"id": node_id, "type": datatype.node_type})
            attributes.append(self._node_attribute(node_id, datatype))
        return elements, attributes

    def _properties(self):
        properties: List[AbstractProperty] = list(self._sorted(self.registry.get_properties()))
        properties.extend(self._sorted(self.registry.get_type_of_property_map().values()))

        elements: List[Dict[str, Any]] = []
        attributes: List[Dict[str, Any]] = []
        for prop in properties:
            prop_id = self.registry.get_id_for_entity(prop)
            elements.append({"id": prop_id, "type": prop.property_type})

            attribute = prop.annotations_dict()
            attribute["id"] = prop_id
            attribute["label"] = self._label_map(prop)
            if prop.domains:
                attribute["domain"] = self._node_id(prop.domains[0])
            if prop.ranges:
                attribute["range"] = self._node_id(prop.ranges[0])
            if len(prop.domains) > 1 or len(prop.ranges) > 1:
                logger.debug(f"{prop.iri} has several domains or ranges; drawing the first of each")
            if isinstance(prop, VowlObjectProperty) and prop.inverse is not None:
                inverse = self.registry.get_object_property_map().get(prop.inverse)
                if inverse is not None:
                    attribute["inverse"] = self.registry.get_id_for_entity(inverse)
            attributes.append(attribute)
        return elements, attributes

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _node_id(self, iri: URIRef) -> str:
        # A punned IRI may be a property in the unified table but still a class here.
        for nodes in (self.registry.get_class_map(), self.registry.get_datatype_map()):
            if iri in nodes:
                return self.registry.get_id_for_entity(nodes[iri])
        return self.registry.get_id_for_entity(self.registry.get_node_for_iri(iri))

    @staticmethod
    def _label_map(entity: AbstractEntity) -> Dict[str, str]:
        return dict(entity.labels) or {IRIConfig.UNDEFINED_LANGUAGE: entity.local_name()}

    @staticmethod
    def _node_attribute(node_id: str, node: AbstractNode) -> Dict[str, Any]:
        attribute = node.annotations_dict()
        attribute["id"] = node_id
        attribute["label"] = VowlSerializer._label_map(node)
        return attribute

    @staticmethod
    def _sorted(entities):
        return sorted(entities, key=lambda e: str(e.iri))


def write_document(document: Dict[str, Any], output_path: str, indent: int = 2) -> Path:
    """Write a serialized VOWL document to ``output_path`` as JSON."""
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, 'w', encoding='utf-8') as f:
        json.dump(document, f, indent=indent, ensure_ascii=False)
    logger.info(f"Wrote VOWL document to {path}")
    return path
